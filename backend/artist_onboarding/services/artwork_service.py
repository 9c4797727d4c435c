"""Artwork Service: section 2 catalog persistence.

Invariants:
    - Artworks are created only for an existing artist
    - list_for_artist orders by sort_order ascending
    - update writes only fields the client sent
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from artist_onboarding.core.errors import ResourceNotFoundError
from artist_onboarding.models import Artwork
from artist_onboarding.schemas.artwork import ArtworkCreate, ArtworkUpdate
from artist_onboarding.services.artist_service import ArtistService

logger = logging.getLogger(__name__)


class ArtworkService:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_or_404(self, artwork_id: UUID) -> Artwork:
        result = await self.db.execute(select(Artwork).where(Artwork.id == artwork_id))
        artwork = result.scalar_one_or_none()
        if not artwork:
            raise ResourceNotFoundError("Artwork", str(artwork_id))
        return artwork

    async def create(self, artist_id: UUID, body: ArtworkCreate) -> Artwork:
        await ArtistService(self.db).get_or_404(artist_id)
        artwork = Artwork(artist_id=artist_id, **body.to_columns())
        self.db.add(artwork)
        await self.db.commit()
        await self.db.refresh(artwork)
        logger.info(
            "Artwork created",
            extra={"artist_id": artist_id, "artwork_id": artwork.id},
        )
        return artwork

    async def list_for_artist(self, artist_id: UUID) -> list[Artwork]:
        await ArtistService(self.db).get_or_404(artist_id)
        result = await self.db.execute(
            select(Artwork)
            .where(Artwork.artist_id == artist_id)
            .order_by(Artwork.sort_order.asc(), Artwork.created_at.asc())
        )
        return list(result.scalars().all())

    async def update(self, artwork_id: UUID, body: ArtworkUpdate) -> Artwork:
        artwork = await self.get_or_404(artwork_id)
        for key, value in body.to_columns().items():
            setattr(artwork, key, value)
        await self.db.commit()
        await self.db.refresh(artwork)
        return artwork

    async def delete(self, artwork_id: UUID) -> None:
        artwork = await self.get_or_404(artwork_id)
        await self.db.delete(artwork)
        await self.db.commit()
        logger.info("Artwork deleted", extra={"artwork_id": artwork_id})
