"""Artist Service: section 1 persistence (artist row + branding) and profile reads.

Invariants:
    - An artist is always created together with its branding row
    - Updates upsert branding (created if an older artist has none)
    - get_or_404 raises ResourceNotFoundError, never returns None

Design Decisions:
    - Duplicate email checked up-front (409) instead of surfacing as an
      IntegrityError from the unique index (503)
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from artist_onboarding.core.errors import (
    EmailAlreadyRegisteredError, ErrorContext, ResourceNotFoundError,
)
from artist_onboarding.models import Artist, ArtistBranding
from artist_onboarding.schemas.artist import ArtistProfileCreate, ArtistResponse
from artist_onboarding.schemas.artwork import ArtworkResponse
from artist_onboarding.schemas.pricing import ProductVariantResponse
from artist_onboarding.schemas.product_configuration import ProductConfigurationResponse

logger = logging.getLogger(__name__)


class ArtistService:
    """Create, update and read artist profiles."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_or_404(self, artist_id: UUID) -> Artist:
        result = await self.db.execute(select(Artist).where(Artist.id == artist_id))
        artist = result.scalar_one_or_none()
        if not artist:
            raise ResourceNotFoundError(
                "Artist", str(artist_id),
                ErrorContext(artist_id=str(artist_id)),
            )
        return artist

    async def _ensure_email_free(self, email: str, exclude: UUID | None = None) -> None:
        query = select(Artist.id).where(Artist.email == email)
        if exclude is not None:
            query = query.where(Artist.id != exclude)
        if (await self.db.execute(query)).first():
            raise EmailAlreadyRegisteredError(email)

    async def create(self, profile: ArtistProfileCreate, *, commit: bool = True) -> Artist:
        """Create artist (status draft) and its branding from section 1 data."""
        await self._ensure_email_free(profile.email)
        artist = Artist(status="draft", **profile.artist_fields())
        artist.branding = ArtistBranding(**profile.branding_fields())
        self.db.add(artist)
        if commit:
            await self.db.commit()
            await self.db.refresh(artist)
        else:
            await self.db.flush()
        logger.info("Artist created", extra={"artist_id": artist.id})
        return artist

    async def update(self, artist_id: UUID, profile: ArtistProfileCreate) -> Artist:
        """Overwrite profile fields; branding is upserted."""
        artist = await self.get_or_404(artist_id)
        await self._ensure_email_free(profile.email, exclude=artist_id)
        for key, value in profile.artist_fields().items():
            setattr(artist, key, value)
        branding_fields = profile.branding_fields()
        if artist.branding is None:
            artist.branding = ArtistBranding(**branding_fields)
        else:
            for key, value in branding_fields.items():
                setattr(artist.branding, key, value)
        await self.db.commit()
        await self.db.refresh(artist)
        logger.info("Artist updated", extra={"artist_id": artist.id})
        return artist

    async def complete_profile(self, artist_id: UUID) -> dict:
        """Artist with every section's data, for the admin detail view."""
        artist = await self.get_or_404(artist_id)
        config = artist.product_configuration
        return {
            "artist": ArtistResponse.model_validate(artist).model_dump(mode="json"),
            "artworks": [
                ArtworkResponse.model_validate(a).model_dump(mode="json")
                for a in artist.artworks
            ],
            "product_configuration": (
                ProductConfigurationResponse.model_validate(config).model_dump(mode="json")
                if config else None
            ),
            "product_variants": [
                ProductVariantResponse.model_validate(v).model_dump(mode="json")
                for v in sorted(artist.variants, key=lambda v: v.created_at, reverse=True)
            ],
        }
