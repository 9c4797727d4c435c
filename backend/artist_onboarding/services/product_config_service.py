"""Product Configuration Service: section 3 upsert/read, one row per artist."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from artist_onboarding.core.errors import ErrorContext, ResourceNotFoundError
from artist_onboarding.models import ProductConfiguration
from artist_onboarding.schemas.product_configuration import ProductConfigurationIn
from artist_onboarding.services.artist_service import ArtistService

logger = logging.getLogger(__name__)


class ProductConfigurationService:

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _find(self, artist_id: UUID) -> ProductConfiguration | None:
        result = await self.db.execute(
            select(ProductConfiguration)
            .where(ProductConfiguration.artist_id == artist_id)
        )
        return result.scalar_one_or_none()

    async def save(self, artist_id: UUID, body: ProductConfigurationIn) -> ProductConfiguration:
        """Insert or overwrite the artist's configuration."""
        await ArtistService(self.db).get_or_404(artist_id)
        config = await self._find(artist_id)
        if config is None:
            config = ProductConfiguration(artist_id=artist_id)
            self.db.add(config)
        for key, value in body.to_columns().items():
            setattr(config, key, value)
        await self.db.commit()
        await self.db.refresh(config)
        logger.info("Product configuration saved", extra={"artist_id": artist_id})
        return config

    async def get(self, artist_id: UUID) -> ProductConfiguration:
        await ArtistService(self.db).get_or_404(artist_id)
        config = await self._find(artist_id)
        if config is None:
            raise ResourceNotFoundError(
                "ProductConfiguration", str(artist_id),
                ErrorContext(artist_id=str(artist_id), section=3),
            )
        return config
