"""Product Configuration Routes: section 3 upsert and read (one per artist)."""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from artist_onboarding.infrastructure.database import get_db
from artist_onboarding.schemas.product_configuration import (
    ProductConfigurationIn, ProductConfigurationResponse,
)
from artist_onboarding.services.product_config_service import (
    ProductConfigurationService,
)

router = APIRouter(prefix="/api/v1/artists", tags=["product-configuration"])


@router.put(
    "/{artist_id}/product-configuration",
    response_model=ProductConfigurationResponse,
)
async def save_product_configuration(
    artist_id: UUID, body: ProductConfigurationIn,
    db: AsyncSession = Depends(get_db),
):
    return await ProductConfigurationService(db).save(artist_id, body)


@router.get(
    "/{artist_id}/product-configuration",
    response_model=ProductConfigurationResponse,
)
async def get_product_configuration(
    artist_id: UUID, db: AsyncSession = Depends(get_db),
):
    return await ProductConfigurationService(db).get(artist_id)
