"""Pricing Routes: live price/SKU quotes and section 4 variant persistence.

Invariants:
    - POST /pricing/quote is stateless (no DB session requested)
    - Saved variants always carry a server-computed final_price and sku
    - PUT /artists/{id}/pricing returns 200 with per-variant errors when at
      least one variant saved, 400 when none did
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from artist_onboarding.infrastructure.database import get_db
from artist_onboarding.schemas.pricing import (
    PriceQuoteRequest, PriceQuoteResponse, PricingConfigurationIn,
    PricingSaveResponse, ProductVariantResponse, VariantUpdateRequest,
)
from artist_onboarding.services.pricing_service import PricingService, quote

router = APIRouter(prefix="/api/v1", tags=["pricing"])


@router.post("/pricing/quote", response_model=PriceQuoteResponse)
async def quote_price(body: PriceQuoteRequest):
    """Preview the SKU and final price of one variant."""
    priced = quote(body)
    return PriceQuoteResponse(
        sku=priced.sku,
        final_price=priced.final_price,
        markup_percentage=priced.markup_percentage,
        discount_percent=priced.discount_percent,
    )


@router.put("/artists/{artist_id}/pricing", response_model=PricingSaveResponse)
async def save_pricing(
    artist_id: UUID, body: PricingConfigurationIn,
    db: AsyncSession = Depends(get_db),
):
    saved, errors = await PricingService(db).save_pricing_configuration(
        artist_id, body,
    )
    return PricingSaveResponse(
        saved_variants=[ProductVariantResponse.model_validate(v) for v in saved],
        errors=errors,
        message=f"Saved {len(saved)} of {len(body.product_variants)} variants",
    )


@router.get(
    "/artists/{artist_id}/variants", response_model=list[ProductVariantResponse],
)
async def list_variants(artist_id: UUID, db: AsyncSession = Depends(get_db)):
    """Variants of an artist, newest first."""
    return await PricingService(db).list_variants(artist_id)


@router.put("/variants/{variant_id}", response_model=ProductVariantResponse)
async def update_variant(
    variant_id: UUID, body: VariantUpdateRequest,
    db: AsyncSession = Depends(get_db),
):
    return await PricingService(db).update_variant(
        variant_id, body.variant,
        body.pricing_strategy, body.markup_config, body.sku_generation,
    )


@router.delete("/variants/{variant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_variant(variant_id: UUID, db: AsyncSession = Depends(get_db)):
    await PricingService(db).delete_variant(variant_id)
