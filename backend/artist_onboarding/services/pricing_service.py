"""Pricing Service: section 4 persistence around the pure price and SKU core.

Invariants:
    - final_price is always recomputed server-side with compute_final_price
    - sku is composed with compose_sku when auto-generation is on or the client
      sent none; a client-supplied sku is kept only when auto-generation is off
    - Saving a configuration is partial-success: every variant is attempted,
      errors are collected per variant, and the call fails only if none saved
    - Surcharges and tax come from the configuration/variant exactly as the
      form sends them; discounts come from the best special offer running today

Design Decisions:
    - price_variant is a pure function of schemas (no DB) so the live form
      preview and the saved variant can never disagree
    - Per-variant failures (unknown or foreign variant id) are detected before
      anything is written, so one bad variant leaves the others intact
"""

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from artist_onboarding.core.errors import (
    ErrorContext, PricingConfigurationError, ResourceNotFoundError,
)
from artist_onboarding.core.pricing import (
    PriceInputs, best_active_discount, compute_final_price, resolve_markup,
)
from artist_onboarding.core.sku import SkuInputs, compose_sku, derive_initials
from artist_onboarding.models import ProductVariant
from artist_onboarding.schemas.pricing import (
    MarkupConfig, PriceQuoteRequest, PricingConfigurationIn, PricingStrategy,
    ProductVariantIn, SkuGeneration,
)
from artist_onboarding.services.artist_service import ArtistService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VariantQuote:
    sku: str
    final_price: float
    markup_percentage: float
    discount_percent: float


def build_price_inputs(
    variant: ProductVariantIn,
    strategy: PricingStrategy,
    markup_config: MarkupConfig,
    today: date | None = None,
) -> PriceInputs:
    """Map a validated variant and the pricing configuration to PriceInputs."""
    return PriceInputs(
        base_cost=variant.base_cost,
        markup_percentage=resolve_markup(
            variant.markup_percentage, markup_config.default_markup_percentage,
        ),
        is_limited_edition=variant.is_limited_edition,
        limited_edition_surcharge=variant.limited_edition_price or 0.0,
        is_signed=variant.is_signed,
        signed_surcharge=variant.signed_price or 0.0,
        discount_percent=best_active_discount(
            (o.model_dump() for o in variant.special_offers), today or date.today(),
        ),
        tax_rate=strategy.tax_rate,
        includes_tax=strategy.includes_tax,
    )


def build_sku_inputs(
    variant: ProductVariantIn, artist_initials: str, settings: SkuGeneration,
) -> SkuInputs:
    return SkuInputs(
        artist_initials=artist_initials,
        product_type=variant.product_type.value,
        size=variant.size,
        media=variant.media,
        frame_color=variant.frame_color,
        prefix=settings.prefix,
        separator=settings.separator,
        include_artist_initials=settings.include_artist_initials,
        include_product_code=settings.include_product_code,
        include_size_code=settings.include_size_code,
        include_media_code=settings.include_media_code,
        include_frame_code=settings.include_frame_code,
    )


def price_variant(
    variant: ProductVariantIn,
    artist_initials: str,
    strategy: PricingStrategy,
    markup_config: MarkupConfig,
    sku_settings: SkuGeneration,
) -> VariantQuote:
    """SKU and final price for one variant. Pure, no IO."""
    price_inputs = build_price_inputs(variant, strategy, markup_config)
    if sku_settings.use_auto_generation or not variant.sku:
        sku = compose_sku(build_sku_inputs(variant, artist_initials, sku_settings))
    else:
        sku = variant.sku
    return VariantQuote(
        sku=sku,
        final_price=compute_final_price(price_inputs),
        markup_percentage=price_inputs.markup_percentage,
        discount_percent=price_inputs.discount_percent,
    )


def quote(body: PriceQuoteRequest) -> VariantQuote:
    return price_variant(
        body.variant, body.artist_initials,
        body.pricing_strategy, body.markup_config, body.sku_generation,
    )


class PricingService:
    """Persist priced product variants for an artist."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_variant_or_404(self, variant_id: UUID) -> ProductVariant:
        result = await self.db.execute(
            select(ProductVariant).where(ProductVariant.id == variant_id),
        )
        variant = result.scalar_one_or_none()
        if not variant:
            raise ResourceNotFoundError(
                "ProductVariant", str(variant_id),
                ErrorContext(variant_id=str(variant_id), section=4),
            )
        return variant

    def _apply(
        self, row: ProductVariant, variant: ProductVariantIn, priced: VariantQuote,
    ) -> None:
        row.sku = priced.sku
        row.product_type = variant.product_type.value
        row.size = variant.size
        row.media = variant.media
        row.frame_color = variant.frame_color
        row.base_cost = variant.base_cost
        row.markup_percentage = priced.markup_percentage
        row.final_price = priced.final_price
        row.is_limited_edition = variant.is_limited_edition
        row.limited_edition_price = variant.limited_edition_price
        row.is_signed = variant.is_signed
        row.signed_price = variant.signed_price
        row.is_active = variant.is_active
        row.special_offers = [
            o.model_dump(mode="json") for o in variant.special_offers
        ]

    async def _upsert_variant(
        self, artist_id: UUID, variant: ProductVariantIn, priced: VariantQuote,
    ) -> ProductVariant:
        row = None
        if variant.id is not None:
            row = await self.get_variant_or_404(variant.id)
            if row.artist_id != artist_id:
                raise ResourceNotFoundError("ProductVariant", str(variant.id))
        if row is None:
            row = ProductVariant(artist_id=artist_id)
            self.db.add(row)
        self._apply(row, variant, priced)
        return row

    async def save_pricing_configuration(
        self, artist_id: UUID, body: PricingConfigurationIn,
    ) -> tuple[list[ProductVariant], list[str]]:
        """Price and persist every variant; return (saved, errors)."""
        artist = await ArtistService(self.db).get_or_404(artist_id)
        initials = derive_initials(artist.full_name)

        saved: list[ProductVariant] = []
        errors: list[str] = []
        for index, variant in enumerate(body.product_variants):
            priced = price_variant(
                variant, initials, body.pricing_strategy,
                body.markup_config, body.sku_generation,
            )
            try:
                row = await self._upsert_variant(artist_id, variant, priced)
                saved.append(row)
            except ResourceNotFoundError as e:
                logger.warning(
                    f"Variant {index} ({priced.sku}) not saved: {e}",
                    extra={"artist_id": artist_id},
                )
                errors.append(f"Error saving variant {priced.sku}: {e}")

        if not saved:
            raise PricingConfigurationError(
                errors, ErrorContext(artist_id=str(artist_id), section=4),
            )
        await self.db.commit()
        logger.info(
            f"Saved {len(saved)} variant(s), {len(errors)} error(s)",
            extra={"artist_id": artist_id, "section": 4},
        )
        return saved, errors

    async def list_variants(self, artist_id: UUID) -> list[ProductVariant]:
        await ArtistService(self.db).get_or_404(artist_id)
        result = await self.db.execute(
            select(ProductVariant)
            .where(ProductVariant.artist_id == artist_id)
            .order_by(ProductVariant.created_at.desc())
        )
        return list(result.scalars().all())

    async def update_variant(
        self,
        variant_id: UUID,
        variant: ProductVariantIn,
        strategy: PricingStrategy,
        markup_config: MarkupConfig,
        sku_settings: SkuGeneration,
    ) -> ProductVariant:
        """Re-price and overwrite a single stored variant."""
        row = await self.get_variant_or_404(variant_id)
        artist = await ArtistService(self.db).get_or_404(row.artist_id)
        priced = price_variant(
            variant, derive_initials(artist.full_name),
            strategy, markup_config, sku_settings,
        )
        self._apply(row, variant, priced)
        await self.db.commit()
        await self.db.refresh(row)
        return row

    async def delete_variant(self, variant_id: UUID) -> None:
        row = await self.get_variant_or_404(variant_id)
        await self.db.delete(row)
        await self.db.commit()
        logger.info("Variant deleted", extra={"variant_id": variant_id})
