"""Pricing Schemas: section 4 (pricing, markup & SKU generation) validation.

Invariants:
    - base_cost and surcharges finite, 0-MAX_AMOUNT; markup 0-1000; discounts
      and tax 0-100
    - A special offer's end_date is not before its start_date
    - product_variants has at least one entry
    - sku_generation.separator is exactly one character, prefix <= 10 chars
    - Client-sent sku/final_price are advisory: the pricing service recomputes them

Design Decisions:
    - markup_percentage on a variant is optional; None means "use the
      configuration default" while an explicit 0 is kept as 0
    - PriceQuoteRequest reuses ProductVariantIn so the live preview and the
      saved variant are validated by the same rules
"""

from datetime import date, datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

from artist_onboarding.config import get_settings
from artist_onboarding.core.domain_types import ProductType
from artist_onboarding.core.pricing import MAX_AMOUNT


def money_field(default=...):
    """Finite amount in [0, MAX_AMOUNT]."""
    return Field(default, ge=0, le=MAX_AMOUNT, allow_inf_nan=False)


class SpecialOffer(BaseModel):
    name: str = Field(min_length=1)
    discount_percentage: float = Field(ge=0, le=100)
    start_date: date | None = None
    end_date: date | None = None
    is_active: bool = True

    @model_validator(mode="after")
    def check_window(self) -> "SpecialOffer":
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class ProductVariantIn(BaseModel):
    """One product variant as sent by the pricing form."""
    id: UUID | None = None
    sku: str | None = Field(None, max_length=100)
    product_type: ProductType
    size: str = Field(min_length=1, max_length=50)
    media: str = Field(min_length=1, max_length=100)
    frame_color: str | None = Field(None, max_length=50)
    base_cost: float = money_field()
    markup_percentage: float | None = Field(None, ge=0, le=1000)
    final_price: float | None = money_field(None)
    is_limited_edition: bool = False
    limited_edition_price: float | None = money_field(None)
    is_signed: bool = False
    signed_price: float | None = money_field(None)
    is_active: bool = True
    special_offers: list[SpecialOffer] = []

    @field_validator("sku", "frame_color", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v


class PricingStrategy(BaseModel):
    strategy: Literal[
        "cost_plus", "market_based", "value_based", "competitive", "custom",
    ] = "cost_plus"
    target_margin: float = Field(60, ge=0, le=100)
    minimum_price: float = Field(25, ge=0)
    maximum_price: float | None = Field(None, ge=0)
    price_rounding: Literal[
        "none", "nearest_5", "nearest_10", "nearest_25", "nearest_50",
    ] = "nearest_5"
    currency_symbol: str = "$"
    includes_tax: bool = False
    tax_rate: float = Field(0, ge=0, le=100)


class VolumeDiscount(BaseModel):
    quantity: int = Field(gt=0)
    discount_percentage: float = Field(ge=0, le=100)


class MarkupConfig(BaseModel):
    default_markup_percentage: float = Field(
        default_factory=lambda: get_settings().default_markup_percentage, ge=0, le=1000,
    )
    markup_by_product_type: dict[str, float] | None = None
    markup_by_size: dict[str, float] | None = None
    markup_by_material: dict[str, float] | None = None
    volume_discounts: list[VolumeDiscount] = []


class WholesaleTier(BaseModel):
    min_quantity: int = Field(gt=0)
    discount_percentage: float = Field(ge=0, le=80)
    description: str | None = None


class WholesalePricing(BaseModel):
    offers_wholesale: bool = False
    minimum_quantity: int = Field(10, gt=0)
    wholesale_discount_percentage: float = Field(30, ge=0, le=80)
    wholesale_tiers: list[WholesaleTier] = []
    wholesale_terms: str | None = Field(None, max_length=1000)
    payment_terms: Literal[
        "net_15", "net_30", "net_60", "payment_on_delivery", "50_50_split",
    ] = "net_30"


class CommissionType(BaseModel):
    type: str = Field(min_length=1)
    description: str | None = Field(None, max_length=500)
    hourly_rate: float | None = Field(None, ge=0)
    flat_rate: float | None = Field(None, ge=0)
    markup_percentage: float | None = Field(None, ge=0)
    minimum_price: float | None = Field(None, ge=0)


class RevisionPolicy(BaseModel):
    included_revisions: int = Field(2, ge=0)
    additional_revision_cost: float = Field(50, ge=0)


class CommissionPricing(BaseModel):
    offers_commissions: bool = True
    base_commission_rate: float = Field(150, ge=0)
    commission_types: list[CommissionType] = []
    deposit_percentage: float = Field(50, ge=0, le=100)
    rush_order_surcharge: float = Field(25, ge=0)
    revision_policy: RevisionPolicy = RevisionPolicy()


class SeasonalAdjustment(BaseModel):
    name: str = Field(min_length=1)
    start_date: str
    end_date: str
    adjustment_percentage: float = Field(ge=-50, le=100)
    is_active: bool = True


class BulkDiscount(BaseModel):
    min_quantity: int = Field(gt=0)
    discount_percentage: float = Field(ge=0, le=50)
    description: str | None = None


class MembershipTier(BaseModel):
    name: str = Field(min_length=1)
    discount_percentage: float = Field(ge=0, le=50)
    requirements: str | None = None


class MemberDiscounts(BaseModel):
    offers_discounts: bool = False
    discount_percentage: float = Field(10, ge=0, le=50)
    membership_tiers: list[MembershipTier] = []


class SpecialPricing(BaseModel):
    seasonal_adjustments: list[SeasonalAdjustment] = []
    bulk_discounts: list[BulkDiscount] = []
    member_discounts: MemberDiscounts = MemberDiscounts()


class SkuGeneration(BaseModel):
    use_auto_generation: bool = True
    prefix: str = Field(
        default_factory=lambda: get_settings().default_sku_prefix, max_length=10,
    )
    include_artist_initials: bool = True
    include_product_code: bool = True
    include_size_code: bool = True
    include_media_code: bool = True
    include_frame_code: bool = True
    separator: str = Field("-", min_length=1, max_length=1)


class PriceDisplay(BaseModel):
    show_prices_on_website: bool = True
    show_starting_at_prices: bool = True
    show_price_ranges: bool = False
    hide_out_of_stock_prices: bool = False
    show_discounted_prices: bool = True
    price_format: Literal["$0.00", "$0", "$0.99", "$0,000.00"] = "$0.00"


class PricingConfigurationIn(BaseModel):
    """Section 4 form payload."""
    pricing_strategy: PricingStrategy = PricingStrategy()
    markup_config: MarkupConfig = Field(default_factory=MarkupConfig)
    product_variants: list[ProductVariantIn] = Field(min_length=1)
    wholesale_pricing: WholesalePricing = WholesalePricing()
    commission_pricing: CommissionPricing = CommissionPricing()
    special_pricing: SpecialPricing = SpecialPricing()
    sku_generation: SkuGeneration = Field(default_factory=SkuGeneration)
    price_display: PriceDisplay = PriceDisplay()


class PriceQuoteRequest(BaseModel):
    """Stateless preview of one variant's SKU and price."""
    variant: ProductVariantIn
    artist_initials: str = Field("", max_length=10)
    pricing_strategy: PricingStrategy = PricingStrategy()
    markup_config: MarkupConfig = Field(default_factory=MarkupConfig)
    sku_generation: SkuGeneration = Field(default_factory=SkuGeneration)


class PriceQuoteResponse(BaseModel):
    sku: str
    final_price: float
    markup_percentage: float
    discount_percent: float


class ProductVariantResponse(BaseModel):
    id: UUID
    artist_id: UUID
    sku: str
    product_type: str
    size: str
    media: str
    frame_color: str | None = None
    base_cost: float
    markup_percentage: float
    final_price: float
    is_limited_edition: bool
    limited_edition_price: float | None = None
    is_signed: bool
    signed_price: float | None = None
    is_active: bool
    special_offers: list[dict] = []
    created_at: datetime

    model_config = {"from_attributes": True}


class PricingSaveResponse(BaseModel):
    """Partial success allowed: saved variants plus per-variant errors."""
    saved_variants: list[ProductVariantResponse]
    errors: list[str] = []
    message: str


class VariantUpdateRequest(BaseModel):
    """Re-price one stored variant; initials come from the stored artist."""
    variant: ProductVariantIn
    pricing_strategy: PricingStrategy = PricingStrategy()
    markup_config: MarkupConfig = Field(default_factory=MarkupConfig)
    sku_generation: SkuGeneration = Field(default_factory=SkuGeneration)
