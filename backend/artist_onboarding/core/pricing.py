"""Price Calculator: base cost + markup/surcharges/discount/tax into a final price.

Invariants:
    - compute_final_price is pure and total on in-range inputs (never raises)
    - Step order is fixed: markup -> limited-edition surcharge -> signed surcharge
      -> discount -> tax -> rounding
    - Surcharges are flat and applied BEFORE the discount, so a discount reduces
      them proportionally; tax is applied AFTER the discount
    - Result is rounded half-up at the cent: floor(price * 100 + 0.5) / 100
    - Output >= 0 for in-range inputs (discount <= 100)
    - Money inputs are capped at MAX_AMOUNT, so the result stays finite even
      at the 1000% markup ceiling
    - A special offer discounts only while active and inside its date window

Design Decisions:
    - Range checks (negative cost, markup > 1000, discount > 100) live in the
      Pydantic schemas, not here: core takes already-validated inputs
    - floor(x + 0.5) instead of round(): round() is banker's rounding and would
      price 0.125 as 0.12 where stored prices expect 0.13
    - The surcharge-before-discount order is kept as observed; existing prices
      depend on it
"""

import math
from dataclasses import dataclass
from datetime import date
from typing import Iterable

from artist_onboarding.core.domain_types import Money

MAX_AMOUNT = 1_000_000_000


@dataclass(frozen=True)
class PriceInputs:
    """Everything needed to price one product variant. Discarded after use."""
    base_cost: float
    markup_percentage: float
    is_limited_edition: bool = False
    limited_edition_surcharge: float = 0.0
    is_signed: bool = False
    signed_surcharge: float = 0.0
    discount_percent: float = 0.0
    tax_rate: float = 0.0
    includes_tax: bool = False


def round_to_cents(amount: float) -> Money:
    """Round half-up to 2 decimals."""
    return Money(math.floor(amount * 100 + 0.5) / 100)


def compute_final_price(inputs: PriceInputs) -> Money:
    """Compute the customer-facing price for one variant. Pure, no IO."""
    price = inputs.base_cost * (1 + inputs.markup_percentage / 100)

    if inputs.is_limited_edition:
        price += inputs.limited_edition_surcharge

    if inputs.is_signed:
        price += inputs.signed_surcharge

    if inputs.discount_percent > 0:
        price *= 1 - inputs.discount_percent / 100

    if inputs.includes_tax and inputs.tax_rate > 0:
        price *= 1 + inputs.tax_rate / 100

    return round_to_cents(price)


def resolve_markup(variant_markup: float | None, default_markup: float) -> float:
    """Variant markup when set (0 included), else the configuration default."""
    return default_markup if variant_markup is None else variant_markup


def offer_applies(offer: dict, today: date) -> bool:
    """Active flag set and today within [start_date, end_date], bounds optional."""
    if not offer.get("is_active", True):
        return False
    start, end = offer.get("start_date"), offer.get("end_date")
    if start is not None and today < start:
        return False
    if end is not None and today > end:
        return False
    return True


def best_active_discount(offers: Iterable[dict], today: date) -> float:
    """Highest discount among offers running on `today`, 0 when there is none.

    Offers are plain dicts with `discount_percentage`, `is_active` (missing
    counts as active, matching the form default) and optional `start_date` /
    `end_date` as date objects, both inclusive.
    """
    discounts = [
        float(o.get("discount_percentage", 0))
        for o in offers
        if offer_applies(o, today)
    ]
    return max(discounts, default=0.0)
