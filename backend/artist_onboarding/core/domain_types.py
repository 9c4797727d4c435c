"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - ArtistId, ArtworkId, VariantId wrap UUIDs, never bare UUID in domain logic
    - All valid states encoded as Enums, no raw string matching
    - Status transitions are listed explicitly in ALLOWED_STATUS_TRANSITIONS

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum, IntEnum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

ArtistId = NewType("ArtistId", UUID)
ArtworkId = NewType("ArtworkId", UUID)
VariantId = NewType("VariantId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

Money = NewType("Money", float)          # >= 0, two decimals after pricing
Percent = NewType("Percent", float)      # 0-100 (markup allows up to 1000)


# ─── Enums ───────────────────────────────────────────────────────

class ArtistStatus(str, Enum):
    """Artist review lifecycle, maps to DB `status` column."""
    DRAFT = "draft"
    IN_REVIEW = "in_review"
    READY = "ready"
    ACTIVE = "active"


class ProductType(str, Enum):
    """Product types an artist can sell. Each has a fixed SKU code."""
    UNFRAMED_PRINT = "unframed_print"
    FRAMED_PRINT = "framed_print"
    CANVAS_WRAP = "canvas_wrap"
    METAL_PRINT = "metal_print"
    ACRYLIC_PRINT = "acrylic_print"
    GREETING_CARD = "greeting_card"
    POSTCARD = "postcard"
    POSTER = "poster"
    STICKER = "sticker"
    CUSTOM = "custom"


class Orientation(str, Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"
    SQUARE = "square"


class DimensionUnit(str, Enum):
    INCHES = "inches"
    CM = "cm"


class DesignFeel(str, Enum):
    """Website design preference collected in section 1."""
    MINIMALIST = "minimalist"
    BOLD = "bold"
    ARTISTIC = "artistic"
    EDITORIAL = "editorial"
    COMMERCIAL = "commercial"


class OnboardingSection(IntEnum):
    """The 4 onboarding form steps."""
    PROFILE = 1
    ARTWORK_CATALOG = 2
    PRODUCT_CONFIGURATION = 3
    PRICING = 4


class ExportFormat(str, Enum):
    CSV = "csv"
    JSON = "json"


# ─── Review workflow ─────────────────────────────────────────────

ALLOWED_STATUS_TRANSITIONS: dict[ArtistStatus, frozenset[ArtistStatus]] = {
    ArtistStatus.DRAFT: frozenset({ArtistStatus.IN_REVIEW}),
    ArtistStatus.IN_REVIEW: frozenset({ArtistStatus.READY, ArtistStatus.DRAFT}),
    ArtistStatus.READY: frozenset({ArtistStatus.ACTIVE, ArtistStatus.IN_REVIEW}),
    ArtistStatus.ACTIVE: frozenset(),
}


def can_transition(current: ArtistStatus, target: ArtistStatus) -> bool:
    """True if an admin may move an artist from current to target."""
    return target in ALLOWED_STATUS_TRANSITIONS[current]
