"""Product Configuration Schemas: section 3 (product types & variants) validation.

Invariants:
    - At least one available size and one print media option
    - All additional costs >= 0 (except media, which may discount: Photo Satin is -5)
    - Defaults match the onboarding form defaults, so partial payloads are complete
      after validation

Design Decisions:
    - Nested groups are plain BaseModels dumped to JSON columns as a whole
"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

from artist_onboarding.core.domain_types import DimensionUnit

HEX_COLOR_PATTERN = r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$"


class CustomProduct(BaseModel):
    name: str = Field(min_length=1)
    description: str | None = Field(None, max_length=500)
    is_active: bool = True


class ProductOfferings(BaseModel):
    unframed_prints: bool = True
    framed_prints: bool = True
    canvas_wraps: bool = True
    metal_prints: bool = False
    acrylic_prints: bool = False
    greeting_cards: bool = True
    postcards: bool = False
    posters: bool = True
    stickers: bool = False
    custom_products: list[CustomProduct] = []


class ProductSize(BaseModel):
    name: str = Field(min_length=1)
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    unit: DimensionUnit = DimensionUnit.INCHES
    is_standard: bool = True
    is_active: bool = True
    aspect_ratio: str | None = None
    sort_order: int = 0


class CustomSizeConstraints(BaseModel):
    min_width: float | None = Field(None, gt=0)
    max_width: float | None = Field(None, gt=0)
    min_height: float | None = Field(None, gt=0)
    max_height: float | None = Field(None, gt=0)
    aspect_ratio_fixed: bool = False


class PrintMedia(BaseModel):
    name: str = Field(min_length=1)
    description: str | None = Field(None, max_length=500)
    finish: Literal["matte", "satin", "glossy", "metallic", "textured"]
    weight: str | None = None
    is_archival: bool = True
    is_active: bool = True
    additional_cost: float = 0
    suitable_for: list[Literal["prints", "canvas", "cards", "posters"]] = ["prints"]
    color_profile: Literal["sRGB", "Adobe RGB", "P3"] = "sRGB"


class FrameColor(BaseModel):
    name: str = Field(min_length=1)
    hex_code: str = Field(pattern=HEX_COLOR_PATTERN)
    is_active: bool = True
    additional_cost: float = Field(0, ge=0)


class FrameMaterial(BaseModel):
    name: str = Field(min_length=1)
    description: str | None = None
    is_active: bool = True
    additional_cost: float = 0


class Matting(BaseModel):
    offered: bool = True
    colors: list[str] = ["White", "Black", "Cream", "Gray"]
    additional_cost: float = Field(0, ge=0)


class GlazingType(BaseModel):
    name: str
    description: str | None = None
    additional_cost: float = Field(0, ge=0)


class Glazing(BaseModel):
    offered: bool = True
    types: list[GlazingType] = [
        GlazingType(name="Standard Glass", description="Basic protection"),
        GlazingType(
            name="UV-Protective Glass", description="Prevents fading",
            additional_cost=15,
        ),
        GlazingType(
            name="Museum Glass", description="Premium anti-reflective",
            additional_cost=35,
        ),
    ]


class FrameOptions(BaseModel):
    colors: list[FrameColor] = []
    materials: list[FrameMaterial] = []
    matting: Matting = Matting()
    glazing: Glazing = Glazing()


class WrapDepth(BaseModel):
    depth: float = Field(gt=0)
    unit: DimensionUnit = DimensionUnit.INCHES
    additional_cost: float = Field(0, ge=0)


class EdgeFinish(BaseModel):
    name: str
    description: str | None = None
    additional_cost: float = Field(0, ge=0)


class CanvasWrapOptions(BaseModel):
    offered: bool = True
    wrap_depths: list[WrapDepth] = [
        WrapDepth(depth=0.75),
        WrapDepth(depth=1.5, additional_cost=10),
    ]
    edge_finishes: list[EdgeFinish] = [
        EdgeFinish(name="Image Wrap", description="Image extends around edges"),
        EdgeFinish(name="White Edges", description="Clean white border"),
        EdgeFinish(
            name="Black Edges", description="Professional black border",
            additional_cost=5,
        ),
    ]


class SignedPrints(BaseModel):
    offered: bool = True
    additional_cost: float = Field(25, ge=0)
    description: str | None = None


class LimitedEditions(BaseModel):
    offered: bool = True
    default_edition_size: int = Field(100, gt=0)
    certificate_included: bool = True
    additional_cost: float = Field(50, ge=0)


class CustomCommissions(BaseModel):
    offered: bool = True
    requires_consultation: bool = True
    minimum_price: float | None = Field(None, gt=0)
    description: str | None = Field(None, max_length=1000)


class SpecialOptions(BaseModel):
    signed_prints: SignedPrints = SignedPrints()
    limited_editions: LimitedEditions = LimitedEditions()
    custom_commissions: CustomCommissions = CustomCommissions()


class PackagingOptions(BaseModel):
    eco_friendly: bool = True
    gift_wrapping: bool = True
    custom_branding: bool = False
    protective_packaging: bool = True
    include_certificate: bool = False
    additional_notes: str | None = Field(None, max_length=500)


class ReturnPolicy(BaseModel):
    accept_returns: bool = True
    return_period: int = Field(30, gt=0)
    conditions: str | None = Field(None, max_length=1000)


class QualityStandards(BaseModel):
    print_resolution: int = Field(300, gt=0)
    color_accuracy: Literal["standard", "enhanced", "professional"] = "enhanced"
    quality_control: bool = True
    return_policy: ReturnPolicy = ReturnPolicy()


class ProductConfigurationIn(BaseModel):
    """Section 3 form payload."""
    product_offerings: ProductOfferings = ProductOfferings()
    available_sizes: list[ProductSize] = Field(min_length=1)
    allow_custom_sizes: bool = False
    custom_size_constraints: CustomSizeConstraints | None = None
    unit_system: Literal["inches", "cm", "both"] = "inches"
    print_media_options: list[PrintMedia] = Field(min_length=1)
    frame_options: FrameOptions = FrameOptions()
    canvas_wrap_options: CanvasWrapOptions = CanvasWrapOptions()
    special_options: SpecialOptions = SpecialOptions()
    packaging_options: PackagingOptions = PackagingOptions()
    quality_standards: QualityStandards = QualityStandards()

    def to_columns(self) -> dict:
        return self.model_dump(mode="json")


class ProductConfigurationResponse(BaseModel):
    id: UUID
    artist_id: UUID
    product_offerings: dict
    unit_system: str
    available_sizes: list[dict]
    allow_custom_sizes: bool
    custom_size_constraints: dict | None = None
    print_media_options: list[dict]
    frame_options: dict
    canvas_wrap_options: dict
    special_options: dict
    packaging_options: dict
    quality_standards: dict
    updated_at: datetime

    model_config = {"from_attributes": True}
