"""Artwork Schemas: section 2 (artwork catalog) validation.

Invariants:
    - year_created between 1900 and the current year
    - width/height strictly positive
    - keywords <= 20
    - ArtworkUpdate is partial: only fields sent are written
"""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field, HttpUrl, field_validator

from artist_onboarding.core.domain_types import DimensionUnit, Orientation


def _check_year(v: int | None) -> int | None:
    if v is not None and v > date.today().year:
        raise ValueError("year_created cannot be in the future")
    return v


class Dimensions(BaseModel):
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    unit: DimensionUnit = DimensionUnit.INCHES


class ArtworkCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    year_created: int = Field(ge=1900)
    medium: str = Field(min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    keywords: list[str] = Field(default_factory=list, max_length=20)
    orientation: Orientation
    dimensions: Dimensions
    thumbnail_url: HttpUrl | None = None
    is_active: bool = True
    sort_order: int = 0
    is_limited_edition: bool = False
    limited_edition_size: int | None = Field(None, gt=0)
    is_available_for_print: bool = True
    is_available_as_original: bool = False
    original_price: float | None = Field(None, gt=0)

    @field_validator("year_created")
    @classmethod
    def year_not_in_future(cls, v):
        return _check_year(v)

    def to_columns(self) -> dict:
        data = self.model_dump(mode="json", exclude={"dimensions"})
        data.update(self.dimensions.model_dump(mode="json"))
        return data


class ArtworkUpdate(BaseModel):
    """Partial update; unset fields are left untouched."""
    title: str | None = Field(None, min_length=1, max_length=255)
    year_created: int | None = Field(None, ge=1900)
    medium: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, max_length=2000)
    keywords: list[str] | None = Field(None, max_length=20)
    orientation: Orientation | None = None
    dimensions: Dimensions | None = None
    is_active: bool | None = None
    sort_order: int | None = None

    @field_validator("year_created")
    @classmethod
    def year_not_in_future(cls, v):
        return _check_year(v)

    def to_columns(self) -> dict:
        data = self.model_dump(mode="json", exclude_unset=True, exclude={"dimensions"})
        if self.dimensions is not None:
            data.update(self.dimensions.model_dump(mode="json"))
        return data


class ArtworkResponse(BaseModel):
    id: UUID
    artist_id: UUID
    title: str
    year_created: int
    medium: str
    description: str | None = None
    keywords: list[str] = []
    orientation: str
    width: float
    height: float
    unit: str
    thumbnail_url: str | None = None
    is_active: bool
    sort_order: int
    is_limited_edition: bool
    limited_edition_size: int | None = None
    is_available_for_print: bool
    is_available_as_original: bool
    original_price: float | None = None
    created_at: datetime

    model_config = {"from_attributes": True}
