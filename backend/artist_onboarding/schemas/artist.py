"""Artist Profile Schemas: section 1 (profile & brand setup) validation.

Invariants:
    - full_name 2-255, location 2-255, bio 50-2000, artistic_style 20-1000
    - Colors are HEX (#RGB or #RRGGBB) or empty
    - Optional strings are stripped; empty strings become None
    - design_references <= 5 URLs, must_have_elements <= 10, preferred_fonts <= 5

Design Decisions:
    - Optional-or-empty fields accept "" (the form submits blank inputs) and
      normalize to None so the DB never stores empty strings
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, HttpUrl, field_validator

from artist_onboarding.core.domain_types import DesignFeel

HEX_COLOR_PATTERN = r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$"

_OPTIONAL_TEXT_FIELDS = (
    "studio_name", "phone", "business_number", "gst_number", "tagline",
    "primary_color", "secondary_color", "accent_color", "domain_name",
)


def _blank_to_none(v):
    if isinstance(v, str):
        v = v.strip()
        return v or None
    return v


class SocialLinks(BaseModel):
    instagram: HttpUrl | None = None
    facebook: HttpUrl | None = None
    twitter: HttpUrl | None = None
    linkedin: HttpUrl | None = None
    website: HttpUrl | None = None
    other: HttpUrl | None = None

    @field_validator("*", mode="before")
    @classmethod
    def empty_as_missing(cls, v):
        return _blank_to_none(v)


class ArtistProfileCreate(BaseModel):
    """Section 1 form payload."""
    # Basic information
    full_name: str = Field(min_length=2, max_length=255)
    studio_name: str | None = Field(None, max_length=255)
    email: EmailStr
    phone: str | None = Field(None, min_length=10, max_length=50)
    location: str = Field(min_length=2, max_length=255)

    # Business information
    business_number: str | None = Field(None, max_length=100)
    gst_number: str | None = Field(None, max_length=100)

    # Bio & statement
    bio: str = Field(min_length=50, max_length=2000)
    tagline: str | None = Field(None, max_length=500)
    artistic_style: str = Field(min_length=20, max_length=1000)

    # Brand colors
    primary_color: str | None = Field(None, pattern=HEX_COLOR_PATTERN)
    secondary_color: str | None = Field(None, pattern=HEX_COLOR_PATTERN)
    accent_color: str | None = Field(None, pattern=HEX_COLOR_PATTERN)

    # Web presence & design preferences
    social_links: SocialLinks = Field(default_factory=SocialLinks)
    domain_name: str | None = Field(None, max_length=255)
    design_feel: DesignFeel | None = None
    design_references: list[HttpUrl] = Field(default_factory=list, max_length=5)
    must_have_elements: list[str] = Field(default_factory=list, max_length=10)
    preferred_fonts: list[str] = Field(default_factory=list, max_length=5)

    @field_validator(*_OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def strip_optional(cls, v):
        return _blank_to_none(v)

    @field_validator("full_name", "location", "bio", "artistic_style")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v

    def artist_fields(self) -> dict:
        """Columns of the artists table."""
        return self.model_dump(include={
            "full_name", "studio_name", "email", "phone", "location",
            "business_number", "gst_number",
        })

    def branding_fields(self) -> dict:
        """Columns of the artist_branding table (JSON-safe)."""
        data = self.model_dump(
            mode="json",
            include={
                "bio", "tagline", "artistic_style", "preferred_fonts",
                "design_feel", "design_references", "must_have_elements",
                "domain_name",
            },
        )
        data["color_palette"] = {
            "primary": self.primary_color,
            "secondary": self.secondary_color,
            "accent": self.accent_color,
        }
        data["social_links"] = self.social_links.model_dump(
            mode="json", exclude_none=True,
        )
        return data


class BrandingResponse(BaseModel):
    bio: str
    tagline: str | None = None
    artistic_style: str
    preferred_fonts: list[str] = []
    color_palette: dict = {}
    design_feel: str | None = None
    design_references: list[str] = []
    must_have_elements: list[str] = []
    social_links: dict = {}
    domain_name: str | None = None

    model_config = {"from_attributes": True}


class ArtistResponse(BaseModel):
    """Artist row with optional branding, public-facing."""
    id: UUID
    full_name: str
    studio_name: str | None = None
    email: str
    phone: str | None = None
    location: str
    business_number: str | None = None
    gst_number: str | None = None
    status: str
    submission_date: datetime | None = None
    admin_notes: str | None = None
    created_at: datetime
    updated_at: datetime
    branding: BrandingResponse | None = None

    model_config = {"from_attributes": True}
