"""Admin Dashboard Schemas: listing rows, stats and review actions."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from artist_onboarding.core.domain_types import ArtistStatus


class ArtistSummary(BaseModel):
    """One row of the admin artist table."""
    id: UUID
    full_name: str
    studio_name: str | None = None
    email: str
    phone: str | None = None
    location: str
    status: str
    completed_sections: list[int]
    completion_percentage: int
    artwork_count: int
    variant_count: int
    submission_date: datetime | None = None
    last_updated: datetime


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int


class ArtistListResponse(BaseModel):
    artists: list[ArtistSummary]
    pagination: Pagination


class DashboardStats(BaseModel):
    status_counts: dict[str, int]
    section_counts: dict[str, int]


class AdminStatusUpdate(BaseModel):
    status: ArtistStatus
    admin_notes: str | None = Field(None, max_length=5000)
