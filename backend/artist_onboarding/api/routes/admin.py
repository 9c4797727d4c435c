"""Admin Routes: review dashboard listing, stats, status changes and export.

Invariants:
    - limit is capped by settings.admin_page_size_max
    - status=all disables the status filter
    - Export honours the same search/status filters as the listing

Design Decisions:
    - Admin authentication is not handled by this service
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from artist_onboarding.config import get_settings
from artist_onboarding.core.domain_types import ExportFormat
from artist_onboarding.infrastructure.database import get_db
from artist_onboarding.schemas.admin import (
    AdminStatusUpdate, ArtistListResponse, ArtistSummary, DashboardStats,
)
from artist_onboarding.schemas.artist import ArtistResponse
from artist_onboarding.services.admin_service import AdminService

router = APIRouter(prefix="/api/v1/admin", tags=["admin"])


@router.get("/artists", response_model=ArtistListResponse)
async def list_artists(
    search: str | None = Query(None, max_length=255),
    status_filter: str | None = Query(None, alias="status"),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1),
    db: AsyncSession = Depends(get_db),
):
    """Paginated artist rows with completion and catalog counts."""
    limit = min(limit, get_settings().admin_page_size_max)
    rows, pagination = await AdminService(db).list_artists(
        search=search, status=status_filter, page=page, limit=limit,
    )
    return ArtistListResponse(
        artists=[ArtistSummary(**row) for row in rows], pagination=pagination,
    )


@router.get("/stats", response_model=DashboardStats)
async def dashboard_stats(db: AsyncSession = Depends(get_db)):
    return await AdminService(db).stats()


@router.patch("/artists/{artist_id}/status", response_model=ArtistResponse)
async def update_artist_status(
    artist_id: UUID, body: AdminStatusUpdate, db: AsyncSession = Depends(get_db),
):
    return await AdminService(db).update_status(artist_id, body)


@router.get("/export")
async def export_artists(
    export_format: ExportFormat = Query(ExportFormat.CSV, alias="format"),
    search: str | None = Query(None, max_length=255),
    status_filter: str | None = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
):
    """Download the filtered artist table as CSV or JSON."""
    service = AdminService(db)
    if export_format is ExportFormat.CSV:
        content = await service.export_csv(search, status_filter)
        return PlainTextResponse(
            content,
            media_type="text/csv",
            headers={"Content-Disposition": 'attachment; filename="artists.csv"'},
        )
    rows = await service.export_rows(search, status_filter)
    return [ArtistSummary(**row).model_dump(mode="json") for row in rows]
