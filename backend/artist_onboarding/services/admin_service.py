"""Admin Service: artist review listing, dashboard stats, status changes, export.

Invariants:
    - status filter "all" (or None) means no filter
    - search matches full_name, studio_name or email (case-insensitive
      substring), or the exact artist id when the term parses as a UUID
    - total_pages = ceil(total / limit); 0 when nothing matches
    - Status changes follow ALLOWED_STATUS_TRANSITIONS; same-status updates
      only touch admin_notes
    - Export applies the same search/status filters as the listing

Design Decisions:
    - Rows are flattened to dicts here and handed to core.admin_stats, which
      holds the counting and CSV logic without touching the DB
"""

import logging
import math
from uuid import UUID

from sqlalchemy import Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from artist_onboarding.core.admin_stats import (
    completion_percentage, compute_section_counts, compute_status_counts, to_csv,
)
from artist_onboarding.core.domain_types import ArtistStatus, can_transition
from artist_onboarding.core.errors import (
    ErrorContext, InvalidStatusTransitionError,
)
from artist_onboarding.models import Artist, OnboardingSession
from artist_onboarding.schemas.admin import AdminStatusUpdate
from artist_onboarding.services.artist_service import ArtistService

logger = logging.getLogger(__name__)


def _parse_uuid(value: str) -> UUID | None:
    try:
        return UUID(value)
    except ValueError:
        return None


def apply_filters(query: Select, search: str | None, status: str | None) -> Select:
    if status and status != "all":
        query = query.where(Artist.status == status)
    term = (search or "").strip()
    if term:
        pattern = f"%{term}%"
        conditions = [
            Artist.full_name.ilike(pattern),
            Artist.studio_name.ilike(pattern),
            Artist.email.ilike(pattern),
        ]
        artist_id = _parse_uuid(term)
        if artist_id is not None:
            conditions.append(Artist.id == artist_id)
        query = query.where(or_(*conditions))
    return query


def summarize(artist: Artist) -> dict:
    """Flatten an artist and its children into one dashboard row."""
    session = artist.onboarding_session
    completed = list(session.completed_sections) if session else []
    return {
        "id": artist.id,
        "full_name": artist.full_name,
        "studio_name": artist.studio_name,
        "email": artist.email,
        "phone": artist.phone,
        "location": artist.location,
        "status": artist.status,
        "completed_sections": completed,
        "completion_percentage": completion_percentage(completed),
        "artwork_count": len(artist.artworks),
        "variant_count": len(artist.variants),
        "submission_date": artist.submission_date,
        "last_updated": artist.updated_at,
    }


class AdminService:
    """Queries and actions behind the admin dashboard."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_artists(
        self,
        search: str | None = None,
        status: str | None = None,
        page: int = 1,
        limit: int = 20,
    ) -> tuple[list[dict], dict]:
        """One page of artist rows plus pagination metadata."""
        base = apply_filters(select(Artist), search, status)
        total = (await self.db.execute(
            select(func.count()).select_from(base.subquery()),
        )).scalar_one()

        result = await self.db.execute(
            base.order_by(Artist.created_at.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )
        rows = [summarize(a) for a in result.scalars().all()]
        pagination = {
            "page": page,
            "limit": limit,
            "total": total,
            "total_pages": math.ceil(total / limit),
        }
        return rows, pagination

    async def stats(self) -> dict:
        result = await self.db.execute(
            select(Artist.status, OnboardingSession.completed_sections)
            .outerjoin(OnboardingSession, OnboardingSession.artist_id == Artist.id)
        )
        rows = [
            {"status": status, "completed_sections": sections or []}
            for status, sections in result.all()
        ]
        return {
            "status_counts": compute_status_counts(rows),
            "section_counts": compute_section_counts(rows),
        }

    async def update_status(self, artist_id: UUID, body: AdminStatusUpdate) -> Artist:
        artist = await ArtistService(self.db).get_or_404(artist_id)
        current = ArtistStatus(artist.status)
        if body.status != current and not can_transition(current, body.status):
            raise InvalidStatusTransitionError(
                current.value, body.status.value,
                ErrorContext(artist_id=str(artist_id)),
            )
        artist.status = body.status.value
        if body.admin_notes is not None:
            artist.admin_notes = body.admin_notes
        await self.db.commit()
        await self.db.refresh(artist)
        logger.info(
            f"Artist status {current.value} -> {body.status.value}",
            extra={"artist_id": artist_id},
        )
        return artist

    async def export_rows(
        self, search: str | None = None, status: str | None = None,
    ) -> list[dict]:
        result = await self.db.execute(
            apply_filters(select(Artist), search, status)
            .order_by(Artist.created_at.desc())
        )
        return [summarize(a) for a in result.scalars().all()]

    async def export_csv(
        self, search: str | None = None, status: str | None = None,
    ) -> str:
        return to_csv(await self.export_rows(search, status))
