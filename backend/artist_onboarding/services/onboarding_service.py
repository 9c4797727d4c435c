"""Onboarding Service: save-as-draft and final submission of the four-step form.

Invariants:
    - A draft without artist_id creates the artist (and branding) from the
      section 1 profile in the same transaction as the session
    - One session per artist; session_token is generated once and then kept
    - completed_sections only grows across draft saves (union, sorted)
    - Once submitted, drafts and re-submission raise OnboardingAlreadySubmittedError
    - complete() moves the artist to in_review and stamps submission_date

Design Decisions:
    - Sessions are queried directly instead of through artist.onboarding_session:
      a freshly flushed artist has no loaded relationship to read in async code
    - form_data merges shallowly, section payload keys override older ones
"""

import logging
import secrets
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from artist_onboarding.core.domain_types import ArtistStatus, OnboardingSection
from artist_onboarding.core.errors import (
    ErrorContext, OnboardingAlreadySubmittedError, ResourceNotFoundError,
)
from artist_onboarding.models import Artist, OnboardingSession
from artist_onboarding.schemas.onboarding import DraftSave, OnboardingComplete
from artist_onboarding.services.artist_service import ArtistService

logger = logging.getLogger(__name__)


def new_session_token() -> str:
    return secrets.token_urlsafe(32)


class OnboardingService:
    """Draft persistence and submission for one artist's onboarding session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _find_session(self, artist_id: UUID) -> OnboardingSession | None:
        result = await self.db.execute(
            select(OnboardingSession).where(OnboardingSession.artist_id == artist_id),
        )
        return result.scalar_one_or_none()

    async def get_session(self, artist_id: UUID) -> OnboardingSession:
        session = await self._find_session(artist_id)
        if not session:
            raise ResourceNotFoundError(
                "OnboardingSession", str(artist_id),
                ErrorContext(artist_id=str(artist_id)),
            )
        return session

    async def save_draft(self, body: DraftSave) -> OnboardingSession:
        """Persist partial form progress, creating the artist on first save."""
        artists = ArtistService(self.db)
        if body.artist_id is None:
            artist = await artists.create(body.profile, commit=False)
        else:
            artist = await artists.get_or_404(body.artist_id)

        session = await self._find_session(artist.id)
        if session is None:
            session = OnboardingSession(
                artist_id=artist.id,
                session_token=body.session_token or new_session_token(),
                completed_sections=[],
                form_data={},
            )
            self.db.add(session)
        elif session.is_submitted:
            raise OnboardingAlreadySubmittedError(str(artist.id))
        elif body.session_token:
            session.session_token = body.session_token

        session.current_section = body.section_number
        session.completed_sections = sorted(
            set(session.completed_sections or []) | set(body.completed_sections),
        )
        session.form_data = {**(session.form_data or {}), **body.form_data}

        await self.db.commit()
        await self.db.refresh(session)
        logger.info(
            "Draft saved",
            extra={"artist_id": artist.id, "section": body.section_number},
        )
        return session

    async def complete(
        self, artist_id: UUID, body: OnboardingComplete,
    ) -> tuple[Artist, OnboardingSession]:
        """Submit the onboarding for admin review."""
        artist = await ArtistService(self.db).get_or_404(artist_id)
        session = await self._find_session(artist_id)
        if session is None:
            session = OnboardingSession(
                artist_id=artist_id,
                session_token=new_session_token(),
                completed_sections=[],
                form_data={},
            )
            self.db.add(session)
        elif session.is_submitted:
            raise OnboardingAlreadySubmittedError(str(artist_id))

        now = datetime.now(timezone.utc)
        session.current_section = int(OnboardingSection.PRICING)
        session.completed_sections = sorted(
            set(session.completed_sections or []) | set(body.completed_sections),
        )
        session.form_data = {**(session.form_data or {}), **body.section_data}
        session.is_submitted = True
        session.submitted_at = now

        artist.status = ArtistStatus.IN_REVIEW.value
        artist.submission_date = now

        await self.db.commit()
        await self.db.refresh(session)
        logger.info("Onboarding submitted", extra={"artist_id": artist_id})
        return artist, session
