"""Onboarding Routes: save-as-draft, resume, and final submission.

Invariants:
    - POST /onboarding/draft creates the artist on first save and upserts
      the session afterwards (always 200)
    - Submitting twice returns 409 (OnboardingAlreadySubmittedError)
"""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from artist_onboarding.infrastructure.database import get_db
from artist_onboarding.schemas.onboarding import (
    DraftSave, DraftSaveResponse, OnboardingComplete,
    OnboardingCompleteResponse, OnboardingSessionResponse,
)
from artist_onboarding.services.onboarding_service import OnboardingService

router = APIRouter(prefix="/api/v1/onboarding", tags=["onboarding"])


@router.post("/draft", response_model=DraftSaveResponse)
async def save_draft(body: DraftSave, db: AsyncSession = Depends(get_db)):
    session = await OnboardingService(db).save_draft(body)
    return DraftSaveResponse(
        artist_id=session.artist_id, session_token=session.session_token,
    )


@router.get("/{artist_id}", response_model=OnboardingSessionResponse)
async def get_onboarding_session(
    artist_id: UUID, db: AsyncSession = Depends(get_db),
):
    """Saved draft state, for resuming the form."""
    return await OnboardingService(db).get_session(artist_id)


@router.post("/{artist_id}/complete", response_model=OnboardingCompleteResponse)
async def complete_onboarding(
    artist_id: UUID,
    body: OnboardingComplete | None = None,
    db: AsyncSession = Depends(get_db),
):
    artist, session = await OnboardingService(db).complete(
        artist_id, body or OnboardingComplete(),
    )
    return OnboardingCompleteResponse(
        artist_id=artist.id,
        session_id=session.id,
        completed_at=session.submitted_at,
    )
