"""Artist Routes: section 1 profile create/update and profile reads.

Invariants:
    - Validation happens in ArtistProfileCreate before the handler runs
    - Routes hold no business logic; ArtistService owns persistence
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from artist_onboarding.infrastructure.database import get_db
from artist_onboarding.schemas.artist import ArtistProfileCreate, ArtistResponse
from artist_onboarding.services.artist_service import ArtistService

router = APIRouter(prefix="/api/v1/artists", tags=["artists"])


@router.post(
    "", response_model=ArtistResponse, status_code=status.HTTP_201_CREATED,
)
async def create_artist(
    body: ArtistProfileCreate, db: AsyncSession = Depends(get_db),
):
    """Create an artist (status draft) with branding."""
    return await ArtistService(db).create(body)


@router.get("/{artist_id}", response_model=ArtistResponse)
async def get_artist(artist_id: UUID, db: AsyncSession = Depends(get_db)):
    return await ArtistService(db).get_or_404(artist_id)


@router.put("/{artist_id}", response_model=ArtistResponse)
async def update_artist(
    artist_id: UUID, body: ArtistProfileCreate, db: AsyncSession = Depends(get_db),
):
    return await ArtistService(db).update(artist_id, body)


@router.get("/{artist_id}/profile")
async def get_complete_profile(artist_id: UUID, db: AsyncSession = Depends(get_db)):
    """Artist plus artworks, product configuration and variants."""
    return await ArtistService(db).complete_profile(artist_id)
