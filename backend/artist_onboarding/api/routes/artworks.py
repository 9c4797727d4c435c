"""Artwork Routes: section 2 catalog entries, nested under an artist for create/list."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from artist_onboarding.infrastructure.database import get_db
from artist_onboarding.schemas.artwork import (
    ArtworkCreate, ArtworkResponse, ArtworkUpdate,
)
from artist_onboarding.services.artwork_service import ArtworkService

router = APIRouter(prefix="/api/v1", tags=["artworks"])


@router.post(
    "/artists/{artist_id}/artworks", response_model=ArtworkResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_artwork(
    artist_id: UUID, body: ArtworkCreate, db: AsyncSession = Depends(get_db),
):
    return await ArtworkService(db).create(artist_id, body)


@router.get(
    "/artists/{artist_id}/artworks", response_model=list[ArtworkResponse],
)
async def list_artworks(artist_id: UUID, db: AsyncSession = Depends(get_db)):
    """Artworks ordered by sort_order."""
    return await ArtworkService(db).list_for_artist(artist_id)


@router.patch("/artworks/{artwork_id}", response_model=ArtworkResponse)
async def update_artwork(
    artwork_id: UUID, body: ArtworkUpdate, db: AsyncSession = Depends(get_db),
):
    """Partial update: only fields present in the body are written."""
    return await ArtworkService(db).update(artwork_id, body)


@router.delete("/artworks/{artwork_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_artwork(artwork_id: UUID, db: AsyncSession = Depends(get_db)):
    await ArtworkService(db).delete(artwork_id)
