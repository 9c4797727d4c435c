"""Artist ORM: aggregate root for one onboarding submission.

Invariants:
    - id is UUID primary key
    - email is unique across artists
    - status is one of ArtistStatus values (draft -> in_review -> ready -> active)
    - Owns branding, artworks, product configuration, variants and the
      onboarding session; all cascade-deleted with the artist

Design Decisions:
    - status as String, not a DB enum: new review states need no migration
    - admin_notes on the artist row: the dashboard edits it together with status
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from artist_onboarding.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Artist(Base):
    """Artist aggregate root: profile fields from section 1."""
    __tablename__ = "artists"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    studio_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    business_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    gst_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="draft",
    )
    submission_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    admin_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow,
    )

    # Relationships
    branding: Mapped[Optional["ArtistBranding"]] = relationship(
        "ArtistBranding", back_populates="artist", uselist=False,
        cascade="all, delete-orphan", lazy="selectin",
    )
    artworks: Mapped[list["Artwork"]] = relationship(
        "Artwork", back_populates="artist",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="Artwork.sort_order",
    )
    product_configuration: Mapped[Optional["ProductConfiguration"]] = relationship(
        "ProductConfiguration", back_populates="artist", uselist=False,
        cascade="all, delete-orphan", lazy="selectin",
    )
    variants: Mapped[list["ProductVariant"]] = relationship(
        "ProductVariant", back_populates="artist",
        cascade="all, delete-orphan", lazy="selectin",
    )
    onboarding_session: Mapped[Optional["OnboardingSession"]] = relationship(
        "OnboardingSession", back_populates="artist", uselist=False,
        cascade="all, delete-orphan", lazy="selectin",
    )
