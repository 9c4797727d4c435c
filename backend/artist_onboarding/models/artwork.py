"""Artwork ORM: one catalog entry from section 2.

Invariants:
    - Always belongs to an Artist (artist_id FK)
    - width/height > 0, enforced by ArtworkCreate before insert
    - Listed per artist by sort_order ascending
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    String, Text, Integer, Float, Boolean, DateTime, ForeignKey, JSON,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from artist_onboarding.db.base import Base


class Artwork(Base):
    __tablename__ = "artworks"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    artist_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("artists.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    year_created: Mapped[int] = mapped_column(Integer, nullable=False)
    medium: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    keywords: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    orientation: Mapped[str] = mapped_column(String(20), nullable=False)
    width: Mapped[float] = mapped_column(Float, nullable=False)
    height: Mapped[float] = mapped_column(Float, nullable=False)
    unit: Mapped[str] = mapped_column(String(10), nullable=False, default="inches")
    thumbnail_url: Mapped[str | None] = mapped_column(String(1000), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_limited_edition: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    limited_edition_size: Mapped[int | None] = mapped_column(Integer, nullable=True)
    is_available_for_print: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    is_available_as_original: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    original_price: Mapped[float | None] = mapped_column(Float, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    artist: Mapped["Artist"] = relationship("Artist", back_populates="artworks")
