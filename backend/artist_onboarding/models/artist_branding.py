"""ArtistBranding ORM: bio, style and website preferences from section 1.

Invariants:
    - Exactly one row per artist (artist_id unique)
    - List/dict preferences stored as JSON, never null (default empty)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, ForeignKey, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from artist_onboarding.db.base import Base


class ArtistBranding(Base):
    __tablename__ = "artist_branding"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    artist_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("artists.id", ondelete="CASCADE"),
        nullable=False, unique=True,
    )
    bio: Mapped[str] = mapped_column(Text, nullable=False)
    tagline: Mapped[str | None] = mapped_column(String(500), nullable=True)
    artistic_style: Mapped[str] = mapped_column(Text, nullable=False)
    preferred_fonts: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    color_palette: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    design_feel: Mapped[str | None] = mapped_column(String(20), nullable=True)
    design_references: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    must_have_elements: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    social_links: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    domain_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    artist: Mapped["Artist"] = relationship("Artist", back_populates="branding")
