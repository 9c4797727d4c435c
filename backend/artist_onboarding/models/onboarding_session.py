"""OnboardingSession ORM: save-as-draft state of the multi-step form.

Invariants:
    - At most one session per artist (artist_id unique)
    - session_token generated once, kept across draft saves unless the client sends one
    - completed_sections holds distinct section numbers in 1..4
    - is_submitted flips to True exactly once, with submitted_at set
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Integer, Boolean, DateTime, ForeignKey, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from artist_onboarding.db.base import Base


class OnboardingSession(Base):
    __tablename__ = "onboarding_sessions"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    artist_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("artists.id", ondelete="CASCADE"),
        nullable=False, unique=True,
    )
    session_token: Mapped[str] = mapped_column(String(64), nullable=False)
    current_section: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    completed_sections: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    form_data: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    is_submitted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
    submitted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    artist: Mapped["Artist"] = relationship(
        "Artist", back_populates="onboarding_session",
    )
