"""ProductConfiguration ORM: product offerings and options from section 3.

Invariants:
    - Exactly one row per artist (artist_id unique), upserted on every save
    - Nested option groups stored as JSON exactly as validated by
      ProductConfigurationIn.model_dump()

Design Decisions:
    - JSON columns over normalized option tables: options are only ever read
      back whole by the form and the admin profile view
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Boolean, DateTime, ForeignKey, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from artist_onboarding.db.base import Base


class ProductConfiguration(Base):
    __tablename__ = "product_configurations"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    artist_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("artists.id", ondelete="CASCADE"),
        nullable=False, unique=True,
    )
    product_offerings: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    unit_system: Mapped[str] = mapped_column(String(10), nullable=False, default="inches")
    available_sizes: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    allow_custom_sizes: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    custom_size_constraints: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    print_media_options: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    frame_options: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    canvas_wrap_options: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    special_options: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    packaging_options: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    quality_standards: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    artist: Mapped["Artist"] = relationship(
        "Artist", back_populates="product_configuration",
    )
