"""ProductVariant ORM: one sellable product (type + size + media + options) from section 4.

Invariants:
    - Always belongs to an Artist (artist_id FK)
    - sku and final_price are written by the pricing service, never taken
      from the client as-is when auto-generation is on
    - final_price >= 0, rounded to cents

Design Decisions:
    - Surcharge columns named *_price to match the form fields they come from
    - special_offers as JSON list: read whole, only used to find the best discount
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Float, Boolean, DateTime, ForeignKey, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from artist_onboarding.db.base import Base


class ProductVariant(Base):
    __tablename__ = "product_variants"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    artist_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("artists.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    sku: Mapped[str] = mapped_column(String(100), nullable=False)
    product_type: Mapped[str] = mapped_column(String(30), nullable=False)
    size: Mapped[str] = mapped_column(String(50), nullable=False)
    media: Mapped[str] = mapped_column(String(100), nullable=False)
    frame_color: Mapped[str | None] = mapped_column(String(50), nullable=True)
    base_cost: Mapped[float] = mapped_column(Float, nullable=False)
    markup_percentage: Mapped[float] = mapped_column(Float, nullable=False)
    final_price: Mapped[float] = mapped_column(Float, nullable=False)
    is_limited_edition: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    limited_edition_price: Mapped[float | None] = mapped_column(Float, nullable=True)
    is_signed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    signed_price: Mapped[float | None] = mapped_column(Float, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    special_offers: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    artist: Mapped["Artist"] = relationship("Artist", back_populates="variants")
