"""Initial schema — artists, branding, artworks, product configuration, variants, onboarding sessions.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _artist_fk() -> sa.Column:
    return sa.Column(
        "artist_id", UUID(as_uuid=True),
        sa.ForeignKey("artists.id", ondelete="CASCADE"), nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "artists",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column("studio_name", sa.String(255), nullable=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("location", sa.String(255), nullable=False),
        sa.Column("business_number", sa.String(100), nullable=True),
        sa.Column("gst_number", sa.String(100), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        sa.Column("submission_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("admin_notes", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_artists_status", "artists", ["status"])

    op.create_table(
        "artist_branding",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "artist_id", UUID(as_uuid=True),
            sa.ForeignKey("artists.id", ondelete="CASCADE"), nullable=False, unique=True,
        ),
        sa.Column("bio", sa.Text, nullable=False),
        sa.Column("tagline", sa.String(500), nullable=True),
        sa.Column("artistic_style", sa.Text, nullable=False),
        sa.Column("preferred_fonts", sa.JSON, nullable=False),
        sa.Column("color_palette", sa.JSON, nullable=False),
        sa.Column("design_feel", sa.String(20), nullable=True),
        sa.Column("design_references", sa.JSON, nullable=False),
        sa.Column("must_have_elements", sa.JSON, nullable=False),
        sa.Column("social_links", sa.JSON, nullable=False),
        sa.Column("domain_name", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "artworks",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        _artist_fk(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("year_created", sa.Integer, nullable=False),
        sa.Column("medium", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("keywords", sa.JSON, nullable=False),
        sa.Column("orientation", sa.String(20), nullable=False),
        sa.Column("width", sa.Float, nullable=False),
        sa.Column("height", sa.Float, nullable=False),
        sa.Column("unit", sa.String(10), nullable=False, server_default="inches"),
        sa.Column("thumbnail_url", sa.String(1000), nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default="true"),
        sa.Column("sort_order", sa.Integer, nullable=False, server_default="0"),
        sa.Column("is_limited_edition", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("limited_edition_size", sa.Integer, nullable=True),
        sa.Column("is_available_for_print", sa.Boolean, nullable=False, server_default="true"),
        sa.Column("is_available_as_original", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("original_price", sa.Float, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_artworks_artist_id", "artworks", ["artist_id"])

    op.create_table(
        "product_configurations",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "artist_id", UUID(as_uuid=True),
            sa.ForeignKey("artists.id", ondelete="CASCADE"), nullable=False, unique=True,
        ),
        sa.Column("product_offerings", sa.JSON, nullable=False),
        sa.Column("unit_system", sa.String(10), nullable=False, server_default="inches"),
        sa.Column("available_sizes", sa.JSON, nullable=False),
        sa.Column("allow_custom_sizes", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("custom_size_constraints", sa.JSON, nullable=True),
        sa.Column("print_media_options", sa.JSON, nullable=False),
        sa.Column("frame_options", sa.JSON, nullable=False),
        sa.Column("canvas_wrap_options", sa.JSON, nullable=False),
        sa.Column("special_options", sa.JSON, nullable=False),
        sa.Column("packaging_options", sa.JSON, nullable=False),
        sa.Column("quality_standards", sa.JSON, nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "product_variants",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        _artist_fk(),
        sa.Column("sku", sa.String(100), nullable=False),
        sa.Column("product_type", sa.String(30), nullable=False),
        sa.Column("size", sa.String(50), nullable=False),
        sa.Column("media", sa.String(100), nullable=False),
        sa.Column("frame_color", sa.String(50), nullable=True),
        sa.Column("base_cost", sa.Float, nullable=False),
        sa.Column("markup_percentage", sa.Float, nullable=False),
        sa.Column("final_price", sa.Float, nullable=False),
        sa.Column("is_limited_edition", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("limited_edition_price", sa.Float, nullable=True),
        sa.Column("is_signed", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("signed_price", sa.Float, nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default="true"),
        sa.Column("special_offers", sa.JSON, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_product_variants_artist_id", "product_variants", ["artist_id"])

    op.create_table(
        "onboarding_sessions",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "artist_id", UUID(as_uuid=True),
            sa.ForeignKey("artists.id", ondelete="CASCADE"), nullable=False, unique=True,
        ),
        sa.Column("session_token", sa.String(64), nullable=False),
        sa.Column("current_section", sa.Integer, nullable=False, server_default="1"),
        sa.Column("completed_sections", sa.JSON, nullable=False),
        sa.Column("form_data", sa.JSON, nullable=False),
        sa.Column("is_submitted", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("submitted_at", sa.DateTime(timezone=True), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("onboarding_sessions")
    op.drop_index("ix_product_variants_artist_id", table_name="product_variants")
    op.drop_table("product_variants")
    op.drop_table("product_configurations")
    op.drop_index("ix_artworks_artist_id", table_name="artworks")
    op.drop_table("artworks")
    op.drop_table("artist_branding")
    op.drop_index("ix_artists_status", table_name="artists")
    op.drop_table("artists")
