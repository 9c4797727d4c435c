"""ORM Models: SQLAlchemy declarative models for all onboarding entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Artist is the aggregate root; all entities scoped by artist_id

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from artist_onboarding.models.artist import Artist  # noqa: F401
from artist_onboarding.models.artist_branding import ArtistBranding  # noqa: F401
from artist_onboarding.models.artwork import Artwork  # noqa: F401
from artist_onboarding.models.product_configuration import ProductConfiguration  # noqa: F401
from artist_onboarding.models.product_variant import ProductVariant  # noqa: F401
from artist_onboarding.models.onboarding_session import OnboardingSession  # noqa: F401
