"""Domain Types — verifies enum values and the admin review workflow.

Tests:
    - NewType wrappers exist and are callable
    - Enums carry the stored string values
    - Transitions follow draft -> in_review -> ready -> active
"""

from uuid import uuid4

from artist_onboarding.core.domain_types import (
    ALLOWED_STATUS_TRANSITIONS, ArtistId, ArtistStatus, Money,
    OnboardingSection, ProductType, can_transition,
)
from artist_onboarding.core.sku import PRODUCT_TYPE_CODES


def test_identity_types_wrap_uuid():
    uid = uuid4()
    assert ArtistId(uid) == uid
    assert Money(9.99) == 9.99


def test_artist_status_values():
    assert [s.value for s in ArtistStatus] == [
        "draft", "in_review", "ready", "active",
    ]


def test_every_product_type_has_a_sku_code():
    assert {p.value for p in ProductType} == set(PRODUCT_TYPE_CODES)


def test_four_onboarding_sections():
    assert [int(s) for s in OnboardingSection] == [1, 2, 3, 4]


def test_forward_transitions_allowed():
    assert can_transition(ArtistStatus.DRAFT, ArtistStatus.IN_REVIEW)
    assert can_transition(ArtistStatus.IN_REVIEW, ArtistStatus.READY)
    assert can_transition(ArtistStatus.READY, ArtistStatus.ACTIVE)


def test_send_back_transitions_allowed():
    assert can_transition(ArtistStatus.IN_REVIEW, ArtistStatus.DRAFT)
    assert can_transition(ArtistStatus.READY, ArtistStatus.IN_REVIEW)


def test_skipping_and_leaving_active_not_allowed():
    assert not can_transition(ArtistStatus.DRAFT, ArtistStatus.ACTIVE)
    assert not can_transition(ArtistStatus.DRAFT, ArtistStatus.READY)
    assert not can_transition(ArtistStatus.ACTIVE, ArtistStatus.DRAFT)


def test_every_status_has_transition_entry():
    assert set(ALLOWED_STATUS_TRANSITIONS) == set(ArtistStatus)
