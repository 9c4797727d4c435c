"""Artist Profile Schemas — section 1 validation rules."""

import pytest
from pydantic import ValidationError

from artist_onboarding.schemas.artist import ArtistProfileCreate
from artist_onboarding.schemas.onboarding import DraftSave

BIO = "I paint coastal landscapes in oil, mostly large canvases of the Pacific."


def _profile(**overrides) -> dict:
    data = {
        "full_name": "Sarah Jones",
        "email": "sarah@example.com",
        "location": "Vancouver, BC",
        "bio": BIO,
        "artistic_style": "Impressionist seascapes",
    }
    data.update(overrides)
    return data


def test_minimal_profile_valid():
    profile = ArtistProfileCreate(**_profile())
    assert profile.full_name == "Sarah Jones"
    assert profile.studio_name is None


def test_blank_optional_fields_become_none():
    profile = ArtistProfileCreate(**_profile(studio_name="  ", primary_color=""))
    assert profile.studio_name is None
    assert profile.primary_color is None


@pytest.mark.parametrize("field,value", [
    ("full_name", "S"),
    ("email", "not-an-email"),
    ("bio", "too short"),
    ("primary_color", "red"),
    ("phone", "123"),
])
def test_invalid_profile_rejected(field, value):
    with pytest.raises(ValidationError):
        ArtistProfileCreate(**_profile(**{field: value}))


def test_blank_social_links_dropped_from_branding():
    profile = ArtistProfileCreate(**_profile(
        social_links={"instagram": "", "website": "https://sarahjones.art"},
    ))
    branding = profile.branding_fields()
    assert set(branding["social_links"]) == {"website"}
    assert branding["color_palette"] == {
        "primary": None, "secondary": None, "accent": None,
    }


def test_too_many_design_references_rejected():
    with pytest.raises(ValidationError):
        ArtistProfileCreate(**_profile(
            design_references=[f"https://example.com/{i}" for i in range(6)],
        ))


def test_draft_without_artist_requires_profile():
    with pytest.raises(ValidationError):
        DraftSave(section_number=1)


def test_draft_sections_normalized():
    draft = DraftSave(profile=_profile(), completed_sections=[2, 1, 2])
    assert draft.completed_sections == [1, 2]


def test_draft_section_out_of_range_rejected():
    with pytest.raises(ValidationError):
        DraftSave(profile=_profile(), completed_sections=[5])
