"""Onboarding Flow Schemas: save-as-draft and final submission.

Invariants:
    - section_number in 1..4
    - DraftSave without artist_id must carry a valid section 1 profile
      (the artist row is created from it)
    - completed_sections are distinct values in 1..4 (duplicates dropped, sorted)
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

from artist_onboarding.schemas.artist import ArtistProfileCreate


def _normalize_sections(v: list[int]) -> list[int]:
    if any(s < 1 or s > 4 for s in v):
        raise ValueError("sections must be between 1 and 4")
    return sorted(set(v))


class DraftSave(BaseModel):
    artist_id: UUID | None = None
    section_number: int = Field(1, ge=1, le=4)
    session_token: str | None = Field(None, max_length=64)
    profile: ArtistProfileCreate | None = None
    form_data: dict = {}
    completed_sections: list[int] = []

    @field_validator("completed_sections")
    @classmethod
    def valid_sections(cls, v: list[int]) -> list[int]:
        return _normalize_sections(v)

    @model_validator(mode="after")
    def profile_required_for_new_artist(self):
        if self.artist_id is None and self.profile is None:
            raise ValueError("profile is required when artist_id is not provided")
        return self


class OnboardingComplete(BaseModel):
    section_data: dict = {}
    completed_sections: list[int] = [1, 2, 3, 4]

    @field_validator("completed_sections")
    @classmethod
    def valid_sections(cls, v: list[int]) -> list[int]:
        return _normalize_sections(v)


class OnboardingSessionResponse(BaseModel):
    id: UUID
    artist_id: UUID
    session_token: str
    current_section: int
    completed_sections: list[int]
    form_data: dict
    is_submitted: bool
    updated_at: datetime
    submitted_at: datetime | None = None

    model_config = {"from_attributes": True}


class DraftSaveResponse(BaseModel):
    artist_id: UUID
    session_token: str
    message: str = "Draft saved successfully"


class OnboardingCompleteResponse(BaseModel):
    artist_id: UUID
    session_id: UUID
    completed_at: datetime
    message: str = "Onboarding completed successfully"
