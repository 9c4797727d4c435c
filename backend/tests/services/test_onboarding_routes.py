"""Onboarding Routes — save-as-draft, resume and submission.

Invariants:
    - First draft creates the artist; later drafts keep the session token
    - completed_sections accumulate across drafts
    - Submission moves the artist to in_review; a second submission is 409
"""

from uuid import uuid4

from tests.services.payloads import artist_payload


async def _first_draft(client) -> dict:
    res = await client.post("/api/v1/onboarding/draft", json={
        "section_number": 1,
        "profile": artist_payload(),
        "form_data": {"section1": {"full_name": "Sarah Jones"}},
        "completed_sections": [1],
    })
    assert res.status_code == 200
    return res.json()


async def test_first_draft_creates_artist_and_session(client):
    draft = await _first_draft(client)
    assert draft["session_token"]

    artist = await client.get(f"/api/v1/artists/{draft['artist_id']}")
    assert artist.status_code == 200
    assert artist.json()["status"] == "draft"

    session = (await client.get(f"/api/v1/onboarding/{draft['artist_id']}")).json()
    assert session["current_section"] == 1
    assert session["completed_sections"] == [1]
    assert session["is_submitted"] is False


async def test_later_draft_merges_progress_and_keeps_token(client):
    draft = await _first_draft(client)
    res = await client.post("/api/v1/onboarding/draft", json={
        "artist_id": draft["artist_id"],
        "section_number": 2,
        "form_data": {"section2": {"artworks": 3}},
        "completed_sections": [2],
    })
    assert res.json()["session_token"] == draft["session_token"]

    session = (await client.get(f"/api/v1/onboarding/{draft['artist_id']}")).json()
    assert session["current_section"] == 2
    assert session["completed_sections"] == [1, 2]
    assert set(session["form_data"]) == {"section1", "section2"}


async def test_draft_for_unknown_artist_returns_404(client):
    res = await client.post("/api/v1/onboarding/draft", json={
        "artist_id": str(uuid4()), "section_number": 2,
    })
    assert res.status_code == 404


async def test_draft_without_artist_or_profile_returns_400(client):
    res = await client.post("/api/v1/onboarding/draft", json={"section_number": 1})
    assert res.status_code == 400


async def test_missing_session_returns_404(client, artist):
    res = await client.get(f"/api/v1/onboarding/{artist['id']}")
    assert res.status_code == 404


async def test_complete_moves_artist_to_review(client):
    draft = await _first_draft(client)
    res = await client.post(f"/api/v1/onboarding/{draft['artist_id']}/complete")
    assert res.status_code == 200
    assert res.json()["artist_id"] == draft["artist_id"]

    artist = (await client.get(f"/api/v1/artists/{draft['artist_id']}")).json()
    assert artist["status"] == "in_review"
    assert artist["submission_date"] is not None

    session = (await client.get(f"/api/v1/onboarding/{draft['artist_id']}")).json()
    assert session["is_submitted"] is True
    assert session["completed_sections"] == [1, 2, 3, 4]
    assert session["current_section"] == 4


async def test_complete_without_prior_draft_creates_session(client, artist):
    res = await client.post(
        f"/api/v1/onboarding/{artist['id']}/complete",
        json={"section_data": {"section4": {"variants": 2}}},
    )
    assert res.status_code == 200


async def test_submitted_onboarding_is_locked(client):
    draft = await _first_draft(client)
    url = f"/api/v1/onboarding/{draft['artist_id']}/complete"
    await client.post(url)

    again = await client.post(url)
    assert again.status_code == 409
    assert again.json()["error"]["code"] == "ONBOARDING_ALREADY_SUBMITTED"

    res = await client.post("/api/v1/onboarding/draft", json={
        "artist_id": draft["artist_id"], "section_number": 1,
    })
    assert res.status_code == 409
