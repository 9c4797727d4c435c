"""Admin Routes — listing, search, stats, status workflow and export."""

import pytest

from tests.services.payloads import artist_payload


@pytest.fixture
async def roster(client) -> dict:
    """Three artists; Sarah has submitted her onboarding."""
    ids = {}
    for name, email, studio in [
        ("Sarah Jones", "sarah@example.com", "Jones Studio"),
        ("Mark Lee", "mark@example.com", "Harbour Prints"),
        ("Ana Ruiz", "ana@example.com", None),
    ]:
        res = await client.post("/api/v1/artists", json=artist_payload(
            full_name=name, email=email, studio_name=studio,
        ))
        ids[name] = res.json()["id"]
    await client.post(f"/api/v1/onboarding/{ids['Sarah Jones']}/complete")
    return ids


async def test_list_all_artists(client, roster):
    res = await client.get("/api/v1/admin/artists")
    assert res.status_code == 200
    body = res.json()
    assert body["pagination"]["total"] == 3
    assert body["pagination"]["total_pages"] == 1
    assert len(body["artists"]) == 3


async def test_search_matches_name_studio_and_email(client, roster):
    by_name = (await client.get("/api/v1/admin/artists", params={"search": "jones"})).json()
    assert [a["full_name"] for a in by_name["artists"]] == ["Sarah Jones"]

    by_studio = (await client.get("/api/v1/admin/artists", params={"search": "harbour"})).json()
    assert [a["full_name"] for a in by_studio["artists"]] == ["Mark Lee"]

    by_email = (await client.get("/api/v1/admin/artists", params={"search": "ana@"})).json()
    assert [a["full_name"] for a in by_email["artists"]] == ["Ana Ruiz"]


async def test_search_by_id(client, roster):
    res = await client.get(
        "/api/v1/admin/artists", params={"search": roster["Mark Lee"]},
    )
    assert [a["id"] for a in res.json()["artists"]] == [roster["Mark Lee"]]


async def test_status_filter(client, roster):
    in_review = (await client.get(
        "/api/v1/admin/artists", params={"status": "in_review"},
    )).json()
    assert [a["full_name"] for a in in_review["artists"]] == ["Sarah Jones"]
    assert in_review["artists"][0]["completion_percentage"] == 100

    everyone = (await client.get("/api/v1/admin/artists", params={"status": "all"})).json()
    assert everyone["pagination"]["total"] == 3


async def test_pagination(client, roster):
    res = await client.get("/api/v1/admin/artists", params={"page": 2, "limit": 2})
    body = res.json()
    assert len(body["artists"]) == 1
    assert body["pagination"] == {"page": 2, "limit": 2, "total": 3, "total_pages": 2}


async def test_empty_result_has_zero_pages(client):
    body = (await client.get("/api/v1/admin/artists")).json()
    assert body["artists"] == []
    assert body["pagination"]["total_pages"] == 0


async def test_dashboard_stats(client, roster):
    res = await client.get("/api/v1/admin/stats")
    body = res.json()
    assert body["status_counts"] == {
        "total": 3, "draft": 2, "in_review": 1, "ready": 0, "active": 0,
    }
    assert body["section_counts"]["complete"] == 1
    assert body["section_counts"]["section1"] == 1


async def test_status_update_follows_workflow(client, roster):
    sarah = roster["Sarah Jones"]
    res = await client.patch(
        f"/api/v1/admin/artists/{sarah}/status",
        json={"status": "ready", "admin_notes": "Catalog approved"},
    )
    assert res.status_code == 200
    assert res.json()["status"] == "ready"
    assert res.json()["admin_notes"] == "Catalog approved"


async def test_invalid_transition_returns_409(client, roster):
    res = await client.patch(
        f"/api/v1/admin/artists/{roster['Mark Lee']}/status",
        json={"status": "active"},
    )
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "INVALID_STATUS_TRANSITION"


async def test_unknown_status_value_returns_400(client, roster):
    res = await client.patch(
        f"/api/v1/admin/artists/{roster['Mark Lee']}/status",
        json={"status": "archived"},
    )
    assert res.status_code == 400


async def test_export_csv(client, roster):
    res = await client.get("/api/v1/admin/export", params={"format": "csv"})
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/csv")
    lines = res.text.strip().splitlines()
    assert lines[0].startswith("id,full_name,studio_name,email,status")
    assert len(lines) == 4


async def test_export_json_honours_filters(client, roster):
    res = await client.get(
        "/api/v1/admin/export", params={"format": "json", "status": "draft"},
    )
    assert res.status_code == 200
    assert {a["full_name"] for a in res.json()} == {"Mark Lee", "Ana Ruiz"}
