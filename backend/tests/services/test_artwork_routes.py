"""Artwork and product configuration routes — sections 2 and 3."""

from uuid import uuid4

from tests.services.payloads import artwork_payload

CONFIGURATION = {
    "available_sizes": [{"name": "8x10", "width": 8, "height": 10}],
    "print_media_options": [{"name": "Fine Art Rag", "finish": "matte"}],
}


async def test_create_artwork_flattens_dimensions(client, artist):
    res = await client.post(
        f"/api/v1/artists/{artist['id']}/artworks", json=artwork_payload(),
    )
    assert res.status_code == 201
    body = res.json()
    assert body["width"] == 24
    assert body["height"] == 18
    assert body["unit"] == "inches"


async def test_artwork_for_unknown_artist_returns_404(client):
    res = await client.post(
        f"/api/v1/artists/{uuid4()}/artworks", json=artwork_payload(),
    )
    assert res.status_code == 404


async def test_future_year_rejected(client, artist):
    res = await client.post(
        f"/api/v1/artists/{artist['id']}/artworks",
        json=artwork_payload(year_created=3000),
    )
    assert res.status_code == 400


async def test_list_orders_by_sort_order(client, artist):
    url = f"/api/v1/artists/{artist['id']}/artworks"
    await client.post(url, json=artwork_payload(title="Second", sort_order=2))
    await client.post(url, json=artwork_payload(title="First", sort_order=1))

    res = await client.get(url)
    assert [a["title"] for a in res.json()] == ["First", "Second"]


async def test_patch_updates_only_sent_fields(client, artist):
    created = (await client.post(
        f"/api/v1/artists/{artist['id']}/artworks", json=artwork_payload(),
    )).json()

    res = await client.patch(
        f"/api/v1/artworks/{created['id']}", json={"title": "Dusk at Tofino"},
    )
    assert res.status_code == 200
    assert res.json()["title"] == "Dusk at Tofino"
    assert res.json()["medium"] == "Oil on canvas"


async def test_delete_artwork(client, artist):
    created = (await client.post(
        f"/api/v1/artists/{artist['id']}/artworks", json=artwork_payload(),
    )).json()

    res = await client.delete(f"/api/v1/artworks/{created['id']}")
    assert res.status_code == 204
    listed = await client.get(f"/api/v1/artists/{artist['id']}/artworks")
    assert listed.json() == []


async def test_product_configuration_upsert(client, artist):
    url = f"/api/v1/artists/{artist['id']}/product-configuration"
    first = await client.put(url, json=CONFIGURATION)
    assert first.status_code == 200
    assert first.json()["available_sizes"][0]["name"] == "8x10"

    second = await client.put(url, json={**CONFIGURATION, "unit_system": "cm"})
    assert second.json()["id"] == first.json()["id"]

    res = await client.get(url)
    assert res.json()["unit_system"] == "cm"


async def test_product_configuration_requires_sizes(client, artist):
    res = await client.put(
        f"/api/v1/artists/{artist['id']}/product-configuration",
        json={**CONFIGURATION, "available_sizes": []},
    )
    assert res.status_code == 400


async def test_missing_product_configuration_returns_404(client, artist):
    res = await client.get(
        f"/api/v1/artists/{artist['id']}/product-configuration",
    )
    assert res.status_code == 404
