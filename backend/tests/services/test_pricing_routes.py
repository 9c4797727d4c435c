"""Pricing Routes — quotes, section 4 saves, and single-variant maintenance.

Invariants:
    - Saved variants carry server-computed sku and final_price
    - Saving is partial-success: 200 with errors when at least one variant saved,
      400 when none did
"""

from datetime import date, timedelta
from uuid import uuid4

from tests.services.payloads import artist_payload, variant_payload


async def test_quote_uses_default_markup_and_initials(client):
    res = await client.post(
        "/api/v1/pricing/quote",
        json={"variant": variant_payload(), "artist_initials": "sj"},
    )
    assert res.status_code == 200
    assert res.json() == {
        "sku": "ALN-SJ-PRNT-8X10-RAG",
        "final_price": 60.0,
        "markup_percentage": 200.0,
        "discount_percent": 0.0,
    }


async def test_quote_applies_best_active_offer(client):
    variant = variant_payload(special_offers=[
        {"name": "Spring", "discount_percentage": 25},
        {"name": "Expired", "discount_percentage": 50, "is_active": False},
    ])
    res = await client.post("/api/v1/pricing/quote", json={"variant": variant})
    assert res.json()["discount_percent"] == 25.0
    assert res.json()["final_price"] == 45.0


async def test_quote_applies_tax_only_when_included(client):
    strategy = {"tax_rate": 10, "includes_tax": True}
    res = await client.post(
        "/api/v1/pricing/quote",
        json={"variant": variant_payload(), "pricing_strategy": strategy},
    )
    assert res.json()["final_price"] == 66.0


async def test_quote_rejects_negative_cost(client):
    res = await client.post(
        "/api/v1/pricing/quote", json={"variant": variant_payload(base_cost=-1)},
    )
    assert res.status_code == 400


async def test_save_pricing_computes_sku_and_price(client, artist):
    body = {
        "product_variants": [
            variant_payload(final_price=1.0, sku="IGNORED"),
            variant_payload(
                product_type="framed_print", frame_color="Black",
                base_cost=30, markup_percentage=100,
                is_signed=True, signed_price=20,
            ),
        ],
    }
    res = await client.put(f"/api/v1/artists/{artist['id']}/pricing", json=body)
    assert res.status_code == 200
    saved = res.json()["saved_variants"]
    assert [(v["sku"], v["final_price"]) for v in saved] == [
        ("ALN-SJ-PRNT-8X10-RAG", 60.0),
        ("ALN-SJ-FRMD-8X10-RAG-BLK", 80.0),
    ]
    assert res.json()["errors"] == []


async def test_manual_sku_kept_when_auto_generation_off(client, artist):
    body = {
        "product_variants": [variant_payload(sku="MY-OWN-SKU")],
        "sku_generation": {"use_auto_generation": False},
    }
    res = await client.put(f"/api/v1/artists/{artist['id']}/pricing", json=body)
    assert res.json()["saved_variants"][0]["sku"] == "MY-OWN-SKU"


async def test_partial_success_reports_errors(client, artist):
    body = {
        "product_variants": [
            variant_payload(id=str(uuid4())),
            variant_payload(),
        ],
    }
    res = await client.put(f"/api/v1/artists/{artist['id']}/pricing", json=body)
    assert res.status_code == 200
    assert len(res.json()["saved_variants"]) == 1
    assert len(res.json()["errors"]) == 1


async def test_nothing_saved_returns_400(client, artist):
    body = {"product_variants": [variant_payload(id=str(uuid4()))]}
    res = await client.put(f"/api/v1/artists/{artist['id']}/pricing", json=body)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "PRICING_CONFIGURATION_FAILED"


async def test_pricing_for_unknown_artist_returns_404(client):
    body = {"product_variants": [variant_payload()]}
    res = await client.put(f"/api/v1/artists/{uuid4()}/pricing", json=body)
    assert res.status_code == 404


async def test_resave_with_id_updates_in_place(client, artist):
    url = f"/api/v1/artists/{artist['id']}/pricing"
    first = await client.put(url, json={"product_variants": [variant_payload()]})
    variant_id = first.json()["saved_variants"][0]["id"]

    await client.put(url, json={
        "product_variants": [variant_payload(id=variant_id, base_cost=10)],
    })
    listed = (await client.get(f"/api/v1/artists/{artist['id']}/variants")).json()
    assert len(listed) == 1
    assert listed[0]["final_price"] == 30.0


async def test_update_and_delete_single_variant(client, artist):
    saved = (await client.put(
        f"/api/v1/artists/{artist['id']}/pricing",
        json={"product_variants": [variant_payload()]},
    )).json()["saved_variants"][0]

    res = await client.put(
        f"/api/v1/variants/{saved['id']}",
        json={"variant": variant_payload(size="11x14", markup_percentage=0)},
    )
    assert res.status_code == 200
    assert res.json()["sku"] == "ALN-SJ-PRNT-11X14-RAG"
    assert res.json()["final_price"] == 20.0

    res = await client.delete(f"/api/v1/variants/{saved['id']}")
    assert res.status_code == 204
    listed = await client.get(f"/api/v1/artists/{artist['id']}/variants")
    assert listed.json() == []


async def test_delete_unknown_variant_returns_404(client):
    res = await client.delete(f"/api/v1/variants/{uuid4()}")
    assert res.status_code == 404


async def test_quote_rejects_cost_beyond_money_ceiling(client):
    res = await client.post(
        "/api/v1/pricing/quote",
        json={"variant": variant_payload(base_cost=1e308, markup_percentage=200)},
    )
    assert res.status_code == 400
    fields = [d["field"] for d in res.json()["error"]["details"]]
    assert "body.variant.base_cost" in fields


async def test_quote_ignores_expired_and_future_offers(client):
    today = date.today()
    variant = variant_payload(special_offers=[
        {"name": "Ended", "discount_percentage": 50,
         "end_date": (today - timedelta(days=1)).isoformat()},
        {"name": "Upcoming", "discount_percentage": 40,
         "start_date": (today + timedelta(days=1)).isoformat()},
        {"name": "Running", "discount_percentage": 10,
         "start_date": today.isoformat(), "end_date": today.isoformat()},
    ])
    res = await client.post("/api/v1/pricing/quote", json={"variant": variant})
    assert res.json()["discount_percent"] == 10.0
    assert res.json()["final_price"] == 54.0


async def test_saved_offers_keep_iso_dates(client, artist):
    body = {"product_variants": [variant_payload(special_offers=[
        {"name": "Summer", "discount_percentage": 5,
         "start_date": "2020-06-01", "end_date": "2020-06-30"},
    ])]}
    res = await client.put(f"/api/v1/artists/{artist['id']}/pricing", json=body)
    saved = res.json()["saved_variants"][0]
    assert saved["final_price"] == 60.0
    assert saved["special_offers"][0]["end_date"] == "2020-06-30"


async def test_long_artist_name_gives_bounded_sku(client):
    res = await client.post(
        "/api/v1/artists",
        json=artist_payload(full_name=" ".join(["Name"] * 40)),
    )
    assert res.status_code == 201
    body = {"product_variants": [variant_payload()]}
    res = await client.put(f"/api/v1/artists/{res.json()['id']}/pricing", json=body)
    assert res.status_code == 200
    assert res.json()["saved_variants"][0]["sku"] == "ALN-NNNNNNNNNN-PRNT-8X10-RAG"
