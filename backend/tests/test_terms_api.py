"""Tests for commercial condition and campaign endpoints."""

import pytest
from httpx import AsyncClient

from app.models import CommercialCondition, PromotionalCampaign, Supplier


# --- Commercial conditions ---

def condition_payload(supplier: Supplier, region: str = "SP") -> dict:
    return {
        "region_code": region,
        "cashback_percentage": "3.50",
        "extended_term_days": 45,
        "unit_price_variance": "-1.25",
        "supplier_id": str(supplier.id),
    }


@pytest.mark.asyncio
async def test_create_condition(client: AsyncClient, sample_supplier: Supplier, supplier_headers):
    resp = await client.post(
        "/api/v1/commercial-conditions",
        json=condition_payload(sample_supplier, "mg"),
        headers=supplier_headers,
    )
    assert resp.status_code == 201
    data = resp.json()["data"]
    assert data["region_code"] == "MG"
    assert data["unit_price_variance"] == "-1.25"


@pytest.mark.asyncio
async def test_invalid_region_rejected(client: AsyncClient, sample_supplier: Supplier, supplier_headers):
    resp = await client.post(
        "/api/v1/commercial-conditions",
        json=condition_payload(sample_supplier, "XX"),
        headers=supplier_headers,
    )
    assert resp.status_code == 400
    assert resp.json()["success"] is False


@pytest.mark.asyncio
async def test_duplicate_region_conflict(
    client: AsyncClient, sample_condition: CommercialCondition, sample_supplier: Supplier, supplier_headers
):
    resp = await client.post(
        "/api/v1/commercial-conditions",
        json=condition_payload(sample_supplier, "sp"),
        headers=supplier_headers,
    )
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_condition_for_foreign_supplier(
    client: AsyncClient, sample_supplier: Supplier, other_supplier_headers
):
    resp = await client.post(
        "/api/v1/commercial-conditions",
        json=condition_payload(sample_supplier),
        headers=other_supplier_headers,
    )
    assert resp.status_code == 403


@pytest.mark.asyncio
async def test_resolve_condition(
    client: AsyncClient, sample_condition: CommercialCondition, sample_supplier: Supplier, store_headers
):
    resp = await client.get(
        "/api/v1/commercial-conditions/resolve",
        params={"supplier_id": str(sample_supplier.id), "region": "sp"},
        headers=store_headers,
    )
    assert resp.status_code == 200
    assert resp.json()["data"]["id"] == str(sample_condition.id)

    resp = await client.get(
        "/api/v1/commercial-conditions/resolve",
        params={"supplier_id": str(sample_supplier.id), "region": "RJ"},
        headers=store_headers,
    )
    assert resp.status_code == 200
    assert resp.json()["data"] is None

    resp = await client.get(
        "/api/v1/commercial-conditions/resolve",
        params={"supplier_id": str(sample_supplier.id), "region": "XX"},
        headers=store_headers,
    )
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_region_is_immutable(
    client: AsyncClient, sample_condition: CommercialCondition, supplier_headers
):
    resp = await client.patch(
        f"/api/v1/commercial-conditions/{sample_condition.id}",
        json={"region_code": "RJ"},
        headers=supplier_headers,
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_condition_update_delete_ownership(
    client: AsyncClient, sample_condition: CommercialCondition, supplier_headers, other_supplier_headers
):
    url = f"/api/v1/commercial-conditions/{sample_condition.id}"
    resp = await client.patch(url, json={"extended_term_days": 60}, headers=other_supplier_headers)
    assert resp.status_code == 403
    resp = await client.delete(url, headers=other_supplier_headers)
    assert resp.status_code == 403

    resp = await client.patch(url, json={"extended_term_days": 60}, headers=supplier_headers)
    assert resp.json()["data"]["extended_term_days"] == 60

    resp = await client.delete(url, headers=supplier_headers)
    assert resp.status_code == 200
    resp = await client.get(url, headers=supplier_headers)
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_list_conditions_scoped_to_owner(
    client: AsyncClient, sample_condition: CommercialCondition, supplier_headers, other_supplier_headers
):
    resp = await client.get("/api/v1/commercial-conditions", headers=supplier_headers)
    assert len(resp.json()["data"]) == 1

    resp = await client.get("/api/v1/commercial-conditions", headers=other_supplier_headers)
    assert resp.json()["data"] == []


# --- Campaigns ---

def campaign_payload(supplier: Supplier, name: str = "Black Friday") -> dict:
    return {
        "name": name,
        "description": "Storewide discount for big orders",
        "min_value": "500.00",
        "discount_percentage": "15",
        "supplier_id": str(supplier.id),
    }


@pytest.mark.asyncio
async def test_create_campaign_defaults_active(
    client: AsyncClient, sample_supplier: Supplier, supplier_headers
):
    resp = await client.post(
        "/api/v1/campaigns", json=campaign_payload(sample_supplier), headers=supplier_headers
    )
    assert resp.status_code == 201
    assert resp.json()["data"]["status"] == "active"


@pytest.mark.asyncio
async def test_campaign_name_unique(
    client: AsyncClient, sample_campaign: PromotionalCampaign, sample_supplier: Supplier, supplier_headers
):
    resp = await client.post(
        "/api/v1/campaigns",
        json=campaign_payload(sample_supplier, sample_campaign.name),
        headers=supplier_headers,
    )
    assert resp.status_code == 409


@pytest.mark.asyncio
async def test_campaign_rename_conflict(
    client: AsyncClient, sample_supplier: Supplier, campaign_factory, supplier_headers
):
    first = await campaign_factory(sample_supplier, "Winter Deals", "5")
    await campaign_factory(sample_supplier, "Summer Deals", "5")

    resp = await client.patch(
        f"/api/v1/campaigns/{first.id}", json={"name": "Summer Deals"}, headers=supplier_headers
    )
    assert resp.status_code == 409

    resp = await client.patch(
        f"/api/v1/campaigns/{first.id}", json={"name": "Autumn Deals"}, headers=supplier_headers
    )
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_campaign_discount_out_of_range(
    client: AsyncClient, sample_supplier: Supplier, supplier_headers
):
    resp = await client.post(
        "/api/v1/campaigns",
        json={**campaign_payload(sample_supplier), "discount_percentage": "120"},
        headers=supplier_headers,
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_list_campaigns_filters(
    client: AsyncClient, sample_supplier: Supplier, campaign_factory, store_headers
):
    await campaign_factory(sample_supplier, "Running", "5")
    await campaign_factory(sample_supplier, "Paused", "5", status="inactive")

    resp = await client.get(
        "/api/v1/campaigns",
        params={"supplier_id": str(sample_supplier.id), "status": "inactive"},
        headers=store_headers,
    )
    assert [c["name"] for c in resp.json()["data"]] == ["Paused"]


@pytest.mark.asyncio
async def test_campaign_update_delete_ownership(
    client: AsyncClient, sample_campaign: PromotionalCampaign, supplier_headers, other_supplier_headers
):
    url = f"/api/v1/campaigns/{sample_campaign.id}"
    resp = await client.patch(url, json={"status": "expired"}, headers=other_supplier_headers)
    assert resp.status_code == 403
    resp = await client.delete(url, headers=other_supplier_headers)
    assert resp.status_code == 403

    resp = await client.patch(url, json={"status": "expired"}, headers=supplier_headers)
    assert resp.json()["data"]["status"] == "expired"

    resp = await client.delete(url, headers=supplier_headers)
    assert resp.status_code == 200
    resp = await client.get(url, headers=supplier_headers)
    assert resp.status_code == 404
