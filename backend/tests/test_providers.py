import pytest

from fishpoles.providers import amazon, quickbooks, shopify, stripe
from fishpoles.providers.base import OAuthConfig, ProviderNotImplementedError, RevenueProvider, UnknownProviderError
from fishpoles.providers.normalization import (
    PROVIDERS,
    apply_mapping_rules,
    get_provider,
    get_provider_info,
    normalize_raw_event,
)


@pytest.mark.parametrize("module", [shopify, stripe, amazon, quickbooks])
def test_provider_stubs(module):
    assert PROVIDERS[module.PROVIDER_NAME] is module
    assert isinstance(module.get_oauth_config(), OAuthConfig)
    with pytest.raises(ProviderNotImplementedError):
        module.normalize_event({"id": "evt_1"})
    with pytest.raises(ProviderNotImplementedError):
        module.sync_historical_data(object())


def test_normalize_raw_event_errors():
    with pytest.raises(UnknownProviderError):
        normalize_raw_event("paypal", {}, "h1")
    with pytest.raises(ProviderNotImplementedError):
        normalize_raw_event(" Stripe ", {"id": "ch_1"}, "h1")


def test_provider_info():
    assert get_provider_info("shopify")["name"] == "Shopify"
    assert get_provider_info("nope") is None


def test_apply_mapping_rules_priority_and_case():
    rules = [
        {"match_type": "store", "match_value": "Main", "profit_center_id": "pc-low", "priority": 1, "active": True},
        {"match_type": "store", "match_value": " main ", "profit_center_id": "pc-high", "priority": 10, "active": True},
        {"match_type": "sku", "match_value": "ABC", "profit_center_id": "pc-off", "priority": 99, "active": False},
    ]

    assert apply_mapping_rules({"store": "MAIN", "sku": "abc"}, rules) == "pc-high"
    assert apply_mapping_rules({"store": "outra"}, rules) is None


def test_apply_mapping_rules_ignores_unknown_match_type():
    rules = [{"match_type": "color", "match_value": "red", "profit_center_id": "pc1", "priority": 5, "active": True}]
    assert apply_mapping_rules({"color": "red"}, rules) is None


def test_providers_endpoint(client):
    data = client.get("/providers").json()
    assert {p["id"] for p in data} == {"shopify", "stripe", "amazon", "quickbooks"}


def test_normalize_endpoint_501_and_422(client, holding):
    resp = client.post("/providers/shopify/normalize", params={"holding_account_id": holding["id"]}, json={"id": "o1"})
    assert resp.status_code == 501
    assert resp.json()["detail"]["error_code"] == "PROVIDER_NOT_IMPLEMENTED"

    resp = client.post("/providers/paypal/normalize", params={"holding_account_id": holding["id"]}, json={})
    assert resp.status_code == 422
    assert resp.json()["detail"]["error_code"] == "UNKNOWN_PROVIDER"


def test_connections_stub(client, holding):
    resp = client.post("/connections", json={"holding_account_id": holding["id"], "provider": "Stripe"})
    assert resp.status_code == 201
    conn = resp.json()
    assert conn["provider"] == "stripe"
    assert conn["status"] == "disconnected"
    assert conn["metadata"] == {}

    listed = client.get("/connections", params={"holding_account_id": holding["id"]}).json()
    assert [c["id"] for c in listed] == [conn["id"]]

    bad = client.post("/connections", json={"holding_account_id": holding["id"], "provider": "paypal"})
    assert bad.status_code == 422


def test_mapping_rules_endpoints(client, holding, profit_center):
    base = {"holding_account_id": holding["id"], "provider": "shopify", "profit_center_id": profit_center["id"]}

    resp = client.post("/mapping-rules", json={**base, "match_type": "store", "match_value": "Loja Centro", "priority": 3})
    assert resp.status_code == 201
    assert resp.json()["active"] is True

    bad = client.post("/mapping-rules", json={**base, "match_type": "color", "match_value": "x"})
    assert bad.status_code == 422
    assert bad.json()["detail"]["error_code"] == "INVALID_MATCH_TYPE"

    listed = client.get("/mapping-rules", params={"holding_account_id": holding["id"]}).json()
    assert len(listed) == 1

    hit = client.post(
        "/mapping-rules/resolve",
        params={"holding_account_id": holding["id"], "provider": "shopify"},
        json={"store": "loja centro"},
    ).json()
    assert hit == {"profit_center_id": profit_center["id"], "matched": True}

    miss = client.post(
        "/mapping-rules/resolve",
        params={"holding_account_id": holding["id"]},
        json={"store": "outra"},
    ).json()
    assert miss == {"profit_center_id": None, "matched": False}


@pytest.mark.parametrize("name", sorted(PROVIDERS))
def test_registry_holds_revenue_providers(name):
    provider = get_provider(name.upper())
    assert isinstance(provider, RevenueProvider)
    assert provider.PROVIDER_NAME == name
