"""Normalização de eventos de providers e roteamento via mapping rules.

Os providers ainda são stubs: normalize_raw_event sempre termina em
ProviderNotImplementedError (ou UnknownProviderError). apply_mapping_rules já
funciona e decide o profit center de uma transação normalizada.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from fishpoles.providers import amazon, quickbooks, shopify, stripe
from fishpoles.providers.base import RevenueProvider, UnknownProviderError

PROVIDERS: dict[str, RevenueProvider] = {
    shopify.PROVIDER_NAME: shopify,
    stripe.PROVIDER_NAME: stripe,
    amazon.PROVIDER_NAME: amazon,
    quickbooks.PROVIDER_NAME: quickbooks,
}

MATCH_TYPES = (
    "account",
    "store",
    "sku",
    "product",
    "payout",
    "memo",
    "customer",
    "class",
    "location",
)

_PROVIDER_INFO: dict[str, dict[str, str]] = {
    "shopify": {
        "name": "Shopify",
        "description": "E-commerce platform - sync orders and payouts",
        "icon": "shopping-bag",
        "color": "#96bf48",
    },
    "stripe": {
        "name": "Stripe",
        "description": "Payment processor - sync charges and payouts",
        "icon": "credit-card",
        "color": "#635bff",
    },
    "amazon": {
        "name": "Amazon",
        "description": "Marketplace - sync settlement reports",
        "icon": "package",
        "color": "#ff9900",
    },
    "quickbooks": {
        "name": "QuickBooks Online",
        "description": "Accounting - sync sales and deposits",
        "icon": "calculator",
        "color": "#2ca01c",
    },
}


def get_provider(name: str | None) -> RevenueProvider:
    n = (name or "").strip().lower()
    module = PROVIDERS.get(n)
    if module is None:
        raise UnknownProviderError(n)
    return module


def get_provider_info(provider: str) -> dict[str, str] | None:
    return _PROVIDER_INFO.get((provider or "").strip().lower())


def normalize_raw_event(provider: str, raw_event: Mapping[str, Any], holding_account_id: str) -> dict[str, Any]:
    """Converte um evento bruto em payload de Transaction (profit center via rules)."""
    module = get_provider(provider)
    event = module.normalize_event(raw_event)
    return {
        "holding_account_id": holding_account_id,
        "profit_center_id": None,
        "txn_date": event.txn_date,
        "amount_cents": event.amount_cents,
        "currency": event.currency or "USD",
        "provider": module.PROVIDER_NAME,
        "external_id": event.external_id,
        "description": event.description,
        "raw_event_id": raw_event.get("id"),
    }


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _norm(value: Any) -> str:
    return str(value).strip().lower() if value is not None else ""


def apply_mapping_rules(transaction: Any, rules: Iterable[Any]) -> str | None:
    """Primeira regra ativa (maior prioridade primeiro) que casar decide o profit center.

    Casa quando o campo da transação nomeado por match_type é igual a
    match_value (sem diferenciar maiúsculas, ignorando espaços nas pontas).
    Sem match: None (transação fica sem atribuição).
    """
    ordered = sorted(rules, key=lambda r: _field(r, "priority") or 0, reverse=True)
    for rule in ordered:
        if not _field(rule, "active"):
            continue
        match_type = _field(rule, "match_type")
        if match_type not in MATCH_TYPES:
            continue
        expected = _norm(_field(rule, "match_value"))
        if expected and _norm(_field(transaction, match_type)) == expected:
            return _field(rule, "profit_center_id")
    return None
