"""Shopify (stub).

Futuro: OAuth, webhooks de orders/refunds/payouts e sync histórico via Admin API.
"""

from typing import Any, Mapping

from fishpoles.providers.base import NormalizedEvent, OAuthConfig, ProviderNotImplementedError

PROVIDER_NAME = "shopify"


def normalize_event(raw_event: Mapping[str, Any]) -> NormalizedEvent:
    # orders/create, orders/paid, refunds/create, payouts/create
    raise ProviderNotImplementedError(PROVIDER_NAME)


def sync_historical_data(connection: Any) -> list[NormalizedEvent]:
    raise ProviderNotImplementedError(PROVIDER_NAME, "historical sync")


def get_oauth_config() -> OAuthConfig:
    return OAuthConfig(
        auth_url="https://{{shop}}.myshopify.com/admin/oauth/authorize",
        token_url="https://{{shop}}.myshopify.com/admin/oauth/access_token",
        scopes=("read_orders", "read_products", "read_shopify_payments_payouts"),
    )
