"""Stripe (stub): charges, refunds e balance transactions."""

from typing import Any, Mapping

from fishpoles.providers.base import NormalizedEvent, OAuthConfig, ProviderNotImplementedError

PROVIDER_NAME = "stripe"


def normalize_event(raw_event: Mapping[str, Any]) -> NormalizedEvent:
    # charge.succeeded, charge.refunded, payout.paid
    raise ProviderNotImplementedError(PROVIDER_NAME)


def sync_historical_data(connection: Any) -> list[NormalizedEvent]:
    raise ProviderNotImplementedError(PROVIDER_NAME, "historical sync")


def get_oauth_config() -> OAuthConfig:
    return OAuthConfig(
        auth_url="https://connect.stripe.com/oauth/authorize",
        token_url="https://connect.stripe.com/oauth/token",
        scopes=("read_only",),
    )
