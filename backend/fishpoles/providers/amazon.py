"""Amazon Seller Central (stub): settlement reports."""

from typing import Any, Mapping

from fishpoles.providers.base import NormalizedEvent, OAuthConfig, ProviderNotImplementedError

PROVIDER_NAME = "amazon"


def normalize_event(raw_event: Mapping[str, Any]) -> NormalizedEvent:
    raise ProviderNotImplementedError(PROVIDER_NAME)


def sync_historical_data(connection: Any) -> list[NormalizedEvent]:
    raise ProviderNotImplementedError(PROVIDER_NAME, "historical sync")


def get_oauth_config() -> OAuthConfig:
    return OAuthConfig(
        auth_url="https://sellercentral.amazon.com/apps/authorize/consent",
        token_url="https://api.amazon.com/auth/o2/token",
        scopes=(),
    )
