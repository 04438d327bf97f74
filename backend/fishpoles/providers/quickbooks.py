"""QuickBooks Online (stub): sales receipts, invoices e depósitos."""

from typing import Any, Mapping

from fishpoles.providers.base import NormalizedEvent, OAuthConfig, ProviderNotImplementedError

PROVIDER_NAME = "quickbooks"


def normalize_event(raw_event: Mapping[str, Any]) -> NormalizedEvent:
    raise ProviderNotImplementedError(PROVIDER_NAME)


def sync_historical_data(connection: Any) -> list[NormalizedEvent]:
    raise ProviderNotImplementedError(PROVIDER_NAME, "historical sync")


def get_oauth_config() -> OAuthConfig:
    return OAuthConfig(
        auth_url="https://appcenter.intuit.com/connect/oauth2",
        token_url="https://oauth.platform.intuit.com/oauth2/v1/tokens/bearer",
        scopes=("com.intuit.quickbooks.accounting",),
    )
