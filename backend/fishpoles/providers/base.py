from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol, runtime_checkable


class ProviderError(Exception):
    pass


class UnknownProviderError(ProviderError):
    def __init__(self, provider: str):
        super().__init__(f"Unknown provider: {provider}")
        self.provider = provider


class ProviderNotImplementedError(ProviderError):
    def __init__(self, provider: str, what: str = "integration"):
        super().__init__(f"{provider} {what} not implemented")
        self.provider = provider
        self.what = what


@dataclass(frozen=True)
class OAuthConfig:
    auth_url: str
    token_url: str
    scopes: tuple[str, ...]


@dataclass(frozen=True)
class NormalizedEvent:
    """Saída padronizada de um provider (antes de virar Transaction)."""

    txn_date: str
    amount_cents: int
    currency: str = "USD"
    external_id: str | None = None
    description: str = ""


@runtime_checkable
class RevenueProvider(Protocol):
    PROVIDER_NAME: str

    def normalize_event(self, raw_event: Mapping[str, Any]) -> NormalizedEvent:
        ...

    def sync_historical_data(self, connection: Any) -> list[NormalizedEvent]:
        ...

    def get_oauth_config(self) -> OAuthConfig:
        ...
