from decimal import Decimal

import pytest
from fastapi import HTTPException
from pydantic import ValidationError

from fishpoles.api.common import parse_month_param
from fishpoles.core.money import dollars_to_cents, resolve_amount_cents
from fishpoles.core.settings import Settings
from fishpoles.dashboard.store import month_bounds


def test_settings_normalize_env_and_level():
    s = Settings(ENV=" PROD ", DATABASE_URL="postgresql://u:p@db/fish", LOG_LEVEL="debug")
    assert s.ENV == "prod"
    assert s.LOG_LEVEL == "DEBUG"


def test_settings_reject_unknown_env():
    with pytest.raises(ValidationError):
        Settings(ENV="staging")


def test_settings_prod_sqlite_autocreate_fails_fast():
    with pytest.raises(ValidationError):
        Settings(ENV="prod", DATABASE_URL="sqlite:///./x.db", AUTO_CREATE_SCHEMA=True)

    ok = Settings(ENV="prod", DATABASE_URL="sqlite:///./x.db", AUTO_CREATE_SCHEMA=False)
    assert ok.AUTO_CREATE_SCHEMA is False


def test_settings_prefixed_env_var(monkeypatch):
    monkeypatch.setenv("FISHPOLES_CORS_ORIGINS", "http://a.test, http://b.test")
    assert Settings().cors_origins == ["http://a.test", "http://b.test"]


def test_dollars_to_cents():
    assert dollars_to_cents("10") == 1000
    assert dollars_to_cents(Decimal("0.005")) == 1
    assert dollars_to_cents("-0.005") == -1
    assert dollars_to_cents(19.99) == 1999


def test_resolve_amount_cents_prefers_cents():
    assert resolve_amount_cents(5, Decimal("1.00")) == 5
    assert resolve_amount_cents(None, Decimal("1.00")) == 100
    assert resolve_amount_cents(None, None) is None


def test_parse_month_and_bounds():
    assert parse_month_param("2024-02") == (2024, 2)
    assert parse_month_param(" 2023-12 ") == (2023, 12)
    assert month_bounds((2024, 2)) == ("2024-02-01", "2024-02-29")
    assert month_bounds((2023, 12)) == ("2023-12-01", "2023-12-31")


@pytest.mark.parametrize("raw", ["2024-2", "2024-１２", "2024-02-01"])
def test_parse_month_is_strict(raw):
    with pytest.raises(HTTPException) as exc:
        parse_month_param(raw)
    assert exc.value.status_code == 400
    assert exc.value.detail["error_code"] == "INVALID_MONTH"
