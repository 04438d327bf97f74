from datetime import date

import pytest
from fastapi.testclient import TestClient

from fishpoles.core.settings import Settings
from fishpoles.deps import get_today
from fishpoles.main import create_app

# "hoje" fixo para os testes de dashboard
TODAY = date(2024, 2, 10)


@pytest.fixture
def settings(tmp_path):
    # banco novo por teste (sqlite em tmp), nada de DB de dev local
    return Settings(
        ENV="lab",
        DATABASE_URL=f"sqlite:///{tmp_path / 'test.db'}",
        AUTO_CREATE_SCHEMA=True,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(settings):
    app = create_app(settings)
    app.dependency_overrides[get_today] = lambda: TODAY
    return app


@pytest.fixture
def client(app):
    # context manager dispara o lifespan (create_all / dispose)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def holding(client):
    resp = client.post("/holding-accounts", json={"name": "Holding Teste"})
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def company(client, holding):
    resp = client.post(
        "/companies",
        json={"holding_account_id": holding["id"], "name": "Acme", "color": "#ff0000"},
    )
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def profit_center(client, holding, company):
    resp = client.post(
        "/profit-centers",
        json={"holding_account_id": holding["id"], "company_id": company["id"], "name": "Loja"},
    )
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def add_txn(client, holding, profit_center):
    def _add(txn_date, amount_cents, **extra):
        payload = {
            "holding_account_id": holding["id"],
            "profit_center_id": extra.pop("profit_center_id", profit_center["id"]),
            "txn_date": txn_date,
            "amount_cents": amount_cents,
        }
        payload.update(extra)
        resp = client.post("/transactions", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _add
