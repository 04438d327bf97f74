import pytest


@pytest.fixture
def board(client, holding):
    resp = client.post("/kanban/init", json={"holding_account_id": holding["id"]})
    assert resp.status_code == 200
    return resp.json()


def _card(client, holding, column, title, **extra):
    payload = {"holding_account_id": holding["id"], "column_id": column["id"], "title": title}
    payload.update(extra)
    resp = client.post("/kanban/cards", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_init_creates_default_columns_once(client, holding, board):
    assert [c["title"] for c in board] == ["To Do", "In Progress", "Done"]
    assert [c["display_order"] for c in board] == [0, 1, 2]

    again = client.post("/kanban/init", json={"holding_account_id": holding["id"]}).json()
    assert [c["id"] for c in again] == [c["id"] for c in board]


def test_card_inherits_company_and_amount_in_cents(client, holding, company, profit_center, board):
    card = _card(client, holding, board[0], "Ligar fornecedor", profit_center_id=profit_center["id"], amount="19.99")

    assert card["company_id"] == company["id"]
    assert card["amount_cents"] == 1999
    assert card["completed"] is False


def test_move_to_last_column_completes_and_renumbers(client, holding, board):
    todo, doing, done = board
    a = _card(client, holding, todo, "A")
    b = _card(client, holding, todo, "B")
    c = _card(client, holding, todo, "C")

    resp = client.post("/kanban/cards/move", json={"card_id": a["id"], "column_id": done["id"], "new_order": 0})
    assert resp.status_code == 200
    moved = resp.json()
    assert moved["completed"] is True
    assert moved["completed_at"] is not None

    todo_cards = [x for x in client.get("/kanban/cards", params={"holding_account_id": holding["id"]}).json()
                  if x["column_id"] == todo["id"]]
    assert sorted((x["display_order"], x["id"]) for x in todo_cards) == [(0, b["id"]), (1, c["id"])]

    back = client.post("/kanban/cards/move", json={"card_id": a["id"], "column_id": doing["id"], "new_order": 5}).json()
    assert back["completed"] is False
    assert back["completed_at"] is None
    assert back["display_order"] == 0


def test_completed_filter(client, holding, board):
    _card(client, holding, board[0], "aberto")
    _card(client, holding, board[2], "pronto")

    done = client.get("/kanban/cards", params={"holding_account_id": holding["id"], "completed": "true"}).json()
    assert [c["title"] for c in done] == ["pronto"]


def test_delete_column_moves_cards_to_previous(client, holding, board):
    todo, doing, done = board
    _card(client, holding, todo, "x")
    card = _card(client, holding, doing, "y")

    assert client.delete(f"/kanban/columns/{doing['id']}").json() == {"success": True}

    cols = client.get("/kanban/columns", params={"holding_account_id": holding["id"]}).json()
    assert [c["title"] for c in cols] == ["To Do", "Done"]
    assert [c["display_order"] for c in cols] == [0, 1]

    cards = {c["id"]: c for c in client.get("/kanban/cards", params={"holding_account_id": holding["id"]}).json()}
    assert cards[card["id"]]["column_id"] == todo["id"]
    assert cards[card["id"]]["display_order"] == 1


def test_delete_first_column_moves_cards_to_next(client, holding, board):
    todo, doing, _ = board
    card = _card(client, holding, todo, "x")

    client.delete(f"/kanban/columns/{todo['id']}")

    cards = client.get("/kanban/cards", params={"holding_account_id": holding["id"]}).json()
    assert cards[0]["id"] == card["id"]
    assert cards[0]["column_id"] == doing["id"]


def test_cannot_delete_only_column(client, holding):
    col = client.post("/kanban/columns", json={"holding_account_id": holding["id"], "title": "Única"}).json()

    resp = client.delete(f"/kanban/columns/{col['id']}")
    assert resp.status_code == 409
    assert resp.json()["detail"]["error_code"] == "LAST_COLUMN"


def test_update_card_and_delete(client, holding, board):
    card = _card(client, holding, board[0], "velho")

    resp = client.put(f"/kanban/cards/{card['id']}", json={"title": "novo", "priority": "high", "due_date": "2024-03-01"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["title"] == "novo"
    assert data["priority"] == "high"
    assert data["due_date"] == "2024-03-01"

    assert client.delete(f"/kanban/cards/{card['id']}").json() == {"success": True}
    assert client.get("/kanban/cards", params={"holding_account_id": holding["id"]}).json() == []


def test_delete_last_column_completes_cards_of_new_last(client, holding, board):
    todo, doing, done = board
    waiting = _card(client, holding, doing, "em andamento")
    finished = _card(client, holding, done, "feito")
    assert waiting["completed"] is False
    assert finished["completed"] is True

    assert client.delete(f"/kanban/columns/{done['id']}").json() == {"success": True}

    cards = {c["id"]: c for c in client.get("/kanban/cards", params={"holding_account_id": holding["id"]}).json()}
    assert cards[waiting["id"]]["completed"] is True
    assert cards[waiting["id"]]["completed_at"] is not None
    assert cards[finished["id"]]["column_id"] == doing["id"]
    assert cards[finished["id"]]["completed"] is True
