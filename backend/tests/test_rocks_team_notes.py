def test_rock_lifecycle(client, holding, company, profit_center):
    resp = client.post(
        "/rocks",
        json={
            "holding_account_id": holding["id"],
            "title": "Abrir segunda loja",
            "profit_center_id": profit_center["id"],
            "due_date": "2024-03-31",
        },
    )
    assert resp.status_code == 201
    rock = resp.json()
    assert rock["status"] == "active"
    assert rock["company_id"] == company["id"]

    done = client.put(f"/rocks/{rock['id']}", json={"status": "completed"}).json()
    assert done["status"] == "completed"
    assert done["completed_at"] is not None

    listed = client.get("/rocks", params={"holding_account_id": holding["id"], "status": "completed"}).json()
    assert [r["id"] for r in listed] == [rock["id"]]

    reopened = client.put(f"/rocks/{rock['id']}", json={"status": "active"}).json()
    assert reopened["completed_at"] is None

    assert client.delete(f"/rocks/{rock['id']}").json() == {"success": True}
    assert client.get("/rocks", params={"holding_account_id": holding["id"]}).json() == []


def test_rocks_require_holding(client):
    assert client.get("/rocks").status_code == 422


def test_team_member_duplicate_email_409(client, holding):
    payload = {"holding_account_id": holding["id"], "email": "Ana@Example.com"}
    first = client.post("/team", json=payload)
    assert first.status_code == 201
    assert first.json()["email"] == "ana@example.com"
    assert first.json()["name"] == "ana"
    assert first.json()["role"] == "member"

    dup = client.post("/team", json={"holding_account_id": holding["id"], "email": "ana@example.com"})
    assert dup.status_code == 409
    assert dup.json()["detail"]["error_code"] == "TEAM_MEMBER_EXISTS"

    member_id = first.json()["id"]
    assert client.delete(f"/team/{member_id}").json() == {"success": True}
    assert client.get("/team", params={"holding_account_id": holding["id"]}).json() == []


def test_team_member_bad_email_422(client, holding):
    resp = client.post("/team", json={"holding_account_id": holding["id"], "email": "sem-arroba"})
    assert resp.status_code == 422


def test_notes_newest_first(client, profit_center):
    for text in ("primeira", "segunda"):
        resp = client.post("/notes", json={"profit_center_id": profit_center["id"], "text": text})
        assert resp.status_code == 201

    notes = client.get("/notes", params={"profit_center_id": profit_center["id"]}).json()
    assert len(notes) == 2
    assert {n["text"] for n in notes} == {"primeira", "segunda"}
    assert notes[0]["created_by"] == "user"

    assert client.delete(f"/notes/{notes[0]['id']}").json() == {"success": True}
    assert len(client.get("/notes", params={"profit_center_id": profit_center["id"]}).json()) == 1


def test_note_unknown_profit_center_404(client):
    resp = client.post("/notes", json={"profit_center_id": "nope", "text": "x"})
    assert resp.status_code == 404


def test_overhead_amounts(client, profit_center):
    resp = client.post(
        "/overhead",
        json={"profit_center_id": profit_center["id"], "name": "Aluguel", "amount": "1500.00"},
    )
    assert resp.status_code == 201
    item = resp.json()
    assert item["amount_cents"] == 150000
    assert item["frequency"] == "monthly"

    upd = client.put(f"/overhead/{item['id']}", json={"amount_cents": 99, "frequency": "annual"}).json()
    assert upd["amount_cents"] == 99
    assert upd["frequency"] == "annual"
    assert upd["name"] == "Aluguel"

    assert client.delete(f"/overhead/{item['id']}").json() == {"success": True}


def test_overhead_requires_amount(client, profit_center):
    resp = client.post("/overhead", json={"profit_center_id": profit_center["id"], "name": "Luz"})
    assert resp.status_code == 422
