from conftest import login


def _create(client, headers, **overrides):
    body = {"start_date": "2025-05-01", "end_date": "2025-05-10", "reason": "Family trip"}
    body.update(overrides)
    return client.post("/vacation-requests", json=body, headers=headers)


def test_create_request(client, employee_headers):
    res = _create(client, employee_headers)
    assert res.status_code == 201
    body = res.json()
    assert body["status"] == "pending"
    assert body["start_date"] == "2025-05-01"
    assert body["end_date"] == "2025-05-10"
    assert body["reason"] == "Family trip"
    assert body["days"] == 10
    assert body["user_name"] == "John Employee"
    assert body["user_rank"] == "Cabo"
    assert body["user_department"] == "Engineering"
    assert body["supervisor_name"] == "Jane Supervisor"
    assert body["created_at"] == body["updated_at"]

    mine = client.get("/vacation-requests", headers=employee_headers).json()
    assert body["id"] in [r["id"] for r in mine]


def test_client_cannot_force_status_or_identity(client, employee_headers, users):
    res = _create(client, employee_headers, status="approved", user_id=users["bob"].id, user_name="Bob")
    assert res.status_code == 201
    assert res.json()["status"] == "pending"
    assert res.json()["user_id"] == users["employee"].id


def test_create_rejects_inverted_dates(client, employee_headers):
    res = _create(client, employee_headers, start_date="2025-05-10", end_date="2025-05-01")
    assert res.status_code == 422


def test_create_requires_login(client):
    assert _create(client, {}).status_code == 401


def test_list_scopes_for_employee(client, employee_headers, users):
    mine = client.get("/vacation-requests", headers=employee_headers).json()
    assert {r["user_id"] for r in mine} == {users["employee"].id}
    assert client.get("/vacation-requests?scope=pending", headers=employee_headers).json() == []
    assert client.get("/vacation-requests?scope=decided", headers=employee_headers).json() == []


def test_list_scopes_for_supervisor(client, supervisor_headers, users):
    pending = client.get("/vacation-requests?scope=pending", headers=supervisor_headers).json()
    assert len(pending) == 1
    assert all(r["status"] == "pending" for r in pending)
    assert all(r["supervisor_id"] == users["supervisor"].id for r in pending)

    team = client.get("/vacation-requests", headers=supervisor_headers).json()
    assert len(team) == 4


def test_invalid_scope(client, employee_headers):
    res = client.get("/vacation-requests?scope=everything", headers=employee_headers)
    assert res.status_code == 422


def test_get_request_visibility(client, employee_headers, users):
    bob_headers = login(client, "bob@example.com")
    created = _create(client, bob_headers).json()

    assert client.get(f"/vacation-requests/{created['id']}", headers=bob_headers).status_code == 200
    assert client.get(f"/vacation-requests/{created['id']}", headers=employee_headers).status_code == 403
    assert client.get("/vacation-requests/9999", headers=employee_headers).status_code == 404


def test_supervisor_approval_flow(client, employee_headers, supervisor_headers):
    created = _create(client, employee_headers).json()

    res = client.patch(
        f"/vacation-requests/{created['id']}/status",
        json={"status": "approved", "comment": "ok"},
        headers=supervisor_headers,
    )
    assert res.status_code == 200
    assert res.json()["status"] == "approved"
    assert res.json()["supervisor_comment"] == "ok"

    again = client.patch(
        f"/vacation-requests/{created['id']}/status",
        json={"status": "approved", "comment": "ok"},
        headers=supervisor_headers,
    )
    assert again.status_code == 200
    assert again.json() == res.json()

    mine = {r["id"]: r for r in client.get("/vacation-requests", headers=employee_headers).json()}
    assert mine[created["id"]]["status"] == "approved"
    pending_ids = [
        r["id"] for r in client.get("/vacation-requests?scope=pending", headers=supervisor_headers).json()
    ]
    assert created["id"] not in pending_ids


def test_redecision_conflict(client, employee_headers, admin_headers):
    created = _create(client, employee_headers).json()
    url = f"/vacation-requests/{created['id']}/status"
    assert client.patch(url, json={"status": "denied"}, headers=admin_headers).status_code == 200
    res = client.patch(url, json={"status": "approved"}, headers=admin_headers)
    assert res.status_code == 409
    assert "denied" in res.json()["detail"]


def test_employee_cannot_update_status(client, employee_headers):
    created = _create(client, employee_headers).json()
    res = client.patch(
        f"/vacation-requests/{created['id']}/status",
        json={"status": "approved"},
        headers=employee_headers,
    )
    assert res.status_code == 403


def test_update_status_unknown_request(client, admin_headers):
    res = client.patch("/vacation-requests/9999/status", json={"status": "approved"}, headers=admin_headers)
    assert res.status_code == 404


def test_update_status_rejects_unknown_status(client, employee_headers, admin_headers):
    created = _create(client, employee_headers).json()
    res = client.patch(
        f"/vacation-requests/{created['id']}/status",
        json={"status": "cancelled"},
        headers=admin_headers,
    )
    assert res.status_code == 422


def test_my_summary(client, employee_headers):
    res = client.get("/vacation-requests/summary?year=2025", headers=employee_headers)
    assert res.status_code == 200
    body = res.json()
    assert body["total"] == 2
    assert body["pending"] == 1
    assert body["approved"] == 1
    assert body["approved_days"] == 15
    assert body["requesters"] == 1
