def test_list_departments_is_public(client):
    res = client.get("/departments")
    assert res.status_code == 200
    assert [d["name"] for d in res.json()] == ["Seção de Informática", "Seção de Pessoal"]


def test_admin_adds_department(client, admin_headers):
    res = client.post("/departments", json={"name": "Seção de Operações"}, headers=admin_headers)
    assert res.status_code == 201
    body = res.json()
    assert body["id"]
    assert body["created_at"]
    assert "Seção de Operações" in [d["name"] for d in client.get("/departments").json()]


def test_duplicate_department_names_are_allowed(client, admin_headers):
    res = client.post("/departments", json={"name": "Seção de Pessoal"}, headers=admin_headers)
    assert res.status_code == 201
    names = [d["name"] for d in client.get("/departments").json()]
    assert names.count("Seção de Pessoal") == 2


def test_admin_renames_department(client, admin_headers):
    dept_id = client.get("/departments").json()[0]["id"]
    res = client.patch(f"/departments/{dept_id}", json={"name": "Seção de TI"}, headers=admin_headers)
    assert res.status_code == 200
    assert res.json()["name"] == "Seção de TI"


def test_rename_unknown_department(client, admin_headers):
    res = client.patch("/departments/9999", json={"name": "X"}, headers=admin_headers)
    assert res.status_code == 404


def test_admin_removes_department_without_cascade(client, admin_headers, employee_headers):
    dept_id = client.get("/departments").json()[1]["id"]
    assert client.delete(f"/departments/{dept_id}", headers=admin_headers).status_code == 204
    assert len(client.get("/departments").json()) == 1
    assert client.delete(f"/departments/{dept_id}", headers=admin_headers).status_code == 404

    # Requests keep their department snapshot.
    mine = client.get("/vacation-requests", headers=employee_headers).json()
    assert all(r["user_department"] == "Engineering" for r in mine)


def test_non_admin_cannot_manage_departments(client, supervisor_headers, employee_headers):
    for headers in (supervisor_headers, employee_headers):
        assert client.post("/departments", json={"name": "X"}, headers=headers).status_code == 403
        assert client.patch("/departments/1", json={"name": "X"}, headers=headers).status_code == 403
        assert client.delete("/departments/1", headers=headers).status_code == 403
    assert client.post("/departments", json={"name": "X"}).status_code == 401


def test_blank_department_name_is_rejected(client, admin_headers):
    res = client.post("/departments", json={"name": "   "}, headers=admin_headers)
    assert res.status_code == 422

    dept_id = client.get("/departments").json()[0]["id"]
    res = client.patch(f"/departments/{dept_id}", json={"name": "  "}, headers=admin_headers)
    assert res.status_code == 422
    assert client.get("/departments").json()[0]["name"] == "Seção de Informática"


def test_department_name_is_trimmed(client, admin_headers):
    res = client.post("/departments", json={"name": "  Seção de Operações "}, headers=admin_headers)
    assert res.status_code == 201
    assert res.json()["name"] == "Seção de Operações"
