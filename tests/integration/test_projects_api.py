def _create_user(client, email="ann@example.com"):
    r = client.post("/api/users", json={"name": "Ann", "email": email})
    assert r.status_code == 201, r.text
    return r.json()["id"]


def test_create_project_with_creator(client):
    user_id = _create_user(client)
    r = client.post(
        "/api/projects",
        json={"name": "Launch", "description": "Go live", "created_by": {"id": user_id}},
    )
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["created_by_id"] == user_id
    assert body["created_by"]["email"] == "ann@example.com"

    r = client.get(f"/api/projects/user/{user_id}")
    assert r.status_code == 200
    assert [p["name"] for p in r.json()] == ["Launch"]


def test_create_project_with_unknown_creator_is_404(client):
    r = client.post("/api/projects", json={"name": "Orphan", "created_by": {"id": 5}})
    assert r.status_code == 404
    assert r.json()["detail"] == "User not found with id: 5"
    assert client.get("/api/projects").json() == []


def test_blank_name_is_400(client):
    r = client.post("/api/projects", json={"name": "   "})
    assert r.status_code == 400
    assert r.json()["field"] == "name"


def test_search_projects(client):
    client.post("/api/projects", json={"name": "Website", "description": "Marketing"})
    client.post("/api/projects", json={"name": "Mobile"})
    r = client.get("/api/projects", params={"q": "market"})
    assert r.status_code == 200
    assert [p["name"] for p in r.json()] == ["Website"]
    assert len(client.get("/api/projects").json()) == 2


def test_update_keeps_creator(client):
    user_id = _create_user(client)
    project_id = client.post(
        "/api/projects", json={"name": "Launch", "created_by": {"id": user_id}}
    ).json()["id"]
    r = client.put(f"/api/projects/{project_id}", json={"name": "Relaunch"})
    assert r.status_code == 200, r.text
    assert r.json()["name"] == "Relaunch"
    assert r.json()["created_by_id"] == user_id
