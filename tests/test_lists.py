"""List API tests."""

from src.models import List, Task


def create_list(client, headers, **fields):
    payload = {"title": "Groceries", **fields}
    response = client.post("/api/lists", headers=headers, json=payload)
    assert response.status_code == 201, response.text
    return response.json()["list"]


def test_create_list(client, auth_headers):
    """Test creating a list."""
    response = client.post(
        "/api/lists", headers=auth_headers, json={"title": "Shopping", "color": "#ff8800"}
    )
    assert response.status_code == 201
    lst = response.json()["list"]
    assert lst["title"] == "Shopping"
    assert lst["color"] == "#ff8800"
    assert lst["favorite"] is False
    assert lst["authorId"] == auth_headers.user_id


def test_create_list_default_color(client, auth_headers):
    assert create_list(client, auth_headers)["color"] == "#000000"


def test_create_list_validation(client, auth_headers):
    response = client.post(
        "/api/lists", headers=auth_headers, json={"title": "x" * 51, "color": "red"}
    )
    assert response.status_code == 400
    paths = {error["path"] for error in response.json()["errors"]}
    assert paths == {"title", "color"}


def test_short_hex_color_is_accepted(client, auth_headers):
    assert create_list(client, auth_headers, color="#fff")["color"] == "#fff"


def test_get_lists(client, auth_headers, other_auth_headers):
    """Only the caller's lists, newest first."""
    first = create_list(client, auth_headers, title="One")
    second = create_list(client, auth_headers, title="Two")
    create_list(client, other_auth_headers, title="Theirs")

    response = client.get("/api/lists", headers=auth_headers)
    assert response.status_code == 200
    ids = [lst["id"] for lst in response.json()["lists"]]
    assert ids == [second["id"], first["id"]]


def test_get_list_includes_tasks(client, auth_headers):
    lst = create_list(client, auth_headers)
    client.post("/api/tasks", headers=auth_headers, json={"taskName": "Milk", "listId": lst["id"]})
    client.post("/api/tasks", headers=auth_headers, json={"taskName": "Eggs", "listId": lst["id"]})
    client.post("/api/tasks", headers=auth_headers, json={"taskName": "Elsewhere"})

    response = client.get(f"/api/lists/{lst['id']}", headers=auth_headers)
    assert response.status_code == 200
    detail = response.json()["list"]
    assert detail["title"] == "Groceries"
    assert [task["taskName"] for task in detail["tasks"]] == ["Milk", "Eggs"]


def test_get_foreign_list(client, auth_headers, other_auth_headers):
    foreign = create_list(client, other_auth_headers)

    hidden = client.get(f"/api/lists/{foreign['id']}", headers=auth_headers)
    missing = client.get("/api/lists/99999", headers=auth_headers)

    assert hidden.status_code == missing.status_code == 404
    assert hidden.json() == missing.json()


def test_update_list(client, auth_headers):
    lst = create_list(client, auth_headers, color="#123456")
    response = client.put(
        f"/api/lists/{lst['id']}", headers=auth_headers, json={"title": "Renamed"}
    )
    assert response.status_code == 200
    updated = response.json()["list"]
    assert updated["title"] == "Renamed"
    assert updated["color"] == "#123456"


def test_update_list_requires_a_field(client, auth_headers):
    lst = create_list(client, auth_headers)
    response = client.put(f"/api/lists/{lst['id']}", headers=auth_headers, json={})
    assert response.status_code == 400


def test_update_foreign_list(client, auth_headers, other_auth_headers):
    foreign = create_list(client, other_auth_headers)
    response = client.put(
        f"/api/lists/{foreign['id']}", headers=auth_headers, json={"title": "Mine"}
    )
    assert response.status_code == 404


def test_delete_list_cascades_tasks(client, auth_headers, db):
    lst = create_list(client, auth_headers)
    client.post("/api/tasks", headers=auth_headers, json={"taskName": "A", "listId": lst["id"]})
    client.post("/api/tasks", headers=auth_headers, json={"taskName": "B", "listId": lst["id"]})
    loose = client.post("/api/tasks", headers=auth_headers, json={"taskName": "Loose"}).json()

    response = client.delete(f"/api/lists/{lst['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["message"] == "List deleted successfully"

    assert db.query(List).filter(List.id == lst["id"]).count() == 0
    assert db.query(Task).filter(Task.list_id == lst["id"]).count() == 0
    assert db.query(Task).filter(Task.id == loose["task"]["id"]).count() == 1


def test_delete_foreign_list(client, auth_headers, other_auth_headers, db):
    foreign = create_list(client, other_auth_headers)
    response = client.delete(f"/api/lists/{foreign['id']}", headers=auth_headers)
    assert response.status_code == 404
    assert db.query(List).filter(List.id == foreign["id"]).count() == 1


def test_toggle_favorite(client, auth_headers):
    lst = create_list(client, auth_headers)
    url = f"/api/lists/{lst['id']}/favorite"

    assert client.patch(url, headers=auth_headers).json()["list"]["favorite"] is True
    assert client.patch(url, headers=auth_headers).json()["list"]["favorite"] is False


def test_lists_require_auth(client):
    assert client.get("/api/lists").status_code == 401
    assert client.post("/api/lists", json={"title": "x"}).status_code == 401
