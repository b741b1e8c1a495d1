import uuid

from conftest import BASE_URL


def create_todo_payload(title="Test Task", order=None):
    payload = {"title": title}
    if order is not None:
        payload["order"] = order
    return payload


def assert_todo_shape(todo: dict):
    for key in ["id", "url", "order", "title", "completed"]:
        assert key in todo
    assert isinstance(todo["title"], str)
    assert isinstance(todo["completed"], bool)
    assert todo["order"] is None or isinstance(todo["order"], int)
    uuid.UUID(todo["id"])
    assert todo["url"] == f"{BASE_URL}/{todo['id']}"


class TestTodosCRUD:
    def test_create_todo(self, client):
        res = client.post("/", json=create_todo_payload(title="Buy milk", order=3))
        assert res.status_code == 201
        todo = res.json()
        assert_todo_shape(todo)
        assert todo["title"] == "Buy milk"
        assert todo["order"] == 3
        assert todo["completed"] is False

    def test_create_ignores_completed_flag(self, client):
        res = client.post("/", json={"title": "Already done?", "completed": True})
        assert res.status_code == 201
        assert res.json()["completed"] is False

    def test_list_todos(self, client):
        assert client.get("/").json() == []

        first = client.post("/", json=create_todo_payload(title="one")).json()
        second = client.post("/", json=create_todo_payload(title="two")).json()

        res = client.get("/")
        assert res.status_code == 200
        items = res.json()
        assert len(items) == 2
        assert {t["id"] for t in items} == {first["id"], second["id"]}

    def test_clear_todos(self, client):
        client.post("/", json=create_todo_payload(title="one"))
        client.post("/", json=create_todo_payload(title="two"))

        res = client.delete("/")
        assert res.status_code == 204
        assert client.get("/").json() == []

    def test_get_todo_and_not_found(self, client):
        todo = client.post("/", json=create_todo_payload(title="Read book")).json()

        res_get = client.get(f"/{todo['id']}")
        assert res_get.status_code == 200
        assert res_get.json() == todo

        res_404 = client.get(f"/{uuid.uuid4()}")
        assert res_404.status_code == 404
        assert res_404.json()["detail"] == "Todo not found"

    def test_get_with_non_uuid_id_is_not_found(self, client):
        res = client.get("/not-a-uuid")
        assert res.status_code == 404

    def test_follow_url_of_created_todo(self, client):
        todo = client.post("/", json=create_todo_payload(title="Follow me")).json()
        path = todo["url"][len(BASE_URL):]
        assert client.get(path).json()["title"] == "Follow me"

    def test_patch_partial_update(self, client):
        todo = client.post("/", json=create_todo_payload(title="Partial", order=7)).json()

        res_patch = client.patch(f"/{todo['id']}", json={"completed": True})
        assert res_patch.status_code == 200
        patched = res_patch.json()
        assert patched["id"] == todo["id"]
        assert patched["completed"] is True
        # title and order remain unchanged
        assert patched["title"] == "Partial"
        assert patched["order"] == 7

        res_patch = client.patch(f"/{todo['id']}", json={"title": "Renamed", "order": 1})
        patched = res_patch.json()
        assert patched["title"] == "Renamed"
        assert patched["order"] == 1
        assert patched["completed"] is True

        # the change is visible to later reads
        assert client.get(f"/{todo['id']}").json() == patched

    def test_patch_null_title_and_completed_are_ignored(self, client):
        todo = client.post("/", json=create_todo_payload(title="Keep me", order=5)).json()
        client.patch(f"/{todo['id']}", json={"completed": True})

        res = client.patch(f"/{todo['id']}", json={"title": None, "completed": None})
        assert res.status_code == 200
        patched = res.json()
        assert patched["title"] == "Keep me"
        assert patched["completed"] is True
        assert patched["order"] == 5

    def test_patch_null_order_clears_it(self, client):
        todo = client.post("/", json=create_todo_payload(title="Ordered", order=5)).json()

        res = client.patch(f"/{todo['id']}", json={"order": None})
        assert res.status_code == 200
        patched = res.json()
        assert patched["order"] is None
        assert patched["title"] == "Ordered"
        assert client.get(f"/{todo['id']}").json()["order"] is None

    def test_patch_not_found(self, client):
        res = client.patch(f"/{uuid.uuid4()}", json={"title": "Nope"})
        assert res.status_code == 404
        assert res.json()["detail"] == "Todo not found"

        res = client.patch("/not-a-uuid", json={"title": "Nope"})
        assert res.status_code == 404

    def test_delete_todo(self, client):
        todo = client.post("/", json=create_todo_payload(title="ToDelete")).json()

        res_del = client.delete(f"/{todo['id']}")
        assert res_del.status_code == 204
        assert res_del.text == ""

        assert client.get(f"/{todo['id']}").status_code == 404
        # Deleting again still succeeds
        assert client.delete(f"/{todo['id']}").status_code == 204

    def test_delete_missing_leaves_store_unchanged(self, client):
        kept = client.post("/", json=create_todo_payload(title="Keep")).json()

        assert client.delete(f"/{uuid.uuid4()}").status_code == 204
        assert client.delete("/not-a-uuid").status_code == 204
        assert client.get("/").json() == [kept]


class TestOptionsAndCors:
    def test_options_collection(self, client):
        res = client.options("/")
        assert res.status_code == 200
        assert res.headers["allow"] == "DELETE, GET, OPTIONS, POST"

    def test_options_item(self, client):
        res = client.options(f"/{uuid.uuid4()}")
        assert res.status_code == 200
        assert res.headers["allow"] == "DELETE, GET, OPTIONS, PATCH"

    def test_cors_preflight(self, client):
        res = client.options(
            "/",
            headers={
                "Origin": "http://todobackend.com",
                "Access-Control-Request-Method": "PATCH",
                "Access-Control-Request-Headers": "content-type",
            },
        )
        assert res.status_code == 200
        assert res.headers["access-control-allow-origin"] in ("*", "http://todobackend.com")
        assert "PATCH" in res.headers["access-control-allow-methods"]

    def test_cors_header_on_simple_request(self, client):
        res = client.get("/", headers={"Origin": "http://todobackend.com"})
        assert res.status_code == 200
        assert "access-control-allow-origin" in res.headers


class TestValidationErrors:
    def test_create_without_title(self, client):
        res = client.post("/", json={"order": 1})
        assert res.status_code == 400
        body = res.json()
        assert body.get("error") == "ValidationError"
        assert body.get("message") == "Request validation failed"
        assert isinstance(body.get("detail"), list)

    def test_create_with_malformed_json(self, client):
        res = client.post("/", content=b"{not json", headers={"content-type": "application/json"})
        assert res.status_code == 400
        assert res.json().get("error") == "ValidationError"

    def test_patch_with_bad_order(self, client):
        todo = client.post("/", json=create_todo_payload(title="Order bad")).json()
        res = client.patch(f"/{todo['id']}", json={"order": "first"})
        assert res.status_code == 400
        assert res.json().get("error") == "ValidationError"
