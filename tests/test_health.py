from http import HTTPStatus

from django.apps import apps

from config.health import STATUS_TEXT


def test_index_is_plaintext(client):
    resp = client.get("/")
    assert resp.status_code == HTTPStatus.OK
    assert resp["Content-Type"].startswith("text/plain")
    assert resp.content.decode() == STATUS_TEXT


def test_index_rejects_post(client):
    resp = client.post("/")
    assert resp.status_code == HTTPStatus.METHOD_NOT_ALLOWED


def test_index_allows_any_origin(client):
    resp = client.get("/", headers={"origin": "https://shop.example.com"})
    assert resp["Access-Control-Allow-Origin"] == "*"


def test_health_reports_history(client):
    history = apps.get_app_config("chat").history
    before = history.stats()

    resp = client.get("/health/")
    assert resp.status_code == HTTPStatus.OK
    data = resp.json()
    assert data["status"] == "ok"
    assert data["components"]["history"] == {"ok": True, **before}
