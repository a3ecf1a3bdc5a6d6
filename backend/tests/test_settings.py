from portfolio.models import Setting


def test_get_creates_defaults_once(client):
    assert Setting.query.count() == 0

    first = client.get("/api/v1/settings")
    assert first.status_code == 200
    body = first.get_json()
    assert body["theme"] == "dark"
    assert body["siteTitle"] == "PORTFOLIO"
    assert body["showPortrait"] is True
    assert body["resumeUrl"] == "/resume.pdf"
    assert body["globalFontFamily"] == "font-sans"

    second = client.get("/api/v1/settings")
    assert second.get_json()["id"] == body["id"]
    assert Setting.query.count() == 1


def test_put_creates_with_defaults_when_missing(client):
    resp = client.put("/api/v1/settings", json={"theme": "light", "ignored": True})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["theme"] == "light"
    assert body["siteTitle"] == "PORTFOLIO"
    assert Setting.query.count() == 1


def test_put_updates_existing(client):
    created = client.get("/api/v1/settings").get_json()

    resp = client.put("/api/v1/settings", json={"siteTitle": "Jane Doe", "showPortrait": False})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["id"] == created["id"]
    assert body["siteTitle"] == "Jane Doe"
    assert body["showPortrait"] is False
    assert body["theme"] == "dark"


def test_put_rejects_invalid_payloads(client):
    assert client.put("/api/v1/settings", json={"foo": "bar"}).status_code == 400
    assert client.put("/api/v1/settings", json={"showPortrait": "no"}).status_code == 400
    assert client.put("/api/v1/settings", data="[]", content_type="application/json").status_code == 400
