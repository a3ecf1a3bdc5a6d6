from portfolio.extensions import db as _db
from portfolio.models import Category, ProjectItem
from tests.conftest import create


def test_list_categories_by_name(client, seed_categories):
    resp = client.get("/api/v1/categories")
    assert resp.status_code == 200
    assert [c["name"] for c in resp.get_json()] == ["Branding", "Print", "Web Development"]


def test_create_category(client, seed_categories):
    resp = client.post("/api/v1/categories", json={"name": "  Mobile App "})
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["name"] == "Mobile App"
    assert body["order"] == 3


def test_create_category_rejects_duplicates_and_blanks(client, seed_categories):
    assert client.post("/api/v1/categories", json={"name": "branding"}).status_code == 409
    assert client.post("/api/v1/categories", json={"name": ""}).status_code == 400
    assert client.post("/api/v1/categories", json={}).status_code == 400


def test_delete_category_removes_it_from_projects(client, section, seed_categories):
    web, branding, print_ = seed_categories
    both = create(client, "projects", {
        "sectionId": section.id, "title": "Site", "categoryIds": [web.id, branding.id],
    })
    only_web = create(client, "projects", {
        "sectionId": section.id, "title": "App", "categoryIds": [web.id],
    })
    untouched = create(client, "projects", {
        "sectionId": section.id, "title": "Poster", "categoryIds": [print_.id],
    })
    web_id = web.id

    resp = client.delete(f"/api/v1/categories/{web_id}")
    assert resp.status_code == 200
    assert resp.get_json()["projectsUpdated"] == 2

    assert _db.session.get(Category, web_id) is None
    assert _db.session.get(ProjectItem, both["id"]).category_ids == [branding.id]
    assert _db.session.get(ProjectItem, only_web["id"]).category_ids == []
    assert _db.session.get(ProjectItem, untouched["id"]).category_ids == [print_.id]

    names = [c["name"] for c in client.get("/api/v1/categories").get_json()]
    assert "Web Development" not in names


def test_delete_category_is_atomic(client, section, seed_categories, monkeypatch):
    web = seed_categories[0]
    project = create(client, "projects", {
        "sectionId": section.id, "title": "Site", "categoryIds": [web.id],
    })
    web_id = web.id

    def failing_delete(instance):
        raise RuntimeError("store went away")

    monkeypatch.setattr(_db.session, "delete", failing_delete)
    resp = client.delete(f"/api/v1/categories/{web_id}")
    monkeypatch.undo()

    assert resp.status_code == 500
    assert _db.session.get(Category, web_id) is not None
    assert _db.session.get(ProjectItem, project["id"]).category_ids == [web_id]


def test_delete_unknown_category(client):
    assert client.delete("/api/v1/categories/missing").status_code == 404


def test_project_category_validation(client, section, seed_categories):
    resp = client.post("/api/v1/projects", json={
        "sectionId": section.id, "title": "Site", "categoryIds": ["does-not-exist"],
    })
    assert resp.status_code == 404

    resp = client.post("/api/v1/projects", json={
        "sectionId": section.id, "title": "Site", "categoryIds": "web",
    })
    assert resp.status_code == 400

    project = create(client, "projects", {"sectionId": section.id, "title": "Site"})
    assert project["categoryIds"] == []


def test_list_projects_filtered_by_section(client, section, make_section):
    other = make_section("projects", slug="side-projects")
    first = create(client, "projects", {"sectionId": section.id, "title": "Site"})
    create(client, "projects", {"sectionId": other.id, "title": "Side"})
    second = create(client, "projects", {"sectionId": section.id, "title": "App"})

    resp = client.get(f"/api/v1/projects?sectionId={section.id}")
    assert resp.status_code == 200
    assert [p["id"] for p in resp.get_json()] == [first["id"], second["id"]]

    everything = client.get("/api/v1/projects").get_json()
    assert len(everything) == 3
    assert client.get("/api/v1/projects?sectionId=missing").get_json() == []
