from portfolio.extensions import db as _db
from portfolio.models import Section, TextBlock, EducationImage
from tests.conftest import create


def test_create_section_appends_order(client, make_section):
    make_section("hero")
    make_section("about")

    resp = client.post("/api/v1/sections", json={"title": "Work", "slug": "work", "type": "projects"})
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["order"] == 2
    assert body["visible"] is True
    assert body["slug"] == "work"


def test_create_section_with_explicit_order(client):
    resp = client.post(
        "/api/v1/sections",
        json={"title": "Intro", "slug": "intro", "type": "introduction", "order": 5, "visible": False},
    )
    assert resp.status_code == 201
    assert resp.get_json()["order"] == 5
    assert resp.get_json()["visible"] is False


def test_create_section_validation(client, section):
    resp = client.post("/api/v1/sections", json={"title": "No slug", "type": "custom"})
    assert resp.status_code == 400
    assert "slug" in resp.get_json()["message"]

    resp = client.post("/api/v1/sections", json={"title": "X", "slug": "x", "type": "carousel"})
    assert resp.status_code == 400

    resp = client.post("/api/v1/sections", json={"title": "X", "slug": "x", "type": "custom", "visible": "yes"})
    assert resp.status_code == 400

    resp = client.post("/api/v1/sections", json={"title": "Dup", "slug": "projects", "type": "custom"})
    assert resp.status_code == 409


def test_list_sections_returns_ordered_tree(client, make_section):
    second = make_section("about", slug="about")
    first = make_section("hero", slug="hero")
    client.put("/api/v1/sections/reorder", json={"orderedIds": [first.id, second.id]})

    create(client, "textblocks", {"sectionId": second.id, "content": "b"})
    create(client, "textblocks", {"sectionId": second.id, "content": "a"})

    resp = client.get("/api/v1/sections")
    assert resp.status_code == 200
    sections = resp.get_json()
    assert [s["slug"] for s in sections] == ["hero", "about"]

    about = sections[1]
    assert [b["content"] for b in about["textBlocks"]] == ["b", "a"]
    assert about["imageBlocks"] == []
    assert about["heroContent"] is None
    for key in ("projectItems", "educationItems", "experienceItems", "skillItems",
                "skillImages", "testimonialItems", "contactInfoItems", "customContentBlocks"):
        assert about[key] == []


def test_get_section(client, section):
    resp = client.get(f"/api/v1/sections/{section.id}")
    assert resp.status_code == 200
    assert resp.get_json()["id"] == section.id

    assert client.get("/api/v1/sections/unknown").status_code == 404


def test_update_section_partial(client, section):
    resp = client.put(f"/api/v1/sections/{section.id}", json={"title": "Selected work", "color": "red"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["title"] == "Selected work"
    assert body["slug"] == "projects"


def test_update_section_rejects_taken_slug(client, section, make_section):
    other = make_section("about", slug="about")

    resp = client.put(f"/api/v1/sections/{other.id}", json={"slug": "projects"})
    assert resp.status_code == 409

    resp = client.put(f"/api/v1/sections/{section.id}", json={"slug": "projects"})
    assert resp.status_code == 200


def test_update_section_errors(client, section):
    assert client.put(f"/api/v1/sections/{section.id}", json={"unknown": 1}).status_code == 400
    assert client.put(f"/api/v1/sections/{section.id}", json={"title": " "}).status_code == 400
    assert client.put("/api/v1/sections/missing", json={"title": "T"}).status_code == 404


def test_update_section_optimistic_lock(client, section):
    resp = client.put(
        f"/api/v1/sections/{section.id}",
        json={"title": "Stale"},
        headers={"If-Unmodified-Since": "Wed, 21 Oct 2015 07:28:00 GMT"},
    )
    assert resp.status_code == 409

    resp = client.put(
        f"/api/v1/sections/{section.id}",
        json={"title": "Fresh"},
        headers={"If-Unmodified-Since": "Fri, 01 Jan 2100 00:00:00 GMT"},
    )
    assert resp.status_code == 200

    resp = client.put(
        f"/api/v1/sections/{section.id}",
        json={"title": "Bad"},
        headers={"If-Unmodified-Since": "not a date"},
    )
    assert resp.status_code == 400


def test_delete_section_cascades_and_cleans_blobs(client, section, blob_store):
    create(client, "textblocks", {"sectionId": section.id, "content": "text"})
    create(client, "imageblocks", {
        "sectionId": section.id,
        "src": "https://blobs.example.test/images/a.png",
        "imagePublicId": "images/a.png",
    })
    education = create(client, "education", {
        "sectionId": section.id, "institution": "MIT", "period": "2010-2014",
    })
    create(client, "education-images", {
        "educationItemId": education["id"],
        "src": "https://blobs.example.test/images/b.png",
        "imagePublicId": "images/b.png",
    })
    client.put(f"/api/v1/sections/{section.id}/hero", json={
        "portraitImageSrc": "https://blobs.example.test/images/me.png",
        "portraitPublicId": "images/me.png",
    })

    resp = client.delete(f"/api/v1/sections/{section.id}")
    assert resp.status_code == 200

    assert _db.session.get(Section, section.id) is None
    assert TextBlock.query.count() == 0
    assert EducationImage.query.count() == 0
    assert sorted(blob_store.deleted) == ["images/a.png", "images/b.png", "images/me.png"]

    assert client.delete(f"/api/v1/sections/{section.id}").status_code == 404


def test_hero_upsert_replaces_portrait_blob(client, make_section, blob_store):
    hero = make_section("hero", slug="hero")

    resp = client.put(f"/api/v1/sections/{hero.id}/hero", json={
        "portraitImageSrc": "https://blobs.example.test/images/one.png",
        "portraitPublicId": "images/one.png",
        "portraitAlt": "Me",
    })
    assert resp.status_code == 200
    first = resp.get_json()

    resp = client.put(f"/api/v1/sections/{hero.id}/hero", json={
        "portraitImageSrc": "https://blobs.example.test/images/two.png",
        "portraitPublicId": "images/two.png",
    })
    assert resp.status_code == 200
    second = resp.get_json()

    assert second["id"] == first["id"]
    assert second["portraitAlt"] == "Me"
    assert blob_store.deleted == ["images/one.png"]

    full = client.get(f"/api/v1/sections/{hero.id}").get_json()
    assert full["heroContent"]["portraitPublicId"] == "images/two.png"


def test_hero_upsert_rejects_non_string_fields(client, make_section):
    hero = make_section("hero", slug="hero")

    resp = client.put(f"/api/v1/sections/{hero.id}/hero", json={"portraitAlt": {"text": "Me"}})
    assert resp.status_code == 400
    assert "portraitAlt" in resp.get_json()["message"]

    resp = client.put(f"/api/v1/sections/{hero.id}/hero", json={"portraitImageSrc": ["a.png"]})
    assert resp.status_code == 400

    full = client.get(f"/api/v1/sections/{hero.id}").get_json()
    assert full["heroContent"] is None
