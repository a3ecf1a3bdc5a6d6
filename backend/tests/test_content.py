import logging

import pytest

from portfolio.extensions import db as _db
from portfolio.models import ExperienceItem, ExperienceDetailImage, ImageBlock
from tests.conftest import create


def image_block(client, section_id, public_id="images/a.png"):
    return create(client, "imageblocks", {
        "sectionId": section_id,
        "src": f"https://blobs.example.test/{public_id}",
        "imagePublicId": public_id,
    })


def test_create_requires_parent(client, section):
    resp = client.post("/api/v1/skills", json={"title": "Python"})
    assert resp.status_code == 400
    assert "sectionId" in resp.get_json()["message"]

    resp = client.post("/api/v1/skills", json={"title": "Python", "sectionId": "missing"})
    assert resp.status_code == 404
    assert resp.get_json()["message"] == "Section not found"


def test_create_ignores_unknown_fields(client, section):
    skill = create(client, "skills", {
        "sectionId": section.id, "title": "Python", "level": 4, "id": "forced", "order": 42,
    })
    assert skill["id"] != "forced"
    assert skill["order"] == 0
    assert skill["level"] == 4


def test_update_is_partial(client, section):
    item = create(client, "experience", {
        "sectionId": section.id,
        "positionTitle": "Engineer",
        "companyName": "Acme",
        "period": "2020-2023",
    })

    resp = client.put(f"/api/v1/experience/{item['id']}", json={"summary": "Built things"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["summary"] == "Built things"
    assert body["positionTitle"] == "Engineer"


def test_update_errors(client, section):
    item = create(client, "testimonials", {
        "sectionId": section.id, "clientName": "Ann", "content": "Great", "rating": 5,
    })

    assert client.put(f"/api/v1/testimonials/{item['id']}", json={"bogus": 1}).status_code == 400
    assert client.put(f"/api/v1/testimonials/{item['id']}", json={"clientName": ""}).status_code == 400
    assert client.put(f"/api/v1/testimonials/{item['id']}", json={"content": None}).status_code == 400
    assert client.put("/api/v1/testimonials/missing", json={"content": "x"}).status_code == 404


@pytest.mark.parametrize("path,payload", [
    ("testimonials", {"clientName": "Ann", "content": "Great", "rating": 7}),
    ("testimonials", {"clientName": "Ann", "content": "Great", "rating": "5"}),
    ("contact-info", {"type": "fax", "value": "123"}),
    ("skills", {"title": "Python", "level": "expert"}),
    ("textblocks", {"content": 12}),
    ("imageblocks", {"src": "https://blobs.example.test/x.png"}),
])
def test_field_validation(client, section, path, payload):
    resp = client.post(f"/api/v1/{path}", json={"sectionId": section.id, **payload})
    assert resp.status_code == 400


@pytest.mark.parametrize("path,payload", [
    ("education", {"institution": {"name": "MIT"}, "period": "2020"}),
    ("education", {"institution": "MIT", "period": ["2020", "2024"]}),
    ("contact-info", {"type": "email", "value": ["x"]}),
    ("experience", {"positionTitle": [], "companyName": "Acme", "period": "2020"}),
    ("testimonials", {"clientName": {}, "content": "Great", "rating": 5}),
    ("skills", {"title": ["Python"]}),
    ("skills", {"title": "Python", "level": True}),
    ("projects", {"title": {"en": "Site"}}),
    ("textblocks", {"content": "Hi", "fontFamily": {"name": "serif"}}),
])
def test_create_rejects_mismatched_json_types(client, section, path, payload):
    resp = client.post(f"/api/v1/{path}", json={"sectionId": section.id, **payload})
    assert resp.status_code == 400
    assert "Invalid data type" in resp.get_json()["message"]


@pytest.mark.parametrize("path,valid,bad", [
    ("contact-info", {"type": "email", "value": "me@example.com"}, {"value": ["x"]}),
    ("contact-info", {"type": "email", "value": "me@example.com"}, {"label": {"text": "Mail"}}),
    ("education", {"institution": "MIT", "period": "2020"}, {"degree": ["BSc"]}),
    ("skills", {"title": "Python"}, {"level": {"value": 3}}),
    ("projects", {"title": "Site"}, {"layout": ["left"]}),
])
def test_update_rejects_mismatched_json_types(client, section, path, valid, bad):
    item = create(client, path, {"sectionId": section.id, **valid})

    resp = client.put(f"/api/v1/{path}/{item['id']}", json=bad)
    assert resp.status_code == 400
    assert "Invalid data type" in resp.get_json()["message"]


def test_delete_does_not_renumber_siblings(client, section):
    ids = [create(client, "testimonials", {
        "sectionId": section.id, "clientName": f"C{i}", "content": "ok", "rating": 4,
    })["id"] for i in range(3)]

    assert client.delete(f"/api/v1/testimonials/{ids[1]}").status_code == 200

    tree = client.get(f"/api/v1/sections/{section.id}").get_json()
    assert [t["order"] for t in tree["testimonialItems"]] == [0, 2]

    created = create(client, "testimonials", {
        "sectionId": section.id, "clientName": "C3", "content": "ok", "rating": 3,
    })
    assert created["order"] == 3


def test_delete_image_block_deletes_blob(client, section, blob_store):
    block = image_block(client, section.id)

    resp = client.delete(f"/api/v1/imageblocks/{block['id']}")
    assert resp.status_code == 200
    assert blob_store.deleted == ["images/a.png"]
    assert client.delete(f"/api/v1/imageblocks/{block['id']}").status_code == 404


def test_replacing_image_deletes_old_blob(client, section, blob_store):
    block = image_block(client, section.id, "images/old.png")

    resp = client.put(f"/api/v1/imageblocks/{block['id']}", json={
        "src": "https://blobs.example.test/images/new.png",
        "imagePublicId": "images/new.png",
    })
    assert resp.status_code == 200
    assert blob_store.deleted == ["images/old.png"]

    client.put(f"/api/v1/imageblocks/{block['id']}", json={"alt": "Updated"})
    assert blob_store.deleted == ["images/old.png"]


def test_blob_delete_failure_is_logged_not_fatal(client, section, blob_store, monkeypatch, caplog):
    block = image_block(client, section.id, "images/stuck.png")

    def failing_delete(key):
        raise RuntimeError("blob service down")

    monkeypatch.setattr(blob_store, "delete", failing_delete)

    with caplog.at_level(logging.ERROR):
        resp = client.delete(f"/api/v1/imageblocks/{block['id']}")

    assert resp.status_code == 200
    assert _db.session.get(ImageBlock, block["id"]) is None
    assert "images/stuck.png" in caplog.text


def test_experience_item_delete_cascades_images(client, section, blob_store):
    item = create(client, "experience", {
        "sectionId": section.id, "positionTitle": "Dev", "companyName": "Acme", "period": "2021",
    })
    for name in ("one", "two"):
        create(client, "experience-images", {
            "experienceItemId": item["id"],
            "src": f"https://blobs.example.test/images/{name}.png",
            "imagePublicId": f"images/{name}.png",
        })

    tree = client.get(f"/api/v1/sections/{section.id}").get_json()
    images = tree["experienceItems"][0]["detailImages"]
    assert [i["order"] for i in images] == [0, 1]

    assert client.delete(f"/api/v1/experience/{item['id']}").status_code == 200
    assert _db.session.get(ExperienceItem, item["id"]) is None
    assert ExperienceDetailImage.query.count() == 0
    assert sorted(blob_store.deleted) == ["images/one.png", "images/two.png"]


def test_child_image_requires_existing_item(client):
    resp = client.post("/api/v1/education-images", json={
        "educationItemId": "missing", "src": "x", "imagePublicId": "images/x.png",
    })
    assert resp.status_code == 404


def test_list_content_blocks_by_section(client, section, make_section):
    other = make_section("custom", slug="custom")
    create(client, "custom-section-content-blocks", {
        "sectionId": section.id, "type": "TEXT", "content": "first",
    })
    create(client, "custom-section-content-blocks", {
        "sectionId": section.id, "type": "LINK", "linkUrl": "https://example.com",
    })
    create(client, "custom-section-content-blocks", {
        "sectionId": other.id, "type": "TEXT", "content": "elsewhere",
    })

    resp = client.get(f"/api/v1/custom-section-content-blocks?sectionId={section.id}")
    assert resp.status_code == 200
    assert [b["type"] for b in resp.get_json()] == ["TEXT", "LINK"]

    assert client.get("/api/v1/custom-section-content-blocks").status_code == 400


def test_contact_info_crud(client, section):
    item = create(client, "contact-info", {
        "sectionId": section.id, "type": "github", "value": "https://github.com/me",
    })
    resp = client.put(f"/api/v1/contact-info/{item['id']}", json={"label": "GitHub"})
    assert resp.get_json()["label"] == "GitHub"
    assert client.delete(f"/api/v1/contact-info/{item['id']}").status_code == 200
