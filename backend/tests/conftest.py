import pytest

from portfolio import create_app
from portfolio.extensions import db as _db
from portfolio.models import Section, Category, ContactInfoItem, User


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db(app):
    return _db


@pytest.fixture
def blob_store(app):
    return app.extensions["blob_store"]


@pytest.fixture
def outbox(app):
    return app.extensions["mailer"].outbox


@pytest.fixture
def make_section(db):
    counter = {"n": 0}

    def _make(type="custom", slug=None, title=None, visible=True):
        section = Section(
            title=title or type.upper(),
            slug=slug or f"{type}-{counter['n']}",
            type=type,
            order=counter["n"],
            visible=visible,
        )
        counter["n"] += 1
        db.session.add(section)
        db.session.commit()
        return section

    return _make


@pytest.fixture
def section(make_section):
    return make_section("projects", slug="projects")


@pytest.fixture
def seed_categories(db):
    categories = []
    for order, name in enumerate(["Web Development", "Branding", "Print"]):
        category = Category(name=name, order=order)
        db.session.add(category)
        categories.append(category)
    db.session.commit()
    return categories


@pytest.fixture
def contact_section(make_section, db):
    section = make_section("contact", slug="contact")
    db.session.add_all([
        ContactInfoItem(section_id=section.id, type="phone", value="+1 555 0100", order=0),
        ContactInfoItem(section_id=section.id, type="email", value="me@example.com", order=1),
        ContactInfoItem(section_id=section.id, type="email", value="other@example.com", order=2),
    ])
    db.session.commit()
    return section


@pytest.fixture
def admin_user(db):
    user = User(email="admin@example.com", name="Admin User", is_admin=True)
    user.set_password("correct-horse")
    db.session.add(user)
    db.session.commit()
    return user


def create(client, path, payload):
    resp = client.post(f"/api/v1/{path}", json=payload)
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()
