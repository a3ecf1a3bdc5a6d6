import click

from portfolio.application.collections import CATEGORIES, SECTIONS
from portfolio.extensions import db
from portfolio.models import Category, HeroContent, Section, Setting, TextBlock, DEFAULT_SETTINGS
from portfolio.utils.transaction import transactional

DEFAULT_SECTIONS = [
    {"slug": "hero", "title": "PORTFOLIO", "type": "hero"},
    {"slug": "introduction", "title": "INTRODUCTION", "type": "introduction"},
    {"slug": "projects", "title": "PROJECTS", "type": "projects"},
    {"slug": "education", "title": "EDUCATION", "type": "education"},
    {"slug": "skills", "title": "SKILLS", "type": "skills"},
    {"slug": "experience", "title": "EXPERIENCE", "type": "experience"},
    {"slug": "testimonials", "title": "TESTIMONIALS", "type": "testimonials"},
    {"slug": "contact", "title": "CONTACT", "type": "contact"},
]

DEFAULT_CATEGORIES = ["Web Development", "Mobile App", "UI/UX Design", "Branding", "Print"]

HERO_TEXT = [
    "Welcome to My Portfolio. I build amazing things.",
    "You can see anything about me in this way.",
]


def seed_defaults():
    """
    Inserts the default settings, sections, categories and hero content.

    Existing rows are left alone, so running it twice changes nothing.
    Returns the number of rows created.
    """
    created = 0
    with transactional():
        if Setting.query.first() is None:
            setting = Setting()
            for attr, value in DEFAULT_SETTINGS.items():
                setattr(setting, attr, value)
            db.session.add(setting)
            created += 1

        for data in DEFAULT_SECTIONS:
            if Section.query.filter_by(slug=data["slug"]).first() is not None:
                continue
            section = Section()
            section.slug = data["slug"]
            section.title = data["title"]
            section.type = data["type"]
            section.order = SECTIONS.next_order()
            section.visible = True
            db.session.add(section)
            created += 1

            if section.type == "hero":
                hero = HeroContent()
                hero.section = section
                hero.portrait_image_src = "/placeholder-portrait.jpg"
                hero.portrait_alt = "My Portrait"
                db.session.add(hero)
                for order, content in enumerate(HERO_TEXT):
                    block = TextBlock()
                    block.section = section
                    block.content = content
                    block.order = order
                    block.font_family = "font-sans"
                    db.session.add(block)
                    created += 1

        for name in DEFAULT_CATEGORIES:
            if Category.query.filter_by(name=name).first() is None:
                category = Category()
                category.name = name
                category.order = CATEGORIES.next_order()
                db.session.add(category)
                created += 1

    return created


def register_commands(app):
    @app.cli.command("create-admin")
    @click.argument("email")
    @click.option("--name", default="Admin User", show_default=True)
    @click.password_option()
    def create_admin(email, name, password):
        """Create an administrator account."""
        from portfolio.application.auth import create_user

        user = create_user(email, password, name=name, is_admin=True)
        click.echo(f"Created admin user {user.email} ({user.id})")

    @app.cli.command("seed")
    def seed():
        """Insert default settings, sections and categories."""
        created = seed_defaults()
        click.echo(f"Seed complete: {created} rows created")
