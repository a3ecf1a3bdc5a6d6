from typing import Any, Dict, List, Mapping

from sqlalchemy.orm import selectinload

from portfolio.errors import Conflict, InvalidInput, NotFound
from portfolio.extensions import db
from portfolio.models import Section, HeroContent, EducationItem, ExperienceItem
from portfolio.normalizers.section import CHILD_COLLECTIONS
from portfolio.utils.media import delete_blobs
from portfolio.utils.optimistic_lock import enforce_optimistic_lock
from portfolio.utils.order import ReorderResult, validate_ordered_ids
from portfolio.utils.request_data import is_blank, pick_fields, require_fields
from portfolio.utils.transaction import fetch, transactional
from .collections import SECTIONS, SECTION_REORDERABLE
from .crud import check_column_types

ALLOWED_SECTION_TYPES = {
    "hero",
    "about",
    "introduction",
    "projects",
    "experience",
    "skills",
    "education",
    "testimonials",
    "contact",
    "custom",
}

SECTION_FIELDS = {
    "title": "title",
    "slug": "slug",
    "type": "type",
    "visible": "visible",
    "order": "order",
}

HERO_FIELDS = {
    "portraitImageSrc": "portrait_image_src",
    "portraitAlt": "portrait_alt",
    "portraitPublicId": "portrait_public_id",
}


def _tree_options():
    options = [
        selectinload(getattr(Section, attr))
        for attr, _ in CHILD_COLLECTIONS.values()
        if attr not in ("education_items", "experience_items")
    ]
    options.append(selectinload(Section.education_items).selectinload(EducationItem.images))
    options.append(
        selectinload(Section.experience_items).selectinload(ExperienceItem.detail_images)
    )
    options.append(selectinload(Section.hero_content))
    return options


def _validate_section(values: Dict[str, Any]) -> None:
    if "type" in values and values["type"] not in ALLOWED_SECTION_TYPES:
        raise InvalidInput(
            f"Invalid section type. Allowed types are: {', '.join(sorted(ALLOWED_SECTION_TYPES))}"
        )
    if "visible" in values and not isinstance(values["visible"], bool):
        raise InvalidInput("visible must be a boolean")
    if "order" in values:
        order = values["order"]
        if isinstance(order, bool) or not isinstance(order, int) or order < 0:
            raise InvalidInput("order must be a non-negative integer")
    for key in ("title", "slug"):
        if key in values and not isinstance(values[key], str):
            raise InvalidInput(f"{key} must be a string")


def _ensure_slug_free(slug: str, exclude_id=None) -> None:
    query = Section.query.filter(Section.slug == slug)
    if exclude_id is not None:
        query = query.filter(Section.id != exclude_id)
    if query.first() is not None:
        raise Conflict("A section with this slug already exists")


def section_blobs(section: Section) -> List[str]:
    """Public ids of every blob owned by the section and its children."""
    ids = [block.image_public_id for block in section.image_blocks]
    ids += [block.image_public_id for block in section.content_blocks]
    ids += [image.image_public_id for image in section.skill_images]
    ids += [project.image_public_id for project in section.project_items]
    for item in section.education_items:
        ids += [image.image_public_id for image in item.images]
    for item in section.experience_items:
        ids += [image.image_public_id for image in item.detail_images]
    if section.hero_content is not None:
        ids.append(section.hero_content.portrait_public_id)
    return [i for i in ids if i]


def list_sections() -> List[Section]:
    """Every section with all child collections loaded, ordered by ``order``."""
    return (
        Section.query.options(*_tree_options())
        .order_by(Section.order.asc())
        .all()
    )


def get_section(section_id) -> Section:
    return fetch(Section, section_id, "Section")


def create_section(data: Mapping[str, Any]) -> Section:
    require_fields(data, ("title", "slug", "type"))

    values = {k: v for k, v in pick_fields(data, SECTION_FIELDS).items() if v is not None}
    _validate_section(values)
    _ensure_slug_free(values["slug"])

    with transactional():
        section = Section()
        for attr, value in values.items():
            setattr(section, attr, value)
        if "order" not in values:
            section.order = SECTIONS.next_order()
        db.session.add(section)
        db.session.flush()

    return section


def update_section(section_id, data: Mapping[str, Any]) -> Section:
    values = pick_fields(data, SECTION_FIELDS)
    if not values:
        raise InvalidInput("No valid fields provided for update")

    blank = [key for key in ("title", "slug", "type") if key in data and is_blank(data[key])]
    if blank:
        raise InvalidInput(f"Fields cannot be empty: {', '.join(blank)}")
    if values.get("visible", False) is None or values.get("order", 0) is None:
        raise InvalidInput("visible and order cannot be null")
    _validate_section(values)

    section = fetch(Section, section_id, "Section")
    enforce_optimistic_lock(section)

    if "slug" in values and values["slug"] != section.slug:
        _ensure_slug_free(values["slug"], exclude_id=section.id)

    with transactional():
        for attr, value in values.items():
            setattr(section, attr, value)

    return section


def delete_section(section_id) -> None:
    """Deletes a section with all its children, then their blobs."""
    section = fetch(Section, section_id, "Section")
    blobs = section_blobs(section)

    with transactional():
        db.session.delete(section)

    delete_blobs(blobs)


def reorder_sections(ordered_ids: Any) -> ReorderResult:
    return SECTIONS.reorder(None, ordered_ids)


def reorder_section_children(section_id, collection: str, ordered_ids: Any) -> ReorderResult:
    ordering = SECTION_REORDERABLE.get(collection)
    if ordering is None:
        raise NotFound(f"Unknown collection: {collection}")

    ordered_ids = validate_ordered_ids(ordered_ids)
    section = fetch(Section, section_id, "Section")
    return ordering.reorder(section.id, ordered_ids)


def upsert_hero(section_id, data: Mapping[str, Any]) -> HeroContent:
    """
    Creates or updates the portrait content of a hero section.

    A replaced portrait blob is deleted after the commit.
    """
    values = pick_fields(data, HERO_FIELDS)
    if not values:
        raise InvalidInput("No valid fields provided for update")
    check_column_types(HeroContent, HERO_FIELDS, values)

    section = fetch(Section, section_id, "Section")
    hero = section.hero_content
    replaced = []

    if hero is not None:
        enforce_optimistic_lock(hero)
        old_id = hero.portrait_public_id
        if "portrait_public_id" in values and old_id and values["portrait_public_id"] != old_id:
            replaced.append(old_id)

    with transactional():
        if hero is None:
            hero = HeroContent()
            hero.section_id = section.id
            db.session.add(hero)
        for attr, value in values.items():
            setattr(hero, attr, value)
        db.session.flush()

    delete_blobs(replaced)
    return hero
