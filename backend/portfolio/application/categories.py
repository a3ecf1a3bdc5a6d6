from typing import Any, List, Mapping

from portfolio.errors import Conflict, InvalidInput
from portfolio.extensions import db
from portfolio.models import Category, ProjectItem
from portfolio.utils.transaction import fetch, transactional
from .collections import CATEGORIES


def list_categories() -> List[Category]:
    return Category.query.order_by(Category.name.asc()).all()


def create_category(data: Mapping[str, Any]) -> Category:
    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        raise InvalidInput("Category name is required.")
    name = name.strip()

    existing = Category.query.filter(db.func.lower(Category.name) == name.lower()).first()
    if existing is not None:
        raise Conflict("Category already exists.")

    with transactional():
        category = Category()
        category.name = name
        category.order = CATEGORIES.next_order()
        db.session.add(category)
        db.session.flush()

    return category


def delete_category(category_id) -> int:
    """
    Removes the category from every project referencing it, then deletes it.

    Both steps commit together. Returns the number of projects updated.
    """
    category = fetch(Category, category_id, "Category")

    # JSON arrays are not portably queryable; the scan runs inside the transaction
    with transactional():
        updated = 0
        for project in ProjectItem.query.all():
            ids = project.category_ids or []
            if category.id in ids:
                # Assign a new list so the JSON column is flagged dirty
                project.category_ids = [i for i in ids if i != category.id]
                updated += 1
        db.session.delete(category)

    return updated
