from contextlib import contextmanager

from portfolio.errors import NotFound
from portfolio.extensions import db


@contextmanager
def transactional():
    """Context manager for database transactions."""
    try:
        yield
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise


def fetch(model, entity_id, label):
    """Loads one row by primary key or raises NotFound."""
    entity = db.session.get(model, entity_id) if isinstance(entity_id, str) and entity_id else None
    if entity is None:
        raise NotFound(f"{label} not found")
    return entity
