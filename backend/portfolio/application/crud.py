from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from portfolio.errors import InvalidInput
from portfolio.extensions import db
from portfolio.utils.media import delete_blobs
from portfolio.utils.optimistic_lock import enforce_optimistic_lock
from portfolio.utils.order import OrderedCollection
from portfolio.utils.request_data import is_blank, pick_fields, require_fields
from portfolio.utils.transaction import fetch, transactional


@dataclass(frozen=True)
class ParentRef:
    key: str  # JSON key, e.g. "sectionId"
    attr: str  # column, e.g. "section_id"
    model: type
    label: str


@dataclass(frozen=True)
class EntityResource:
    """
    Describes how one child entity kind is created, updated and deleted.

    ``fields`` is the allow-list of JSON keys mapped to model attributes;
    anything else in a payload is ignored. ``blob_fields`` name attributes
    holding blob public ids owned by the row, and ``cascade_blobs`` collects
    the ids owned by its children.
    """

    label: str
    model: type
    normalize: Callable[[Any], Dict[str, Any]]
    fields: Mapping[str, str]
    required: Tuple[str, ...] = ()
    parent: Optional[ParentRef] = None
    ordering: Optional[OrderedCollection] = None
    validate: Optional[Callable[[Dict[str, Any]], None]] = None
    blob_fields: Tuple[str, ...] = ()
    cascade_blobs: Optional[Callable[[Any], List[str]]] = None

    def owned_blobs(self, entity) -> List[str]:
        ids = [getattr(entity, attr) for attr in self.blob_fields]
        if self.cascade_blobs:
            ids.extend(self.cascade_blobs(entity))
        return [i for i in ids if i]


def _reject_nulls(resource: EntityResource, values: Dict[str, Any]) -> None:
    columns = resource.model.__table__.columns
    for key, attr in resource.fields.items():
        if attr in values and values[attr] is None and not columns[attr].nullable:
            raise InvalidInput(f"Field '{key}' cannot be null")


def check_column_types(model, fields: Mapping[str, str], values: Dict[str, Any]) -> None:
    """
    Rejects values whose JSON type does not fit the target column.

    JSON columns are left to the resource validator; None is handled by the
    null checks.
    """
    columns = model.__table__.columns
    for key, attr in fields.items():
        value = values.get(attr)
        if value is None:
            continue
        column_type = columns[attr].type
        if isinstance(column_type, db.JSON):
            continue
        if isinstance(column_type, db.String):
            ok = isinstance(value, str)
        elif isinstance(column_type, db.Boolean):
            ok = isinstance(value, bool)
        elif isinstance(column_type, db.Integer):
            ok = isinstance(value, int) and not isinstance(value, bool)
        elif isinstance(column_type, db.Float):
            ok = isinstance(value, (int, float)) and not isinstance(value, bool)
        else:
            ok = True
        if not ok:
            raise InvalidInput(f"Invalid data type for {key}")


def _parent_id(resource: EntityResource, data: Mapping[str, Any]):
    parent = resource.parent
    value = data.get(parent.key)
    if not isinstance(value, str):
        raise InvalidInput(f"Field '{parent.key}' must be a string identifier")
    return fetch(parent.model, value, parent.label).id


def create_entity(resource: EntityResource, data: Mapping[str, Any]):
    """
    Creates a row appended at the end of its ordered collection.

    The parent must exist; it is looked up before anything is written.
    """
    required = resource.required + ((resource.parent.key,) if resource.parent else ())
    require_fields(data, required)

    values = {k: v for k, v in pick_fields(data, resource.fields).items() if v is not None}
    check_column_types(resource.model, resource.fields, values)
    if resource.validate:
        resource.validate(values)

    scope_id = _parent_id(resource, data) if resource.parent else None

    with transactional():
        entity = resource.model()
        if resource.parent:
            setattr(entity, resource.parent.attr, scope_id)

        for attr, value in values.items():
            setattr(entity, attr, value)

        if resource.ordering:
            entity.order = resource.ordering.next_order(scope_id)

        db.session.add(entity)
        db.session.flush()

    return entity


def update_entity(resource: EntityResource, entity_id, data: Mapping[str, Any]):
    """
    Applies a partial update; only allow-listed fields that are present change.

    Blobs replaced by the update are deleted after the commit.
    """
    values = pick_fields(data, resource.fields)
    if not values:
        raise InvalidInput("No valid fields provided for update")

    blank = [key for key in resource.required if key in data and is_blank(data[key])]
    if blank:
        raise InvalidInput(f"Fields cannot be empty: {', '.join(blank)}")

    _reject_nulls(resource, values)
    check_column_types(resource.model, resource.fields, values)
    if resource.validate:
        resource.validate(values)

    entity = fetch(resource.model, entity_id, resource.label)
    enforce_optimistic_lock(entity)

    replaced = [
        getattr(entity, attr)
        for attr in resource.blob_fields
        if attr in values and values[attr] != getattr(entity, attr)
    ]

    with transactional():
        for attr, value in values.items():
            setattr(entity, attr, value)

    delete_blobs(replaced)
    return entity


def delete_entity(resource: EntityResource, entity_id) -> None:
    """
    Deletes a row and its children, then its blobs (best-effort).

    Siblings keep their order values; gaps are closed by the next reorder.
    """
    entity = fetch(resource.model, entity_id, resource.label)
    blobs = resource.owned_blobs(entity)

    with transactional():
        db.session.delete(entity)

    delete_blobs(blobs)


def list_entities(resource: EntityResource, scope_id=None) -> list:
    query = resource.model.query
    if scope_id is not None and resource.parent:
        query = query.filter(getattr(resource.model, resource.parent.attr) == scope_id)
    return query.order_by(resource.model.order.asc()).all()
