import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from flask import current_app
from sqlalchemy.exc import DBAPIError

from portfolio.errors import ConflictRetriesExhausted, InvalidInput
from portfolio.extensions import db
from portfolio.utils.store_errors import is_write_conflict
from portfolio.utils.transaction import transactional


@dataclass
class ReorderResult:
    updated: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"updated": self.updated, "skipped": self.skipped}


def validate_ordered_ids(ordered_ids: Any) -> List[str]:
    if not isinstance(ordered_ids, list) or not all(isinstance(i, str) for i in ordered_ids):
        raise InvalidInput("Invalid request body: orderedIds must be an array of strings.")

    if len(set(ordered_ids)) != len(ordered_ids):
        raise InvalidInput("Invalid request body: orderedIds must not contain duplicates.")

    return ordered_ids


@dataclass(frozen=True)
class OrderedCollection:
    """
    A set of sibling rows sharing one dense, zero-based ``order`` sequence.

    Siblings are grouped by ``scope_field`` (typically ``section_id``); a
    collection without a scope field is global. Several models may share a
    single sequence, e.g. the text and image blocks of one section.
    """

    name: str
    models: Tuple[type, ...]
    scope_field: Optional[str] = "section_id"

    def _filtered(self, query, model, scope_id):
        if self.scope_field is None:
            return query
        return query.filter(getattr(model, self.scope_field) == scope_id)

    def siblings(self, scope_id=None) -> list:
        rows = []
        for model in self.models:
            rows.extend(self._filtered(model.query, model, scope_id).all())
        return sorted(rows, key=lambda row: row.order)

    def next_order(self, scope_id=None) -> int:
        """Returns max(order) + 1 among the siblings, or 0 when there are none."""
        highest = -1
        for model in self.models:
            query = self._filtered(db.session.query(db.func.max(model.order)), model, scope_id)
            value = query.scalar()
            if value is not None and value > highest:
                highest = value
        return highest + 1

    def apply_order(self, scope_id, ordered_ids: Sequence[str]) -> ReorderResult:
        """
        Assigns positions to the given ids in one flush.

        Ids that do not belong to the scope are skipped; the remaining ids
        receive 0..N-1 in the order given. Siblings not listed keep their
        current order.
        """
        by_id = {row.id: row for row in self.siblings(scope_id)}
        result = ReorderResult()

        for item_id in ordered_ids:
            row = by_id.get(item_id)
            if row is None:
                result.skipped.append(item_id)
                continue
            row.order = len(result.updated)
            result.updated.append(item_id)

        db.session.flush()
        return result

    def reorder(
        self,
        scope_id,
        ordered_ids: Any,
        *,
        max_attempts: Optional[int] = None,
        base_delay: Optional[float] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> ReorderResult:
        """
        Applies a drag-and-drop reorder atomically, retrying write conflicts.

        The whole transaction is retried up to ``max_attempts`` times in
        total with exponential backoff starting at ``base_delay`` seconds.
        """
        ordered_ids = validate_ordered_ids(ordered_ids)

        config = current_app.config
        if max_attempts is None:
            max_attempts = config.get("REORDER_MAX_ATTEMPTS", 3)
        if base_delay is None:
            base_delay = config.get("REORDER_BASE_DELAY", 0.1)

        delay = base_delay
        for attempt in range(1, max_attempts + 1):
            try:
                with transactional():
                    return self.apply_order(scope_id, ordered_ids)
            except DBAPIError as exc:
                if not is_write_conflict(exc):
                    raise

                if attempt == max_attempts:
                    current_app.logger.error(
                        f"Reorder of {self.name} in scope {scope_id} failed after {attempt} attempts"
                    )
                    raise ConflictRetriesExhausted(
                        f"Could not reorder {self.name} because of concurrent updates. Please retry.",
                        error=str(exc.orig),
                    ) from exc

                current_app.logger.warning(
                    f"Write conflict reordering {self.name} in scope {scope_id} "
                    f"(attempt {attempt}/{max_attempts}); retrying in {delay:.2f}s"
                )
                sleep(delay)
                delay *= 2

        # max_attempts < 1
        raise ConflictRetriesExhausted(f"Could not reorder {self.name}")
