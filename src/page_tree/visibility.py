from __future__ import annotations

from typing import Iterable, List, Optional, TypeVar

from src.interfaces.record import HierarchyRecord

R = TypeVar("R", bound=HierarchyRecord)


def mark_visible_roots(records: List[R], visible_ids: Optional[Iterable[int]] = None) -> List[R]:
    """Flag the records that should be listed at the top level.

    A record is a visible root when it has no parent, or when its parent is
    not part of the visible set. The visible set defaults to the ids of
    ``records`` themselves.
    """

    if visible_ids is None:
        visible = {record.id for record in records if record.id is not None}
    else:
        visible = set(visible_ids)

    for record in records:
        record.visible_root = record.parent_id is None or record.parent_id not in visible
    return records


__all__ = ["mark_visible_roots"]
