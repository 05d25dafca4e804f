from __future__ import annotations

from typing import Optional

from src.interfaces.record import HierarchyRecord


def belongs_under(
    candidate: HierarchyRecord,
    parent: Optional[HierarchyRecord],
    top_level_pass: bool,
) -> bool:
    """Return True when ``candidate`` sits directly under ``parent``.

    On the top level pass only visible roots qualify, whatever their parent
    pointer says. Otherwise the candidate's ``parent_id`` must equal the
    parent's ``id``. Without a parent, only true roots that are not already
    visible roots match; a parent that has no ``id`` yet never has children.
    """

    if top_level_pass:
        return candidate.visible_root
    if parent is None:
        return candidate.parent_id is None and not candidate.visible_root
    if parent.id is None:
        return False
    return candidate.parent_id == parent.id


__all__ = ["belongs_under"]
