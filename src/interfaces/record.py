from __future__ import annotations

from typing import Optional, Protocol


class HierarchyRecord(Protocol):
    """Minimal shape the page tree operations need from a record.

    ``hierarchy_index`` is written by the index annotator; everything else is
    read only.
    """

    id: Optional[int]
    parent_id: Optional[int]
    visible_root: bool
    hierarchy_index: int


__all__ = ["HierarchyRecord"]
