from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True, eq=False)
class PageRecord:
    """A page row as loaded from the site; only the hierarchy fields matter here."""

    id: Optional[int]
    parent_id: Optional[int] = None
    visible_root: bool = False
    hierarchy_index: int = 0
    title: str = ""
    status: str = "publish"

    @property
    def is_persisted(self) -> bool:
        return self.id is not None


__all__ = ["PageRecord"]
