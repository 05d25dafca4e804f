from __future__ import annotations

from typing import Callable, Generic, Iterator, List, Optional, Sequence, TypeVar

from src.interfaces.record import HierarchyRecord
from src.page_tree.flatten import flatten
from src.page_tree.indexes import annotate_indexes
from src.page_tree.removal import first_index, last_index, remove_subtree

R = TypeVar("R", bound=HierarchyRecord)
T = TypeVar("T")


class PageList(Generic[R]):
    """Ordered list of pages as shown in the page list screen."""

    def __init__(self, pages: Optional[Sequence[R]] = None) -> None:
        self._pages: List[R] = list(pages or [])

    @property
    def pages(self) -> List[R]:
        return self._pages

    @property
    def first_index(self) -> int:
        return first_index(self._pages)

    @property
    def last_index(self) -> int:
        return last_index(self._pages)

    def contains_page(self, page_id: Optional[int]) -> bool:
        """Return whether a page with ``page_id`` is in the list."""

        if page_id is None:
            return False
        return any(page.id == page_id for page in self._pages)

    def map(self, transform: Callable[[R, List[R]], T]) -> List[T]:
        """Apply ``transform(page, pages)`` to every page in order."""

        return [transform(page, self._pages) for page in self._pages]

    def sort(self, parent: Optional[R] = None, considering_top_level: bool = True) -> "PageList[R]":
        """Return the pages in hierarchical (depth first) order."""

        return PageList(flatten(self._pages, parent=parent, top_level_pass=considering_top_level))

    def hierarchy_indexes(self) -> "PageList[R]":
        """Annotate ``hierarchy_index`` on every page; the list must already be sorted."""

        annotate_indexes(self._pages)
        return self

    def remove(self, from_index: int) -> "PageList[R]":
        """Return a new list without the page at ``from_index`` and its subtree."""

        return PageList(remove_subtree(self._pages, from_index))

    def ids(self) -> List[Optional[int]]:
        return [page.id for page in self._pages]

    def __len__(self) -> int:
        return len(self._pages)

    def __iter__(self) -> Iterator[R]:
        return iter(self._pages)

    def __getitem__(self, index: int) -> R:
        return self._pages[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PageList):
            return self._pages == other._pages
        if isinstance(other, list):
            return self._pages == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"PageList({self.ids()!r})"


__all__ = ["PageList"]
