from __future__ import annotations

import logging
from typing import List, Sequence, TypeVar

from src.interfaces.record import HierarchyRecord

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=HierarchyRecord)


def first_index(records: Sequence[HierarchyRecord]) -> int:
    return 0


def last_index(records: Sequence[HierarchyRecord]) -> int:
    return 0 if not records else len(records) - 1


def remove_subtree(records: Sequence[R], start: int) -> List[R]:
    """Drop the record at ``start`` together with the block that follows it.

    The block ends right before the next visible root, which is kept along
    with everything after it. Empty input or an out of range ``start`` gives
    back an unchanged copy. The input sequence is never modified.
    """

    if not records or start < first_index(records) or start > last_index(records):
        logger.debug("Subtree removal at %d ignored for %d page(s)", start, len(records))
        return list(records)

    if start == first_index(records):
        left: List[R] = []
        right = list(records[1:])
    elif start == last_index(records):
        return list(records[:-1])
    else:
        left = list(records[:start])
        right = list(records[start + 1 :])

    kept_from = len(right)
    for offset, record in enumerate(right):
        if record.visible_root:
            kept_from = offset
            break

    return left + right[kept_from:]


__all__ = ["first_index", "last_index", "remove_subtree"]
