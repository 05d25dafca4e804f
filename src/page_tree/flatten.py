from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, Iterator, List, Optional, Sequence, Set, TypeVar

from src.interfaces.record import HierarchyRecord
from src.page_tree.predicate import belongs_under

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=HierarchyRecord)


def flatten(
    records: Sequence[R],
    parent: Optional[R] = None,
    top_level_pass: bool = True,
) -> List[R]:
    """Order ``records`` depth first so each parent is followed by its subtree.

    Siblings keep their relative input order. Records whose ancestor chain
    never reaches a visible root are left out of the result. Each record is
    emitted at most once, so parent cycles through a visible root terminate.
    The walk keeps its own stack, so chain depth is not bounded by the
    interpreter recursion limit.
    """

    ordered: List[R] = []
    _flatten_into(records, parent, top_level_pass, ordered, set())
    if parent is None and top_level_pass:
        _log_omitted(records, ordered)
    return ordered


def _flatten_into(
    records: Sequence[R],
    parent: Optional[R],
    top_level_pass: bool,
    ordered: List[R],
    seen: Set[int],
) -> None:
    stack: List[Iterator[R]] = [_children(records, parent, top_level_pass)]
    while stack:
        record = next(stack[-1], None)
        if record is None:
            stack.pop()
            continue
        if id(record) in seen:
            continue
        seen.add(id(record))
        ordered.append(record)
        stack.append(_children(records, record, False))


def _children(records: Sequence[R], parent: Optional[R], top_level_pass: bool) -> Iterator[R]:
    return (record for record in records if belongs_under(record, parent, top_level_pass))


def flatten_indexed(records: Sequence[R]) -> List[R]:
    """Same ordering as :func:`flatten`, built from a parent to children map.

    Linear in the number of records instead of quadratic.
    """

    children: Dict[int, List[R]] = defaultdict(list)
    for record in records:
        if record.parent_id is not None:
            children[record.parent_id].append(record)

    ordered: List[R] = []
    seen: Set[int] = set()
    stack: List[R] = [record for record in reversed(records) if record.visible_root]
    while stack:
        record = stack.pop()
        if id(record) in seen:
            continue
        seen.add(id(record))
        ordered.append(record)
        if record.id is not None:
            stack.extend(reversed(children.get(record.id, [])))

    _log_omitted(records, ordered)
    return ordered


def _log_omitted(records: Sequence[HierarchyRecord], ordered: Sequence[HierarchyRecord]) -> None:
    omitted = len(records) - len(ordered)
    if omitted > 0:
        logger.debug("Flatten left out %d unreachable page(s) of %d", omitted, len(records))


__all__ = ["flatten", "flatten_indexed"]
