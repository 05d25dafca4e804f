"""Indentation indexes for an already flattened page list.

The list must already be in the order produced by
:func:`src.page_tree.flatten.flatten`; on any other order the indexes are
meaningless, and there is no cheap way to check for that here.

Rules, applied left to right:

* the first record and every visible root get ``0``;
* a record with the same ``parent_id`` as the record before it (a sibling)
  gets the *position* of that previous record;
* any other record is a child of the previous one and gets the previous
  record's index plus one.

The sibling rule mixes position and depth on purpose; clients rendering the
list rely on these exact values.
"""

from __future__ import annotations

from typing import List, Sequence, TypeVar

from src.interfaces.record import HierarchyRecord

R = TypeVar("R", bound=HierarchyRecord)


def compute_hierarchy_indexes(records: Sequence[HierarchyRecord]) -> List[int]:
    """Return the hierarchy index for each position without touching the records."""

    indexes: List[int] = []
    for position, record in enumerate(records):
        if position == 0 or record.visible_root:
            indexes.append(0)
            continue
        previous = records[position - 1]
        if record.parent_id == previous.parent_id:
            indexes.append(position - 1)
        else:
            indexes.append(indexes[position - 1] + 1)
    return indexes


def annotate_indexes(records: List[R]) -> List[R]:
    """Write :func:`compute_hierarchy_indexes` onto ``hierarchy_index`` in place."""

    for record, index in zip(records, compute_hierarchy_indexes(records)):
        record.hierarchy_index = index
    return records


__all__ = ["annotate_indexes", "compute_hierarchy_indexes"]
