"""Flattening, indentation and subtree removal for hierarchical page lists."""

from .flatten import flatten, flatten_indexed
from .indexes import annotate_indexes, compute_hierarchy_indexes
from .page_list import PageList
from .predicate import belongs_under
from .removal import first_index, last_index, remove_subtree
from .visibility import mark_visible_roots

__all__ = [
    "PageList",
    "annotate_indexes",
    "belongs_under",
    "compute_hierarchy_indexes",
    "first_index",
    "flatten",
    "flatten_indexed",
    "last_index",
    "mark_visible_roots",
    "remove_subtree",
]
