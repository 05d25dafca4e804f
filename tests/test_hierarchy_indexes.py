from src.page_tree import annotate_indexes, compute_hierarchy_indexes, flatten

from tests.shared_pages import page, scenario_pages


def _indexes(records):
    return [record.hierarchy_index for record in records]


def test_scenario_indexes_use_previous_position_for_siblings():
    pages = annotate_indexes(flatten(scenario_pages()))

    assert _indexes(pages) == [0, 1, 1, 0]


def test_child_index_is_previous_index_plus_one():
    pages = flatten([page(1), page(2, parent=1), page(3, parent=2), page(4, parent=3)])

    assert compute_hierarchy_indexes(pages) == [0, 1, 2, 3]


def test_sibling_after_deep_subtree_reuses_previous_position():
    pages = flatten(
        [
            page(1),
            page(2),
            page(3, parent=2),
            page(4, parent=2),
            page(5, parent=2),
        ]
    )

    assert compute_hierarchy_indexes(pages) == [0, 0, 1, 2, 3]


def test_first_position_is_zero_even_when_not_a_visible_root():
    pages = [page(2, parent=1, root=False), page(3, parent=2, root=False)]

    assert compute_hierarchy_indexes(pages) == [0, 1]


def test_compute_does_not_touch_records():
    pages = flatten(scenario_pages())

    compute_hierarchy_indexes(pages)

    assert _indexes(pages) == [0, 0, 0, 0]


def test_annotate_is_idempotent_and_returns_same_list():
    pages = flatten(scenario_pages())

    first = annotate_indexes(pages)
    before = _indexes(first)
    second = annotate_indexes(first)

    assert second is pages
    assert _indexes(second) == before


def test_empty_sequence():
    assert compute_hierarchy_indexes([]) == []
    assert annotate_indexes([]) == []
