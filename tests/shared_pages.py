from src.models.page import PageRecord


def page(id, parent=None, root=None, title=""):
    if root is None:
        root = parent is None
    return PageRecord(id=id, parent_id=parent, visible_root=root, title=title or f"Page {id}")


def scenario_pages():
    return [page(1), page(2, 1), page(3, 1), page(4)]


def ids(records):
    return [record.id for record in records]
