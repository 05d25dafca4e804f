from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from src.ingest.loader import PageEntry
from src.models.page import PageRecord


class PageModel(BaseModel):
    id: int | None = None
    parent_id: int | None = None
    visible_root: bool = False
    hierarchy_index: int = 0
    title: str = ""
    status: str = "publish"

    @classmethod
    def from_record(cls, record: PageRecord) -> "PageModel":
        return cls(
            id=record.id,
            parent_id=record.parent_id,
            visible_root=record.visible_root,
            hierarchy_index=record.hierarchy_index,
            title=record.title,
            status=record.status,
        )


class HierarchyRequest(BaseModel):
    pages: List[PageEntry] = Field(default_factory=list)


class RemoveSubtreeRequest(BaseModel):
    pages: List[PageEntry] = Field(default_factory=list)
    index: int


class PageListResponse(BaseModel):
    items: List[PageModel]
    first_index: int = 0
    last_index: int = 0


__all__ = ["HierarchyRequest", "PageListResponse", "PageModel", "RemoveSubtreeRequest"]
