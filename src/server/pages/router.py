from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError

from src.ingest.loader import load_pages, records_from_entries
from src.models.page import PageRecord
from src.page_tree import PageList
from src.server.models import HierarchyRequest, PageListResponse, PageModel, RemoveSubtreeRequest
from src.server.settings import Settings, get_settings

router = APIRouter(prefix="/api/pages", tags=["pages"])


def _to_response(pages: PageList[PageRecord]) -> PageListResponse:
    return PageListResponse(
        items=[PageModel.from_record(page) for page in pages],
        first_index=pages.first_index,
        last_index=pages.last_index,
    )


def _hierarchy(records: List[PageRecord]) -> PageList[PageRecord]:
    return PageList(records).sort().hierarchy_indexes()


@router.get("", response_model=PageListResponse)
def list_pages(settings: Settings = Depends(get_settings)) -> PageListResponse:
    try:
        records = load_pages(settings.pages_path)
    except FileNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except (ValueError, ValidationError) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return _to_response(_hierarchy(records))


@router.post("/hierarchy", response_model=PageListResponse)
def build_hierarchy(payload: HierarchyRequest) -> PageListResponse:
    return _to_response(_hierarchy(records_from_entries(payload.pages)))


@router.post("/hierarchy/remove", response_model=PageListResponse)
def remove_pages(payload: RemoveSubtreeRequest) -> PageListResponse:
    pages = PageList(records_from_entries(payload.pages))
    remaining = pages.remove(payload.index).hierarchy_indexes()
    return _to_response(remaining)


__all__ = ["router"]
