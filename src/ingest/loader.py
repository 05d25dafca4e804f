from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Iterable, List

import yaml
from pydantic import BaseModel, ConfigDict, Field

from src.models.page import PageRecord
from src.page_tree.visibility import mark_visible_roots

logger = logging.getLogger(__name__)


class PageEntry(BaseModel):
    """One page as it appears in an exported page file."""

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = None
    parent_id: int | None = Field(default=None, alias="parent")
    visible_root: bool | None = None
    title: str = ""
    status: str = "publish"

    def to_record(self) -> PageRecord:
        return PageRecord(
            id=self.id,
            parent_id=self.parent_id,
            visible_root=bool(self.visible_root),
            title=self.title,
            status=self.status,
        )


def _load_structured_file(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"Pages file not found: {path}")

    ext = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    if ext in {".yaml", ".yml"}:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in pages file {path}: {exc}") from exc
    if ext == ".toml":
        return tomllib.loads(text)
    if ext == ".json":
        return json.loads(text)
    raise ValueError(f"Unsupported pages format '{ext}' for {path}")


def _page_items(data: Any, path: Path) -> List[Dict[str, Any]]:
    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("pages", [])
    if not isinstance(data, list):
        raise ValueError(f"Pages file {path} must contain a list of pages or a 'pages' list")
    return data


def records_from_entries(entries: Iterable[PageEntry]) -> List[PageRecord]:
    """Convert validated entries, deriving the visible root flag where an entry omits it."""

    entries = list(entries)
    records = [entry.to_record() for entry in entries]
    if any(entry.visible_root is None for entry in entries):
        mark_visible_roots(records)
        for entry, record in zip(entries, records):
            if entry.visible_root is not None:
                record.visible_root = entry.visible_root
    return records


def load_pages(path: Path) -> List[PageRecord]:
    """Read page records from a JSON, YAML or TOML export, in file order."""

    items = _page_items(_load_structured_file(path), path)
    entries = [PageEntry.model_validate(item) for item in items]
    records = records_from_entries(entries)
    logger.debug("Loaded %d page(s) from %s", len(records), path)
    return records


__all__ = ["PageEntry", "load_pages", "records_from_entries"]
