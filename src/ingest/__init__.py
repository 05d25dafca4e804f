"""Loading page exports into page records."""

from .loader import PageEntry, load_pages, records_from_entries

__all__ = ["PageEntry", "load_pages", "records_from_entries"]
