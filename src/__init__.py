"""Page hierarchy package."""

from .models.page import PageRecord
from .page_tree import PageList

__all__ = ["PageRecord", "PageList"]
