"""Shared interfaces for page hierarchy records."""

from .record import HierarchyRecord

__all__ = ["HierarchyRecord"]
