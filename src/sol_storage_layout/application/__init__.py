#!/usr/bin/env python3

"""Application layer orchestrating a storage layout run."""

from .layout_context import LayoutContext
from .storage_layout import StorageLayout, get_storage_layout

__all__ = [
    "LayoutContext",
    "StorageLayout",
    "get_storage_layout",
]
