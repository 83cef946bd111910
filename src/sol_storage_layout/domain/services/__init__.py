#!/usr/bin/env python3

"""Domain services layer."""

from . import indexing, layout, parsing

__all__ = [
    "indexing",
    "layout",
    "parsing",
]
