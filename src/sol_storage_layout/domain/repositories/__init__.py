#!/usr/bin/env python3

"""Repositories supplying compiled contract data."""

from . import artifacts

__all__ = [
    "artifacts",
]
