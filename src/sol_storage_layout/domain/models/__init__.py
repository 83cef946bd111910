#!/usr/bin/env python3

"""Domain models for the storage layout analyzer."""

from . import solidity

__all__ = [
    "solidity",
]
