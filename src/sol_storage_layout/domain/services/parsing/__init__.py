#!/usr/bin/env python3

"""Type resolution services for Solidity ASTs."""

from .type_resolver import TypeResolver

__all__ = [
    "TypeResolver",
]
