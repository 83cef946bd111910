#!/usr/bin/env python3

"""AST indexing services."""

from .import_collector import ImportCollector
from .node_index import NodeIndex

__all__ = [
    "ImportCollector",
    "NodeIndex",
]
