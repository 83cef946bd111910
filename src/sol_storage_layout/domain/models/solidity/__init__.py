#!/usr/bin/env python3

"""Solidity AST and storage layout domain models."""

from .artifact import ContractArtifact
from .layout_result import StorageLayoutResult
from .node_kinds import CONTAINER_KEY, NodeKind
from .storage_info import StorageEntry, StorageInfo
from .type_info import DYNAMIC_LENGTH, TypeInfo, TypeKind

__all__ = [
    "CONTAINER_KEY",
    "ContractArtifact",
    "DYNAMIC_LENGTH",
    "NodeKind",
    "StorageEntry",
    "StorageInfo",
    "StorageLayoutResult",
    "TypeInfo",
    "TypeKind",
]
