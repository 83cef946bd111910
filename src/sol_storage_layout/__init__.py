"""Solidity storage layout analyzer - inheritance-aware storage layouts from compiler ASTs."""

from .application import StorageLayout, get_storage_layout
from .domain.errors import (
    ArtifactNotFound,
    ContractNotFound,
    StorageLayoutError,
    UnknownNodeKind,
    UnresolvableReference,
)
from .domain.models.solidity import ContractArtifact, StorageLayoutResult
from .domain.repositories.artifacts import BuildArtifacts, get_build_artifacts
from .infrastructure.config import Config
from .main import main

__all__ = [
    "ArtifactNotFound",
    "BuildArtifacts",
    "Config",
    "ContractArtifact",
    "ContractNotFound",
    "StorageLayout",
    "StorageLayoutError",
    "StorageLayoutResult",
    "UnknownNodeKind",
    "UnresolvableReference",
    "get_build_artifacts",
    "get_storage_layout",
    "main",
]
