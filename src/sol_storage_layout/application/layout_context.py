#!/usr/bin/env python3

"""State accumulated by one storage layout run."""

from dataclasses import dataclass, field

from ..domain.models.solidity import StorageEntry, StorageLayoutResult, TypeInfo
from ..domain.services.indexing import NodeIndex


@dataclass
class LayoutContext:
    """Structures owned by a single run and filled in by its stages.

    Attributes:
        imports: Source paths transitively imported by the contract
        nodes: Index of every AST node in the contract's and imported sources
        types: Type table of every canonical type touched
        storage: Storage entries in slot order
    """

    imports: set[str] = field(default_factory=set)
    nodes: NodeIndex = field(default_factory=NodeIndex)
    types: dict[str, TypeInfo] = field(default_factory=dict)
    storage: list[StorageEntry] = field(default_factory=list)

    def to_result(self) -> StorageLayoutResult:
        return StorageLayoutResult(types=self.types, storage=self.storage)
