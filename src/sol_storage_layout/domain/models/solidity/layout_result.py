#!/usr/bin/env python3

"""Storage layout descriptor produced by a single run."""

import json
from dataclasses import dataclass, field
from typing import Any

from .storage_info import StorageEntry
from .type_info import TypeInfo


@dataclass
class StorageLayoutResult:
    """Type table and ordered storage entries of a contract.

    Attributes:
        types: Canonical type id -> TypeInfo for every type touched
        storage: State variables, base-most contract first, in declaration order
    """

    types: dict[str, TypeInfo] = field(default_factory=dict)
    storage: list[StorageEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "types": {type_id: info.to_dict() for type_id, info in self.types.items()},
            "storage": [entry.to_dict() for entry in self.storage],
        }

    def to_json(self, indent: int | None = 2) -> str:
        """Render as JSON. Output is stable for a given contract and artifact set."""
        return json.dumps(self.to_dict(), indent=indent)
