#!/usr/bin/env python3

"""Storage slot entry models."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class StorageInfo:
    """A declared variable or struct field with its resolved type id."""

    label: str
    ast_id: int
    type: str

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "astId": self.ast_id, "type": self.type}


@dataclass
class StorageEntry(StorageInfo):
    """A state variable together with the contract that declares it."""

    contract: str = field(kw_only=True)

    def to_dict(self) -> dict[str, Any]:
        return {"contract": self.contract, **super().to_dict()}
