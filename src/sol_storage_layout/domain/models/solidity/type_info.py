#!/usr/bin/env python3

"""Canonical type descriptor model."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .storage_info import StorageInfo

# Length token recorded for dynamically-sized arrays
DYNAMIC_LENGTH = "dyn"


class TypeKind(str, Enum):
    """Kinds of canonical storage types."""

    ELEMENTARY = "elementary"
    ARRAY = "array"
    MAPPING = "mapping"
    STRUCT = "struct"
    ENUM = "enum"


@dataclass
class TypeInfo:
    """Canonical descriptor for a declared type.

    ``id`` identifies the type by structure, so the same type referenced from
    different variables or contracts always maps to the same ``id``.
    """

    id: str
    kind: TypeKind
    label: str
    value_type: str | None = None  # array and mapping only
    length: str | None = None  # array only
    members: list[StorageInfo] | list[str] | None = None  # struct and enum only

    def to_dict(self) -> dict[str, Any]:
        """Render in the wire shape consumed by layout comparators."""
        data: dict[str, Any] = {
            "id": self.id,
            "kind": self.kind.value,
            "label": self.label,
        }
        if self.value_type is not None:
            data["valueType"] = self.value_type
        if self.length is not None:
            data["length"] = self.length
        if self.members is not None:
            data["members"] = [
                member.to_dict() if isinstance(member, StorageInfo) else member
                for member in self.members
            ]
        return data
