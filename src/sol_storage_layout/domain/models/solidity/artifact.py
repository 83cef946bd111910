#!/usr/bin/env python3

"""Compiled contract artifact model."""

from dataclasses import dataclass
from typing import Any


@dataclass
class ContractArtifact:
    """A compiled contract: its name, source path and the AST of its source unit."""

    contract_name: str
    ast: dict[str, Any]
    source_path: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContractArtifact":
        """Build from a compiler build artifact (``contractName``, ``ast``, ``sourcePath``).

        Raises:
            KeyError: If the artifact has no contract name or AST
            TypeError: If the AST is not a JSON object
        """
        ast = data["ast"]
        if not isinstance(ast, dict):
            raise TypeError(f"Artifact AST must be an object, got {type(ast).__name__}")
        source_path = data.get("sourcePath") or ast.get("absolutePath")
        return cls(contract_name=data["contractName"], ast=ast, source_path=source_path)
