"""Pytest configuration and shared fixtures."""

import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from sol_storage_layout.domain.models.solidity import ContractArtifact
from sol_storage_layout.infrastructure.logging import LoggerSetup


class AstBuilder:
    """Builds compiler-shaped AST nodes with unique ids."""

    def __init__(self) -> None:
        self._next_id = 1

    def _new_id(self) -> int:
        node_id = self._next_id
        self._next_id += 1
        return node_id

    def elementary(self, type_string: str, type_identifier: str | None = None) -> dict[str, Any]:
        return {
            "id": self._new_id(),
            "nodeType": "ElementaryTypeName",
            "name": type_string,
            "typeDescriptions": {
                "typeString": type_string,
                "typeIdentifier": type_identifier or f"t_{type_string}",
            },
        }

    def array(self, base: dict[str, Any], length: int | None = None) -> dict[str, Any]:
        type_string = f"{base['typeDescriptions']['typeString']}[{'' if length is None else length}]"
        node: dict[str, Any] = {
            "id": self._new_id(),
            "nodeType": "ArrayTypeName",
            "baseType": base,
            "length": None,
            "typeDescriptions": {"typeString": type_string, "typeIdentifier": "t_array"},
        }
        if length is not None:
            node["length"] = {"id": self._new_id(), "nodeType": "Literal", "value": str(length)}
        return node

    def mapping(self, key: dict[str, Any], value: dict[str, Any]) -> dict[str, Any]:
        key_string = key["typeDescriptions"]["typeString"]
        value_string = value["typeDescriptions"]["typeString"]
        return {
            "id": self._new_id(),
            "nodeType": "Mapping",
            "keyType": key,
            "valueType": value,
            "typeDescriptions": {
                "typeString": f"mapping({key_string} => {value_string})",
                "typeIdentifier": "t_mapping",
            },
        }

    def user_defined(
        self, declaration: dict[str, Any] | int, type_string: str | None = None
    ) -> dict[str, Any]:
        if isinstance(declaration, dict):
            referenced_id = declaration["id"]
            type_string = type_string or declaration.get("canonicalName") or declaration["name"]
        else:
            referenced_id = declaration
        return {
            "id": self._new_id(),
            "nodeType": "UserDefinedTypeName",
            "referencedDeclaration": referenced_id,
            "typeDescriptions": {
                "typeString": type_string,
                "typeIdentifier": f"t_userdefined_{referenced_id}",
            },
        }

    def variable(
        self,
        name: str,
        type_name: dict[str, Any],
        state: bool = True,
        constant: bool = False,
    ) -> dict[str, Any]:
        return {
            "id": self._new_id(),
            "nodeType": "VariableDeclaration",
            "name": name,
            "typeName": type_name,
            "stateVariable": state,
            "constant": constant,
        }

    def struct(self, name: str, members: Iterable[dict[str, Any]] = ()) -> dict[str, Any]:
        return {
            "id": self._new_id(),
            "nodeType": "StructDefinition",
            "name": name,
            "canonicalName": name,
            "members": list(members),
        }

    def enum(self, name: str, members: Iterable[str]) -> dict[str, Any]:
        return {
            "id": self._new_id(),
            "nodeType": "EnumDefinition",
            "name": name,
            "canonicalName": name,
            "members": [
                {"id": self._new_id(), "nodeType": "EnumValue", "name": member}
                for member in members
            ],
        }

    def contract(
        self,
        name: str,
        nodes: Iterable[dict[str, Any]] = (),
        bases: Iterable[dict[str, Any]] = (),
        linearization: list[int] | None = None,
    ) -> dict[str, Any]:
        """Build a contract definition.

        Without an explicit linearization, bases are linearized as a simple
        chain: the contract, then each base's own linearization, last base first.
        """
        contract_id = self._new_id()
        children = list(nodes)
        for child in children:
            child.setdefault("scope", contract_id)
            if child["nodeType"] in ("StructDefinition", "EnumDefinition"):
                child["canonicalName"] = f"{name}.{child['name']}"

        if linearization is None:
            linearization = [contract_id]
            for base in reversed(list(bases)):
                for base_id in base["linearizedBaseContracts"]:
                    if base_id not in linearization:
                        linearization.append(base_id)

        return {
            "id": contract_id,
            "nodeType": "ContractDefinition",
            "name": name,
            "linearizedBaseContracts": linearization,
            "nodes": children,
        }

    def import_directive(self, path: str) -> dict[str, Any]:
        return {"id": self._new_id(), "nodeType": "ImportDirective", "absolutePath": path}

    def source_unit(self, path: str, nodes: Iterable[dict[str, Any]] = ()) -> dict[str, Any]:
        unit_id = self._new_id()
        children = list(nodes)
        for child in children:
            child.setdefault("scope", unit_id)
        return {
            "id": unit_id,
            "nodeType": "SourceUnit",
            "absolutePath": path,
            "nodes": children,
        }


class InMemoryArtifacts:
    """Artifact source backed by a dict of source path -> artifacts."""

    def __init__(self) -> None:
        self.by_source_path: dict[str, list[ContractArtifact]] = {}

    def add(self, source_unit: dict[str, Any], *contract_names: str) -> list[ContractArtifact]:
        path = source_unit["absolutePath"]
        artifacts = [
            ContractArtifact(contract_name=name, ast=source_unit, source_path=path)
            for name in contract_names
        ]
        self.by_source_path.setdefault(path, []).extend(artifacts)
        return artifacts

    def get_artifacts_from_source_path(self, source_path: str) -> list[ContractArtifact]:
        return list(self.by_source_path.get(source_path, []))


def count_nodes(node: dict[str, Any]) -> int:
    """Count a node and its ``nodes`` descendants."""
    return 1 + sum(count_nodes(child) for child in node.get("nodes") or [])


@pytest.fixture
def ast_builder() -> AstBuilder:
    """Fresh AST builder; ids are unique within a test."""
    return AstBuilder()


@pytest.fixture
def in_memory_artifacts() -> InMemoryArtifacts:
    """Empty in-memory artifact source."""
    return InMemoryArtifacts()


@pytest.fixture
def node_counter():
    """Function counting the nodes of an AST reachable through ``nodes`` lists."""
    return count_nodes


@pytest.fixture
def reset_logging():
    """Reset global logging configuration around a test."""
    LoggerSetup.reset()
    yield
    LoggerSetup.reset()
