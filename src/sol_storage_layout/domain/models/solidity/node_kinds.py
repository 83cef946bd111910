#!/usr/bin/env python3

"""Solidity AST node kinds understood by the layout engine.

Values are the compiler's ``nodeType`` tags. Anything outside this set is
either ignored (when it appears as a container child) or rejected (when it
appears where a type name is expected).
"""

from enum import Enum

# Key under which the compiler lists child nodes of source units and contracts
CONTAINER_KEY = "nodes"


class NodeKind(str, Enum):
    """Closed set of AST node kinds the layout engine dispatches on."""

    IMPORT_DIRECTIVE = "ImportDirective"
    CONTRACT_DEFINITION = "ContractDefinition"
    VARIABLE_DECLARATION = "VariableDeclaration"
    STRUCT_DEFINITION = "StructDefinition"
    ENUM_DEFINITION = "EnumDefinition"

    ELEMENTARY_TYPE_NAME = "ElementaryTypeName"
    ARRAY_TYPE_NAME = "ArrayTypeName"
    MAPPING = "Mapping"
    USER_DEFINED_TYPE_NAME = "UserDefinedTypeName"

    @classmethod
    def of(cls, node: dict) -> "NodeKind | None":
        """Return the kind of an AST node, or None for kinds outside the set."""
        try:
            return cls(node.get("nodeType"))
        except ValueError:
            return None
