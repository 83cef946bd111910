#!/usr/bin/env python3

"""Canonical type resolution for Solidity type names.

This module maps type-name AST nodes to canonical ``TypeInfo`` records:
- Elementary types keyed by the compiler's type identifier (all strings share ``t_string``)
- Arrays keyed by length and element type
- Mappings keyed by their innermost value type only
- Contract references treated as ``address``
- Structs keyed by declaring contract and name, memoized in the type table
- Enums keyed by canonical name

Every resolved type is registered into a shared type table.
"""

import re
from collections.abc import Callable
from typing import Any

from ....infrastructure.logging import get_logger
from ...errors import UnknownNodeKind, UnresolvableReference
from ...models.solidity import DYNAMIC_LENGTH, NodeKind, StorageInfo, TypeInfo, TypeKind
from ..indexing import NodeIndex

logger = get_logger(__name__)

STRING_TYPE_ID = "t_string"
ADDRESS_TYPE_ID = "t_address"

# Trailing fixed length in a rendered array type, e.g. "uint256[10] storage ref"
_ARRAY_LENGTH_PATTERN = re.compile(r"\[(\d+)\][^\[\]]*$")


class TypeResolver:
    """Resolves type-name nodes to canonical TypeInfo records.

    Attributes:
        node_index: Index used to follow user-defined type references
        types: Type table; canonical id -> TypeInfo, first registration wins
    """

    def __init__(self, node_index: NodeIndex, types: dict[str, TypeInfo]):
        self.node_index = node_index
        self.types = types
        self._type_name_handlers: dict[NodeKind, Callable[[dict[str, Any]], TypeInfo]] = {
            NodeKind.ELEMENTARY_TYPE_NAME: self._resolve_elementary,
            NodeKind.ARRAY_TYPE_NAME: self._resolve_array,
            NodeKind.MAPPING: self._resolve_mapping,
            NodeKind.USER_DEFINED_TYPE_NAME: self._resolve_user_defined,
        }

    def resolve(self, type_node: dict[str, Any]) -> TypeInfo:
        """Resolve a type-name node and register the result in the type table.

        Args:
            type_node: Type-name AST node (elementary, array, mapping or user-defined)

        Returns:
            The registered TypeInfo for the node's canonical type

        Raises:
            UnknownNodeKind: If the node is not a supported type name
            UnresolvableReference: If a referenced declaration is not indexed
        """
        kind = NodeKind.of(type_node)
        handler = self._type_name_handlers.get(kind)
        if handler is None:
            # Function type names have no storage layout support
            raise UnknownNodeKind(type_node.get("nodeType"))
        return self.register_type(handler(type_node))

    def register_type(self, type_info: TypeInfo) -> TypeInfo:
        """Add a type to the type table unless its id is already present.

        Returns:
            The table entry for the type's id
        """
        # First registration wins: a struct entry registered before its members
        # must stay the same object. Labels of ids shared by several declarations
        # (t_string variants, enums with equal canonical names) come from the
        # first one resolved.
        return self.types.setdefault(type_info.id, type_info)

    def _resolve_elementary(self, node: dict[str, Any]) -> TypeInfo:
        descriptions = node["typeDescriptions"]
        type_id = descriptions["typeIdentifier"]
        if type_id.startswith(STRING_TYPE_ID):
            type_id = STRING_TYPE_ID

        return TypeInfo(id=type_id, kind=TypeKind.ELEMENTARY, label=descriptions["typeString"])

    def _resolve_array(self, node: dict[str, Any]) -> TypeInfo:
        base_type = self.resolve(node["baseType"])
        length = self._array_length(node)

        return TypeInfo(
            id=f"t_array:{length}<{base_type.id}>",
            kind=TypeKind.ARRAY,
            label=f"{base_type.label}[{'' if length == DYNAMIC_LENGTH else length}]",
            value_type=base_type.id,
            length=length,
        )

    def _array_length(self, node: dict[str, Any]) -> str:
        """Get the declared length of an array type name, or DYNAMIC_LENGTH."""
        length_node = node.get("length")
        if not length_node:
            return DYNAMIC_LENGTH

        if length_node.get("value") is not None:
            return str(length_node["value"])

        # Length given by a constant expression; the compiler renders it evaluated
        type_string = (node.get("typeDescriptions") or {}).get("typeString", "")
        match = _ARRAY_LENGTH_PATTERN.search(type_string)
        if match is None:
            raise UnresolvableReference(length_node.get("referencedDeclaration"), type_string)
        return match.group(1)

    def _resolve_mapping(self, node: dict[str, Any]) -> TypeInfo:
        # Keys are hashed into the slot, so only the innermost value type matters
        value_type = self._resolve_mapping_value(node["valueType"])

        return TypeInfo(
            id=f"t_mapping<{value_type.id}>",
            kind=TypeKind.MAPPING,
            label=f"mapping(key => {value_type.label})",
            value_type=value_type.id,
        )

    def _resolve_mapping_value(self, node: dict[str, Any]) -> TypeInfo:
        while NodeKind.of(node) is NodeKind.MAPPING:
            node = node["valueType"]
        return self.resolve(node)

    def _resolve_user_defined(self, node: dict[str, Any]) -> TypeInfo:
        descriptions = node.get("typeDescriptions") or {}
        referenced_id = node.get("referencedDeclaration")
        referenced_node = self.node_index.get(referenced_id)
        if referenced_node is None:
            raise UnresolvableReference(referenced_id, descriptions.get("typeString"))

        referenced_kind = NodeKind.of(referenced_node)
        if referenced_kind is NodeKind.CONTRACT_DEFINITION:
            return self._resolve_contract_reference()
        if referenced_kind is NodeKind.STRUCT_DEFINITION:
            return self._resolve_struct(referenced_node)
        if referenced_kind is NodeKind.ENUM_DEFINITION:
            return self._resolve_enum(referenced_node)

        logger.debug(
            f"Resolving {referenced_node.get('nodeType')} reference "
            f"{descriptions.get('typeString')} by its type identifier"
        )
        return TypeInfo(
            id=descriptions["typeIdentifier"],
            kind=TypeKind.ELEMENTARY,
            label=descriptions["typeString"],
        )

    def _resolve_contract_reference(self) -> TypeInfo:
        # A contract reference is stored as an address
        return TypeInfo(id=ADDRESS_TYPE_ID, kind=TypeKind.ELEMENTARY, label="address")

    def _resolve_struct(self, struct_node: dict[str, Any]) -> TypeInfo:
        """Resolve a struct definition, reusing the type table entry when present.

        The struct is registered before its members are resolved, so a struct
        that refers back to itself (through a mapping or dynamic array)
        resolves to the entry being built.
        """
        type_id = self._struct_type_id(struct_node)
        if type_id in self.types:
            logger.debug(f"Struct type cache hit: {type_id}")
            return self.types[type_id]

        members: list[StorageInfo] = []
        type_info = self.register_type(
            TypeInfo(
                id=type_id,
                kind=TypeKind.STRUCT,
                label=struct_node.get("canonicalName") or struct_node["name"],
                members=members,
            )
        )

        for member in struct_node.get("members") or []:
            if NodeKind.of(member) is not NodeKind.VARIABLE_DECLARATION:
                continue
            member_type = self.resolve(member["typeName"])
            members.append(
                StorageInfo(label=member["name"], ast_id=member["id"], type=member_type.id)
            )

        logger.debug(f"Resolved struct {type_id} with {len(members)} members")
        return type_info

    def _struct_type_id(self, struct_node: dict[str, Any]) -> str:
        """Identify a struct by its declaring contract and name."""
        scope_id = struct_node.get("scope")
        scope_node = self.node_index.get(scope_id)
        if scope_node is None:
            raise UnresolvableReference(scope_id, struct_node.get("canonicalName"))

        scope_name = scope_node.get("name")
        if not scope_name:
            # Declared at file level
            return f"t_struct<{struct_node['name']}>"
        return f"t_struct<{scope_name}.{struct_node['name']}>"

    def _resolve_enum(self, enum_node: dict[str, Any]) -> TypeInfo:
        # Enums are keyed by canonical name only; the declaring scope is not used
        canonical_name = enum_node.get("canonicalName") or enum_node["name"]
        return TypeInfo(
            id=f"t_enum<{canonical_name}>",
            kind=TypeKind.ENUM,
            label=canonical_name,
            members=[member["name"] for member in enum_node.get("members") or []],
        )
