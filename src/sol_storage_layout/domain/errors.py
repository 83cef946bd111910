#!/usr/bin/env python3

"""Errors raised while computing a storage layout.

Every error here is fatal for the contract being analyzed: a layout is either
computed completely or not at all.
"""


class StorageLayoutError(ValueError):
    """Base class for storage layout failures."""


class UnresolvableReference(StorageLayoutError):
    """A referenced AST node id is not present in the node index."""

    def __init__(self, referenced_id: int | None, type_string: str | None):
        self.referenced_id = referenced_id
        self.type_string = type_string
        super().__init__(
            f"Could not find referenced AST node {referenced_id} for type {type_string}"
        )


class UnknownNodeKind(StorageLayoutError):
    """A type node has a kind the resolver does not handle."""

    def __init__(self, node_kind: str | None):
        self.node_kind = node_kind
        super().__init__(f"Cannot get type info for unknown node type {node_kind}")


class ContractNotFound(StorageLayoutError):
    """The named contract has no definition node in its own AST."""

    def __init__(self, contract_name: str, source_path: str | None = None):
        self.contract_name = contract_name
        self.source_path = source_path
        location = f" in {source_path}" if source_path else ""
        super().__init__(f"Could not find contract definition {contract_name}{location}")


class ArtifactNotFound(StorageLayoutError):
    """No build artifact exists for the requested contract name."""

    def __init__(self, contract_name: str):
        self.contract_name = contract_name
        super().__init__(f"No build artifact found for contract {contract_name}")
