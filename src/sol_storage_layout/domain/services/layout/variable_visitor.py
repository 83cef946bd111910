#!/usr/bin/env python3

"""State variable collection for a single contract."""

from typing import Any

from ....infrastructure.logging import get_logger
from ...models.solidity import CONTAINER_KEY, StorageEntry
from ..parsing import TypeResolver

logger = get_logger(__name__)


class VariableVisitor:
    """Appends a storage entry for every non-constant state variable of a contract."""

    def __init__(self, type_resolver: TypeResolver, storage: list[StorageEntry]):
        self.type_resolver = type_resolver
        self.storage = storage

    def visit(self, contract_node: dict[str, Any]) -> None:
        """Resolve the state variables declared directly in a contract.

        Args:
            contract_node: Contract definition node
        """
        contract_name = contract_node["name"]

        for node in contract_node.get(CONTAINER_KEY) or []:
            if not node.get("stateVariable"):
                continue
            if node.get("constant"):
                logger.debug(f"Skipping constant {contract_name}.{node.get('name')}")
                continue

            type_info = self.type_resolver.resolve(node["typeName"])
            self.storage.append(
                StorageEntry(
                    label=node["name"],
                    ast_id=node["id"],
                    type=type_info.id,
                    contract=contract_name,
                )
            )
