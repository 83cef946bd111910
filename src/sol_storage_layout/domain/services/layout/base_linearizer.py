#!/usr/bin/env python3

"""Inheritance linearization in storage slot order."""

from typing import Any

from ....infrastructure.logging import get_logger
from ...errors import ContractNotFound, UnresolvableReference
from ...models.solidity import CONTAINER_KEY, NodeKind
from ..indexing import NodeIndex

logger = get_logger(__name__)


class BaseLinearizer:
    """Orders a contract and its ancestors from most-base to most-derived.

    The compiler lists ``linearizedBaseContracts`` most-derived first. Storage
    slots are assigned to base contracts first, so the list is reversed.
    """

    def __init__(self, node_index: NodeIndex, ast: dict[str, Any]):
        """Initialize linearizer.

        Args:
            node_index: Index holding the contract's AST and all imported ASTs
            ast: Source unit AST in which the contract is defined
        """
        self.node_index = node_index
        self.ast = ast

    def find_contract_node(self, contract_name: str) -> dict[str, Any]:
        """Find a contract definition among the top-level nodes of the source unit.

        Raises:
            ContractNotFound: If no contract of that name is defined there
        """
        for node in self.ast.get(CONTAINER_KEY) or []:
            if (
                NodeKind.of(node) is NodeKind.CONTRACT_DEFINITION
                and node.get("name") == contract_name
            ):
                return node
        raise ContractNotFound(contract_name, self.ast.get("absolutePath"))

    def linearized_bases(self, contract_name: str) -> list[dict[str, Any]]:
        """Get the contract definitions of a contract's linearization, base-most first.

        Args:
            contract_name: Name of the most-derived contract

        Returns:
            Contract definition nodes, ending with the contract itself

        Raises:
            ContractNotFound: If the contract is not defined in the source unit
            UnresolvableReference: If a base contract was never indexed
        """
        contract_node = self.find_contract_node(contract_name)

        bases = []
        for base_id in contract_node.get("linearizedBaseContracts") or []:
            base_node = self.node_index.get(base_id)
            if base_node is None:
                raise UnresolvableReference(base_id, f"contract base of {contract_name}")
            bases.append(base_node)
        bases.reverse()

        logger.debug(
            f"Linearization of {contract_name}: "
            f"{' -> '.join(str(base.get('name')) for base in bases)}"
        )
        return bases
