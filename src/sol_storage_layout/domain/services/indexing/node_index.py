#!/usr/bin/env python3

"""Index of AST nodes by id across every visited source unit."""

from typing import Any

from ....infrastructure.logging import get_logger
from ...models.solidity import CONTAINER_KEY

logger = get_logger(__name__)


class NodeIndex:
    """Maps AST node ids to nodes.

    Nodes are added by walking whole trees. The first node seen for an id is
    kept; a subtree whose root is already indexed is not walked again, so
    indexing the same source unit twice (or through an import cycle) is a no-op.
    """

    def __init__(self) -> None:
        self._nodes: dict[int, dict[str, Any]] = {}

    def index(self, node: dict[str, Any]) -> None:
        """Record a node and, recursively, its children.

        Args:
            node: AST node; children are read from its ``nodes`` list
        """
        node_id = node["id"]
        if node_id in self._nodes:
            return

        self._nodes[node_id] = node
        for child in node.get(CONTAINER_KEY) or []:
            self.index(child)

    def get(self, node_id: int | None) -> dict[str, Any] | None:
        """Get a node by id, or None if it has not been indexed."""
        if node_id is None:
            return None
        return self._nodes.get(node_id)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)
