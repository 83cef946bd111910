#!/usr/bin/env python3

"""Storage layout orchestrator (Application Layer).

Runs the layout pipeline for one contract:
- ImportCollector: follows imports and indexes every imported AST
- NodeIndex: makes every node id resolvable
- BaseLinearizer: orders the contract's ancestors base-most first
- VariableVisitor: emits a storage entry per non-constant state variable
- TypeResolver: resolves each declared type into the shared type table
"""

from ..domain.models.solidity import ContractArtifact, StorageLayoutResult
from ..domain.repositories.artifacts import ArtifactSource, get_build_artifacts
from ..domain.services.indexing import ImportCollector
from ..domain.services.layout import BaseLinearizer, VariableVisitor
from ..domain.services.parsing import TypeResolver
from ..infrastructure.logging import get_logger, log_timing
from .layout_context import LayoutContext

logger = get_logger(__name__)


class StorageLayout:
    """Computes the storage layout of a contract from its artifact and imports.

    Each call to ``run`` starts from a fresh LayoutContext, so an instance can
    be run repeatedly with identical results.
    """

    def __init__(self, contract: ContractArtifact, artifacts: ArtifactSource):
        """Initialize layout computation.

        Args:
            contract: Artifact of the contract to analyze
            artifacts: Source of the artifacts of imported files
        """
        self.contract = contract
        self.artifacts = artifacts

    @log_timing
    def run(self) -> StorageLayoutResult:
        """Compute the type table and ordered storage entries.

        Returns:
            StorageLayoutResult for the contract

        Raises:
            StorageLayoutError: If any reference, node kind or contract cannot be
                resolved; no partial layout is returned
        """
        context = LayoutContext()
        ast = self.contract.ast

        ImportCollector(context.nodes, self.artifacts, context.imports).collect(ast)
        context.nodes.index(ast)

        type_resolver = TypeResolver(context.nodes, context.types)
        visitor = VariableVisitor(type_resolver, context.storage)
        linearizer = BaseLinearizer(context.nodes, ast)

        for contract_node in linearizer.linearized_bases(self.contract.contract_name):
            visitor.visit(contract_node)

        logger.info(
            f"Storage layout of {self.contract.contract_name}: "
            f"{len(context.storage)} variables, {len(context.types)} types "
            f"({len(context.imports)} imports, {len(context.nodes)} nodes indexed)"
        )
        return context.to_result()


def get_storage_layout(
    contract: ContractArtifact, artifacts: ArtifactSource | None = None
) -> StorageLayoutResult:
    """Compute the storage layout of a contract.

    Args:
        contract: Artifact of the contract to analyze
        artifacts: Source of imported artifacts; the configured build
            directory is used when omitted

    Returns:
        StorageLayoutResult with ``types`` and ``storage``
    """
    if artifacts is None:
        artifacts = get_build_artifacts()
    return StorageLayout(contract, artifacts).run()
