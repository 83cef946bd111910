#!/usr/bin/env python3

"""Transitive import closure collection."""

from typing import Any

from ....infrastructure.logging import get_logger
from ...models.solidity import CONTAINER_KEY, NodeKind
from ...repositories.artifacts import ArtifactSource
from .node_index import NodeIndex

logger = get_logger(__name__)


class ImportCollector:
    """Follows import directives and indexes every imported source unit.

    Attributes:
        node_index: Index that receives the ASTs of imported files
        artifacts: Source of compiled artifacts per source path
        imports: Source paths already followed; grows as imports are discovered
    """

    def __init__(self, node_index: NodeIndex, artifacts: ArtifactSource, imports: set[str]):
        self.node_index = node_index
        self.artifacts = artifacts
        self.imports = imports

    def collect(self, ast: dict[str, Any]) -> None:
        """Index all files transitively imported by a source unit.

        A path already in ``imports`` is not followed again, which makes
        cyclic imports safe.

        Args:
            ast: Source unit AST whose top-level import directives are followed
        """
        for node in ast.get(CONTAINER_KEY) or []:
            if NodeKind.of(node) is not NodeKind.IMPORT_DIRECTIVE:
                continue

            import_path = node["absolutePath"]
            if import_path in self.imports:
                logger.debug(f"Import already collected: {import_path}")
                continue
            self.imports.add(import_path)

            imported_artifacts = self.artifacts.get_artifacts_from_source_path(import_path)
            if not imported_artifacts:
                logger.warning(f"No artifacts found for imported source {import_path}")
                continue

            logger.debug(f"Collecting {len(imported_artifacts)} artifact(s) from {import_path}")
            for artifact in imported_artifacts:
                self.node_index.index(artifact.ast)
                self.collect(artifact.ast)
