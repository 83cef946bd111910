#!/usr/bin/env python3

"""Build artifact repository backed by a directory of compiler JSON output."""

import json
from pathlib import Path
from typing import Any, Protocol

from ....infrastructure.config import Config
from ....infrastructure.logging import get_logger
from ...errors import ArtifactNotFound
from ...models.solidity import ContractArtifact

logger = get_logger(__name__)


class ArtifactSource(Protocol):
    """Anything that can list the artifacts compiled from a source file."""

    def get_artifacts_from_source_path(self, source_path: str) -> list[ContractArtifact]:
        ...


class BuildArtifacts:
    """Compiled contract artifacts loaded from a build directory.

    Every ``*.json`` file in the directory is read once, on first access,
    and indexed by contract name and by source path. A single source file
    may produce several artifacts.
    """

    def __init__(self, build_dir: str | Path):
        """Initialize repository.

        Args:
            build_dir: Directory holding one JSON artifact per contract
        """
        self.build_dir = Path(build_dir)
        self._by_name: dict[str, ContractArtifact] | None = None
        self._by_source_path: dict[str, list[ContractArtifact]] = {}

    def _load(self) -> dict[str, ContractArtifact]:
        if self._by_name is not None:
            return self._by_name

        self._by_name = {}
        for artifact_file in sorted(self.build_dir.glob("*.json")):
            data = self._read_artifact_file(artifact_file)
            if data is None:
                continue

            try:
                artifact = ContractArtifact.from_dict(data)
            except (KeyError, TypeError):
                logger.debug(f"Skipping {artifact_file.name}: not a contract artifact")
                continue

            self._by_name[artifact.contract_name] = artifact
            if artifact.source_path:
                self._by_source_path.setdefault(artifact.source_path, []).append(artifact)

        logger.info(f"Loaded {len(self._by_name)} artifacts from {self.build_dir}")
        return self._by_name

    def _read_artifact_file(self, artifact_file: Path) -> dict[str, Any] | None:
        try:
            with open(artifact_file, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Failed to load artifact {artifact_file}: {e}")
            return None

        if not isinstance(data, dict):
            logger.debug(f"Skipping {artifact_file.name}: not a JSON object")
            return None
        return data

    def get_artifacts_from_source_path(self, source_path: str) -> list[ContractArtifact]:
        """Get all artifacts compiled from a source file.

        Args:
            source_path: Absolute source path as recorded by the compiler

        Returns:
            Artifacts for the source file, empty if none were built from it
        """
        self._load()
        return list(self._by_source_path.get(source_path, []))

    def get_artifact(self, contract_name: str) -> ContractArtifact:
        """Get the artifact of a contract by name.

        Raises:
            ArtifactNotFound: If no artifact was built for the contract
        """
        artifacts = self._load()
        if contract_name not in artifacts:
            raise ArtifactNotFound(contract_name)
        return artifacts[contract_name]

    def list_artifacts(self) -> list[ContractArtifact]:
        return list(self._load().values())


def get_build_artifacts(build_dir: str | Path | None = None) -> BuildArtifacts:
    """Get the default artifact repository.

    Args:
        build_dir: Build directory; taken from configuration when omitted

    Returns:
        BuildArtifacts over the build directory
    """
    if build_dir is None:
        build_dir = Config.from_env().build_dir
    return BuildArtifacts(build_dir)
