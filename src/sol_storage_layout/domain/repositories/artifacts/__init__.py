#!/usr/bin/env python3

"""Build artifact repositories."""

from .build_artifacts import ArtifactSource, BuildArtifacts, get_build_artifacts

__all__ = [
    "ArtifactSource",
    "BuildArtifacts",
    "get_build_artifacts",
]
