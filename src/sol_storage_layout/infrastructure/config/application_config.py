"""Configuration management for the storage layout analyzer."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_BUILD_DIR = "build/contracts"
DEFAULT_LOG_DIR = "logs"


@dataclass
class Config:
    """Configuration for the storage layout analyzer."""

    build_dir: Path
    verbose: bool = False
    log_dir: Path = Path(DEFAULT_LOG_DIR)

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        build_dir = Path(os.getenv("BUILD_DIR", DEFAULT_BUILD_DIR))
        log_dir = Path(os.getenv("LOG_DIR", DEFAULT_LOG_DIR))
        verbose = os.getenv("VERBOSE", "false").lower() in ("true", "1", "yes")

        return cls(build_dir=build_dir, verbose=verbose, log_dir=log_dir)

    @classmethod
    def from_args(
        cls,
        build_dir: Optional[Path] = None,
        verbose: Optional[bool] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Args:
            build_dir: Directory holding compiled contract artifacts (overrides env)
            verbose: Enable verbose output (overrides env)

        Returns:
            Config object
        """
        config = cls.from_env()

        if build_dir is not None:
            config.build_dir = build_dir
        if verbose is not None:
            config.verbose = verbose

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if not self.build_dir.exists():
            raise ValueError(f"Build directory not found: {self.build_dir}")

        if not self.build_dir.is_dir():
            raise ValueError(f"Not a directory: {self.build_dir}")
