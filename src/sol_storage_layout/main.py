"""Main entry point for the Solidity storage layout analyzer."""

import argparse
import json
import sys
from pathlib import Path
from typing import NoReturn

from .application import get_storage_layout
from .domain.errors import StorageLayoutError
from .domain.repositories.artifacts import BuildArtifacts
from .infrastructure.config import Config
from .infrastructure.logging import LoggerSetup, get_logger, log_timing


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Compute inheritance-aware storage layouts of compiled Solidity contracts",
        epilog="""
Examples:
  # Layout of a single contract (artifacts in ./build/contracts)
  sol-storage-layout MyToken

  # Several contracts
  sol-storage-layout MyToken,MyVault Registry

  # Custom build directory, verbose logs
  sol-storage-layout MyToken --build-dir out/artifacts --verbose

  # Using .env file for configuration
  echo 'BUILD_DIR=out/artifacts' > .env
  sol-storage-layout MyToken
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "contracts",
        nargs="+",
        metavar="CONTRACT",
        help="Contract name(s) to analyze. Supports comma-separated lists: 'Token,Vault'",
    )
    parser.add_argument(
        "-b",
        "--build-dir",
        type=Path,
        help="Directory holding compiled contract artifacts (default: ./build/contracts)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=None,
        help="Enable verbose output with debug logs",
    )
    return parser.parse_args(argv)


def split_contract_names(values: list[str]) -> list[str]:
    """Flatten positional arguments that may hold comma-separated names."""
    return [name.strip() for value in values for name in value.split(",") if name.strip()]


@log_timing
def main(argv: list[str] | None = None) -> NoReturn:
    """Print the storage layout of each requested contract as JSON on stdout."""
    args = parse_args(argv)

    try:
        config = Config.from_args(build_dir=args.build_dir, verbose=args.verbose)
        config.validate()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    # stdout carries the JSON layout only
    LoggerSetup.initialize(config.log_dir, verbose=config.verbose, stream=sys.stderr)
    logger = get_logger(__name__)
    logger.debug(f"Build directory: {config.build_dir}")

    contract_names = split_contract_names(args.contracts)
    if not contract_names:
        logger.error("No contracts provided")
        sys.exit(1)

    artifacts = BuildArtifacts(config.build_dir)
    layouts = {}
    failed_contracts = []

    for i, contract_name in enumerate(contract_names, 1):
        logger.info(f"[{i}/{len(contract_names)}] Processing: {contract_name}")
        try:
            contract = artifacts.get_artifact(contract_name)
            layouts[contract_name] = get_storage_layout(contract, artifacts).to_dict()
        except StorageLayoutError as e:
            logger.error(f"[FAILED] {contract_name}: {e}")
            failed_contracts.append((contract_name, str(e)))

    print(json.dumps(layouts, indent=2))

    logger.info(f"Total contracts: {len(contract_names)}")
    logger.info(f"Successfully analyzed: {len(layouts)}")
    logger.info(f"Failed: {len(failed_contracts)}")
    for contract_name, error in failed_contracts:
        logger.info(f"  - {contract_name}: {error}")

    sys.exit(0 if not failed_contracts else 1)


if __name__ == "__main__":
    main()
