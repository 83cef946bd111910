"""Test suite for the Solidity storage layout analyzer.

Test Structure:
- application/: End-to-end layout runs over fabricated compiler ASTs
- config/: Tests for configuration management
- domain/: Tests for models, artifact loading and the layout services
- infrastructure/: Tests for logging setup

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m integration     # Run full pipeline tests only
"""
