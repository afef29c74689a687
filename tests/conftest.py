"""
Shared pytest fixtures for the armored message test suite.

This module provides common fixtures used across test modules:
- Fixture file paths (armored contract, account, ledger)
- Line readers matching how callers feed documents to the pipeline

Usage:
    Fixtures are automatically discovered by pytest.
    Import them directly in test files - no explicit import needed.
"""

import sys
from pathlib import Path
from typing import Callable, List

import pytest

# Ensure the package is importable without an editable install
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


# ===========================
# Path Fixtures
# ===========================

@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    """Return the armored document fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def read_fixture_lines(fixtures_dir: Path) -> Callable[[str], List[str]]:
    """
    Read a fixture file into lines without terminators.

    Returns:
        Function taking a fixture name and returning its lines
    """
    def _read(name: str) -> List[str]:
        return (fixtures_dir / name).read_text(encoding="utf-8").splitlines()

    return _read
