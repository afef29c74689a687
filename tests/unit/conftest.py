"""
Lightweight fixtures for unit tests - NO fixture file dependencies.
All documents are synthesized in memory with zlib + base64.
"""

import base64
import zlib
from typing import Callable, List

import pytest

from armored_message.config import clear_config_cache


CONTRACT_PLAINTEXT = (
    "-----BEGIN SIGNED CONTRACT-----\n"
    "Version: 1\n"
    "\n"
    "something sane\n"
    "-----BEGIN SIGNATURE-----\n"
    "something sane\n"
    "-----END SIGNATURE-----\n"
    "-----END SIGNED CONTRACT-----\n"
)


def armor_bytes(data: bytes, label: str = "OT ARMORED CONTRACT") -> List[str]:
    """Wrap raw bytes in a fixed-shape armor envelope (4-line header, 2-line footer)."""
    encoded = base64.b64encode(data).decode("ascii")
    body = [encoded[i:i + 64] for i in range(0, len(encoded), 64)]
    return [
        f"-----BEGIN {label}-----",
        "Version: Open Transactions 0.93",
        "Comment: http://github.com/FellowTraveler/Open-Transactions/wiki",
        "",
        *body,
        "",
        f"-----END {label}-----",
    ]


def armor_text(plaintext: str, label: str = "OT ARMORED CONTRACT") -> List[str]:
    """Compress plaintext and wrap it in an armor envelope."""
    return armor_bytes(zlib.compress(plaintext.encode("utf-8")), label=label)


# =============================================================================
# Document Fixtures
# =============================================================================

@pytest.fixture
def contract_plaintext() -> str:
    """Well-formed signed contract with one signature."""
    return CONTRACT_PLAINTEXT


@pytest.fixture
def contract_lines(contract_plaintext: str) -> List[str]:
    """Plaintext lines of the signed contract, as the inflator yields them."""
    return contract_plaintext.split("\n")


@pytest.fixture
def armor() -> Callable[..., List[str]]:
    """Factory: armor(plaintext, label=...) -> armored document lines."""
    return armor_text


@pytest.fixture
def armor_raw() -> Callable[..., List[str]]:
    """Factory: armor_raw(data, label=...) -> armored lines for arbitrary bytes."""
    return armor_bytes


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def fresh_config(monkeypatch, tmp_path):
    """Point the YAML loader at an empty configs dir and reset its cache."""
    monkeypatch.setenv("ARMOR_CONFIGS_DIR", str(tmp_path))
    clear_config_cache()
    yield tmp_path
    clear_config_cache()
