"""
YAML defaults for the decoder settings.

configs/config.yaml at the project root holds one top-level key per
settings section. Tests and deployments that keep the file elsewhere point
ARMOR_CONFIGS_DIR at the directory holding it.

    >>> load_yaml_section("config.yaml", "decoder")["envelope_mode"]
    'fixed'
"""

from functools import lru_cache
from pathlib import Path
from typing import Any
import os

import yaml

CONFIGS_DIR_ENV = "ARMOR_CONFIGS_DIR"


def _get_configs_dir() -> Path:
    override = os.environ.get(CONFIGS_DIR_ENV)
    if override:
        return Path(override)
    # src/armored_message/config/_loader.py -> project root
    return Path(__file__).resolve().parents[3] / "configs"


@lru_cache(maxsize=16)
def load_yaml_section(config_file: str, section: str | None = None) -> dict[str, Any]:
    """
    Read a YAML file from the configs directory, memoized per (file, section).

    A missing file reads as an empty mapping, so every setting falls back to
    its coded default. Call clear_config_cache() after changing the file or
    ARMOR_CONFIGS_DIR.
    """
    config_path = _get_configs_dir() / config_file
    if not config_path.exists():
        return {}

    with open(config_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    return data.get(section, {}) if section else data


def clear_config_cache() -> None:
    load_yaml_section.cache_clear()
