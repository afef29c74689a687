"""
Armored Message Decoder Configuration Package.

This module uses Pydantic Settings to:
1. Define the schema for all configuration
2. Load defaults from configs/config.yaml
3. Automatically override with environment variables from .env

Usage:
    from armored_message.config import settings

    mode = settings.decoder.envelope_mode
    limit = settings.decoder.max_inflated_bytes
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from armored_message.config._loader import clear_config_cache, load_yaml_section
from armored_message.config.decoder import DecoderConfig


class Settings(BaseSettings):
    """
    Main settings class that combines all configuration sections.

    Usage:
        from armored_message.config import settings

        settings.decoder.envelope_mode
    """
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    decoder: DecoderConfig = Field(default_factory=DecoderConfig)


# ===========================
# Global Settings Instance
# ===========================

settings = Settings()


__all__ = [
    "settings",
    "Settings",
    "DecoderConfig",
    "load_yaml_section",
    "clear_config_cache",
]
