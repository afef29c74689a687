"""Decoder pipeline configuration."""

import codecs
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from armored_message.config._loader import load_yaml_section
from armored_message.constants import (
    DEFAULT_MAX_INFLATED_BYTES,
    ENVELOPE_FOOTER_LINES,
    ENVELOPE_HEADER_LINES,
    MIN_ENVELOPE_LINES,
)


def _get_config() -> dict:
    return load_yaml_section("config.yaml").get("decoder", {})


class DecoderConfig(BaseSettings):
    """Envelope and inflation settings for the decoding pipeline."""
    model_config = SettingsConfigDict(
        env_prefix='ARMOR_DECODER_',
        case_sensitive=False,
        validate_assignment=True,
    )

    envelope_mode: Literal["fixed", "scan"] = Field(
        default_factory=lambda: _get_config().get('envelope_mode', "fixed")
    )
    header_lines: int = Field(
        default_factory=lambda: _get_config().get('header_lines', ENVELOPE_HEADER_LINES),
        ge=1,
    )
    footer_lines: int = Field(
        default_factory=lambda: _get_config().get('footer_lines', ENVELOPE_FOOTER_LINES),
        ge=1,
    )
    min_envelope_lines: int = Field(
        default_factory=lambda: _get_config().get('min_envelope_lines', MIN_ENVELOPE_LINES),
        ge=1,
    )
    text_encoding: str = Field(
        default_factory=lambda: _get_config().get('text_encoding', "utf-8"),
        validate_default=True,
    )
    max_inflated_bytes: int = Field(
        default_factory=lambda: _get_config().get('max_inflated_bytes', DEFAULT_MAX_INFLATED_BYTES),
        gt=0,
    )

    @field_validator('text_encoding')
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown text encoding: {value}") from exc
        return value
