"""
Unit tests for armored_message/config

YAML defaults, environment overrides and validation of DecoderConfig.
"""

import pytest
from pydantic import ValidationError

from armored_message.config import DecoderConfig, Settings, load_yaml_section
from armored_message.constants import DEFAULT_MAX_INFLATED_BYTES


class TestDecoderConfig:

    def test_defaults_without_yaml(self, fresh_config):
        config = DecoderConfig()
        assert config.envelope_mode == "fixed"
        assert config.header_lines == 4
        assert config.footer_lines == 2
        assert config.min_envelope_lines == 6
        assert config.text_encoding == "utf-8"
        assert config.max_inflated_bytes == DEFAULT_MAX_INFLATED_BYTES

    def test_reads_yaml_section(self, fresh_config):
        (fresh_config / "config.yaml").write_text(
            "decoder:\n  envelope_mode: scan\n  max_inflated_bytes: 1024\n",
            encoding="utf-8",
        )
        config = DecoderConfig()
        assert config.envelope_mode == "scan"
        assert config.max_inflated_bytes == 1024
        assert config.header_lines == 4

    def test_env_overrides_yaml(self, fresh_config, monkeypatch):
        (fresh_config / "config.yaml").write_text(
            "decoder:\n  envelope_mode: scan\n", encoding="utf-8"
        )
        monkeypatch.setenv("ARMOR_DECODER_ENVELOPE_MODE", "fixed")
        assert DecoderConfig().envelope_mode == "fixed"

    def test_rejects_unknown_mode(self, fresh_config):
        with pytest.raises(ValidationError):
            DecoderConfig(envelope_mode="guess")

    def test_rejects_unknown_text_encoding(self, fresh_config):
        with pytest.raises(ValidationError):
            DecoderConfig(text_encoding="no-such-codec")

    def test_rejects_unknown_text_encoding_from_yaml(self, fresh_config):
        (fresh_config / "config.yaml").write_text(
            "decoder:\n  text_encoding: no-such-codec\n", encoding="utf-8"
        )
        with pytest.raises(ValidationError):
            DecoderConfig()

    def test_rejects_non_positive_limit(self, fresh_config):
        with pytest.raises(ValidationError):
            DecoderConfig(max_inflated_bytes=0)

    def test_settings_nests_decoder(self, fresh_config):
        assert isinstance(Settings().decoder, DecoderConfig)


class TestLoadYamlSection:

    def test_missing_file_is_empty(self, fresh_config):
        assert load_yaml_section("absent.yaml") == {}

    def test_selects_section(self, fresh_config):
        (fresh_config / "config.yaml").write_text("decoder:\n  header_lines: 3\n", encoding="utf-8")
        assert load_yaml_section("config.yaml", "decoder") == {"header_lines": 3}

    def test_shipped_config_is_loadable(self, project_root, monkeypatch):
        monkeypatch.setenv("ARMOR_CONFIGS_DIR", str(project_root / "configs"))
        load_yaml_section.cache_clear()
        try:
            assert load_yaml_section("config.yaml", "decoder")["envelope_mode"] == "fixed"
        finally:
            load_yaml_section.cache_clear()
