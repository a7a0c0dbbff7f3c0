"""Tests for errchain configuration."""

import os

import pytest

import errchain
from errchain import (
    ErrchainError,
    ErrchainSettings,
    FormatType,
    InvalidConfigError,
    config,
)
from errchain.core.paths import default_strip_path


class TestFormatType:
    """Test FormatType enum."""

    def test_values(self):
        """Verify FormatType enum values."""
        assert FormatType.FULL.value == "full"
        assert FormatType.SHORT.value == "short"

    @pytest.mark.parametrize(
        "value, expected",
        [
            (FormatType.SHORT, FormatType.SHORT),
            ("full", FormatType.FULL),
            ("SHORT", FormatType.SHORT),
            (" Short ", FormatType.SHORT),
        ],
    )
    def test_parse(self, value, expected):
        """Test parsing members, values and names."""
        assert FormatType.parse(value) is expected

    @pytest.mark.parametrize("value", ["verbose", "", 1, None])
    def test_parse_invalid(self, value):
        """Test unknown formats raise InvalidConfigError."""
        with pytest.raises(InvalidConfigError):
            FormatType.parse(value)

    def test_invalid_config_error_hierarchy(self):
        """Test InvalidConfigError is catchable as ErrchainError and ValueError."""
        with pytest.raises(ErrchainError):
            FormatType.parse("nope")
        with pytest.raises(ValueError, match="Invalid configuration: unknown format"):
            FormatType.parse("nope")


class TestErrchainSettings:
    """Test ErrchainSettings dataclass."""

    def test_default_values(self):
        """Test default settings values."""
        settings = ErrchainSettings()
        assert settings.default_format == FormatType.FULL
        assert settings.strip_roots is None

    def test_string_format_is_parsed(self):
        """Test string formats are converted to FormatType."""
        settings = ErrchainSettings(default_format="short")
        assert settings.default_format is FormatType.SHORT

    def test_strip_roots_must_be_list(self):
        """Test a bare string for strip_roots is rejected."""
        with pytest.raises(InvalidConfigError):
            ErrchainSettings(strip_roots="/srv/app")

    def test_dict_round_trip(self):
        """Test to_dict/from_dict."""
        settings = ErrchainSettings(default_format=FormatType.SHORT, strip_roots=["/srv/app"])
        data = settings.to_dict()
        assert data == {"default_format": "short", "strip_roots": ["/srv/app"]}
        assert ErrchainSettings.from_dict(data) == settings

    def test_from_dict_empty(self):
        """Test empty input gives defaults."""
        assert ErrchainSettings.from_dict({}) == ErrchainSettings()
        assert ErrchainSettings.from_dict(None) == ErrchainSettings()

    def test_from_dict_not_mapping(self):
        """Test non-mapping input is rejected."""
        with pytest.raises(InvalidConfigError):
            ErrchainSettings.from_dict(["short"])

    def test_from_env(self):
        """Test loading from ERRCHAIN_* variables."""
        env = {
            "ERRCHAIN_FORMAT": "short",
            "ERRCHAIN_STRIP_ROOTS": os.pathsep.join(["/srv/a", "/srv/b"]),
        }
        settings = ErrchainSettings.from_env(env)
        assert settings.default_format is FormatType.SHORT
        assert settings.strip_roots == ["/srv/a", "/srv/b"]

    def test_from_env_defaults(self, monkeypatch):
        """Test missing variables give defaults."""
        monkeypatch.delenv("ERRCHAIN_FORMAT", raising=False)
        monkeypatch.delenv("ERRCHAIN_STRIP_ROOTS", raising=False)
        assert ErrchainSettings.from_env() == ErrchainSettings()

    def test_from_env_invalid_format(self):
        """Test an invalid format value is reported."""
        with pytest.raises(InvalidConfigError):
            ErrchainSettings.from_env({"ERRCHAIN_FORMAT": "loud"})

    def test_from_yaml(self, tmp_path):
        """Test loading from a YAML file."""
        path = tmp_path / "errchain.yaml"
        path.write_text("default_format: short\nstrip_roots:\n  - /srv/app\n", encoding="utf-8")

        settings = ErrchainSettings.from_yaml(path)
        assert settings.default_format is FormatType.SHORT
        assert settings.strip_roots == ["/srv/app"]

    def test_from_yaml_nested_section(self, tmp_path):
        """Test settings under an 'errchain' key."""
        path = tmp_path / "app.yaml"
        path.write_text("errchain:\n  default_format: full\nother: 1\n", encoding="utf-8")

        settings = ErrchainSettings.from_yaml(str(path))
        assert settings == ErrchainSettings(default_format=FormatType.FULL)

    def test_from_yaml_empty_file(self, tmp_path):
        """Test an empty YAML file gives defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert ErrchainSettings.from_yaml(path) == ErrchainSettings()


class TestConfigure:
    """Test configure() and reset()."""

    def test_defaults(self):
        """Test built-in defaults."""
        assert config.DEFAULT_FORMAT is FormatType.FULL
        assert config.strip_path is default_strip_path

    def test_configure_with_settings(self):
        """Test applying a settings object."""
        config.configure(ErrchainSettings(default_format="short", strip_roots=["/srv/app"]))
        assert config.DEFAULT_FORMAT is FormatType.SHORT
        assert config.strip_path("/srv/app/x.py") == "x.py"

    def test_configure_settings_without_roots(self):
        """Test settings without roots keep the default stripper."""
        config.configure(ErrchainSettings())
        assert config.strip_path is default_strip_path

    def test_custom_strip_overrides_roots(self):
        """Test an explicit strip function takes precedence."""
        def strip(path):
            return "stripped"

        config.configure(ErrchainSettings(strip_roots=["/srv/app"]), strip=strip)
        assert config.strip_path is strip

    def test_configure_invalid_format(self):
        """Test configure() rejects unknown formats."""
        with pytest.raises(InvalidConfigError):
            config.configure(default_format="loud")

    def test_reset(self):
        """Test reset() restores defaults."""
        errchain.configure(default_format=FormatType.SHORT, strip=lambda p: p)
        errchain.reset()
        assert config.DEFAULT_FORMAT is FormatType.FULL
        assert config.strip_path is default_strip_path

    def test_configure_applies_to_new_records(self):
        """Test the stripper is used at construction time."""
        config.configure(strip=lambda p: os.path.basename(p))
        err = errchain.new("x")
        config.reset()
        assert err.file == "test_config.py"
