"""Unit tests for the user configuration file."""

from pathlib import Path

import pytest
from rmup.core.config import (
    DefaultsConfig,
    JunkConfig,
    RmupConfig,
    load_config,
    load_config_or_default,
    save_config,
)
from rmup.errors import ConfigError, ConfigNotFoundError, ConfigParseError


class TestRmupConfig:
    """Tests for the configuration models."""

    def test_defaults(self) -> None:
        """An empty config carries the built-in defaults."""
        config = RmupConfig()

        assert config.defaults == DefaultsConfig()
        assert config.defaults.relative is True
        assert config.defaults.force is False
        assert config.junk.extra_patterns == []
        assert config.colors == {}

    def test_unknown_section_rejected(self) -> None:
        """Unknown top-level tables are rejected."""
        with pytest.raises(ValueError):
            RmupConfig.model_validate({"deletion": {}})

    def test_unknown_default_rejected(self) -> None:
        """Unknown keys in [defaults] are rejected."""
        with pytest.raises(ValueError):
            DefaultsConfig.model_validate({"recursive": True})


class TestLoadConfig:
    """Tests for load_config."""

    def test_loads_valid_file(self, tmp_path: Path) -> None:
        """A valid TOML file is parsed and validated."""
        path = tmp_path / "config.toml"
        path.write_text(
            "[defaults]\nforce = true\nrelative = false\n\n"
            '[junk]\nextra_patterns = ["*.bak"]\n\n'
            '[colors]\nsuccess = "#00ff00"\n'
        )

        config = load_config(path)

        assert config.defaults.force is True
        assert config.defaults.relative is False
        assert config.defaults.delete_initial is False
        assert config.junk == JunkConfig(extra_patterns=["*.bak"])
        assert config.colors == {"success": "#00ff00"}

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises ConfigNotFoundError."""
        with pytest.raises(ConfigNotFoundError):
            load_config(tmp_path / "missing.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises ConfigParseError."""
        path = tmp_path / "config.toml"
        path.write_text("[defaults\nforce = ")

        with pytest.raises(ConfigParseError, match="Invalid TOML"):
            load_config(path)

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Schema violations raise ConfigError."""
        path = tmp_path / "config.toml"
        path.write_text('[defaults]\nforce = "sometimes"\n')

        with pytest.raises(ConfigError, match="Invalid config content"):
            load_config(path)

    def test_default_path(self, isolated_config: Path) -> None:
        """Without a path the XDG config location is used."""
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text("[defaults]\nverbose = true\n")

        assert load_config().defaults.verbose is True


class TestLoadConfigOrDefault:
    """Tests for load_config_or_default."""

    def test_missing_file_gives_defaults(self, isolated_config: Path) -> None:
        """No file means built-in defaults."""
        assert load_config_or_default() == RmupConfig()

    def test_invalid_file_still_raises(self, tmp_path: Path) -> None:
        """An invalid file is an error, not a fallback."""
        path = tmp_path / "config.toml"
        path.write_text("not toml at all [")

        with pytest.raises(ConfigError):
            load_config_or_default(path)


class TestSaveConfig:
    """Tests for save_config."""

    def test_save_and_load(self, tmp_path: Path) -> None:
        """A saved config loads back unchanged."""
        path = tmp_path / "nested" / "config.toml"
        config = RmupConfig(
            defaults=DefaultsConfig(force=True),
            junk=JunkConfig(extra_patterns=["*.orig"]),
            colors={"error": "#ff0000"},
        )

        saved = save_config(config, path)

        assert saved == path
        assert load_config(path) == config

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        """Only the config file remains after saving."""
        path = tmp_path / "config.toml"

        save_config(RmupConfig(), path)

        assert [p.name for p in tmp_path.iterdir()] == ["config.toml"]

    def test_write_failure(self, tmp_path: Path) -> None:
        """Unwritable locations raise ConfigError."""
        blocker = tmp_path / "file"
        blocker.write_text("")

        with pytest.raises(ConfigError, match="Failed to write config"):
            save_config(RmupConfig(), blocker / "config.toml")
