"""Unit tests for settings and the YAML settings source."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from pantry.core.config import Settings, get_settings
from pantry.core.config.yaml_source import (
    CONFIG_DIR_ENV_VAR,
    MultiYamlConfigSettingsSource,
    deep_merge,
    read_yaml_mapping,
)


pytestmark = pytest.mark.unit


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """A throwaway config tree with base and test layers."""
    base = tmp_path / "base"
    test_env = tmp_path / "environments" / "test"
    base.mkdir(parents=True)
    test_env.mkdir(parents=True)
    (base / "logging.yaml").write_text("logging:\n  level: INFO\n  format: json\n")
    (base / "matching.yaml").write_text("matching:\n  near_match_threshold: 0.6\n")
    (test_env / "logging.yaml").write_text("logging:\n  level: DEBUG\n")
    return tmp_path


class TestDeepMerge:
    """Tests for deep_merge."""

    def test_nested_keys_are_merged(self) -> None:
        """Should merge nested mappings key by key."""
        base = {"logging": {"level": "INFO", "format": "json"}, "app": {"name": "x"}}
        override = {"logging": {"level": "DEBUG"}}

        assert deep_merge(base, override) == {
            "logging": {"level": "DEBUG", "format": "json"},
            "app": {"name": "x"},
        }

    def test_inputs_are_not_modified(self) -> None:
        """Should return a new mapping."""
        base = {"a": {"b": 1}}
        deep_merge(base, {"a": {"b": 2}})
        assert base == {"a": {"b": 1}}

    def test_non_mapping_replaces(self) -> None:
        """Should let scalars and lists replace whole values."""
        assert deep_merge({"a": {"b": 1}}, {"a": [1, 2]}) == {"a": [1, 2]}


class TestReadYamlMapping:
    """Tests for read_yaml_mapping."""

    def test_empty_file(self, tmp_path: Path) -> None:
        """Should treat an empty file as an empty mapping."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert read_yaml_mapping(path) == {}

    def test_rejects_list(self, tmp_path: Path) -> None:
        """Should reject a top-level list."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="must contain a YAML mapping"):
            read_yaml_mapping(path)


class TestMultiYamlConfigSettingsSource:
    """Tests for layering YAML files."""

    def test_environment_overrides_base(
        self, config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Should overlay the environment directory on the base directory."""
        monkeypatch.setenv("APP_ENV", "test")
        source = MultiYamlConfigSettingsSource(Settings, config_dir=config_dir)

        assert source()["logging"] == {"level": "DEBUG", "format": "json"}
        assert source()["matching"] == {"near_match_threshold": 0.6}

    def test_missing_environment_directory(
        self, config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Should fall back to base values for an unknown environment."""
        monkeypatch.setenv("APP_ENV", "staging")
        source = MultiYamlConfigSettingsSource(Settings, config_dir=config_dir)
        assert source()["logging"]["level"] == "INFO"

    def test_config_dir_from_environment(
        self, config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Should honour the config directory override variable."""
        monkeypatch.setenv(CONFIG_DIR_ENV_VAR, str(config_dir))
        monkeypatch.setenv("APP_ENV", "test")

        settings = Settings()

        assert settings.matching.near_match_threshold == 0.6
        assert settings.logging.level == "DEBUG"


class TestSettings:
    """Tests for the Settings model."""

    def test_project_config_for_test_environment(self) -> None:
        """Should load the repository's test environment config."""
        settings = Settings()

        assert settings.is_testing
        assert settings.app.name == "Pantry Assistant"
        assert set(settings.app.model_dump()) == {"name", "version"}
        assert settings.matching.near_match_threshold == 0.7
        assert settings.seed.load_recipes is False

    def test_env_var_beats_yaml(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should let nested environment variables override YAML."""
        monkeypatch.setenv("MATCHING__NEAR_MATCH_THRESHOLD", "0.8")
        assert Settings().matching.near_match_threshold == 0.8

    def test_init_values_win(self) -> None:
        """Should prefer explicit constructor values."""
        settings = Settings(APP_ENV="production", matching={"near_match_threshold": 0.9})

        assert settings.is_production
        assert not settings.is_development
        assert settings.matching.near_match_threshold == 0.9

    @pytest.mark.parametrize("threshold", [-0.1, 1.1])
    def test_threshold_bounds(self, threshold: float) -> None:
        """Should reject thresholds outside [0, 1]."""
        with pytest.raises(ValidationError):
            Settings(matching={"near_match_threshold": threshold})

    def test_get_settings_is_cached(self) -> None:
        """Should return the same instance until the cache is cleared."""
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
