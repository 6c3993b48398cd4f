"""YAML settings source layering base and per-environment config files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from pydantic_settings import PydanticBaseSettingsSource


if TYPE_CHECKING:
    from pydantic.fields import FieldInfo


CONFIG_DIR_ENV_VAR = "PANTRY_CONFIG_DIR"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` on top of ``base``.

    Nested mappings are merged key by key; any other value in ``override``
    replaces the one in ``base``. Neither input is modified.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def read_yaml_mapping(path: Path) -> dict[str, Any]:
    """Read a YAML file that must contain a mapping (or nothing at all)."""
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        msg = f"{path} must contain a YAML mapping, got {type(data).__name__}"
        raise ValueError(msg)
    return data


class MultiYamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Load ``config/base/*.yaml`` then overlay ``config/environments/{APP_ENV}``.

    The config directory defaults to ``<project root>/config`` and can be
    pointed elsewhere with the ``PANTRY_CONFIG_DIR`` environment variable,
    which is what an installed (non-editable) deployment needs.
    """

    def __init__(
        self,
        settings_cls: type[Any],
        config_dir: Path | None = None,
    ) -> None:
        super().__init__(settings_cls)
        self._config_dir = config_dir or self._find_config_dir()
        self._app_env = os.getenv("APP_ENV", "development")
        self._yaml_data = self._load_yaml_files()

    @staticmethod
    def _find_config_dir() -> Path:
        override = os.getenv(CONFIG_DIR_ENV_VAR)
        if override:
            return Path(override)
        # src/pantry/core/config/yaml_source.py -> project root
        return Path(__file__).resolve().parents[4] / "config"

    def _load_yaml_files(self) -> dict[str, Any]:
        merged: dict[str, Any] = {}
        for directory in (
            self._config_dir / "base",
            self._config_dir / "environments" / self._app_env,
        ):
            if not directory.is_dir():
                continue
            for yaml_file in sorted(directory.glob("*.yaml")):
                merged = deep_merge(merged, read_yaml_mapping(yaml_file))
        return merged

    def get_field_value(
        self,
        _field: FieldInfo,
        field_name: str,
    ) -> tuple[Any, str, bool]:
        """Return the merged YAML value for ``field_name``."""
        value = self._yaml_data.get(field_name)
        return value, field_name, isinstance(value, (dict, list))

    def __call__(self) -> dict[str, Any]:
        return self._yaml_data
