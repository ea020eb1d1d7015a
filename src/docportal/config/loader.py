# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Settings discovery and loading for docportal.

Settings come from the first of ``docportal.toml``, ``.docportal.toml`` or the
``[tool.docportal]`` table of ``pyproject.toml`` found in the working
directory (or from an explicit file). The ``DOCPORTAL_ROOT`` and
``DOCPORTAL_MANIFEST`` environment variables override file values; CLI flags
are applied on top by the caller through ``apply_overrides``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final, cast

from pydantic import ValidationError

from docportal.compat import tomllib

from .models import (
    ConfigReadError,
    InvalidConfigFileError,
    PortalSettings,
    SettingsModel,
    apply_overrides,
    settings_from_model,
)

ROOT_ENV: Final[str] = "DOCPORTAL_ROOT"
MANIFEST_ENV: Final[str] = "DOCPORTAL_MANIFEST"
CONFIG_FILENAMES: Final[tuple[str, ...]] = ("docportal.toml", ".docportal.toml", "pyproject.toml")


@dataclass(slots=True, frozen=True)
class LoadedSettings:
    """Container for loaded settings and their source path.

    Attributes:
        settings: Resolved settings instance.
        path: Settings file the values came from, or None when defaults are used.
    """

    settings: PortalSettings
    path: Path | None


def load_settings(explicit_path: Path | None = None, *, cwd: Path | None = None) -> PortalSettings:
    """Load docportal settings from a TOML file or use defaults.

    Args:
        explicit_path: Optional settings file; when given only this file is read.
        cwd: Directory searched for settings files (defaults to ``Path.cwd()``).

    Returns:
        Resolved settings with environment overrides applied.
    """
    return load_settings_with_metadata(explicit_path, cwd=cwd).settings


def load_settings_with_metadata(explicit_path: Path | None = None, *, cwd: Path | None = None) -> LoadedSettings:
    """Load docportal settings together with the file they came from.

    Args:
        explicit_path: Optional settings file; when given only this file is read.
        cwd: Directory searched for settings files (defaults to ``Path.cwd()``).

    Returns:
        LoadedSettings: Resolved settings and their source path.

    Raises:
        ConfigReadError: If a candidate file cannot be read or parsed as TOML.
        InvalidConfigFileError: If a candidate file fails validation, or an
            explicit file holds no docportal settings.
    """
    base_dir = (cwd or Path.cwd()).resolve()
    if explicit_path is not None:
        candidate = explicit_path if explicit_path.is_absolute() else (base_dir / explicit_path).resolve()
        search_order = [candidate]
    else:
        search_order = [base_dir / name for name in CONFIG_FILENAMES]

    for candidate in search_order:
        loaded = _load_candidate(candidate, explicit=explicit_path is not None)
        if loaded is not None:
            _apply_environment(loaded.settings)
            return loaded

    settings = PortalSettings(root=str(base_dir))
    _apply_environment(settings)
    return LoadedSettings(settings=settings, path=None)


def _apply_environment(settings: PortalSettings) -> None:
    consume_overrides = {"root": os.getenv(ROOT_ENV), "manifest": os.getenv(MANIFEST_ENV)}
    _ = apply_overrides(settings, consume_overrides)


def _load_candidate(candidate: Path, *, explicit: bool) -> LoadedSettings | None:
    if not candidate.exists():
        if explicit:
            raise ConfigReadError(candidate, FileNotFoundError(str(candidate)))
        return None
    try:
        raw_map: dict[str, object] = tomllib.loads(candidate.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigReadError(candidate, exc) from exc

    payload = _extract_payload(candidate, raw_map)
    if payload is None:
        if explicit:
            message = f"{candidate.name} does not define docportal settings"
            raise InvalidConfigFileError(candidate, ValueError(message))
        return None

    try:
        model = SettingsModel.model_validate(payload)
    except ValidationError as exc:
        raise InvalidConfigFileError(candidate, exc) from exc

    base_dir = candidate.parent.resolve()
    settings = settings_from_model(base_dir, model)
    if model.root is None:
        settings.root = str(base_dir)
    return LoadedSettings(settings=settings, path=candidate.resolve())


def _extract_payload(candidate: Path, raw_map: dict[str, object]) -> dict[str, object] | None:
    """Extract the docportal table from a parsed TOML mapping.

    Standalone files may hold the settings at top level or under a
    ``[docportal]`` table; ``pyproject.toml`` must use ``[tool.docportal]``.

    Args:
        candidate: Source settings path.
        raw_map: Data parsed from the TOML document.

    Returns:
        Mapping to validate, or None when the file holds no docportal settings.

    Raises:
        InvalidConfigFileError: If the docportal section is not a table.
    """
    if candidate.name == "pyproject.toml":
        tool_section = raw_map.get("tool")
        if not isinstance(tool_section, dict):
            return None
        section = cast("dict[str, object]", tool_section).get("docportal")
    else:
        section = raw_map.get("docportal", raw_map)
    if section is None:
        return None
    if not isinstance(section, dict):
        message = "docportal settings must be a TOML table"
        raise InvalidConfigFileError(candidate, ValueError(message))
    return cast("dict[str, object]", section)


__all__ = ["CONFIG_FILENAMES", "MANIFEST_ENV", "ROOT_ENV", "LoadedSettings", "load_settings", "load_settings_with_metadata"]
