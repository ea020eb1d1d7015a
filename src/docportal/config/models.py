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

"""Settings models for docportal.

A pydantic ``SettingsModel`` validates the raw TOML table; ``PortalSettings``
is the resolved dataclass the rest of the package consumes. Settings describe
where the portal lives (``root``), which manifest to read and where exports
go. They are distinct from the navigation manifest itself, which is fetched
from the portal root at startup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from docportal.core.model_types import LogFormat
from docportal.exceptions import PortalValidationError
from docportal.paths import MANIFEST_FILENAME

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_ROOT: Final[str] = "."
DEFAULT_TIMEOUT: Final[float] = 10.0
DEFAULT_OUTPUT_DIR: Final[str] = "site"
REMOTE_SCHEMES: Final[tuple[str, ...]] = ("http://", "https://")

LogLevelName = Literal["debug", "info", "warning", "error"]


class ConfigValidationError(PortalValidationError):
    """Raised when settings data contains invalid values."""


class ConfigReadError(ConfigValidationError):
    """Raised when a settings file cannot be read from disk."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with file path and underlying error.

        Args:
            path: The settings file that could not be read.
            error: The underlying exception that caused the read failure.
        """
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """Raised when a settings file fails validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with settings path and validation error.

        Args:
            path: The settings file that failed validation.
            error: The underlying validation exception.
        """
        self.path = path
        self.error = error
        super().__init__(f"Invalid docportal configuration in {path}: {error}")


class SettingsModel(BaseModel):
    """Raw ``[docportal]`` settings table as written in TOML."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")

    root: str | None = None
    manifest: str | None = None
    timeout: float | None = Field(default=None, gt=0)
    output_dir: str | None = None
    log_format: LogFormat | None = None
    log_level: LogLevelName | None = None

    @field_validator("log_format", "log_level", mode="before")
    @classmethod
    def _lowercase(cls, value: object) -> object:
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("root", "manifest", "output_dir")
    @classmethod
    def _non_blank(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            msg = "must not be blank"
            raise ValueError(msg)
        return value


@dataclass(slots=True)
class PortalSettings:
    """Resolved settings for one portal.

    Attributes:
        root: Base URL (``http``/``https``) or local directory holding
            ``app.json`` and the per-tab resources.
        manifest: Manifest resource name relative to ``root``.
        timeout: Network timeout in seconds for remote roots.
        output_dir: Destination directory for static exports.
        log_format: Preferred log format, ``None`` to defer to the environment.
        log_level: Preferred log level, ``None`` to defer to the environment.
    """

    root: str = DEFAULT_ROOT
    manifest: str = MANIFEST_FILENAME
    timeout: float = DEFAULT_TIMEOUT
    output_dir: Path = field(default_factory=lambda: Path(DEFAULT_OUTPUT_DIR))
    log_format: LogFormat | None = None
    log_level: LogLevelName | None = None

    @property
    def is_remote(self) -> bool:
        """Return True when ``root`` is an HTTP(S) base URL."""
        return is_remote_root(self.root)


def is_remote_root(root: str) -> bool:
    """Return True when ``root`` names an HTTP(S) location."""
    return root.lower().startswith(REMOTE_SCHEMES)


def settings_from_model(base_dir: Path, model: SettingsModel) -> PortalSettings:
    """Convert a validated settings model into ``PortalSettings``.

    Relative directory roots and output directories are resolved against
    ``base_dir`` (the directory holding the settings file).

    Args:
        base_dir: Directory used to resolve relative paths.
        model: Validated settings model.

    Returns:
        Resolved settings.
    """
    settings = PortalSettings()
    if model.root is not None:
        settings.root = model.root if is_remote_root(model.root) else str((base_dir / model.root).resolve())
    if model.manifest is not None:
        settings.manifest = model.manifest
    if model.timeout is not None:
        settings.timeout = model.timeout
    if model.output_dir is not None:
        output_dir = Path(model.output_dir)
        settings.output_dir = output_dir if output_dir.is_absolute() else (base_dir / output_dir).resolve()
    settings.log_format = model.log_format
    settings.log_level = model.log_level
    return settings


def apply_overrides(settings: PortalSettings, overrides: Mapping[str, str | None]) -> PortalSettings:
    """Apply non-empty ``root``/``manifest`` overrides in place.

    Args:
        settings: Settings to update.
        overrides: Mapping of field name to override value; ``None`` or blank
            values are ignored.

    Returns:
        The same ``settings`` instance.
    """
    root = overrides.get("root")
    if root and root.strip():
        settings.root = root if is_remote_root(root) else str(Path(root).resolve())
    manifest = overrides.get("manifest")
    if manifest and manifest.strip():
        settings.manifest = manifest
    return settings


__all__ = [
    "DEFAULT_OUTPUT_DIR",
    "DEFAULT_ROOT",
    "DEFAULT_TIMEOUT",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "LogLevelName",
    "PortalSettings",
    "SettingsModel",
    "apply_overrides",
    "is_remote_root",
    "settings_from_model",
]
