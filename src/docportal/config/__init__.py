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

"""Settings for docportal (portal root, manifest name, export target, logging)."""

from __future__ import annotations

from .loader import (
    CONFIG_FILENAMES,
    MANIFEST_ENV,
    ROOT_ENV,
    LoadedSettings,
    load_settings,
    load_settings_with_metadata,
)
from .models import (
    DEFAULT_OUTPUT_DIR,
    DEFAULT_ROOT,
    DEFAULT_TIMEOUT,
    ConfigReadError,
    ConfigValidationError,
    InvalidConfigFileError,
    PortalSettings,
    SettingsModel,
    apply_overrides,
    is_remote_root,
)

__all__ = [
    "CONFIG_FILENAMES",
    "DEFAULT_OUTPUT_DIR",
    "DEFAULT_ROOT",
    "DEFAULT_TIMEOUT",
    "MANIFEST_ENV",
    "ROOT_ENV",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "LoadedSettings",
    "PortalSettings",
    "SettingsModel",
    "apply_overrides",
    "is_remote_root",
    "load_settings",
    "load_settings_with_metadata",
]
