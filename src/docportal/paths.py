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

"""Resource layout of a portal root.

Every resource is addressed relative to the portal root as
``{path or default_dir}{file}``; an empty ``path`` also selects the default,
and directory defaults carry their trailing slash.
"""

from __future__ import annotations

from typing import Final

from docportal.core.model_types import ResourceKind
from docportal.core.type_aliases import ResourcePath

MANIFEST_FILENAME: Final[str] = "app.json"
JSON_DIR: Final[str] = "json/"
MARKDOWN_DIR: Final[str] = "markdown/"
HTML_DIR: Final[str] = ""
STYLES_DIR: Final[str] = "css/"
SCRIPTS_DIR: Final[str] = "js/"

RESOURCE_DIRS: Final[dict[ResourceKind, str]] = {
    ResourceKind.STYLESHEET: STYLES_DIR,
    ResourceKind.SCRIPT: SCRIPTS_DIR,
}


def resource_path(path: str | None, file: str, default_dir: str) -> ResourcePath:
    """Join a directory prefix and file name the way manifest entries expect.

    Args:
        path: Directory prefix from the manifest (``None``/empty selects the default).
        file: File name from the manifest.
        default_dir: Directory used when ``path`` is unset.

    Returns:
        Resource path relative to the portal root.
    """
    return ResourcePath(f"{path or default_dir}{file}")


def element_id(kind: ResourceKind, tab_id: str) -> str:
    """Return the head element id that marks a tab-scoped resource."""
    return f"{kind.value}-{tab_id}"


__all__ = [
    "HTML_DIR",
    "JSON_DIR",
    "MANIFEST_FILENAME",
    "MARKDOWN_DIR",
    "RESOURCE_DIRS",
    "SCRIPTS_DIR",
    "STYLES_DIR",
    "element_id",
    "resource_path",
]
