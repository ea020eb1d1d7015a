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

"""Enumerations shared by the portal pipeline.

- Content source tags read from the navigation manifest
- Per-tab loading states tracked by the tab controller
- Head resource kinds (tab stylesheets and scripts)
- Logging formats and components
"""

from __future__ import annotations

from docportal.compat import StrEnum


class ContentSource(StrEnum):
    """Interpretation of a tab's ``content`` resource.

    Attributes:
        JSON: Structured content document rendered by the HTML generator.
        MARKDOWN: Minimal Markdown converted to HTML.
        HTML: Raw HTML injected verbatim.
    """

    JSON = "json"
    MARKDOWN = "markdown"
    HTML = "html"

    @classmethod
    def from_str(cls, raw: str) -> ContentSource:
        """Create a ContentSource from a manifest string.

        Args:
            raw: Source tag as written in the manifest.

        Returns:
            ContentSource enum value.

        Raises:
            ValueError: If the string does not name a known source.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown content source '{raw}'"
            raise ValueError(msg) from exc

    @classmethod
    def coerce(cls, raw: object) -> ContentSource | None:
        """Return the matching source, or ``None`` for unset/unrecognised tags."""
        if isinstance(raw, ContentSource):
            return raw
        if not isinstance(raw, str):
            return None
        try:
            return cls.from_str(raw)
        except ValueError:
            return None


class TabState(StrEnum):
    """Lifecycle of the most recent switch request for a tab.

    Attributes:
        IDLE: Never requested, or superseded before it rendered.
        LOADING: Loading placeholder shown, resources and content pending.
        RENDERED: Content injected into the content region.
        ERROR: An unexpected failure replaced the content with an error card.
    """

    IDLE = "idle"
    LOADING = "loading"
    RENDERED = "rendered"
    ERROR = "error"


class ResourceKind(StrEnum):
    """Tab-scoped head resources; the value doubles as the element id prefix."""

    STYLESHEET = "style"
    SCRIPT = "script"


class LogFormat(StrEnum):
    """Enumeration of log output formats.

    Attributes:
        TEXT: Human-readable text format.
        JSON: Machine-readable JSON format.
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        """Create a LogFormat enum from a string value.

        Args:
            raw: String representation of the log format.

        Returns:
            LogFormat enum value.

        Raises:
            ValueError: If the string does not match any LogFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log format '{raw}'"
            raise ValueError(msg) from exc


class LogComponent(StrEnum):
    """Logical components attached to structured log records."""

    MANIFEST = "manifest"
    CONTENT = "content"
    CACHE = "cache"
    CONTROLLER = "controller"
    RESOURCES = "resources"
    FETCH = "fetch"
    CLI = "cli"
    SERVICES = "services"


__all__ = [
    "ContentSource",
    "LogComponent",
    "LogFormat",
    "ResourceKind",
    "TabState",
]
