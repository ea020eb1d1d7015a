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

"""Common exception hierarchy for docportal."""

from __future__ import annotations

__all__ = [
    "ConfigurationNotLoadedError",
    "ContentParseError",
    "PortalError",
    "PortalValidationError",
    "ResourceFetchError",
    "UnknownTabError",
]


class PortalError(Exception):
    """Base error for all docportal exceptions."""


class PortalValidationError(PortalError, ValueError):
    """Raised when input data fails validation checks."""


class ResourceFetchError(PortalError):
    """Raised when a portal resource cannot be fetched.

    Covers transport failures, missing files and non-success HTTP statuses.
    """

    def __init__(self, resource: str, *, status: int | None = None, reason: str | None = None) -> None:
        """Initialise the error with the failing resource.

        Args:
            resource: Resource path or URL that was requested.
            status: HTTP-style status code when a response was received.
            reason: Transport or filesystem error text when no response exists.
        """
        self.resource = resource
        self.status = status
        self.reason = reason
        detail = f"status {status}" if status is not None else (reason or "unavailable")
        super().__init__(f"Unable to fetch {resource}: {detail}")


class ContentParseError(PortalValidationError):
    """Raised when a fetched document is not valid JSON or fails validation."""

    def __init__(self, resource: str, error: Exception) -> None:
        """Initialise the error with the failing resource.

        Args:
            resource: Resource path of the document.
            error: Underlying decode or validation error.
        """
        self.resource = resource
        self.error = error
        super().__init__(f"Unable to parse {resource}: {error}")


class UnknownTabError(PortalError, LookupError):
    """Raised by services when a caller names a tab absent from the manifest."""

    def __init__(self, tab_id: str) -> None:
        """Initialise the error with the unknown tab id.

        Args:
            tab_id: Identifier that did not match any tab descriptor.
        """
        self.tab_id = tab_id
        super().__init__(f"Tab not found: {tab_id}")


class ConfigurationNotLoadedError(PortalError, RuntimeError):
    """Raised when the navigation manifest is read before ``load()`` ran."""

    def __init__(self) -> None:
        """Initialise the error with a fixed message."""
        super().__init__("Portal configuration has not been loaded yet")
