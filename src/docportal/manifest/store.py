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

"""Configuration store holding the navigation manifest for one portal session."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from docportal.core.model_types import LogComponent
from docportal.exceptions import ConfigurationNotLoadedError, ContentParseError, ResourceFetchError
from docportal.json import parse_json
from docportal.logging import structured_extra
from docportal.paths import MANIFEST_FILENAME

from .models import PortalConfig, TabDescriptor, fallback_config

if TYPE_CHECKING:
    from docportal.fetch import Fetcher

logger: logging.Logger = logging.getLogger("docportal.manifest")


def parse_config(payload: str, *, resource: str = MANIFEST_FILENAME) -> PortalConfig:
    """Parse and validate a manifest document.

    Args:
        payload: Raw manifest text.
        resource: Resource name used in error messages.

    Returns:
        Validated configuration.

    Raises:
        ContentParseError: If the text is not JSON or fails validation.
    """
    try:
        return PortalConfig.model_validate(parse_json(payload))
    except (ValueError, ValidationError) as exc:
        raise ContentParseError(resource, exc) from exc


class ConfigurationStore:
    """Load the manifest once and track the active tab.

    Args:
        fetcher: Reads resources relative to the portal root.
        manifest: Manifest resource name.
    """

    def __init__(self, fetcher: Fetcher, *, manifest: str = MANIFEST_FILENAME) -> None:
        self._fetcher = fetcher
        self.manifest = manifest
        self._config: PortalConfig | None = None

    async def load(self) -> PortalConfig:
        """Fetch the manifest, substituting the fallback configuration on any failure.

        Returns:
            The loaded (or fallback) configuration; also kept on the store.
        """
        try:
            response = await self._fetcher.fetch(self.manifest)
            config = parse_config(response.text, resource=self.manifest)
        except (ResourceFetchError, ContentParseError) as exc:
            logger.warning(
                "Failed to load configuration, using fallback: %s",
                exc,
                extra=structured_extra(
                    component=LogComponent.MANIFEST,
                    path=self.manifest,
                    status=getattr(exc, "status", None),
                ),
            )
            config = fallback_config()
        else:
            logger.info(
                "Loaded configuration with %d tab(s)",
                len(config.navigation.tabs),
                extra=structured_extra(component=LogComponent.MANIFEST, path=self.manifest),
            )
        self._config = config
        return config

    @property
    def loaded(self) -> bool:
        return self._config is not None

    @property
    def config(self) -> PortalConfig:
        """Return the loaded configuration.

        Raises:
            ConfigurationNotLoadedError: If ``load()`` has not completed yet.
        """
        if self._config is None:
            raise ConfigurationNotLoadedError
        return self._config

    @property
    def tabs(self) -> list[TabDescriptor]:
        """Tabs in manifest order."""
        return self.config.navigation.tabs

    def ordered_tabs(self) -> list[TabDescriptor]:
        """Tabs sorted by ``order``; manifest order breaks ties."""
        return sorted(self.tabs, key=lambda tab: tab.order)

    def find(self, tab_id: str) -> TabDescriptor | None:
        return next((tab for tab in self.tabs if tab.id == tab_id), None)

    def active_tab(self) -> TabDescriptor | None:
        return next((tab for tab in self.tabs if tab.active), None)

    def set_active(self, tab_id: str) -> bool:
        """Mark ``tab_id`` as the only active tab.

        Unknown ids are logged and leave every flag untouched.

        Returns:
            True when the flags were updated.
        """
        if self.find(tab_id) is None:
            logger.error(
                "Cannot activate unknown tab: %s",
                tab_id,
                extra=structured_extra(component=LogComponent.MANIFEST, tab=tab_id),
            )
            return False
        for tab in self.tabs:
            tab.active = tab.id == tab_id
        return True


__all__ = ["ConfigurationStore", "parse_config"]
