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


"""Tab listing and single-tab rendering services."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from docportal.app import PortalController
from docportal.core.model_types import ContentSource, LogComponent
from docportal.exceptions import UnknownTabError
from docportal.logging import structured_extra

if TYPE_CHECKING:
    from docportal.config.models import PortalSettings
    from docportal.fetch import Fetcher
    from docportal.manifest.models import PortalConfig

logger: logging.Logger = logging.getLogger("docportal.services.tabs")


@dataclass(slots=True, frozen=True)
class TabSummary:
    """One row of ``docportal tabs`` output.

    Attributes:
        id: Tab id.
        name: Navigation label.
        title: Display title.
        order: Sort key.
        active: Whether the manifest marks the tab active.
        source: Recognised content source, None for placeholder tabs.
        file: Configured content file, if any.
    """

    id: str
    name: str
    title: str
    order: int
    active: bool
    source: ContentSource | None
    file: str | None


def summarise_tabs(config: PortalConfig) -> list[TabSummary]:
    """Summaries of every tab in navigation order."""
    tabs = sorted(config.navigation.tabs, key=lambda tab: tab.order)
    return [
        TabSummary(
            id=tab.id,
            name=tab.name,
            title=tab.display_title,
            order=tab.order,
            active=tab.active,
            source=tab.content.kind if tab.content else None,
            file=tab.content.file if tab.content else None,
        )
        for tab in tabs
    ]


async def list_tabs(settings: PortalSettings, *, fetcher: Fetcher | None = None) -> list[TabSummary]:
    """Load the manifest and summarise its tabs.

    Args:
        settings: Portal settings.
        fetcher: Optional fetcher overriding the one built from ``settings``.

    Returns:
        Tab summaries in navigation order.
    """
    async with PortalController(settings, fetcher=fetcher) as portal:
        config = await portal.store.load()
        return summarise_tabs(config)


async def render_tab(settings: PortalSettings, tab_id: str, *, fetcher: Fetcher | None = None) -> str:
    """Render the full page shell with ``tab_id`` selected.

    Args:
        settings: Portal settings.
        tab_id: Tab to render.
        fetcher: Optional fetcher overriding the one built from ``settings``.

    Returns:
        Full HTML document.

    Raises:
        UnknownTabError: If the manifest has no tab ``tab_id``.
    """
    async with PortalController(settings, fetcher=fetcher, url=f"/#{tab_id}") as portal:
        await portal.store.load()
        if portal.store.find(tab_id) is None:
            raise UnknownTabError(tab_id)
        _ = await portal.start()
        logger.info(
            "Rendered tab %s",
            tab_id,
            extra=structured_extra(component=LogComponent.SERVICES, tab=tab_id),
        )
        return portal.render_shell()


__all__ = ["TabSummary", "list_tabs", "render_tab", "summarise_tabs"]
