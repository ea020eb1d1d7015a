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

"""Navigation and footer rendering.

Tabs are listed in ``order`` (manifest order breaks ties). The page keeps the
projected ``NavItem`` list so the active marker can be re-synchronised on
every switch without re-reading the manifest.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime
from typing import TYPE_CHECKING

from docportal.compat import UTC
from docportal.content.generator import classes
from docportal.content.nodes import el, render_all
from docportal.page import NavItem

if TYPE_CHECKING:
    from docportal.manifest.models import AppInfo, PortalConfig
    from docportal.page import PortalPage


def ordered(config: PortalConfig) -> list[NavItem]:
    """Project the configuration's tabs into navigation items."""
    tabs = sorted(config.navigation.tabs, key=lambda tab: tab.order)
    return [
        NavItem(tab_id=tab.id, name=tab.name, title=tab.display_title, icon=tab.icon, active=tab.active)
        for tab in tabs
    ]


def render_nav_items(items: Iterable[NavItem]) -> str:
    return render_all(
        (
            el(
                "li",
                el(
                    "a",
                    el("i", class_=f"icon-{item.icon}") if item.icon else None,
                    item.name,
                    href=f"#{item.tab_id}",
                    class_=classes("nav-tab-link", "active" if item.active else None),
                    data_tab=item.tab_id,
                    title=item.title,
                ),
            )
            for item in items
        ),
        separator="\n",
    )


def render_footer_items(items: Iterable[NavItem]) -> str:
    return render_all(
        (el("li", el("a", item.name, href=f"#{item.tab_id}", data_tab=item.tab_id)) for item in items),
        separator="\n",
    )


def render_navigation(config: PortalConfig) -> str:
    """Render the ``<li>`` navigation links for every tab."""
    return render_nav_items(ordered(config))


def render_footer_links(config: PortalConfig) -> str:
    """Render the footer ``<li>`` links for every tab."""
    return render_footer_items(ordered(config))


def format_last_updated(app: AppInfo, today: date | None = None) -> str:
    """Return the footer date: ``app.last_updated`` or today, as ``YYYY-MM-DD``.

    Values that are not ISO dates are shown unchanged.
    """
    raw = app.last_updated
    if not raw:
        return (today or datetime.now(UTC).date()).isoformat()
    try:
        return date.fromisoformat(raw[:10]).isoformat()
    except ValueError:
        return raw


def paint_navigation(page: PortalPage, config: PortalConfig, *, today: date | None = None) -> None:
    """Initial paint: navigation, footer links and footer app details."""
    page.nav_items = ordered(config)
    page.footer_links = ordered(config)
    page.app_name = config.app.name
    page.app_version = config.app.version
    page.last_updated = format_last_updated(config.app, today)


__all__ = [
    "format_last_updated",
    "ordered",
    "paint_navigation",
    "render_footer_items",
    "render_footer_links",
    "render_nav_items",
    "render_navigation",
]
