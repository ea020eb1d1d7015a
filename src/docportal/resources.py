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

"""Attach and detach tab-scoped stylesheets and scripts.

Head elements carry ids ``style-<tab>``/``script-<tab>``. Switching tabs
removes every other element of the same kind, attaches the new one when it is
missing and fetches the resource once to check it loads. A failed check is a
warning; it never fails the switch.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from docportal.core.model_types import LogComponent, ResourceKind
from docportal.exceptions import ResourceFetchError
from docportal.logging import structured_extra
from docportal.page import HeadElement
from docportal.paths import RESOURCE_DIRS, element_id, resource_path

if TYPE_CHECKING:
    from docportal.fetch import Fetcher
    from docportal.manifest.models import ResourceRef, TabDescriptor
    from docportal.page import PortalPage

logger: logging.Logger = logging.getLogger("docportal.resources")


def _resource_ref(tab: TabDescriptor, kind: ResourceKind) -> ResourceRef | None:
    return tab.styles if kind is ResourceKind.STYLESHEET else tab.scripts


def _detach_others(page: PortalPage, kind: ResourceKind, keep: str | None) -> None:
    for element in page.head_elements(kind):
        if element.id != keep:
            _ = page.detach(element.id)


async def attach_tab_resource(page: PortalPage, fetcher: Fetcher, tab: TabDescriptor, kind: ResourceKind) -> bool:
    """Attach one kind of tab resource.

    Args:
        page: Page whose head is updated.
        fetcher: Used to check that the resource loads.
        tab: Tab being switched to.
        kind: Stylesheet or script.

    Returns:
        True when the tab's element is attached and its resource loaded (or was
        already attached); False when the tab declares none or the load check failed.
    """
    ref = _resource_ref(tab, kind)
    if ref is None or not ref.file:
        _detach_others(page, kind, keep=None)
        return False

    marker = element_id(kind, tab.id)
    _detach_others(page, kind, keep=marker)
    if page.has_element(marker):
        return True

    url = resource_path(ref.path, ref.file, RESOURCE_DIRS[kind])
    page.attach(HeadElement(id=marker, kind=kind, url=url))
    try:
        _ = await fetcher.fetch(url)
    except ResourceFetchError as exc:
        logger.warning(
            "Could not load %s for %s",
            "styles" if kind is ResourceKind.STYLESHEET else "scripts",
            tab.id,
            extra=structured_extra(
                component=LogComponent.RESOURCES,
                tab=tab.id,
                path=url,
                status=exc.status,
                details={"kind": kind.value},
            ),
        )
        return False
    return True


async def attach_tab_resources(page: PortalPage, fetcher: Fetcher, tab: TabDescriptor) -> tuple[bool, bool]:
    """Attach the tab's stylesheet and script concurrently."""
    styles, scripts = await asyncio.gather(
        attach_tab_resource(page, fetcher, tab, ResourceKind.STYLESHEET),
        attach_tab_resource(page, fetcher, tab, ResourceKind.SCRIPT),
    )
    return styles, scripts


__all__ = ["attach_tab_resource", "attach_tab_resources"]
