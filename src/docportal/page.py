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

"""Headless page model.

``PortalPage`` holds what a browser document would: the content region and
its classes, tab-scoped ``<link>``/``<script>`` head elements, the document
title, navigation and footer state. ``BrowserHistory`` is an entry stack with
``pushState``/``replaceState`` semantics and async popstate listeners.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final
from urllib.parse import urlsplit, urlunsplit

from docportal.content.nodes import el, render
from docportal.core.type_aliases import HistoryState

if TYPE_CHECKING:
    from docportal.core.model_types import ResourceKind

FADE_IN_CLASS: Final[str] = "fade-in"
LOADING_HTML: Final[str] = '<div class="loading">Loading content...</div>'

PopStateListener = Callable[[HistoryState | None], Awaitable[None]]


@dataclass(slots=True, frozen=True)
class HeadElement:
    """Tab-scoped ``<link rel="stylesheet">`` or ``<script>`` element."""

    id: str
    kind: ResourceKind
    url: str


@dataclass(slots=True)
class ContentRegion:
    html: str = ""
    classes: set[str] = field(default_factory=set)


@dataclass(slots=True)
class NavItem:
    """Navigation or footer link for one tab."""

    tab_id: str
    name: str
    title: str
    icon: str | None = None
    active: bool = False


@dataclass(slots=True, frozen=True)
class HistoryEntry:
    state: HistoryState | None
    fragment: str


def with_fragment(url: str, fragment: str) -> str:
    """Return ``url`` with its fragment replaced (an empty fragment removes it)."""
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, parts.query, fragment))


class BrowserHistory:
    """Session history stack for a single document.

    Args:
        url: Initial document URL; its fragment seeds the first entry.
    """

    def __init__(self, url: str = "/") -> None:
        self.url = url
        self._entries: list[HistoryEntry] = [HistoryEntry(state=None, fragment=urlsplit(url).fragment)]
        self._index = 0
        self._listeners: list[PopStateListener] = []

    @property
    def current(self) -> HistoryEntry:
        return self._entries[self._index]

    @property
    def fragment(self) -> str:
        return self.current.fragment

    @property
    def location(self) -> str:
        return with_fragment(self.url, self.fragment)

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    @property
    def index(self) -> int:
        return self._index

    def __len__(self) -> int:
        return len(self._entries)

    def push_state(self, state: HistoryState, fragment: str) -> None:
        """Append an entry after the current one, dropping any forward entries."""
        del self._entries[self._index + 1 :]
        self._entries.append(HistoryEntry(state=dict(state), fragment=fragment))
        self._index += 1

    def replace_state(self, state: HistoryState, fragment: str | None = None) -> None:
        """Replace the current entry's state, keeping its fragment unless given."""
        self._entries[self._index] = HistoryEntry(
            state=dict(state),
            fragment=self.fragment if fragment is None else fragment,
        )

    def add_listener(self, listener: PopStateListener) -> None:
        self._listeners.append(listener)

    async def go(self, delta: int) -> bool:
        """Move ``delta`` entries and notify popstate listeners.

        Returns:
            False (without notifying) when the target is outside the stack.
        """
        target = self._index + delta
        if delta == 0 or not 0 <= target < len(self._entries):
            return False
        self._index = target
        for listener in list(self._listeners):
            await listener(self.current.state)
        return True

    async def back(self) -> bool:
        return await self.go(-1)

    async def forward(self) -> bool:
        return await self.go(1)


class PortalPage:
    """Document state written by the tab controller and navigation renderer."""

    def __init__(self) -> None:
        self.content = ContentRegion()
        self.title = ""
        self.nav_items: list[NavItem] = []
        self.footer_links: list[NavItem] = []
        self.app_name = ""
        self.app_version = ""
        self.last_updated = ""
        self._head: dict[str, HeadElement] = {}

    def show_loading(self) -> None:
        self.content.html = LOADING_HTML
        self.content.classes.discard(FADE_IN_CLASS)

    def show_error(self, message: str) -> None:
        self.content.html = render(
            el(
                "div",
                el("h2", "Error"),
                el("div", el("p", message), class_="card"),
                class_="content-section",
            ),
        )

    def inject(self, html: str) -> None:
        self.content.html = html
        self.content.classes.add(FADE_IN_CLASS)

    def head_elements(self, kind: ResourceKind | None = None) -> list[HeadElement]:
        """Attached head elements in attachment order, optionally of one kind."""
        return [element for element in self._head.values() if kind is None or element.kind is kind]

    def has_element(self, element_id: str) -> bool:
        return element_id in self._head

    def attach(self, element: HeadElement) -> None:
        self._head[element.id] = element

    def detach(self, element_id: str) -> bool:
        return self._head.pop(element_id, None) is not None

    def sync_active(self, tab_id: str) -> None:
        """Mark the navigation link for ``tab_id`` active and clear the rest."""
        for item in self.nav_items:
            item.active = item.tab_id == tab_id


__all__ = [
    "FADE_IN_CLASS",
    "LOADING_HTML",
    "BrowserHistory",
    "ContentRegion",
    "HeadElement",
    "HistoryEntry",
    "NavItem",
    "PopStateListener",
    "PortalPage",
    "with_fragment",
]
