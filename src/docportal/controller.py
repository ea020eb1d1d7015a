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

"""Tab controller: switch tabs, load their resources and content, track history.

A switch shows the loading placeholder before its first suspension point,
then attaches the tab's stylesheet/script and resolves its content
concurrently. Every switch takes a request token; once its awaits finish, a
switch whose token is no longer the latest discards its result, so the most
recent request always owns the content region, the title and history.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from docportal.content.adapters import resolve_content
from docportal.core.model_types import LogComponent, TabState
from docportal.core.type_aliases import RequestToken
from docportal.logging import structured_extra
from docportal.manifest.models import TabDescriptor
from docportal.resources import attach_tab_resources

if TYPE_CHECKING:
    from docportal.content.cache import ContentCache
    from docportal.core.type_aliases import HistoryState
    from docportal.fetch import Fetcher
    from docportal.manifest.store import ConfigurationStore
    from docportal.page import BrowserHistory, PortalPage

logger: logging.Logger = logging.getLogger("docportal.controller")

HISTORY_KEY = "tab"

RenderListener = Callable[[TabDescriptor], object]


class TabController:
    """Coordinate tab switches for one page.

    Args:
        store: Loaded configuration store.
        cache: Session content cache.
        fetcher: Reads content and checks that tab resources load.
        page: Page model receiving content, title and head elements.
        history: Session history; the controller listens for popstate.
    """

    def __init__(
        self,
        store: ConfigurationStore,
        cache: ContentCache,
        fetcher: Fetcher,
        page: PortalPage,
        history: BrowserHistory,
    ) -> None:
        self.store = store
        self.cache = cache
        self.fetcher = fetcher
        self.page = page
        self.history = history
        self._token = RequestToken(0)
        self._latest_tab: str | None = None
        self._current: str | None = None
        self._states: dict[str, TabState] = {}
        self._render_listeners: list[RenderListener] = []
        history.add_listener(self.handle_popstate)

    @property
    def current_tab(self) -> str | None:
        """Id of the tab most recently switched to."""
        return self._current

    @property
    def latest_token(self) -> RequestToken:
        return self._token

    def state_of(self, tab_id: str) -> TabState:
        return self._states.get(tab_id, TabState.IDLE)

    def add_render_listener(self, listener: RenderListener) -> None:
        """Call ``listener(tab)`` after each tab renders; coroutine results are awaited."""
        self._render_listeners.append(listener)

    async def switch_tab(self, tab_id: str, *, update_history: bool = True) -> bool:
        """Switch to ``tab_id``.

        Args:
            tab_id: Tab to display.
            update_history: Push a ``{"tab": id}`` entry with fragment ``#id``;
                history replays pass False.

        Returns:
            True when this switch owns the page afterwards (rendered or showing
            the error card); False for unknown ids and superseded switches.
        """
        tab = self.store.find(tab_id)
        if tab is None:
            logger.error(
                "Tab not found: %s",
                tab_id,
                extra=structured_extra(component=LogComponent.CONTROLLER, tab=tab_id),
            )
            return False

        self._token = token = RequestToken(self._token + 1)
        self._latest_tab = tab.id
        self.page.sync_active(tab.id)
        _ = self.store.set_active(tab.id)
        self.page.show_loading()
        self._states[tab.id] = TabState.LOADING

        state = await self._load(tab, token)
        if state is None:
            self._supersede(tab, token)
            return False

        if update_history:
            self.history.push_state({HISTORY_KEY: tab.id}, tab.id)
        self._current = tab.id
        if state is TabState.RENDERED:
            await self._notify(tab)
        return True

    async def _load(self, tab: TabDescriptor, token: RequestToken) -> TabState | None:
        started = time.perf_counter()
        try:
            _, html = await asyncio.gather(
                attach_tab_resources(self.page, self.fetcher, tab),
                self._resolve(tab),
            )
            if not self._is_latest(token):
                return None
            self.page.inject(html)
            self.page.title = f"{tab.display_title} - {self.store.config.app.name}"
        except Exception:  # noqa: BLE001  # pylint: disable=broad-exception-caught
            if not self._is_latest(token):
                return None
            logger.exception(
                "Error loading tab content for %s",
                tab.id,
                extra=structured_extra(component=LogComponent.CONTROLLER, tab=tab.id, token=token),
            )
            self.page.show_error(f"Failed to load {tab.name} content")
            self._states[tab.id] = TabState.ERROR
            return TabState.ERROR

        self._states[tab.id] = TabState.RENDERED
        logger.info(
            "Rendered tab %s",
            tab.id,
            extra=structured_extra(
                component=LogComponent.CONTROLLER,
                tab=tab.id,
                token=token,
                duration_ms=round((time.perf_counter() - started) * 1000, 3),
            ),
        )
        return TabState.RENDERED

    async def _resolve(self, tab: TabDescriptor) -> str:
        cached = self.cache.get(tab.id)
        if cached is not None:
            logger.debug(
                "Using cached content for %s",
                tab.id,
                extra=structured_extra(component=LogComponent.CACHE, tab=tab.id, cached=True),
            )
            return cached
        html = await resolve_content(tab, self.fetcher)
        self.cache.store(tab.id, html)
        return html

    def _is_latest(self, token: RequestToken) -> bool:
        return token == self._token

    def _supersede(self, tab: TabDescriptor, token: RequestToken) -> None:
        logger.debug(
            "Discarding superseded switch to %s",
            tab.id,
            extra=structured_extra(component=LogComponent.CONTROLLER, tab=tab.id, token=token),
        )
        if self._latest_tab != tab.id and self._states.get(tab.id) is TabState.LOADING:
            self._states[tab.id] = TabState.IDLE

    async def _notify(self, tab: TabDescriptor) -> None:
        for listener in list(self._render_listeners):
            try:
                result = listener(tab)
                if inspect.isawaitable(result):
                    await result
            except Exception:  # noqa: BLE001  # pylint: disable=broad-exception-caught
                logger.exception(
                    "Render listener failed for %s",
                    tab.id,
                    extra=structured_extra(component=LogComponent.CONTROLLER, tab=tab.id),
                )

    def initial_tab(self, fragment: str | None = None) -> TabDescriptor | None:
        """Pick the first tab to show: fragment, then active tab, then first tab."""
        if fragment and (tab := self.store.find(fragment)) is not None:
            return tab
        return self.store.active_tab() or next(iter(self.store.tabs), None)

    async def start(self, fragment: str | None = None) -> str | None:
        """Render the initial tab without pushing history.

        The current entry's state is replaced with ``{"tab": id}`` so a later
        back-navigation can return to it.

        Args:
            fragment: URL fragment to honour; defaults to the history's fragment.

        Returns:
            The initial tab id, or None when the manifest has no tabs.
        """
        tab = self.initial_tab(self.history.fragment if fragment is None else fragment.lstrip("#"))
        if tab is None:
            return None
        self.history.replace_state({HISTORY_KEY: tab.id})
        _ = await self.switch_tab(tab.id, update_history=False)
        return tab.id

    async def handle_popstate(self, state: HistoryState | None) -> None:
        """Re-render the tab recorded in a history entry without pushing a new one."""
        tab_id = state.get(HISTORY_KEY) if state else None
        if tab_id is None:
            tab = self.initial_tab(self.history.fragment)
            tab_id = tab.id if tab is not None else None
        if tab_id is not None:
            _ = await self.switch_tab(tab_id, update_history=False)

    async def refresh(self) -> bool:
        """Evict the current tab from the cache and render it again (history untouched)."""
        if self._current is None:
            return False
        _ = self.cache.evict(self._current)
        return await self.switch_tab(self._current, update_history=False)

    def clear_cache(self) -> None:
        self.cache.clear()


__all__ = ["HISTORY_KEY", "RenderListener", "TabController"]
