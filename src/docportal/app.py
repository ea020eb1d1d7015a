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

"""Portal composition root.

``PortalController`` is built once per page session. It owns the
configuration store, content cache, page model, history and tab controller,
and is handed to page decorators through ``install`` instead of being looked
up globally. Decorators only need ``config`` and ``switch_tab``; ``refresh``,
``clear_cache`` and ``add_render_listener`` complete the consumer surface.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from docportal.compat import Self
from docportal.config.models import PortalSettings
from docportal.content.cache import ContentCache
from docportal.controller import TabController
from docportal.core.model_types import LogComponent
from docportal.fetch import create_fetcher
from docportal.logging import structured_extra
from docportal.manifest.store import ConfigurationStore
from docportal.navigation import paint_navigation
from docportal.page import BrowserHistory, PortalPage
from docportal.shell import render_shell

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from docportal.controller import RenderListener
    from docportal.fetch import Fetcher
    from docportal.manifest.models import PortalConfig

logger: logging.Logger = logging.getLogger("docportal.controller")

DecoratorT = TypeVar("DecoratorT")


class PortalController:
    """One portal page session.

    Args:
        settings: Portal settings; defaults to ``PortalSettings()``.
        fetcher: Resource fetcher; defaults to one built from ``settings.root``.
            A supplied fetcher is not closed by ``aclose``.
        url: Initial document URL; its fragment selects the first tab.
    """

    def __init__(
        self,
        settings: PortalSettings | None = None,
        *,
        fetcher: Fetcher | None = None,
        url: str = "/",
    ) -> None:
        self.settings = settings or PortalSettings()
        self._owns_fetcher = fetcher is None
        self.fetcher: Fetcher = fetcher or create_fetcher(self.settings.root, timeout=self.settings.timeout)
        self.store = ConfigurationStore(self.fetcher, manifest=self.settings.manifest)
        self.cache = ContentCache()
        self.page = PortalPage()
        self.history = BrowserHistory(url)
        self.tabs = TabController(self.store, self.cache, self.fetcher, self.page, self.history)

    async def start(self) -> str | None:
        """Load the manifest, paint navigation and render the initial tab.

        Calling ``start`` again reloads the manifest and empties the content
        cache.

        Returns:
            The initial tab id.
        """
        if self.store.loaded:
            # Cached renders belong to the previous manifest.
            self.cache.clear()
        config = await self.store.load()
        paint_navigation(self.page, config)
        initial = await self.tabs.start()
        logger.info(
            "Portal started on tab %s",
            initial,
            extra=structured_extra(component=LogComponent.CONTROLLER, tab=initial),
        )
        return initial

    @property
    def config(self) -> PortalConfig:
        """Current configuration (read accessor for decorators)."""
        return self.store.config

    @property
    def current_tab(self) -> str | None:
        return self.tabs.current_tab

    async def switch_tab(self, tab_id: str) -> bool:
        """Switch tabs with history tracking (invocation function for decorators)."""
        return await self.tabs.switch_tab(tab_id)

    def clear_cache(self) -> None:
        self.tabs.clear_cache()

    async def refresh(self) -> bool:
        return await self.tabs.refresh()

    def add_render_listener(self, listener: RenderListener) -> None:
        self.tabs.add_render_listener(listener)

    def install(self, decorator: Callable[[PortalController], DecoratorT]) -> DecoratorT:
        """Hand this controller to a decorator's initialisation entry point."""
        return decorator(self)

    def render_shell(self) -> str:
        """Render the current page state as a full HTML document."""
        return render_shell(self.page)

    async def aclose(self) -> None:
        if self._owns_fetcher:
            await self.fetcher.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()


__all__ = ["PortalController"]
