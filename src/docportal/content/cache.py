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

"""Session cache of rendered tab HTML.

Entries are authoritative until ``evict`` or ``clear``; placeholder renders
are stored like any other so a failing resource is not refetched. There is no
size bound; a session holds at most one entry per manifest tab.
"""

from __future__ import annotations

import logging

from docportal.core.model_types import LogComponent
from docportal.logging import structured_extra

logger: logging.Logger = logging.getLogger("docportal.cache")


class ContentCache:
    """Mapping of tab id to rendered HTML."""

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}

    def get(self, tab_id: str) -> str | None:
        return self._entries.get(tab_id)

    def store(self, tab_id: str, html: str) -> None:
        self._entries[tab_id] = html
        logger.debug(
            "Cached content for %s",
            tab_id,
            extra=structured_extra(component=LogComponent.CACHE, tab=tab_id),
        )

    def evict(self, tab_id: str) -> bool:
        """Drop one entry; returns True when an entry existed."""
        return self._entries.pop(tab_id, None) is not None

    def clear(self) -> None:
        self._entries.clear()
        logger.info("Content cache cleared", extra=structured_extra(component=LogComponent.CACHE))

    def keys(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, tab_id: object) -> bool:
        return tab_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["ContentCache"]
