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


"""Test doubles for isolating the portal from real transports."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from docportal.exceptions import ResourceFetchError
from docportal.fetch import FetchResponse

if TYPE_CHECKING:
    from collections.abc import Mapping

    from docportal.core.type_aliases import ResourcePath

__all__ = ["MemoryFetcher"]


class MemoryFetcher:
    """Fetcher serving resources from a dict and recording every request.

    Missing resources fail with status 404. ``statuses`` forces a status for a
    resource, ``failures`` raises an arbitrary exception, and ``gate`` holds a
    fetch until the returned event is set.
    """

    def __init__(self, resources: Mapping[str, str] | None = None) -> None:
        super().__init__()
        self.resources: dict[str, str] = dict(resources or {})
        self.statuses: dict[str, int] = {}
        self.failures: dict[str, Exception] = {}
        self.requests: list[str] = []
        self.closed = False
        self._gates: dict[str, asyncio.Event] = {}

    def gate(self, resource: str) -> asyncio.Event:
        event = asyncio.Event()
        self._gates[resource] = event
        return event

    def count(self, resource: str) -> int:
        return self.requests.count(resource)

    async def fetch(self, resource: ResourcePath | str) -> FetchResponse:
        key = str(resource)
        self.requests.append(key)
        gate = self._gates.get(key)
        if gate is not None:
            _ = await gate.wait()
        failure = self.failures.get(key)
        if failure is not None:
            raise failure
        status = self.statuses.get(key)
        if status is not None and not 200 <= status < 300:
            raise ResourceFetchError(key, status=status)
        if key not in self.resources:
            raise ResourceFetchError(key, status=404)
        return FetchResponse(status=200, text=self.resources[key], url=key)

    async def aclose(self) -> None:
        self.closed = True
