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

"""Resource fetching for portal roots.

A portal root is either an HTTP(S) base URL, read with ``httpx.AsyncClient``,
or a local directory, read from a worker thread. Both fetchers return a
``FetchResponse`` for 2xx results and raise ``ResourceFetchError`` for
everything else, so callers handle one failure type.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

import httpx

from docportal.compat import override
from docportal.config.models import DEFAULT_TIMEOUT, is_remote_root
from docportal.core.model_types import LogComponent
from docportal.exceptions import ResourceFetchError
from docportal.logging import structured_extra

if TYPE_CHECKING:
    from docportal.core.type_aliases import ResourcePath

logger: logging.Logger = logging.getLogger("docportal.fetch")


@dataclass(slots=True, frozen=True)
class FetchResponse:
    """Successful fetch result.

    Attributes:
        status: HTTP-style status code (200 for local files).
        text: Decoded body.
        url: Absolute URL or file path that was read.
    """

    status: int
    text: str
    url: str


class Fetcher(Protocol):
    """Reads resources relative to a portal root."""

    async def fetch(self, resource: ResourcePath | str) -> FetchResponse:
        """Fetch ``resource`` or raise ``ResourceFetchError``."""
        ...

    async def aclose(self) -> None:
        """Release any underlying transport."""
        ...


class HttpFetcher:
    """Fetch resources from an HTTP(S) base URL.

    Args:
        base_url: Portal root URL; resources are resolved relative to it.
        timeout: Request timeout in seconds.
        client: Pre-built client (its ``base_url`` wins); closed by the caller.
        transport: Optional transport for the internally created client.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            follow_redirects=True,
        )

    async def fetch(self, resource: ResourcePath | str) -> FetchResponse:
        try:
            response = await self._client.get(str(resource).lstrip("/"))
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.debug(
                "Request for %s failed: %s",
                resource,
                exc,
                extra=structured_extra(component=LogComponent.FETCH, path=str(resource)),
            )
            raise ResourceFetchError(str(resource), reason=str(exc) or type(exc).__name__) from exc
        if not response.is_success:
            logger.debug(
                "Request for %s returned %s",
                resource,
                response.status_code,
                extra=structured_extra(
                    component=LogComponent.FETCH,
                    path=str(resource),
                    status=response.status_code,
                ),
            )
            raise ResourceFetchError(str(resource), status=response.status_code)
        return FetchResponse(status=response.status_code, text=response.text, url=str(response.url))

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    @override
    def __repr__(self) -> str:
        return f"HttpFetcher(base_url={self.base_url!r})"


class FileFetcher:
    """Fetch resources from a local portal directory.

    Resources resolving outside ``root`` are rejected as not found; names
    the filesystem cannot represent are reported as fetch failures.
    """

    def __init__(self, root: Path) -> None:
        self.root = root.resolve()

    async def fetch(self, resource: ResourcePath | str) -> FetchResponse:
        try:
            target = (self.root / str(resource).lstrip("/")).resolve()
        except (OSError, ValueError) as exc:
            raise ResourceFetchError(str(resource), reason=str(exc)) from exc
        if not target.is_relative_to(self.root):
            raise ResourceFetchError(str(resource), status=404)
        try:
            text = await asyncio.to_thread(target.read_text, encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as exc:
            raise ResourceFetchError(str(resource), status=404) from exc
        except (OSError, ValueError) as exc:
            raise ResourceFetchError(str(resource), reason=str(exc)) from exc
        return FetchResponse(status=200, text=text, url=str(target))

    async def aclose(self) -> None:
        return None

    @override
    def __repr__(self) -> str:
        return f"FileFetcher(root={str(self.root)!r})"


def create_fetcher(root: str, *, timeout: float = DEFAULT_TIMEOUT) -> HttpFetcher | FileFetcher:
    """Return the fetcher matching ``root`` (URL or directory)."""
    if is_remote_root(root):
        return HttpFetcher(root, timeout=timeout)
    return FileFetcher(Path(root))


__all__ = ["FetchResponse", "Fetcher", "FileFetcher", "HttpFetcher", "create_fetcher"]
