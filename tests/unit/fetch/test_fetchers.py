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


"""Tests for HTTP and filesystem fetchers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from docportal.exceptions import ResourceFetchError
from docportal.fetch import FileFetcher, HttpFetcher, create_fetcher

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.unit

BASE_URL = "https://docs.example.test/portal"


def _transport(routes: dict[str, httpx.Response], seen: list[str] | None = None) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(str(request.url))
        return routes.get(request.url.path, httpx.Response(404, text="missing"))

    return httpx.MockTransport(handler)


@pytest.mark.asyncio
async def test_http_fetcher_resolves_relative_to_base_url() -> None:
    seen: list[str] = []
    routes = {"/portal/json/about.json": httpx.Response(200, text='{"title": "About"}')}
    fetcher = HttpFetcher(BASE_URL, transport=_transport(routes, seen))
    response = await fetcher.fetch("json/about.json")
    await fetcher.aclose()
    assert response.status == 200
    assert response.text == '{"title": "About"}'
    assert seen == [f"{BASE_URL}/json/about.json"]


@pytest.mark.asyncio
async def test_http_fetcher_strips_leading_slash() -> None:
    routes = {"/portal/app.json": httpx.Response(200, text="{}")}
    fetcher = HttpFetcher(f"{BASE_URL}/", transport=_transport(routes))
    response = await fetcher.fetch("/app.json")
    await fetcher.aclose()
    assert response.url == f"{BASE_URL}/app.json"


@pytest.mark.asyncio
async def test_http_fetcher_raises_for_error_status() -> None:
    fetcher = HttpFetcher(BASE_URL, transport=_transport({}))
    with pytest.raises(ResourceFetchError) as excinfo:
        _ = await fetcher.fetch("json/missing.json")
    await fetcher.aclose()
    assert excinfo.value.status == 404
    assert excinfo.value.resource == "json/missing.json"


@pytest.mark.asyncio
async def test_http_fetcher_wraps_transport_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    fetcher = HttpFetcher(BASE_URL, transport=httpx.MockTransport(handler))
    with pytest.raises(ResourceFetchError, match="connection refused") as excinfo:
        _ = await fetcher.fetch("app.json")
    await fetcher.aclose()
    assert excinfo.value.status is None


@pytest.mark.asyncio
async def test_http_fetcher_wraps_unrepresentable_urls() -> None:
    fetcher = HttpFetcher(BASE_URL, transport=_transport({}))
    with pytest.raises(ResourceFetchError) as excinfo:
        _ = await fetcher.fetch("json/bad\nname.json")
    await fetcher.aclose()
    assert excinfo.value.status is None
    assert excinfo.value.resource == "json/bad\nname.json"


@pytest.mark.asyncio
async def test_http_fetcher_leaves_supplied_client_open() -> None:
    client = httpx.AsyncClient(base_url=BASE_URL, transport=_transport({}))
    fetcher = HttpFetcher(BASE_URL, client=client)
    await fetcher.aclose()
    assert client.is_closed is False
    await client.aclose()


@pytest.mark.asyncio
async def test_file_fetcher_reads_relative_to_root(tmp_path: Path) -> None:
    (tmp_path / "json").mkdir()
    _ = (tmp_path / "json" / "about.json").write_text("{}", encoding="utf-8")
    response = await FileFetcher(tmp_path).fetch("json/about.json")
    assert response.status == 200
    assert response.text == "{}"


@pytest.mark.asyncio
@pytest.mark.parametrize("resource", ["missing.json", "json", "../outside.json"])
async def test_file_fetcher_reports_not_found(tmp_path: Path, resource: str) -> None:
    (tmp_path / "json").mkdir()
    _ = (tmp_path.parent / "outside.json").write_text("{}", encoding="utf-8")
    with pytest.raises(ResourceFetchError) as excinfo:
        _ = await FileFetcher(tmp_path).fetch(resource)
    assert excinfo.value.status == 404


def test_create_fetcher_selects_by_root(tmp_path: Path) -> None:
    assert isinstance(create_fetcher(str(tmp_path)), FileFetcher)
    assert isinstance(create_fetcher("HTTPS://docs.example.test"), HttpFetcher)


@pytest.mark.asyncio
async def test_file_fetcher_wraps_unrepresentable_names(tmp_path: Path) -> None:
    with pytest.raises(ResourceFetchError) as excinfo:
        _ = await FileFetcher(tmp_path).fetch("json/bad\x00name.json")
    assert excinfo.value.status is None
    assert excinfo.value.reason
