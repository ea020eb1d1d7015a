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


"""Tests for the configuration store."""

from __future__ import annotations

import json
import logging

import pytest

from docportal.exceptions import ConfigurationNotLoadedError, ContentParseError
from docportal.manifest import ConfigurationStore, parse_config
from tests.fixtures.builders import build_manifest, build_tab
from tests.fixtures.stubs import MemoryFetcher

pytestmark = pytest.mark.unit


def _store(manifest: object) -> tuple[ConfigurationStore, MemoryFetcher]:
    fetcher = MemoryFetcher({"app.json": json.dumps(manifest)})
    return ConfigurationStore(fetcher), fetcher


def test_parse_config_wraps_invalid_json() -> None:
    with pytest.raises(ContentParseError, match=r"Unable to parse app\.json"):
        _ = parse_config("{not json")


def test_config_before_load_raises() -> None:
    store, _ = _store(build_manifest(build_tab("a")))
    assert store.loaded is False
    with pytest.raises(ConfigurationNotLoadedError):
        _ = store.config


@pytest.mark.asyncio
async def test_load_reads_manifest_once() -> None:
    store, fetcher = _store(build_manifest(build_tab("a"), build_tab("b")))
    config = await store.load()
    assert [tab.id for tab in config.navigation.tabs] == ["a", "b"]
    assert store.config is config
    assert fetcher.requests == ["app.json"]


@pytest.mark.asyncio
async def test_load_uses_custom_manifest_name() -> None:
    fetcher = MemoryFetcher({"nav/site.json": json.dumps(build_manifest(build_tab("x")))})
    store = ConfigurationStore(fetcher, manifest="nav/site.json")
    config = await store.load()
    assert config.navigation.tabs[0].id == "x"


@pytest.mark.asyncio
async def test_http_error_falls_back(caplog: pytest.LogCaptureFixture) -> None:
    store, fetcher = _store(build_manifest(build_tab("a")))
    fetcher.statuses["app.json"] = 500
    with caplog.at_level(logging.WARNING, logger="docportal.manifest"):
        config = await store.load()
    assert [tab.id for tab in config.navigation.tabs] == ["homepage"]
    assert "using fallback" in caplog.text


@pytest.mark.asyncio
async def test_malformed_manifest_falls_back() -> None:
    fetcher = MemoryFetcher({"app.json": "{"})
    config = await ConfigurationStore(fetcher).load()
    assert config.app.name == "Documentation Portal"
    assert config.navigation.tabs[0].active is True


@pytest.mark.asyncio
async def test_duplicate_ids_fall_back() -> None:
    store, _ = _store(build_manifest(build_tab("a"), build_tab("a")))
    config = await store.load()
    assert [tab.id for tab in config.navigation.tabs] == ["homepage"]


@pytest.mark.asyncio
async def test_ordered_tabs_is_stable_for_equal_orders() -> None:
    store, _ = _store(
        build_manifest(
            build_tab("c", order=2),
            build_tab("a", order=1),
            build_tab("b", order=2),
        ),
    )
    _ = await store.load()
    assert [tab.id for tab in store.ordered_tabs()] == ["a", "c", "b"]
    assert [tab.id for tab in store.tabs] == ["c", "a", "b"]


@pytest.mark.asyncio
async def test_set_active_is_exclusive() -> None:
    store, _ = _store(build_manifest(build_tab("a", active=True), build_tab("b"), build_tab("c", active=True)))
    _ = await store.load()
    assert store.set_active("b") is True
    assert [tab.id for tab in store.tabs if tab.active] == ["b"]
    assert store.active_tab() is store.find("b")


@pytest.mark.asyncio
async def test_set_active_unknown_id_changes_nothing(caplog: pytest.LogCaptureFixture) -> None:
    store, _ = _store(build_manifest(build_tab("a", active=True), build_tab("b")))
    _ = await store.load()
    with caplog.at_level(logging.ERROR, logger="docportal.manifest"):
        assert store.set_active("missing") is False
    assert [tab.id for tab in store.tabs if tab.active] == ["a"]
    assert "missing" in caplog.text


@pytest.mark.asyncio
async def test_find_returns_none_for_unknown_id() -> None:
    store, _ = _store(build_manifest(build_tab("a")))
    _ = await store.load()
    assert store.find("zzz") is None
    assert store.find("a") is not None
