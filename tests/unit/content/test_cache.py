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


"""Tests for the session content cache."""

from __future__ import annotations

import logging

import pytest

from docportal.content.cache import ContentCache

pytestmark = pytest.mark.unit


def test_store_and_get() -> None:
    cache = ContentCache()
    assert cache.get("about") is None
    cache.store("about", "<p>a</p>")
    assert cache.get("about") == "<p>a</p>"
    assert "about" in cache
    assert len(cache) == 1


def test_store_overwrites() -> None:
    cache = ContentCache()
    cache.store("about", "old")
    cache.store("about", "new")
    assert cache.get("about") == "new"
    assert cache.keys() == ["about"]


def test_evict_reports_presence() -> None:
    cache = ContentCache()
    cache.store("about", "x")
    assert cache.evict("about") is True
    assert cache.evict("about") is False
    assert "about" not in cache


def test_clear_empties_and_logs(caplog: pytest.LogCaptureFixture) -> None:
    cache = ContentCache()
    cache.store("a", "1")
    cache.store("b", "2")
    with caplog.at_level(logging.INFO, logger="docportal.cache"):
        cache.clear()
    assert len(cache) == 0
    assert "Content cache cleared" in caplog.text
