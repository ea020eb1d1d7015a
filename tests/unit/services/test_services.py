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


"""Tests for the tab listing, rendering and export services."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import pytest

from docportal.config import PortalSettings
from docportal.core.model_types import ContentSource
from docportal.exceptions import UnknownTabError
from docportal.services.export import INDEX_FILENAME, export_site
from docportal.services.tabs import list_tabs, render_tab
from tests.fixtures.builders import PortalDataBuilder, build_manifest, build_tab, write_portal

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.unit


@pytest.fixture
def portal_root(tmp_path: Path, portal_builder: PortalDataBuilder) -> Path:
    return write_portal(tmp_path / "portal", portal_builder.build_resources())


@pytest.fixture
def settings(portal_root: Path, tmp_path: Path) -> PortalSettings:
    return PortalSettings(root=str(portal_root), output_dir=tmp_path / "site")


@pytest.mark.asyncio
async def test_list_tabs_in_navigation_order(settings: PortalSettings) -> None:
    summaries = await list_tabs(settings)
    assert [summary.id for summary in summaries] == ["homepage", "about", "guide", "legacy"]
    assert summaries[0].active is True
    assert summaries[0].source is None
    assert summaries[2].source is ContentSource.MARKDOWN
    assert summaries[2].title == "User Guide"
    assert summaries[3].file == "legacy.html"


@pytest.mark.asyncio
async def test_render_tab_returns_full_page(settings: PortalSettings) -> None:
    html = await render_tab(settings, "about")
    assert "<title>About - Test Portal</title>" in html
    assert "<h1>About Us</h1>" in html
    assert 'class="nav-tab-link active" data-tab="about"' in html


@pytest.mark.asyncio
async def test_render_tab_unknown_id(settings: PortalSettings) -> None:
    with pytest.raises(UnknownTabError, match="Tab not found: missing"):
        _ = await render_tab(settings, "missing")


@pytest.mark.asyncio
async def test_export_writes_index_and_page_per_tab(settings: PortalSettings, tmp_path: Path) -> None:
    result = await export_site(settings)
    site = tmp_path / "site"
    assert result.output_dir == site
    assert result.index == site / INDEX_FILENAME
    assert sorted(path.name for path in site.iterdir()) == [
        "about.html",
        "guide.html",
        "homepage.html",
        "index.html",
        "legacy.html",
    ]
    assert result.errors == []
    guide = (site / "guide.html").read_text(encoding="utf-8")
    assert '<link id="style-guide" rel="stylesheet" href="css/guide.css" />' in guide
    assert "<h1>Guide</h1>" in guide
    index = (site / "index.html").read_text(encoding="utf-8")
    assert "<title>Home - Test Portal</title>" in index


@pytest.mark.asyncio
async def test_export_dry_run_writes_nothing(settings: PortalSettings, tmp_path: Path) -> None:
    result = await export_site(settings, output_dir=tmp_path / "elsewhere", dry_run=True)
    assert set(result.pages) == {"homepage", "about", "guide", "legacy"}
    assert not (tmp_path / "elsewhere").exists()


@pytest.mark.asyncio
async def test_export_records_tabs_with_errors(settings: PortalSettings, portal_builder: PortalDataBuilder) -> None:
    fetcher = portal_builder.fetcher()
    fetcher.failures["pages/legacy.html"] = RuntimeError("boom")
    result = await export_site(settings, fetcher=fetcher)
    assert result.errors == ["legacy"]
    assert "Failed to load Legacy content" in result.pages["legacy"].read_text(encoding="utf-8")


@pytest.mark.asyncio
async def test_export_skips_ids_that_escape_the_output_dir(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    outside = tmp_path / "outside" / "pwned"
    manifest = build_manifest(
        build_tab("homepage", active=True),
        build_tab(str(outside)),
        build_tab("../escaped"),
        build_tab("..\\escaped"),
    )
    root = write_portal(tmp_path / "portal", {"app.json": json.dumps(manifest)})
    site = tmp_path / "site"
    settings = PortalSettings(root=str(root), output_dir=site)

    with caplog.at_level(logging.WARNING, logger="docportal.services.export"):
        result = await export_site(settings)

    assert set(result.pages) == {"homepage"}
    assert result.errors == [str(outside), "../escaped", "..\\escaped"]
    assert not (tmp_path / "outside").exists()
    assert not (tmp_path / "escaped.html").exists()
    assert sorted(path.name for path in site.iterdir()) == ["homepage.html", "index.html"]
    assert "cannot be used as a page file name" in caplog.text


@pytest.mark.asyncio
async def test_export_keeps_index_for_the_initial_tab(tmp_path: Path) -> None:
    manifest = build_manifest(build_tab("homepage", active=True), build_tab("index"))
    root = write_portal(tmp_path / "portal", {"app.json": json.dumps(manifest)})
    result = await export_site(PortalSettings(root=str(root), output_dir=tmp_path / "site"))

    assert result.errors == ["index"]
    assert "index" not in result.pages
    index = (tmp_path / "site" / INDEX_FILENAME).read_text(encoding="utf-8")
    assert "<title>Homepage - Test Portal</title>" in index
