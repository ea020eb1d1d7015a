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


"""Static export of a portal: one HTML file per tab plus ``index.html``."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from docportal.app import PortalController
from docportal.core.model_types import LogComponent, TabState
from docportal.logging import structured_extra

if TYPE_CHECKING:
    from pathlib import Path

    from docportal.config.models import PortalSettings
    from docportal.fetch import Fetcher

logger: logging.Logger = logging.getLogger("docportal.services.export")

INDEX_FILENAME = "index.html"
_UNSAFE_ID_CHARS = ("/", "\\", "\x00")


@dataclass(slots=True)
class ExportResult:
    """Files written by ``export_site``.

    Attributes:
        output_dir: Destination directory.
        index: Path of ``index.html`` (the initial tab).
        pages: Mapping of tab id to its page path.
        errors: Tab ids that rendered the error card or were skipped because
            their id is not a safe page file name.
    """

    output_dir: Path
    index: Path | None = None
    pages: dict[str, Path] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)


def _page_path(destination: Path, tab_id: str) -> Path | None:
    """Return the page path for ``tab_id``, or None when it cannot be written safely.

    Ids must name a single file directly inside ``destination`` and must not
    shadow ``index.html``.
    """
    if not tab_id or tab_id in {".", ".."} or any(char in tab_id for char in _UNSAFE_ID_CHARS):
        return None
    if f"{tab_id}.html" == INDEX_FILENAME:
        return None
    page_path = destination / f"{tab_id}.html"
    if not page_path.resolve().is_relative_to(destination.resolve()):
        return None
    return page_path


def _write(path: Path, content: str, *, dry_run: bool) -> None:
    if dry_run:
        logger.info(
            "Would write %s (dry-run)",
            path,
            extra=structured_extra(component=LogComponent.SERVICES, path=path),
        )
        return
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(content, encoding="utf-8")
    logger.info("Wrote %s", path, extra=structured_extra(component=LogComponent.SERVICES, path=path))


async def export_site(
    settings: PortalSettings,
    *,
    output_dir: Path | None = None,
    fetcher: Fetcher | None = None,
    dry_run: bool = False,
) -> ExportResult:
    """Render every tab to static HTML.

    Args:
        settings: Portal settings (``output_dir`` is the default destination).
        output_dir: Destination overriding ``settings.output_dir``.
        fetcher: Optional fetcher overriding the one built from ``settings``.
        dry_run: Render without writing files.

    Returns:
        ExportResult describing the written files.
    """
    destination = output_dir or settings.output_dir
    result = ExportResult(output_dir=destination)
    async with PortalController(settings, fetcher=fetcher) as portal:
        _ = await portal.start()
        index = destination / INDEX_FILENAME
        _write(index, portal.render_shell(), dry_run=dry_run)
        result.index = index

        for tab in portal.store.ordered_tabs():
            page_path = _page_path(destination, tab.id)
            if page_path is None:
                logger.warning(
                    "Skipping tab %r: its id cannot be used as a page file name",
                    tab.id,
                    extra=structured_extra(component=LogComponent.SERVICES, tab=tab.id),
                )
                result.errors.append(tab.id)
                continue
            if portal.current_tab != tab.id:
                _ = await portal.tabs.switch_tab(tab.id, update_history=False)
            _write(page_path, portal.render_shell(), dry_run=dry_run)
            result.pages[tab.id] = page_path
            if portal.tabs.state_of(tab.id) is TabState.ERROR:
                result.errors.append(tab.id)
    return result


__all__ = ["INDEX_FILENAME", "ExportResult", "export_site"]
