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

"""Content source adapters.

A tab's ``content`` entry selects one variant of ``ContentVariant``. Each
variant resolves to an HTML string and degrades to the placeholder when its
resource cannot be fetched or parsed; those failures are logged as warnings
and never raised. Any other exception propagates to the tab controller.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, TypeAlias

from pydantic import ValidationError

from docportal.compat import assert_never
from docportal.core.model_types import ContentSource, LogComponent
from docportal.exceptions import ContentParseError, ResourceFetchError
from docportal.json import parse_json
from docportal.logging import structured_extra
from docportal.paths import HTML_DIR, JSON_DIR, MARKDOWN_DIR, SCRIPTS_DIR, STYLES_DIR, resource_path

from .document import ContentDocument, load_document
from .generator import render_document
from .markdown import markdown_to_html
from .nodes import el, render

if TYPE_CHECKING:
    from docportal.core.type_aliases import ResourcePath
    from docportal.fetch import Fetcher
    from docportal.manifest.models import TabDescriptor

logger: logging.Logger = logging.getLogger("docportal.content")

PLACEHOLDER_ICON: Final[str] = "\N{PAGE FACING UP}"
PLACEHOLDER_MESSAGE: Final[str] = "This tab is ready for content!"


class MissingContentFileError(ResourceFetchError):
    """Raised when a content entry names a source but no file."""

    def __init__(self, tab_id: str) -> None:
        super().__init__(f"content for tab {tab_id}", reason="no file configured")


def _require_file(tab: TabDescriptor, file: str | None) -> str:
    if not file:
        raise MissingContentFileError(tab.id)
    return file


def _degrade(tab: TabDescriptor, source: ContentSource, resource: str | None, exc: Exception) -> str:
    logger.warning(
        "Could not load %s content for %s: %s",
        source.value,
        tab.id,
        exc,
        extra=structured_extra(
            component=LogComponent.CONTENT,
            tab=tab.id,
            source=source,
            path=resource,
            status=getattr(exc, "status", None),
        ),
    )
    return render_placeholder(tab)


@dataclass(slots=True, frozen=True)
class JsonContent:
    """Structured document rendered through the HTML generator."""

    path: str | None
    file: str | None

    def resource(self, tab: TabDescriptor) -> ResourcePath:
        return resource_path(self.path, _require_file(tab, self.file), JSON_DIR)

    async def resolve(self, tab: TabDescriptor, fetcher: Fetcher) -> str:
        resource: str | None = None
        try:
            resource = self.resource(tab)
            response = await fetcher.fetch(resource)
            document = parse_document(response.text, resource=resource)
        except (ResourceFetchError, ContentParseError) as exc:
            return _degrade(tab, ContentSource.JSON, resource, exc)
        return render_document(document, tab.id)


@dataclass(slots=True, frozen=True)
class MarkdownContent:
    """Markdown read from the fixed ``markdown/`` directory; ``path`` is not consulted."""

    file: str | None

    def resource(self, tab: TabDescriptor) -> ResourcePath:
        return resource_path(None, _require_file(tab, self.file), MARKDOWN_DIR)

    async def resolve(self, tab: TabDescriptor, fetcher: Fetcher) -> str:
        resource: str | None = None
        try:
            resource = self.resource(tab)
            response = await fetcher.fetch(resource)
        except ResourceFetchError as exc:
            return _degrade(tab, ContentSource.MARKDOWN, resource, exc)
        return markdown_to_html(response.text)


@dataclass(slots=True, frozen=True)
class HtmlContent:
    """Trusted HTML passed through unchanged."""

    path: str | None
    file: str | None

    def resource(self, tab: TabDescriptor) -> ResourcePath:
        return resource_path(self.path, _require_file(tab, self.file), HTML_DIR)

    async def resolve(self, tab: TabDescriptor, fetcher: Fetcher) -> str:
        resource: str | None = None
        try:
            resource = self.resource(tab)
            response = await fetcher.fetch(resource)
        except ResourceFetchError as exc:
            return _degrade(tab, ContentSource.HTML, resource, exc)
        return response.text


@dataclass(slots=True, frozen=True)
class Unconfigured:
    """No content entry, or a source tag that is not recognised."""

    async def resolve(self, tab: TabDescriptor, fetcher: Fetcher) -> str:
        del fetcher
        return render_placeholder(tab)


ContentVariant: TypeAlias = "JsonContent | MarkdownContent | HtmlContent | Unconfigured"


def parse_document(payload: str, *, resource: str) -> ContentDocument:
    """Parse a JSON content document.

    Raises:
        ContentParseError: If the payload is empty, not JSON or fails validation.
    """
    try:
        return load_document(parse_json(payload))
    except (ValueError, ValidationError) as exc:
        raise ContentParseError(resource, exc) from exc


def content_variant(tab: TabDescriptor) -> ContentVariant:
    """Select the adapter for ``tab`` from its ``content.source`` tag."""
    content = tab.content
    if content is None:
        return Unconfigured()
    match content.kind:
        case ContentSource.JSON:
            return JsonContent(path=content.path, file=content.file)
        case ContentSource.MARKDOWN:
            return MarkdownContent(file=content.file)
        case ContentSource.HTML:
            return HtmlContent(path=content.path, file=content.file)
        case None:
            return Unconfigured()
        case unreachable:
            assert_never(unreachable)


async def resolve_content(tab: TabDescriptor, fetcher: Fetcher) -> str:
    """Resolve ``tab`` to HTML through its content variant.

    Returns:
        Rendered HTML; the placeholder when the variant degraded.
    """
    variant = content_variant(tab)
    match variant:
        case JsonContent() | MarkdownContent() | HtmlContent() | Unconfigured():
            html = await variant.resolve(tab, fetcher)
        case unreachable:
            assert_never(unreachable)
    logger.debug(
        "Resolved content for %s via %s",
        tab.id,
        type(variant).__name__,
        extra=structured_extra(component=LogComponent.CONTENT, tab=tab.id, source=tab.content.kind if tab.content else None),
    )
    return html


def _example_skeleton(tab: TabDescriptor) -> str:
    example = {
        "title": tab.display_title,
        "subtitle": f"Welcome to {tab.name}",
        "hero": {"title": "Hero Section Title", "description": "Hero description"},
        "sections": [{"title": "Section Title", "content": "Section content here..."}],
    }
    return json.dumps(example, indent=2, ensure_ascii=False)


def placeholder_paths(tab: TabDescriptor) -> tuple[str, str, str]:
    """Return the content, stylesheet and script paths ``tab`` would use."""
    content, styles, scripts = tab.content, tab.styles, tab.scripts
    return (
        resource_path(content and content.path, (content and content.file) or f"{tab.id}.json", JSON_DIR),
        resource_path(styles and styles.path, (styles and styles.file) or f"{tab.id}.css", STYLES_DIR),
        resource_path(scripts and scripts.path, (scripts and scripts.file) or f"{tab.id}.js", SCRIPTS_DIR),
    )


def render_placeholder(tab: TabDescriptor) -> str:
    """Render the self-documenting empty state for ``tab``."""
    content_path, styles_path, scripts_path = placeholder_paths(tab)
    files = [
        (content_path, "- Page content and structure"),
        (styles_path, "- Custom styles for this tab"),
        (scripts_path, "- Interactive functionality"),
    ]
    return render(
        el(
            "div",
            el(
                "div",
                el("div", PLACEHOLDER_ICON, class_="empty-icon"),
                el("h2", tab.display_title),
                el("p", PLACEHOLDER_MESSAGE, class_="empty-message"),
                el(
                    "div",
                    el("h3", "To add content, create these files:"),
                    el(
                        "ul",
                        *(el("li", el("code", path), " ", el("span", desc, class_="file-desc")) for path, desc in files),
                        class_="file-list",
                    ),
                    class_="empty-instructions",
                ),
                el(
                    "div",
                    el("h4", "Example JSON structure:"),
                    el("pre", _example_skeleton(tab), class_="code-block"),
                    class_="empty-example",
                ),
                class_="empty-state",
            ),
            class_="content-section empty-tab",
        ),
    )


__all__ = [
    "ContentVariant",
    "HtmlContent",
    "JsonContent",
    "MarkdownContent",
    "MissingContentFileError",
    "Unconfigured",
    "content_variant",
    "parse_document",
    "placeholder_paths",
    "render_placeholder",
    "resolve_content",
]
