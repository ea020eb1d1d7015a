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

"""Full-page HTML shell for a rendered portal page.

The shell mirrors the portal's single-page layout: header with the app name,
the navigation list, the ``content-container`` region holding the current
tab's HTML, and a footer with tab links, the version and the last-updated
date. Tab-scoped stylesheets and scripts attached by the controller are
emitted in the head.
"""

from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING

from docportal.content.generator import classes
from docportal.core.model_types import ResourceKind
from docportal.navigation import render_footer_items, render_nav_items

if TYPE_CHECKING:
    from docportal.page import PortalPage


def _indent(block: str, spaces: int) -> list[str]:
    pad = " " * spaces
    return [f"{pad}{line}" for line in block.splitlines() if line.strip()]


def _render_head(page: PortalPage) -> list[str]:
    parts = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '  <meta charset="utf-8" />',
        '  <meta name="viewport" content="width=device-width, initial-scale=1" />',
        f"  <title>{escape(page.title or page.app_name, quote=False)}</title>",
        '  <link rel="stylesheet" href="styles.css" />',
    ]
    for element in page.head_elements(ResourceKind.STYLESHEET):
        parts.append(f'  <link id="{escape(element.id)}" rel="stylesheet" href="{escape(element.url)}" />')
    parts.append("</head>")
    return parts


def _render_body(page: PortalPage) -> list[str]:
    content_classes = classes("content-container", *sorted(page.content.classes))
    parts = [
        "<body>",
        '  <header class="header">',
        f'    <div class="logo">{escape(page.app_name, quote=False)}</div>',
        '    <nav class="main-nav">',
        '      <ul id="navigation-tabs" class="nav-tabs">',
        *_indent(render_nav_items(page.nav_items), 8),
        "      </ul>",
        "    </nav>",
        "  </header>",
        '  <main class="main-content">',
        f'    <div id="content-container" class="{escape(content_classes)}">',
        page.content.html,
        "    </div>",
        "  </main>",
        '  <footer class="footer">',
        '    <ul id="footer-links" class="footer-links">',
        *_indent(render_footer_items(page.footer_links), 6),
        "    </ul>",
        (
            f'    <p class="footer-meta">{escape(page.app_name, quote=False)} '
            f'v{escape(page.app_version, quote=False)} &middot; Last updated '
            f'<span id="last-updated">{escape(page.last_updated, quote=False)}</span></p>'
        ),
        "  </footer>",
        '  <script src="global.js"></script>',
    ]
    for element in page.head_elements(ResourceKind.SCRIPT):
        parts.append(f'  <script id="{escape(element.id)}" src="{escape(element.url)}"></script>')
    return parts


def render_shell(page: PortalPage) -> str:
    """Render ``page`` as a complete HTML document.

    Args:
        page: Page state after navigation paint and at least one tab switch.

    Returns:
        HTML document text ending with a newline.
    """
    parts: list[str] = []
    parts.extend(_render_head(page))
    parts.extend(_render_body(page))
    parts.extend(("</body>", "</html>"))
    return "\n".join(parts) + "\n"


__all__ = ["render_shell"]
