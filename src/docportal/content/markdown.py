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

"""Minimal Markdown to HTML transform.

Supported: ``#``/``##``/``###`` headings, ``* `` list items (consecutive items
share one ``<ul>``) and paragraphs (consecutive text lines joined until a blank
line, heading or list item). Inline text is emitted verbatim, unescaped.
"""

from __future__ import annotations

from typing import Final

HEADING_PREFIXES: Final[tuple[tuple[str, str], ...]] = (
    ("### ", "h3"),
    ("## ", "h2"),
    ("# ", "h1"),
)
LIST_PREFIX: Final[str] = "* "


def _heading(line: str) -> str | None:
    for prefix, tag in HEADING_PREFIXES:
        if line.startswith(prefix):
            return f"<{tag}>{line[len(prefix) :]}</{tag}>"
    return None


def markdown_to_html(markdown: str) -> str:
    """Convert minimal Markdown to HTML.

    Args:
        markdown: Source text; ``\\r\\n`` line endings are accepted.

    Returns:
        HTML blocks separated by newlines.
    """
    blocks: list[str] = []
    paragraph: list[str] = []
    items: list[str] = []

    def flush() -> None:
        if paragraph:
            blocks.append(f"<p>{' '.join(paragraph)}</p>")
            paragraph.clear()
        if items:
            blocks.extend(["<ul>", *(f"<li>{item}</li>" for item in items), "</ul>"])
            items.clear()

    for raw_line in markdown.splitlines():
        line = raw_line.rstrip()
        if not line.strip():
            flush()
            continue
        if (heading := _heading(line)) is not None:
            flush()
            blocks.append(heading)
        elif line.startswith(LIST_PREFIX):
            if paragraph:
                flush()
            items.append(line[len(LIST_PREFIX) :])
        else:
            if items:
                flush()
            paragraph.append(line)
    flush()
    return "\n".join(blocks)


__all__ = ["markdown_to_html"]
