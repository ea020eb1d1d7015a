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

"""Tab content: source adapters, the JSON document generator, Markdown and the cache."""

from __future__ import annotations

from .adapters import (
    ContentVariant,
    HtmlContent,
    JsonContent,
    MarkdownContent,
    Unconfigured,
    content_variant,
    render_placeholder,
    resolve_content,
)
from .cache import ContentCache
from .document import ContentDocument, load_document
from .generator import render_document
from .markdown import markdown_to_html

__all__ = [
    "ContentCache",
    "ContentDocument",
    "ContentVariant",
    "HtmlContent",
    "JsonContent",
    "MarkdownContent",
    "Unconfigured",
    "content_variant",
    "load_document",
    "markdown_to_html",
    "render_document",
    "render_placeholder",
    "resolve_content",
]
