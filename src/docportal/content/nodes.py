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

"""Typed HTML fragment tree rendered to text at the boundary.

Builders return ``Node`` values; only ``render`` produces strings. Text is
escaped (``&``, ``<``, ``>``), attribute values additionally escape quotes, and
``Raw`` passes trusted markup through unchanged.
"""

from __future__ import annotations

import html
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Final, TypeAlias

from docportal.compat import assert_never

VOID_TAGS: Final[frozenset[str]] = frozenset({"br", "hr", "img", "input", "link", "meta"})


@dataclass(slots=True, frozen=True)
class Text:
    value: str


@dataclass(slots=True, frozen=True)
class Raw:
    """Markup inserted without escaping."""

    value: str


@dataclass(slots=True, frozen=True)
class Element:
    tag: str
    attrs: tuple[tuple[str, str], ...] = ()
    children: tuple[Node, ...] = ()


@dataclass(slots=True, frozen=True)
class Fragment:
    """Sibling nodes without a wrapping element."""

    children: tuple[Node, ...] = field(default_factory=tuple)


Node: TypeAlias = "Text | Raw | Element | Fragment"
Child: TypeAlias = "Node | str | None"


def _attr_name(name: str) -> str:
    return name.rstrip("_").replace("_", "-")


def _coerce_children(children: Iterable[Child]) -> tuple[Node, ...]:
    return tuple(Text(child) if isinstance(child, str) else child for child in children if child is not None)


def el(tag: str, *children: Child, **attrs: str | None) -> Element:
    """Build an element.

    ``None`` children and attributes are skipped, strings become ``Text``.
    Attribute names drop a trailing ``_`` (``class_``) and map ``_`` to ``-``
    (``data_tab`` -> ``data-tab``).
    """
    pairs = tuple((_attr_name(name), value) for name, value in attrs.items() if value is not None)
    return Element(tag=tag, attrs=pairs, children=_coerce_children(children))


def fragment(*children: Child) -> Fragment:
    return Fragment(children=_coerce_children(children))


def render(node: Node) -> str:
    """Render a node tree to HTML text."""
    if isinstance(node, Text):
        return html.escape(node.value, quote=False)
    if isinstance(node, Raw):
        return node.value
    if isinstance(node, Fragment):
        return "".join(render(child) for child in node.children)
    if isinstance(node, Element):
        attrs = "".join(f' {name}="{html.escape(value, quote=True)}"' for name, value in node.attrs)
        if node.tag in VOID_TAGS:
            return f"<{node.tag}{attrs}>"
        inner = "".join(render(child) for child in node.children)
        return f"<{node.tag}{attrs}>{inner}</{node.tag}>"
    assert_never(node)


def render_all(nodes: Iterable[Node], *, separator: str = "") -> str:
    return separator.join(render(node) for node in nodes)


__all__ = [
    "VOID_TAGS",
    "Child",
    "Element",
    "Fragment",
    "Node",
    "Raw",
    "Text",
    "el",
    "fragment",
    "render",
    "render_all",
]
