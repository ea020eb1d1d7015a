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

"""Structural HTML generator for JSON content documents.

Each block builder is a pure function returning a node tree and omits any
sub-element whose source field is empty. ``render_document`` fixes the block
order: hero, page header, sections, grid, cards, lists.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .nodes import Element, Fragment, Node, el, fragment, render

if TYPE_CHECKING:
    from .document import Card, ContentDocument, ContentList, Grid, Hero, ListEntry, Section


def classes(*names: str | None) -> str:
    """Join the non-empty class names with single spaces."""
    return " ".join(name for name in names if name)


def hero_node(hero: Hero) -> Element:
    buttons = [
        el("a", button.text, href=button.link or "#", class_=classes("btn", button.class_name))
        for button in hero.buttons or []
    ]
    return el(
        "div",
        el("h1", hero.title) if hero.title else None,
        el("p", hero.subtitle, class_="hero-subtitle") if hero.subtitle else None,
        el("p", hero.description, class_="hero-description") if hero.description else None,
        *buttons,
        class_=hero.class_name or "hero-section",
    )


def header_node(title: str | None, subtitle: str | None) -> Element | None:
    """Return the page header, or None without a title (a lone subtitle is dropped)."""
    if not title:
        return None
    return el(
        "div",
        el("h1", title),
        el("p", subtitle, class_="subtitle") if subtitle else None,
        class_="page-header",
    )


def section_node(section: Section) -> Element:
    items = None
    if section.items is not None:
        items = el(
            "div",
            *(
                el(
                    "div",
                    el("h3", item.title) if item.title else None,
                    el("p", item.content) if item.content else None,
                    el("a", "Learn More", href=item.link, class_="btn btn-secondary") if item.link else None,
                    class_="section-item",
                )
                for item in section.items
            ),
            class_="section-items",
        )
    return el(
        "div",
        el("h2", section.title) if section.title else None,
        el("div", section.content, class_="section-content") if section.content else None,
        items,
        class_=classes("content-section", section.class_name),
    )


def grid_node(grid: Grid) -> Element:
    columns = f"grid-cols-{grid.columns}" if grid.columns else "grid-auto"
    items = [
        el(
            "div",
            el("div", item.icon, class_="grid-icon") if item.icon else None,
            el("h3", item.title) if item.title else None,
            el("p", item.description) if item.description else None,
            el("a", "View", href=item.link, class_="grid-link") if item.link else None,
            class_="grid-item",
        )
        for item in grid.items or []
    ]
    return el(
        "div",
        el("h2", grid.title, class_="grid-title") if grid.title else None,
        el("div", *items, class_=classes("grid", columns)),
        class_=classes("grid-container", grid.class_name),
    )


def card_node(card: Card) -> Element:
    image = el("img", src=card.image, alt=card.title or "", class_="card-image") if card.image else None
    return el(
        "div",
        image,
        el(
            "div",
            el("h3", card.title, class_="card-title") if card.title else None,
            el("p", card.content, class_="card-text") if card.content else None,
            el("a", "Read More", href=card.link, class_="btn card-btn") if card.link else None,
            class_="card-content",
        ),
        class_=classes("card", card.class_name),
    )


def cards_node(cards: list[Card]) -> Element:
    return el("div", *(card_node(card) for card in cards), class_="cards-container")


def _list_item(item: str | ListEntry) -> Element:
    if isinstance(item, str):
        return el("li", item)
    return el(
        "li",
        el("strong", item.title) if item.title else None,
        el("span", item.content) if item.content else None,
    )


def list_node(content_list: ContentList) -> Element:
    tag = "ol" if content_list.ordered else "ul"
    return el(
        "div",
        el("h3", content_list.title, class_="list-title") if content_list.title else None,
        el(tag, *(_list_item(item) for item in content_list.items or []), class_="content-list"),
        class_=classes("list-container", content_list.class_name),
    )


def document_nodes(document: ContentDocument) -> Fragment:
    """Return the document's blocks in display order."""
    blocks: list[Node | None] = [
        hero_node(document.hero) if document.hero is not None else None,
        header_node(document.title, document.subtitle),
    ]
    blocks.extend(section_node(section) for section in document.sections or [])
    if document.grid is not None:
        blocks.append(grid_node(document.grid))
    if document.cards is not None:
        blocks.append(cards_node(document.cards))
    blocks.extend(list_node(content_list) for content_list in document.lists or [])
    return fragment(*blocks)


def render_document(document: ContentDocument, tab_id: str) -> str:
    """Render a document wrapped in its tab-scoped container.

    Args:
        document: Validated content document.
        tab_id: Owning tab; yields the ``{tab_id}-content`` class.

    Returns:
        HTML fragment string.
    """
    return render(el("div", document_nodes(document), class_=f"content-section {tab_id}-content"))


__all__ = [
    "card_node",
    "cards_node",
    "classes",
    "document_nodes",
    "grid_node",
    "header_node",
    "hero_node",
    "list_node",
    "render_document",
    "section_node",
]
