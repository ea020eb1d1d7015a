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


"""Tests for the structural HTML generator."""

from __future__ import annotations

import pytest

from docportal.content.document import load_document
from docportal.content.generator import (
    card_node,
    classes,
    grid_node,
    header_node,
    hero_node,
    list_node,
    render_document,
    section_node,
)
from docportal.content.nodes import render

pytestmark = pytest.mark.unit


def test_classes_skips_empty_names() -> None:
    assert classes("card", None, "", "wide") == "card wide"


def test_about_document_renders_header_then_section() -> None:
    document = load_document({"title": "About Us", "sections": [{"title": "Mission", "content": "Our mission..."}]})
    assert render_document(document, "about") == (
        '<div class="content-section about-content">'
        '<div class="page-header"><h1>About Us</h1></div>'
        '<div class="content-section"><h2>Mission</h2>'
        '<div class="section-content">Our mission...</div></div>'
        "</div>"
    )


def test_blocks_follow_fixed_order_regardless_of_key_order() -> None:
    document = load_document(
        {
            "lists": [{"title": "L", "items": ["x"]}],
            "cards": [{"title": "C"}],
            "grid": {"title": "G"},
            "sections": [{"title": "S"}],
            "subtitle": "Sub",
            "title": "T",
            "hero": {"title": "H"},
        },
    )
    html = render_document(document, "tab")
    markers = [
        'class="hero-section"',
        'class="page-header"',
        "<h2>S</h2>",
        'class="grid-container"',
        'class="cards-container"',
        'class="list-container"',
    ]
    positions = [html.index(marker) for marker in markers]
    assert positions == sorted(positions)


def test_header_requires_title() -> None:
    assert header_node(None, "Lonely subtitle") is None
    node = header_node("T", "Sub")
    assert node is not None
    assert render(node) == '<div class="page-header"><h1>T</h1><p class="subtitle">Sub</p></div>'


def test_hero_buttons_default_link_and_class() -> None:
    document = load_document(
        {
            "hero": {
                "title": "Welcome",
                "buttons": [{"text": "Start", "link": "#guide", "className": "btn-primary"}, {"text": "Later"}],
            },
        },
    )
    assert document.hero is not None
    assert render(hero_node(document.hero)) == (
        '<div class="hero-section"><h1>Welcome</h1>'
        '<a href="#guide" class="btn btn-primary">Start</a>'
        '<a href="#" class="btn">Later</a></div>'
    )


def test_hero_class_name_replaces_default() -> None:
    document = load_document({"hero": {"title": "W", "className": "media-hero"}})
    assert document.hero is not None
    assert render(hero_node(document.hero)).startswith('<div class="media-hero">')


def test_section_items_render_learn_more_links() -> None:
    document = load_document(
        {"sections": [{"title": "S", "className": "wide", "items": [{"title": "I", "content": "c", "link": "/i"}]}]},
    )
    assert document.sections is not None
    assert render(section_node(document.sections[0])) == (
        '<div class="content-section wide"><h2>S</h2>'
        '<div class="section-items"><div class="section-item"><h3>I</h3><p>c</p>'
        '<a href="/i" class="btn btn-secondary">Learn More</a></div></div></div>'
    )


@pytest.mark.parametrize(
    ("grid", "expected"),
    [
        ({"columns": 3}, 'class="grid grid-cols-3"'),
        ({}, 'class="grid grid-auto"'),
    ],
)
def test_grid_columns_class(grid: dict[str, object], expected: str) -> None:
    document = load_document({"grid": grid})
    assert document.grid is not None
    assert expected in render(grid_node(document.grid))


def test_grid_item_link_text() -> None:
    document = load_document({"grid": {"title": "G", "items": [{"icon": "*", "title": "A", "link": "/a"}]}})
    assert document.grid is not None
    assert render(grid_node(document.grid)) == (
        '<div class="grid-container"><h2 class="grid-title">G</h2>'
        '<div class="grid grid-auto"><div class="grid-item"><div class="grid-icon">*</div>'
        '<h3>A</h3><a href="/a" class="grid-link">View</a></div></div></div>'
    )


def test_card_image_uses_title_as_alt() -> None:
    document = load_document({"cards": [{"image": "a.png", "title": "Card", "link": "/c"}]})
    assert document.cards is not None
    assert render(card_node(document.cards[0])) == (
        '<div class="card"><img src="a.png" alt="Card" class="card-image">'
        '<div class="card-content"><h3 class="card-title">Card</h3>'
        '<a href="/c" class="btn card-btn">Read More</a></div></div>'
    )


def test_ordered_list_with_mixed_items() -> None:
    document = load_document(
        {"lists": [{"title": "Steps", "type": "ordered", "items": ["one", {"title": "Two", "content": "details"}]}]},
    )
    assert document.lists is not None
    assert render(list_node(document.lists[0])) == (
        '<div class="list-container"><h3 class="list-title">Steps</h3>'
        '<ol class="content-list"><li>one</li><li><strong>Two</strong><span>details</span></li></ol></div>'
    )


def test_unordered_list_by_default() -> None:
    document = load_document({"lists": [{"items": ["a"]}]})
    assert document.lists is not None
    assert render(list_node(document.lists[0])) == (
        '<div class="list-container"><ul class="content-list"><li>a</li></ul></div>'
    )


def test_document_text_is_escaped() -> None:
    document = load_document({"title": "<script>alert(1)</script>"})
    html = render_document(document, "x")
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_empty_document_renders_empty_container() -> None:
    assert render_document(load_document({}), "empty") == '<div class="content-section empty-content"></div>'
