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

"""Lenient pydantic models for JSON content documents.

Every field is optional and a field of the wrong shape is treated as absent:
blocks that are not objects, arrays that are not lists and list members that
are not objects are dropped before validation. Scalars in text positions are
stringified; other values in text positions are dropped.
"""

from __future__ import annotations

from typing import Annotated, Any, ClassVar

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field

from docportal.json import JSONValue, as_list


def _text(value: object) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _block(value: object) -> object:
    return value if isinstance(value, dict) else None


def _blocks(value: object) -> list[JSONValue] | None:
    if not isinstance(value, list):
        return None
    return [item for item in as_list(value) if isinstance(item, dict)]


def _list_entries(value: object) -> list[JSONValue] | None:
    if not isinstance(value, list):
        return None
    entries: list[JSONValue] = []
    for item in as_list(value):
        if isinstance(item, dict):
            entries.append(item)
        elif (text := _text(item)) is not None:
            entries.append(text)
    return entries


OptionalText = Annotated[str | None, BeforeValidator(_text)]
CLASS_NAME = AliasChoices("className", "class_name")


def _class_name() -> Any:  # noqa: ANN401 # JUSTIFIED: pydantic Field returns FieldInfo used as a default
    return Field(default=None, validation_alias=CLASS_NAME, serialization_alias="className")


class _DocumentModel(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class HeroButton(_DocumentModel):
    text: OptionalText = None
    link: OptionalText = None
    class_name: OptionalText = _class_name()


class Hero(_DocumentModel):
    title: OptionalText = None
    subtitle: OptionalText = None
    description: OptionalText = None
    buttons: Annotated[list[HeroButton] | None, BeforeValidator(_blocks)] = None
    class_name: OptionalText = _class_name()


class SectionItem(_DocumentModel):
    title: OptionalText = None
    content: OptionalText = None
    link: OptionalText = None


class Section(_DocumentModel):
    title: OptionalText = None
    content: OptionalText = None
    class_name: OptionalText = _class_name()
    items: Annotated[list[SectionItem] | None, BeforeValidator(_blocks)] = None


class GridItem(_DocumentModel):
    icon: OptionalText = None
    title: OptionalText = None
    description: OptionalText = None
    link: OptionalText = None


class Grid(_DocumentModel):
    title: OptionalText = None
    columns: OptionalText = None
    class_name: OptionalText = _class_name()
    items: Annotated[list[GridItem] | None, BeforeValidator(_blocks)] = None


class Card(_DocumentModel):
    image: OptionalText = None
    title: OptionalText = None
    content: OptionalText = None
    link: OptionalText = None
    class_name: OptionalText = _class_name()


class ListEntry(_DocumentModel):
    """Structured list item; plain strings are kept as ``str``."""

    title: OptionalText = None
    content: OptionalText = None


class ContentList(_DocumentModel):
    title: OptionalText = None
    type: OptionalText = None
    class_name: OptionalText = _class_name()
    items: Annotated[list[str | ListEntry] | None, BeforeValidator(_list_entries)] = None

    @property
    def ordered(self) -> bool:
        return self.type == "ordered"


class ContentDocument(_DocumentModel):
    """Root of a JSON content document."""

    title: OptionalText = None
    subtitle: OptionalText = None
    hero: Annotated[Hero | None, BeforeValidator(_block)] = None
    sections: Annotated[list[Section] | None, BeforeValidator(_blocks)] = None
    grid: Annotated[Grid | None, BeforeValidator(_block)] = None
    cards: Annotated[list[Card] | None, BeforeValidator(_blocks)] = None
    lists: Annotated[list[ContentList] | None, BeforeValidator(_blocks)] = None


def load_document(data: object) -> ContentDocument:
    """Validate parsed JSON into a document; a non-object root yields an empty document."""
    return ContentDocument.model_validate(data if isinstance(data, dict) else {})


__all__ = [
    "Card",
    "ContentDocument",
    "ContentList",
    "Grid",
    "GridItem",
    "Hero",
    "HeroButton",
    "ListEntry",
    "Section",
    "SectionItem",
    "load_document",
]
