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

"""Pydantic models for the navigation manifest (``app.json``).

The manifest is validated once at startup. Unknown keys are kept on every
model so descriptors carry whatever extra metadata the portal authors add;
only ``TabDescriptor.active`` is mutated afterwards.
"""

from __future__ import annotations

from typing import ClassVar, Final

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, JsonValue, field_validator, model_validator

from docportal.core.model_types import ContentSource

FALLBACK_APP_NAME: Final[str] = "Documentation Portal"
FALLBACK_APP_VERSION: Final[str] = "1.0.0"
FALLBACK_TAB_ID: Final[str] = "homepage"

LENIENT_MODEL_CONFIG: ConfigDict = ConfigDict(extra="allow", populate_by_name=True)


class DuplicateTabIdError(ValueError):
    """Raised when two descriptors share an id."""

    def __init__(self, tab_id: str) -> None:
        self.tab_id = tab_id
        super().__init__(f"Duplicate tab id '{tab_id}'")


class ContentRef(BaseModel):
    """``content`` entry of a tab: where the tab's content lives and how to read it."""

    model_config: ClassVar[ConfigDict] = LENIENT_MODEL_CONFIG

    source: str | None = None
    path: str | None = None
    file: str | None = None

    @property
    def kind(self) -> ContentSource | None:
        """Return the recognised source tag, ``None`` for unset or unknown tags."""
        return ContentSource.coerce(self.source)


class ResourceRef(BaseModel):
    """``styles``/``scripts`` entry of a tab."""

    model_config: ClassVar[ConfigDict] = LENIENT_MODEL_CONFIG

    path: str | None = None
    file: str | None = None


class TabDescriptor(BaseModel):
    """One navigable tab.

    Attributes:
        id: Unique key, immutable once loaded.
        name: Navigation label; defaults to ``id``.
        title: Heading/document title; ``display_title`` falls back to ``name``.
        order: Sort key for navigation (manifest order breaks ties).
        active: Exclusive activation flag written by ``ConfigurationStore.set_active``.
        icon: Optional glyph name rendered as ``<i class="icon-{icon}">``.
        content: Content resource reference.
        styles: Tab-scoped stylesheet reference.
        scripts: Tab-scoped script reference.
    """

    model_config: ClassVar[ConfigDict] = LENIENT_MODEL_CONFIG

    id: str = Field(min_length=1, frozen=True)
    name: str
    title: str | None = None
    order: int = 0
    active: bool = False
    icon: str | None = None
    content: ContentRef | None = None
    styles: ResourceRef | None = None
    scripts: ResourceRef | None = None

    @model_validator(mode="before")
    @classmethod
    def _default_name(cls, data: object) -> object:
        if isinstance(data, dict) and not data.get("name"):
            return {**data, "name": data.get("id")}
        return data

    @field_validator("order", mode="before")
    @classmethod
    def _default_order(cls, value: object) -> object:
        return 0 if value is None else value

    @field_validator("active", mode="before")
    @classmethod
    def _default_active(cls, value: object) -> object:
        return False if value is None else value

    @property
    def display_title(self) -> str:
        """Return ``title`` when set, otherwise ``name``."""
        return self.title or self.name


class AppInfo(BaseModel):
    """``app`` block: portal name, version and last-updated date."""

    model_config: ClassVar[ConfigDict] = LENIENT_MODEL_CONFIG

    name: str = FALLBACK_APP_NAME
    version: str = FALLBACK_APP_VERSION
    last_updated: str | None = Field(
        default=None,
        validation_alias=AliasChoices("lastUpdated", "last_updated"),
        serialization_alias="lastUpdated",
    )


class Navigation(BaseModel):
    """``navigation`` block holding the tab list (at least one, unique ids)."""

    model_config: ClassVar[ConfigDict] = LENIENT_MODEL_CONFIG

    tabs: list[TabDescriptor] = Field(min_length=1)

    @model_validator(mode="after")
    def _unique_ids(self) -> Navigation:
        seen: set[str] = set()
        for tab in self.tabs:
            if tab.id in seen:
                raise DuplicateTabIdError(tab.id)
            seen.add(tab.id)
        return self


class PortalConfig(BaseModel):
    """Validated navigation manifest."""

    model_config: ClassVar[ConfigDict] = LENIENT_MODEL_CONFIG

    app: AppInfo = Field(default_factory=AppInfo)
    navigation: Navigation
    departments: dict[str, JsonValue] | None = None


def fallback_config() -> PortalConfig:
    """Return the single-tab configuration used when the manifest is unusable."""
    return PortalConfig(
        app=AppInfo(name=FALLBACK_APP_NAME, version=FALLBACK_APP_VERSION),
        navigation=Navigation(
            tabs=[
                TabDescriptor(
                    id=FALLBACK_TAB_ID,
                    name="Home",
                    title="Documentation Home",
                    active=True,
                    order=1,
                ),
            ],
        ),
    )


__all__ = [
    "FALLBACK_APP_NAME",
    "FALLBACK_APP_VERSION",
    "FALLBACK_TAB_ID",
    "AppInfo",
    "ContentRef",
    "DuplicateTabIdError",
    "Navigation",
    "PortalConfig",
    "ResourceRef",
    "TabDescriptor",
    "fallback_config",
]
