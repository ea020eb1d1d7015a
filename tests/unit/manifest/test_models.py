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


"""Tests for the navigation manifest models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from docportal.core.model_types import ContentSource
from docportal.manifest.models import (
    FALLBACK_TAB_ID,
    ContentRef,
    PortalConfig,
    TabDescriptor,
    fallback_config,
)
from tests.fixtures.builders import build_manifest, build_tab

pytestmark = pytest.mark.unit


def test_tab_name_defaults_to_id() -> None:
    tab = TabDescriptor.model_validate({"id": "faq"})
    assert tab.name == "faq"
    assert tab.display_title == "faq"


def test_display_title_prefers_title() -> None:
    tab = TabDescriptor.model_validate({"id": "faq", "name": "FAQ", "title": "Questions"})
    assert tab.display_title == "Questions"


def test_null_order_and_active_use_defaults() -> None:
    tab = TabDescriptor.model_validate({"id": "faq", "order": None, "active": None})
    assert tab.order == 0
    assert tab.active is False


def test_unknown_descriptor_keys_are_kept() -> None:
    tab = TabDescriptor.model_validate({"id": "faq", "type": "dynamic"})
    assert tab.model_extra == {"type": "dynamic"}


def test_tab_id_is_immutable() -> None:
    tab = TabDescriptor.model_validate({"id": "faq"})
    with pytest.raises(ValidationError):
        tab.id = "other"  # type: ignore[misc]


def test_blank_tab_id_is_rejected() -> None:
    with pytest.raises(ValidationError):
        _ = TabDescriptor.model_validate({"id": ""})


def test_content_ref_kind_recognises_known_sources() -> None:
    assert ContentRef(source="JSON").kind is ContentSource.JSON
    assert ContentRef(source="markdown").kind is ContentSource.MARKDOWN
    assert ContentRef(source="yaml").kind is None
    assert ContentRef().kind is None


def test_duplicate_tab_ids_fail_validation() -> None:
    payload = build_manifest(build_tab("a"), build_tab("a"))
    with pytest.raises(ValidationError, match="Duplicate tab id 'a'"):
        _ = PortalConfig.model_validate(payload)


def test_empty_tab_list_fails_validation() -> None:
    with pytest.raises(ValidationError):
        _ = PortalConfig.model_validate(build_manifest())


def test_app_block_reads_camel_case_last_updated() -> None:
    config = PortalConfig.model_validate(build_manifest(build_tab("a"), last_updated="2024-12-01"))
    assert config.app.last_updated == "2024-12-01"
    assert config.app.name == "Test Portal"


def test_app_block_defaults_when_missing() -> None:
    config = PortalConfig.model_validate({"navigation": {"tabs": [{"id": "a"}]}})
    assert config.app.name == "Documentation Portal"
    assert config.app.version == "1.0.0"
    assert config.app.last_updated is None


def test_fallback_config_has_single_active_homepage() -> None:
    config = fallback_config()
    (tab,) = config.navigation.tabs
    assert tab.id == FALLBACK_TAB_ID
    assert tab.name == "Home"
    assert tab.title == "Documentation Home"
    assert tab.active is True
    assert tab.order == 1
    assert tab.content is None
