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


"""Fixtures shared across all unit tests."""

from __future__ import annotations

import pytest

from tests.fixtures.builders import PortalDataBuilder
from tests.fixtures.stubs import MemoryFetcher


@pytest.fixture
def portal_builder() -> PortalDataBuilder:
    """Provide the sample portal builder.

    Returns:
        A fresh `PortalDataBuilder` so tests may add resources freely.
    """
    return PortalDataBuilder()


@pytest.fixture
def memory_fetcher(portal_builder: PortalDataBuilder) -> MemoryFetcher:
    """Return a fetcher serving the sample portal."""
    return portal_builder.fetcher()
