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


"""Strategies for manifest and content inputs."""

from __future__ import annotations

from hypothesis import strategies as st


def tab_ids() -> st.SearchStrategy[str]:
    """Return a strategy yielding manifest-style tab ids."""
    return st.from_regex(r"[a-z][a-z0-9-]{0,11}", fullmatch=True)


def markdown_words() -> st.SearchStrategy[str]:
    """Single-line text that Markdown treats as plain content.

    Returns:
        Strategy emitting alphanumeric text with inner spaces and no markers.
    """
    return st.from_regex(r"[A-Za-z0-9]([A-Za-z0-9 ]{0,20}[A-Za-z0-9])?", fullmatch=True)


def plain_text(min_size: int = 1, max_size: int = 40) -> st.SearchStrategy[str]:
    """Return a strategy yielding arbitrary text, markup characters included."""
    return st.text(min_size=min_size, max_size=max_size)


def arbitrary_source_tags() -> st.SearchStrategy[object]:
    """Values that may appear as a ``content.source`` tag.

    Returns:
        Strategy emitting known tags in any case, arbitrary text, ints and None.
    """
    known = st.sampled_from(["json", "JSON", " markdown ", "Html"])
    return st.one_of(known, st.text(), st.integers(), st.none())
