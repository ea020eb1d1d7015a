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

"""Typing constructs newer than the oldest supported interpreter.

``override`` and ``TypedDict`` (with ``Unpack`` support) come from the stdlib
on 3.12+, ``Self``/``Unpack``/``assert_never`` on 3.11+, and from
``typing_extensions`` otherwise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing_extensions import Self, TypedDict, Unpack, assert_never, override
else:
    try:
        from typing import TypedDict, override  # py>=3.12
    except ImportError:
        from typing_extensions import TypedDict, override

    try:
        from typing import Self, Unpack, assert_never  # py>=3.11
    except ImportError:  # py<3.11
        from typing_extensions import Self, Unpack, assert_never

__all__ = ["Self", "TypedDict", "Unpack", "assert_never", "override"]
