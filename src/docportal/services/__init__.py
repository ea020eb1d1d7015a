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


"""Service layer between the CLI and the portal pipeline.

Each submodule runs a complete workflow (listing tabs, rendering one tab,
exporting a static site) on top of ``PortalController``.
"""

from __future__ import annotations

from . import export, tabs

__all__ = ["export", "tabs"]
