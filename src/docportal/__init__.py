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


"""docportal - tabbed documentation portal engine.

Reads a navigation manifest (``app.json``), renders navigation, and loads each
tab's content from JSON documents, Markdown or raw HTML into a single content
region with a session cache and URL-fragment history.
"""

from __future__ import annotations

from docportal.exceptions import (
    ConfigurationNotLoadedError,
    ContentParseError,
    PortalError,
    PortalValidationError,
    ResourceFetchError,
    UnknownTabError,
)

from .app import PortalController
from .config import PortalSettings, load_settings
from .content import ContentCache, ContentDocument, markdown_to_html, render_document, render_placeholder
from .controller import TabController
from .core.model_types import ContentSource, TabState
from .fetch import FetchResponse, Fetcher, FileFetcher, HttpFetcher, create_fetcher
from .manifest import ConfigurationStore, PortalConfig, TabDescriptor, fallback_config
from .navigation import format_last_updated, render_footer_links, render_navigation
from .page import BrowserHistory, PortalPage
from .services.export import ExportResult, export_site
from .services.tabs import TabSummary, list_tabs, render_tab
from .shell import render_shell

__all__ = [
    "BrowserHistory",
    "ConfigurationNotLoadedError",
    "ConfigurationStore",
    "ContentCache",
    "ContentDocument",
    "ContentParseError",
    "ContentSource",
    "ExportResult",
    "FetchResponse",
    "Fetcher",
    "FileFetcher",
    "HttpFetcher",
    "PortalConfig",
    "PortalController",
    "PortalError",
    "PortalPage",
    "PortalSettings",
    "PortalValidationError",
    "ResourceFetchError",
    "TabController",
    "TabDescriptor",
    "TabState",
    "TabSummary",
    "UnknownTabError",
    "__version__",
    "create_fetcher",
    "export_site",
    "fallback_config",
    "format_last_updated",
    "list_tabs",
    "load_settings",
    "markdown_to_html",
    "render_document",
    "render_footer_links",
    "render_navigation",
    "render_placeholder",
    "render_shell",
    "render_tab",
]

__version__ = "0.1.0"
