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

"""Structured logging utilities shared across docportal components."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Final, Literal, cast

from docportal.compat import UTC, TypedDict, Unpack, override
from docportal.core.model_types import ContentSource, LogComponent, LogFormat
from docportal.json import normalize_enums_for_json

ROOT_LOGGER_NAME: Final[str] = "docportal"
LOG_FORMAT_ENV: Final[str] = "DOCPORTAL_LOG_FORMAT"
LOG_LEVEL_ENV: Final[str] = "DOCPORTAL_LOG_LEVEL"

LOG_FORMATS: Final[tuple[Literal["text", "json"], ...]] = cast(
    "tuple[Literal['text', 'json'], ...]",
    tuple(format_.value for format_ in LogFormat),
)
LOG_LEVELS: Final[tuple[Literal["debug", "info", "warning", "error"], ...]] = (
    "debug",
    "info",
    "warning",
    "error",
)
STRUCTURED_FIELDS: Final[tuple[str, ...]] = (
    "component",
    "tab",
    "source",
    "path",
    "status",
    "cached",
    "token",
    "duration_ms",
    "details",
)
CHILD_LOGGERS: Final[tuple[str, ...]] = (
    "docportal.manifest",
    "docportal.content",
    "docportal.cache",
    "docportal.controller",
    "docportal.resources",
    "docportal.fetch",
    "docportal.cli",
    "docportal.services",
)


@dataclass(slots=True, frozen=True)
class LogConfig:
    """Resolved logging configuration."""

    format: LogFormat
    level: int


class JSONLogFormatter(logging.Formatter):
    """Render log records as one JSON object per line."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "message": record.getMessage(),
            "logger": record.name,
        }
        for field in STRUCTURED_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(normalize_enums_for_json(payload), ensure_ascii=False)


_LEVELS: Final[dict[str, int]] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _select_format(preferred: LogFormat | str | None) -> LogFormat:
    value = preferred if preferred is not None else os.getenv(LOG_FORMAT_ENV)
    if not value:
        return LogFormat.TEXT
    return value if isinstance(value, LogFormat) else LogFormat.from_str(value)


def _select_level(preferred: str | None) -> int:
    value = preferred if preferred is not None else os.getenv(LOG_LEVEL_ENV)
    # Unknown names fall back to info.
    return _LEVELS.get((value or "info").strip().lower(), logging.INFO)


def configure_logging(
    log_format: LogFormat | str | None = None,
    *,
    log_level: str | None = None,
) -> LogConfig:
    """Configure docportal logging according to the requested format and level.

    Args:
        log_format: Desired log output format. ``None`` falls back to the
            ``DOCPORTAL_LOG_FORMAT`` environment variable or ``text``.
        log_level: Preferred verbosity. ``None`` consults
            ``DOCPORTAL_LOG_LEVEL`` or defaults to ``info``.

    Returns:
        The selected format and numeric level, which is also applied to the
        ``docportal`` logger and its children.
    """
    selected_format = _select_format(log_format)
    level = _select_level(log_level)

    handler = logging.StreamHandler()
    if selected_format is LogFormat.JSON:
        handler.setFormatter(JSONLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    root_logger.propagate = False
    for child in CHILD_LOGGERS:
        logging.getLogger(child).setLevel(level)
    return LogConfig(format=selected_format, level=level)


class _StructuredLogBase(TypedDict):
    component: LogComponent


class StructuredLogExtra(_StructuredLogBase, total=False):
    """Structured logging extras accepted by docportal log records."""

    tab: str
    source: ContentSource
    path: str
    status: int
    cached: bool
    token: int
    duration_ms: float
    details: Mapping[str, object]


class _StructuredLogKwargs(TypedDict, total=False):
    tab: str
    source: ContentSource | str | None
    path: str | os.PathLike[str]
    status: int | None
    cached: bool
    token: int
    duration_ms: float
    details: Mapping[str, object]


def structured_extra(
    component: LogComponent,
    **kwargs: Unpack[_StructuredLogKwargs],
) -> StructuredLogExtra:
    """Return a consistently typed ``logging.extra`` payload.

    ``None`` values are dropped so optional context (a missing status, an
    unconfigured source) never shows up as ``null`` in JSON logs.

    Args:
        component: Logical logging component for the record.
        **kwargs: Optional structured fields (tab, source, path, status, ...).

    Returns:
        Mapping suitable for the ``extra`` parameter when emitting log records.
    """
    extra: StructuredLogExtra = {"component": component}
    payload = cast("dict[str, object]", extra)
    for key, value in cast("dict[str, object]", kwargs).items():
        if value is None:
            continue
        if key == "source":
            source = ContentSource.coerce(value)
            if source is not None:
                payload[key] = source
        elif key == "path":
            payload[key] = os.fspath(cast("str | os.PathLike[str]", value))
        elif key == "details":
            details = cast("Mapping[str, object]", value)
            if details:
                payload[key] = dict(details)
        else:
            payload[key] = value
    return extra


__all__ = [
    "LOG_FORMATS",
    "LOG_LEVELS",
    "LogConfig",
    "StructuredLogExtra",
    "configure_logging",
    "structured_extra",
]
