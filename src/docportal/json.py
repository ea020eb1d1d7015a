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

"""Canonical JSON types and helpers used across docportal.

Fetched resources (the navigation manifest and JSON content documents) arrive
as text; these helpers turn them into plain JSON structures before pydantic
validation. No dependencies on logging or configuration layers.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import TypeAlias, cast

from pydantic import JsonValue

__all__ = [
    "JSONList",
    "JSONValue",
    "as_list",
    "normalize_enums_for_json",
    "parse_json",
]

JSONValue: TypeAlias = JsonValue
JSONList = list[JsonValue]


def parse_json(payload: str) -> JSONValue:
    """Parse a JSON document fetched as text.

    Args:
        payload: Raw response body.

    Returns:
        Parsed JSON value.

    Raises:
        ValueError: If the body is empty or not valid JSON
            (``json.JSONDecodeError`` is a ``ValueError``).
    """
    if not (data := payload.strip()):
        message = "Expected a JSON document but received an empty body"
        raise ValueError(message)
    return cast("JSONValue", json.loads(data))


def as_list(value: object) -> JSONList:
    """Return `value` as a JSON list if it is a list, else an empty list."""
    return cast("JSONList", value) if isinstance(value, list) else []


def normalize_enums_for_json(value: object) -> JSONValue:
    """Recursively convert Enum keys/values to their string payloads.

    Args:
        value: Arbitrary object hierarchy that may include `Enum` instances,
            mappings, or sequences.

    Returns:
        A JSON-compatible structure with enum keys and values replaced by
        their `.value` payloads and unknown objects stringified.
    """

    def _convert(obj: object) -> JSONValue:
        if isinstance(obj, Enum):
            return cast("JSONValue", obj.value)
        if isinstance(obj, dict):
            result: dict[str, JSONValue] = {}
            for key, raw_val in cast("dict[object, object]", obj).items():
                norm_key = str(key.value) if isinstance(key, Enum) else str(key)
                result[norm_key] = _convert(raw_val)
            return cast("JSONValue", result)
        if isinstance(obj, (list, tuple)):
            return cast("JSONValue", [_convert(item) for item in cast("list[object]", obj)])
        if isinstance(obj, (str, int, float, bool)) or obj is None:
            return cast("JSONValue", obj)
        return cast("JSONValue", str(obj))

    return _convert(value)
