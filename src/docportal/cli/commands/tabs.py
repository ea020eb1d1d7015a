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


"""``docportal tabs``: list the manifest's tabs in navigation order."""

from __future__ import annotations

import argparse
import asyncio
import json
from typing import TYPE_CHECKING

from docportal.cli.helpers import build_settings, echo, register_argument
from docportal.json import normalize_enums_for_json
from docportal.services.tabs import TabSummary, list_tabs

if TYPE_CHECKING:
    from collections.abc import Sequence

    from docportal.cli.types import SubparserCollection

TABLE_HEADERS = ("id", "name", "order", "source", "file", "active")


def register_tabs_command(
    subparsers: SubparserCollection,
    *,
    parents: Sequence[argparse.ArgumentParser] | None = None,
) -> None:
    """Attach the ``docportal tabs`` command to the CLI.

    Args:
        subparsers: Top-level argparse subparser collection to register commands on.
        parents: Shared parent parsers carrying global flags.
    """
    tabs = subparsers.add_parser(
        "tabs",
        help="List tabs from the navigation manifest",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        parents=parents or [],
    )
    register_argument(
        tabs,
        "--format",
        dest="output_format",
        choices=("table", "json"),
        default="table",
        help="Output format.",
    )


def _row(summary: TabSummary) -> tuple[str, ...]:
    return (
        summary.id,
        summary.name,
        str(summary.order),
        summary.source.value if summary.source else "-",
        summary.file or "-",
        "*" if summary.active else "",
    )


def format_table(summaries: Sequence[TabSummary]) -> list[str]:
    """Render summaries as aligned text columns."""
    rows = [TABLE_HEADERS, *(_row(summary) for summary in summaries)]
    widths = [max(len(row[index]) for row in rows) for index in range(len(TABLE_HEADERS))]
    return ["  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip() for row in rows]


def format_json(summaries: Sequence[TabSummary]) -> str:
    payload = [
        {
            "id": summary.id,
            "name": summary.name,
            "title": summary.title,
            "order": summary.order,
            "active": summary.active,
            "source": summary.source,
            "file": summary.file,
        }
        for summary in summaries
    ]
    return json.dumps(normalize_enums_for_json(payload), indent=2)


def execute_tabs(args: argparse.Namespace) -> int:
    """Execute the ``tabs`` command.

    Args:
        args: Parsed CLI namespace.

    Returns:
        ``0`` on success.
    """
    settings = build_settings(args)
    summaries = asyncio.run(list_tabs(settings))
    if args.output_format == "json":
        echo(format_json(summaries))
    else:
        for line in format_table(summaries):
            echo(line)
    return 0


__all__ = ["execute_tabs", "format_json", "format_table", "register_tabs_command"]
