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


"""``docportal export``: write a static HTML page per tab."""

from __future__ import annotations

import argparse
import asyncio
import pathlib
from typing import TYPE_CHECKING

from docportal.cli.helpers import build_settings, echo, register_argument
from docportal.services.export import export_site

if TYPE_CHECKING:
    from collections.abc import Sequence

    from docportal.cli.types import SubparserCollection


def register_export_command(
    subparsers: SubparserCollection,
    *,
    parents: Sequence[argparse.ArgumentParser] | None = None,
) -> None:
    """Attach the ``docportal export`` command to the CLI.

    Args:
        subparsers: Top-level argparse subparser collection to register commands on.
        parents: Shared parent parsers carrying global flags.
    """
    export = subparsers.add_parser(
        "export",
        help="Export every tab as static HTML",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        parents=parents or [],
    )
    register_argument(
        export,
        "-o",
        "--output",
        type=pathlib.Path,
        default=None,
        help="Destination directory (default: output_dir from settings).",
    )
    register_argument(
        export,
        "--dry-run",
        action="store_true",
        help="Render pages but skip writing files.",
    )


def execute_export(args: argparse.Namespace) -> int:
    """Execute the ``export`` command.

    Returns:
        ``0`` when every tab rendered, ``1`` when any tab showed the error card.
    """
    settings = build_settings(args)
    result = asyncio.run(export_site(settings, output_dir=args.output, dry_run=args.dry_run))
    verb = "Would write" if args.dry_run else "Wrote"
    echo(f"[docportal] {verb} {len(result.pages) + 1} page(s) to {result.output_dir}")
    if result.errors:
        echo(f"[docportal] Tabs with errors: {', '.join(result.errors)}", err=True)
        return 1
    return 0


__all__ = ["execute_export", "register_export_command"]
