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


"""``docportal render``: print or save the full page for one tab."""

from __future__ import annotations

import argparse
import asyncio
import logging
import pathlib
from typing import TYPE_CHECKING

from docportal.cli.helpers import build_settings, echo, register_argument
from docportal.core.model_types import LogComponent
from docportal.exceptions import UnknownTabError
from docportal.logging import structured_extra
from docportal.services.tabs import render_tab

if TYPE_CHECKING:
    from collections.abc import Sequence

    from docportal.cli.types import SubparserCollection

logger: logging.Logger = logging.getLogger("docportal.cli")


def register_render_command(
    subparsers: SubparserCollection,
    *,
    parents: Sequence[argparse.ArgumentParser] | None = None,
) -> None:
    """Attach the ``docportal render`` command to the CLI.

    Args:
        subparsers: Top-level argparse subparser collection to register commands on.
        parents: Shared parent parsers carrying global flags.
    """
    render = subparsers.add_parser(
        "render",
        help="Render the full page for one tab",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        parents=parents or [],
    )
    register_argument(render, "tab", help="Tab id to render.")
    register_argument(
        render,
        "-o",
        "--output",
        type=pathlib.Path,
        default=None,
        help="Write the page to this file instead of stdout.",
    )


def execute_render(args: argparse.Namespace) -> int:
    """Execute the ``render`` command.

    Returns:
        ``0`` on success, ``1`` when the tab does not exist.
    """
    settings = build_settings(args)
    try:
        html = asyncio.run(render_tab(settings, args.tab))
    except UnknownTabError as exc:
        echo(f"[docportal] {exc}", err=True)
        return 1
    output: pathlib.Path | None = args.output
    if output is None:
        echo(html, newline=False)
        return 0
    output.parent.mkdir(parents=True, exist_ok=True)
    _ = output.write_text(html, encoding="utf-8")
    logger.info(
        "Wrote %s",
        output,
        extra=structured_extra(component=LogComponent.CLI, tab=args.tab, path=output),
    )
    return 0


__all__ = ["execute_render", "register_render_command"]
