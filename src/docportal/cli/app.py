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


"""CLI entry point and orchestration for docportal commands."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Final

from docportal import __version__
from docportal.cli.commands import export as export_command
from docportal.cli.commands import render as render_command
from docportal.cli.commands import tabs as tabs_command
from docportal.cli.helpers import echo as _echo
from docportal.cli.helpers import register_argument as _register_argument
from docportal.cli.helpers import register_portal_options
from docportal.config import ConfigValidationError
from docportal.core.model_types import LogComponent
from docportal.logging import LOG_FORMATS, LOG_LEVELS, configure_logging, structured_extra

if TYPE_CHECKING:
    from docportal.cli.types import SubparserCollection

logger: logging.Logger = logging.getLogger("docportal.cli")

DOCPORTAL_VERSION: Final[str] = __version__

CommandHandler = Callable[[argparse.Namespace], int]


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point for the docportal command-line interface.

    Args:
        argv: Command-line arguments to parse. If None, uses sys.argv.

    Returns:
        int: Exit code from the executed command handler (0 for success,
            2 for settings errors, other non-zero values per command).
    """
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if args.version:
        _echo(f"docportal {DOCPORTAL_VERSION}")
        return 0
    if args.command is None:
        parser.error("No command provided.")
    _ = configure_logging(args.log_format, log_level=args.log_level)
    handler = _command_handlers().get(args.command)
    if handler is None:
        parser.error(f"Unknown command {args.command}")
    try:
        return handler(args)
    except ConfigValidationError as exc:
        logger.debug(
            "Settings error",
            exc_info=True,
            extra=structured_extra(component=LogComponent.CLI),
        )
        _echo(f"[docportal] {exc}", err=True)
        return 2


def _command_handlers() -> dict[str, CommandHandler]:
    return {
        "tabs": tabs_command.execute_tabs,
        "render": render_command.execute_render,
        "export": export_command.execute_export,
    }


def _global_options(default: object = None) -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    register_portal_options(common, default=default)
    _register_argument(
        common,
        "--log-format",
        choices=LOG_FORMATS,
        default=default,
        help="Select logging output format (default: DOCPORTAL_LOG_FORMAT or text).",
    )
    _register_argument(
        common,
        "--log-level",
        choices=LOG_LEVELS,
        default=default,
        help="Set verbosity of logged events (default: DOCPORTAL_LOG_LEVEL or info).",
    )
    return common


def _build_parser() -> argparse.ArgumentParser:
    """Build the top-level parser with global options and all subcommands.

    Global flags are accepted before or after the subcommand; the subcommand
    copies default to ``SUPPRESS`` so they never reset an earlier value.
    """
    parser = argparse.ArgumentParser(
        prog="docportal",
        parents=[_global_options()],
        description="Render and export tabbed documentation portals described by app.json.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    _register_argument(
        parser,
        "--version",
        action="store_true",
        help="Print the docportal version and exit.",
    )
    subparsers: SubparserCollection = parser.add_subparsers(dest="command")

    parents = [_global_options(argparse.SUPPRESS)]
    tabs_command.register_tabs_command(subparsers, parents=parents)
    render_command.register_render_command(subparsers, parents=parents)
    export_command.register_export_command(subparsers, parents=parents)
    return parser


__all__ = ["main"]
