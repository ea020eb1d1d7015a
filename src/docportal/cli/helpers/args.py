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


# ignore JUSTIFIED: argument helpers mirror argparse signatures and allow passthrough
# typing without constraining caller kwargs
# ruff: noqa: ANN401  # pylint: disable=redundant-returns-doc,unnecessary-ellipsis

"""Argument parser helpers used across CLI commands."""

from __future__ import annotations

import argparse
import pathlib
from typing import Any, Protocol

from docportal.config import PortalSettings, apply_overrides, load_settings
from docportal.logging import configure_logging


class ArgumentRegistrar(Protocol):
    """Interface shared by ``ArgumentParser`` and argument groups."""

    def add_argument(
        self,
        *args: Any,
        **kwargs: Any,
    ) -> argparse.Action:
        """Expose ``ArgumentParser.add_argument`` so helpers can operate generically."""
        ...  # pragma: no cover


def register_argument(
    registrar: ArgumentRegistrar,
    *args: Any,
    **kwargs: Any,
) -> None:
    """Register an argument on a parser/argument group, discarding the action handle.

    Args:
        registrar: Parser or argument group on which to register the option.
        *args: Positional flags and option strings forwarded to ``add_argument``.
        **kwargs: Keyword options forwarded to ``add_argument``.
    """
    _ = registrar.add_argument(*args, **kwargs)


def register_portal_options(parser: argparse.ArgumentParser, *, default: object = None) -> None:
    """Register the flags that locate the portal and its settings file.

    Args:
        parser: Parser receiving the "Portal" argument group.
        default: Default for every flag; subcommand copies pass
            ``argparse.SUPPRESS`` so values given before the subcommand survive.
    """
    group = parser.add_argument_group("Portal")
    register_argument(
        group,
        "--root",
        default=default,
        help="Portal root: a directory or http(s) base URL holding app.json (overrides settings).",
    )
    register_argument(
        group,
        "--manifest",
        default=default,
        help="Manifest resource name relative to the root (overrides settings).",
    )
    register_argument(
        group,
        "--config",
        type=pathlib.Path,
        default=default,
        help="Explicit docportal settings file (default: discovered in the working directory).",
    )


def build_settings(args: argparse.Namespace) -> PortalSettings:
    """Resolve settings from files, the environment and CLI flags.

    Raises:
        ConfigValidationError: If a settings file cannot be read or is invalid.
    """
    settings = load_settings(getattr(args, "config", None))
    if settings.log_format is not None or settings.log_level is not None:
        # CLI flags win over the settings file.
        _ = configure_logging(
            getattr(args, "log_format", None) or settings.log_format,
            log_level=getattr(args, "log_level", None) or settings.log_level,
        )
    return apply_overrides(
        settings,
        {"root": getattr(args, "root", None), "manifest": getattr(args, "manifest", None)},
    )


__all__ = [
    "ArgumentRegistrar",
    "build_settings",
    "register_argument",
    "register_portal_options",
]
