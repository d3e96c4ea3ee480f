#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""CLI helper for Click."""

import logging
from typing import Any, Callable, TypeVar, Union

import click
from click_option_group import optgroup

from probescan import __version__ as probescan_version

FC = TypeVar("FC", bound=Union[Callable[..., Any], click.Command])


def probescan_apps_common_options(options: FC) -> FC:
    """Common click options.

    Sets --help, --version; provides: `log_level: int` for logging.

    :return: click decorator
    """
    options = click.help_option("--help")(options)
    options = click.version_option(probescan_version, "--version")(options)
    options = click.option(
        "-vv",
        "--debug",
        "log_level",
        flag_value=logging.DEBUG,
        help="Display more debugging information.",
    )(options)
    options = click.option(
        "-v",
        "--verbose",
        "log_level",
        flag_value=logging.INFO,
        help="Print more detailed information",
    )(options)
    return options


def probe_filter_options(options: FC) -> FC:
    """Probe selection click options.

    Provides: `all_devices: bool` and `device: Optional[str]`.

    :return: click decorator
    """
    options = optgroup.option(
        "-d",
        "--device",
        type=str,
        help="Fingerprint (or its beginning) of the probe to use.",
    )(options)
    options = optgroup.option(
        "-a",
        "--all",
        "all_devices",
        is_flag=True,
        default=False,
        help="Include devices that are not known debug probes.",
    )(options)
    options = optgroup.group("Probe selection")(options)
    return options
