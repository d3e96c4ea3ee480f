#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Probescan application utilities and error handling."""

import logging
import sys
from functools import wraps
from typing import Any, Callable, Optional

import click

from probescan import PROBESCAN_DEBUG_LOG_FILE, PROBESCAN_DEBUG_LOGGING_DISABLED
from probescan.exceptions import ProbeScanError

logger = logging.getLogger(__name__)


class ProbeScanAppError(ProbeScanError):
    """Probescan application error exception for CLI tools.

    :cvar fmt: Format string template for error message display.
    """

    fmt = "{description}"

    def __init__(self, desc: Optional[str] = None, error_code: int = 1) -> None:
        """Initialize the AppError.

        :param desc: Description to print out on command line, defaults to None
        :param error_code: Error code passed to OS, defaults to 1
        """
        super().__init__(desc)
        self.description = desc
        self.error_code = error_code


def catch_probescan_error(function: Callable) -> Callable:
    """Catch and handle probescan errors and other exceptions.

    Application errors exit with their own error code, library errors with code 2
    and any other exception with code 3. The debug log file is mentioned for the
    unexpected ones.

    :param function: The function to be decorated.
    :return: The decorated function.
    """

    @wraps(function)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            retval = function(*args, **kwargs)
            return retval
        except ProbeScanAppError as app_exc:
            if app_exc.description:
                click.echo(f"{app_exc.__class__.__name__}: {app_exc}", err=True)
            if 0 < app_exc.error_code < 256:
                sys.exit(app_exc.error_code)
            sys.exit(1)
        except (AssertionError, ProbeScanError) as probescan_exc:
            click.echo(f"{probescan_exc.__class__.__name__}: {probescan_exc}", err=True)
            logger.debug(str(probescan_exc), exc_info=True)
            if not PROBESCAN_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {PROBESCAN_DEBUG_LOG_FILE} for more info", fg="yellow"
                )
            sys.exit(2)
        except (Exception, KeyboardInterrupt) as base_exc:  # pylint: disable=broad-except
            click.echo(f"GENERAL ERROR: {type(base_exc).__name__}: {base_exc}", err=True)
            logger.debug(str(base_exc), exc_info=True)
            if not PROBESCAN_DEBUG_LOGGING_DISABLED:
                click.secho(
                    f"See debug log file: {PROBESCAN_DEBUG_LOG_FILE} for more info.", fg="yellow"
                )
            sys.exit(3)

    return wrapper
