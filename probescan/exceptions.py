#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Probescan exception classes.

This module defines the hierarchy of custom exception classes used throughout
the probescan library for consistent error handling and reporting.
"""

from typing import Optional

#######################################################################
# # Probescan Exceptions
#######################################################################


class ProbeScanError(Exception):
    """Probescan Base Exception.

    All probescan specific exceptions inherit from this class, which provides
    consistent error formatting.

    :cvar fmt: Default error message format template.
    """

    fmt = "PROBESCAN: {description}"

    def __init__(self, desc: Optional[str] = None) -> None:
        """Initialize the base probescan exception.

        :param desc: Optional description of the exception.
        """
        super().__init__()
        self.description = desc

    def __str__(self) -> str:
        """Return string representation of the exception.

        :return: Formatted exception message, "Unknown Error" when no description is set.
        """
        return self.fmt.format(description=self.description or "Unknown Error")


class ProbeScanValueError(ProbeScanError, ValueError):
    """Probescan standard value error exception."""


class ProbeScanIOError(ProbeScanError, IOError):
    """Probescan standard IO error exception."""


class ProbeScanConnectionError(ProbeScanError, ConnectionError):
    """Probescan connection error exception.

    Raised when the host USB subsystem can't be reached.
    """


class EnumerationError(ProbeScanConnectionError):
    """USB enumeration failure.

    The host USB registry could not be queried. The whole enumeration fails,
    there is no partial result and no retry.
    """


class VolumeReadError(ProbeScanIOError):
    """Mass-storage volume metadata can't be opened or read.

    Raised for a single candidate volume; the volume scan skips it and continues.
    """


class MalformedSerialError(ProbeScanValueError):
    """Probe serial number is too short for the expected fixed prefix."""


class ProbeSelectionError(ProbeScanError):
    """Base exception for probe selection problems."""


class ProbeNotFoundError(ProbeSelectionError):
    """No probe matches the selection criteria."""


class MultipleProbesError(ProbeSelectionError):
    """Several probes match the selection criteria and no choice can be made."""
