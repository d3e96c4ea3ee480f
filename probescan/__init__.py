#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Probescan - identification and addressing of USB debug probes.

The package turns raw USB enumeration records into typed probe handles (J-Link,
ST-Link, DAPLink, TI-ICDI) and tells the caller how to reach each of them: the
OpenOCD serial argument, the virtual serial port path and the DAPLink mass-storage
volume.

MULTIPLE INTERFACES:
    - Pure Python library for custom integrations
    - The `probescan` CLI tool for scripting
"""

import os
from typing import Optional, Union

from packaging.version import Version, parse
from platformdirs import PlatformDirs


def get_probescan_version() -> Version:
    """Get probescan version information.

    :return: Parsed version object.
    """
    from .__version__ import __version__ as probescan_version

    return parse(probescan_version)


def value_to_bool(value: Optional[Union[bool, int, str]]) -> bool:
    """Convert value to boolean from various input formats.

    Supports conversion from string representations like "True", "true", "T", "1"
    and standard Python truthy/falsy values for other types.

    :param value: Value to convert to boolean (string, int, bool, or None).
    :return: Boolean representation of the input value.
    """
    if isinstance(value, str):
        return value in ("True", "true", "T", "1")
    return bool(value)


version = get_probescan_version()

__author__ = "NXP"
__license__ = "BSD-3-Clause"
__version__ = str(version)

PROBESCAN_VERSION_BASE = version.base_version

PROBESCAN_PLATFORM_DIRS = PlatformDirs(
    appauthor="nxp",
    appname="probescan",
    version=PROBESCAN_VERSION_BASE,
    ensure_exists=False,
)

# Root folder with mounted mass-storage volumes (DAPLink drag-and-drop disks)
PROBESCAN_VOLUMES_DIR = os.environ.get("PROBESCAN_VOLUMES_DIR", "/Volumes")
# Character device prefix of the probes' virtual serial ports
PROBESCAN_SERIAL_DEVICE_PREFIX = os.environ.get(
    "PROBESCAN_SERIAL_DEVICE_PREFIX", "/dev/cu.usbmodem"
)

PROBESCAN_INTERACTIVE_DISABLED = value_to_bool(os.environ.get("PROBESCAN_INTERACTIVE_DISABLED"))

# Default console log level is DEBUG instead of WARNING
PROBESCAN_DEBUG = value_to_bool(os.environ.get("PROBESCAN_DEBUG"))

PROBESCAN_DEBUG_LOGGING_DISABLED = value_to_bool(
    os.environ.get("PROBESCAN_DEBUG_LOGGING_DISABLED")
)
PROBESCAN_DEBUG_LOG_FILE = os.environ.get(
    "PROBESCAN_DEBUG_LOG_FILE", os.path.join(PROBESCAN_PLATFORM_DIRS.user_log_dir, "debug.log")
)
