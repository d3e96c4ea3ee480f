#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Mass-storage volume lookup.

Some probes (DAPLink) expose a drag-and-drop disk. The disk of a particular unit
is recognized by its DETAILS.TXT metadata file, which contains the probe's serial
number (the "Unique ID" line).
"""

import logging
import os
from typing import Callable, Optional

from probescan import PROBESCAN_VOLUMES_DIR
from probescan.exceptions import VolumeReadError

logger = logging.getLogger(__name__)

DETAILS_FILE_NAME = "DETAILS.TXT"
DAPLINK_VOLUME_PREFIX = "DAPLINK"


def read_details_file(path: str) -> str:
    """Read volume metadata file.

    Undecodable bytes are replaced, so a malformed file is read as text that just
    doesn't contain the serial number.

    :param path: Path to the metadata file.
    :return: Content of the file.
    :raises VolumeReadError: The file can't be opened or read.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()
    except OSError as exc:
        raise VolumeReadError(f"Cannot read {path}: {str(exc)}") from exc


def find_msd_volume(
    serial_number: str,
    volumes_dir: Optional[str] = None,
    read_text: Optional[Callable[[str], str]] = None,
    prefix: str = DAPLINK_VOLUME_PREFIX,
) -> Optional[str]:
    """Find mounted mass-storage volume of the probe.

    Volumes named with the given prefix are checked in alphabetical order, the first
    one whose metadata file contains the serial number is returned. A volume whose
    metadata can't be read is skipped.

    :param serial_number: Serial number of the probe.
    :param volumes_dir: Folder with mounted volumes, defaults to PROBESCAN_VOLUMES_DIR.
    :param read_text: Function reading the metadata file, defaults to read_details_file.
    :param prefix: Volume name prefix of the probe family.
    :return: Path to the volume or None if not found.
    """
    if not serial_number:
        logger.debug("Empty serial number, mass-storage volume can't be identified")
        return None

    volumes_dir = volumes_dir or PROBESCAN_VOLUMES_DIR
    read_text = read_text or read_details_file

    try:
        volumes = sorted(os.listdir(volumes_dir))
    except OSError as exc:
        logger.debug(f"Cannot list volumes in {volumes_dir}: {str(exc)}")
        return None

    for volume in volumes:
        if not volume.startswith(prefix):
            continue
        volume_path = os.path.join(volumes_dir, volume)
        details_path = os.path.join(volume_path, DETAILS_FILE_NAME)
        try:
            details = read_text(details_path)
        except (VolumeReadError, OSError, UnicodeDecodeError) as exc:
            logger.warning(f"Skipping volume {volume_path}: {str(exc)}")
            continue
        if serial_number in details:
            logger.debug(f"Probe {serial_number} has mass-storage volume {volume_path}")
            return volume_path

    return None
