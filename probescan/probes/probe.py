#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Debug probe handle and per-family addressing rules.

Each probe family may provide three capabilities: the OpenOCD serial argument,
the virtual serial port path and the mass-storage volume path. The rules of each
family are kept in explicit tables; a family missing in a table simply doesn't
have the capability and the accessor returns None.
"""

import logging
from typing import Callable, Optional

from probescan import PROBESCAN_SERIAL_DEVICE_PREFIX
from probescan.exceptions import MalformedSerialError
from probescan.probes.family import ProbeFamily
from probescan.probes.msd import DAPLINK_VOLUME_PREFIX, find_msd_volume
from probescan.usb.record import UsbRecord

logger = logging.getLogger(__name__)

TI_ICDI_SERIAL_PREFIX_LENGTH = 7


def location_id_digits(record: UsbRecord) -> str:
    """Get device path part derived from the location ID.

    Hexadecimal rendering of the location ID (0 when unknown) with all '0' digits removed.

    :param record: USB record of the probe.
    :return: Device path part, e.g. "1a3" for location 0x1a03.
    """
    return format(record.location_id or 0, "x").replace("0", "")


def serial_number_prefix(record: UsbRecord) -> str:
    """Get device path part derived from the serial number.

    :param record: USB record of the probe.
    :return: First characters of the serial number.
    :raises MalformedSerialError: The serial number is too short.
    """
    serial_number = record.serial_number
    if len(serial_number) < TI_ICDI_SERIAL_PREFIX_LENGTH:
        raise MalformedSerialError(
            f"Serial number '{serial_number}' is shorter than "
            f"{TI_ICDI_SERIAL_PREFIX_LENGTH} characters"
        )
    return serial_number[:TI_ICDI_SERIAL_PREFIX_LENGTH]


# probe family -> OpenOCD command selecting the adapter by serial number
OPENOCD_SERIAL_COMMANDS: dict[ProbeFamily, str] = {
    ProbeFamily.JLINK: "jlink_serial",
    ProbeFamily.STLINK_V2: "hla_serial",
    ProbeFamily.STLINK_V21: "hla_serial",
    ProbeFamily.TI_ICDI: "hla_serial",
    ProbeFamily.DAPLINK: "cmsis_dap_serial",
}

# probe family -> (device path part, interface suffix) of the virtual serial port
SERIAL_PATH_RULES: dict[ProbeFamily, tuple[Callable[[UsbRecord], str], str]] = {
    ProbeFamily.JLINK: (location_id_digits, "1"),
    ProbeFamily.STLINK_V21: (location_id_digits, "3"),
    ProbeFamily.DAPLINK: (location_id_digits, "2"),
    ProbeFamily.TI_ICDI: (serial_number_prefix, "1"),
}

# probe family -> name prefix of the mass-storage volume
MSD_VOLUME_PREFIXES: dict[ProbeFamily, str] = {
    ProbeFamily.DAPLINK: DAPLINK_VOLUME_PREFIX,
}


class ProbeHandle:
    """Typed handle of one enumerated USB device.

    The family is resolved from the USB vendor and product ID once, when the
    handle is created, and never changes.
    """

    def __init__(self, record: UsbRecord) -> None:
        """Initialize the probe handle.

        :param record: USB record of the device.
        """
        self._record = record
        self._family = ProbeFamily.from_usb_id(record.vendor_id, record.product_id)

    @property
    def record(self) -> UsbRecord:
        """Raw USB record of the probe."""
        return self._record

    @property
    def family(self) -> ProbeFamily:
        """Probe family."""
        return self._family

    @property
    def serial_number(self) -> str:
        """Serial number of the probe."""
        return self._record.serial_number

    def fingerprint(self) -> str:
        """Get fingerprint of the probe.

        :return: Digest of the USB descriptor strings.
        """
        return self._record.fingerprint()

    def is_unknown(self) -> bool:
        """Check whether the device is not a known debug probe.

        :return: True for unknown devices.
        """
        return self._family is ProbeFamily.UNKNOWN

    def device_type(self) -> Optional[str]:
        """Get probe type name.

        :return: Probe type, e.g. "JLink", None for unknown devices.
        """
        if self.is_unknown():
            return None
        return self._family.label

    def openocd_serial(self) -> Optional[str]:
        """Get OpenOCD argument selecting this exact probe.

        :return: Command with serial number, e.g. "jlink_serial 000123456789",
            None if not applicable.
        """
        command = OPENOCD_SERIAL_COMMANDS.get(self._family)
        if command is None:
            return None
        return f"{command} {self._record.serial_number}"

    def serial_path(self, prefix: Optional[str] = None) -> Optional[str]:
        """Get path of the probe's virtual serial port.

        The names follow the device files created by the OS for the known probe
        firmware; they can't be queried, only reproduced.

        :param prefix: Device file prefix, defaults to PROBESCAN_SERIAL_DEVICE_PREFIX.
        :return: Serial device path or None if not applicable or not available.
        """
        rule = SERIAL_PATH_RULES.get(self._family)
        if rule is None:
            return None
        path_part, suffix = rule
        try:
            middle = path_part(self._record)
        except MalformedSerialError as exc:
            logger.warning(f"Serial port path of {self} is not available: {exc.description}")
            return None
        return f"{prefix or PROBESCAN_SERIAL_DEVICE_PREFIX}{middle}{suffix}"

    def msd_path(
        self,
        volumes_dir: Optional[str] = None,
        read_text: Optional[Callable[[str], str]] = None,
    ) -> Optional[str]:
        """Get path of the probe's mounted mass-storage volume.

        :param volumes_dir: Folder with mounted volumes, defaults to PROBESCAN_VOLUMES_DIR.
        :param read_text: Function reading the volume metadata file.
        :return: Volume path or None if not applicable or not mounted.
        """
        volume_prefix = MSD_VOLUME_PREFIXES.get(self._family)
        if volume_prefix is None:
            return None
        return find_msd_volume(
            self._record.serial_number,
            volumes_dir=volumes_dir,
            read_text=read_text,
            prefix=volume_prefix,
        )

    def get_info(self) -> str:
        """Get detailed description of the probe.

        :return: Multi-line text with identification and all addressing information.
        """
        return (
            f"Fingerprint: {self.fingerprint()}\n"
            f"Type: {self.device_type() or 'Unknown'}\n"
            f"Description: {self._family.description}\n"
            f"{self._record}\n"
            f"OpenOCD serial: {self.openocd_serial() or 'N/A'}\n"
            f"Serial port: {self.serial_path() or 'N/A'}\n"
            f"Mass storage: {self.msd_path() or 'N/A'}"
        )

    def __str__(self) -> str:
        return (
            f"{self.device_type() or 'Unknown device'} {self._record.usb_id}. "
            f"S/N:{self._record.serial_number}"
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._family.label}, {self._record!r})"


def classify(record: UsbRecord) -> ProbeHandle:
    """Classify USB record as a debug probe.

    Total function: devices that are not known probes get the UNKNOWN family.

    :param record: USB record of the device.
    :return: Probe handle.
    """
    probe = ProbeHandle(record)
    logger.debug(f"Device {record.usb_id} classified as {probe.family.label}")
    return probe
