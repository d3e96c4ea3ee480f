#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""USB device scanner.

Reads the list of all USB devices attached to the host and converts them into
`UsbRecord` objects. The pyusb library with the libusb backend bundled by
libusb-package is used, so no system libusb installation is needed.
"""

import logging
from typing import Any, Callable, Iterable, Optional, Sequence

import libusb_package
import usb.core
import usb.util

from probescan.exceptions import EnumerationError
from probescan.usb.record import UsbRecord

logger = logging.getLogger(__name__)

# macOS style location ID: bus number in the top byte, then one nibble per hub port
LOCATION_BUS_SHIFT = 24
LOCATION_PORT_BITS = 4
LOCATION_MAX_DEPTH = 6


def compute_location_id(bus: Optional[int], port_numbers: Optional[Sequence[int]]) -> Optional[int]:
    """Compute platform location ID from the USB topology.

    The result follows the layout of the macOS IORegistry `locationID` property,
    e.g. bus 0x14 with port chain (2,) gives 0x14200000.

    :param bus: USB bus number, None when unknown.
    :param port_numbers: Chain of hub port numbers from the root hub to the device.
    :return: Location ID or None if the bus number is unknown.
    """
    if bus is None:
        return None
    location_id = (bus & 0xFF) << LOCATION_BUS_SHIFT
    shift = LOCATION_BUS_SHIFT
    for port in (port_numbers or ())[:LOCATION_MAX_DEPTH]:
        shift -= LOCATION_PORT_BITS
        location_id |= (port & 0xF) << shift
    return location_id


def _get_string(device: Any, index: int) -> str:
    """Read string descriptor of the device.

    Some devices refuse string requests without sufficient permissions; such a
    string is reported as empty instead of failing the whole enumeration.

    :param device: pyusb device object.
    :param index: String descriptor index, zero means no string.
    :return: Descriptor string or empty string.
    """
    if not index:
        return ""
    try:
        return usb.util.get_string(device, index) or ""
    except (ValueError, usb.core.USBError, NotImplementedError) as exc:
        logger.debug(
            f"Cannot read string descriptor {index} of device "
            f"{device.idVendor:#06x}:{device.idProduct:#06x}: {str(exc)}"
        )
        return ""


def usb_device_to_record(device: Any) -> UsbRecord:
    """Convert pyusb device object into USB record.

    :param device: pyusb device object.
    :return: USB record describing the device.
    """
    return UsbRecord(
        vendor_id=device.idVendor,
        product_id=device.idProduct,
        vendor_string=_get_string(device, device.iManufacturer),
        product_string=_get_string(device, device.iProduct),
        serial_number=_get_string(device, device.iSerialNumber),
        location_id=compute_location_id(
            getattr(device, "bus", None), getattr(device, "port_numbers", None)
        ),
    )


def _find_all_devices() -> Iterable[Any]:
    return libusb_package.find(find_all=True)


def enumerate_usb_records(
    finder: Optional[Callable[[], Iterable[Any]]] = None,
) -> list[UsbRecord]:
    """Enumerate all USB devices attached to the host.

    :param finder: Function returning pyusb device objects, defaults to libusb-package finder.
    :return: List of USB records in the enumeration order.
    :raises EnumerationError: The USB subsystem can't be queried.
    """
    finder = finder or _find_all_devices
    try:
        devices = list(finder())
    except (usb.core.NoBackendError, usb.core.USBError) as exc:
        raise EnumerationError(f"USB devices enumeration failed: {str(exc)}") from exc

    records = [usb_device_to_record(device) for device in devices]
    logger.debug(f"Enumerated {len(records)} USB devices")
    return records
