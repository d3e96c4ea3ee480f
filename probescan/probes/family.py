#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Debug probe families and their USB identifiers.

The family of a probe is given only by its USB vendor and product ID pair. Any
pair not listed in `PROBE_USB_IDS` is an unknown device.
"""

from probescan.utils.probe_enum import ProbeEnum


class ProbeFamily(ProbeEnum):
    """Debug probe family.

    The label is the probe type reported to the user.
    """

    UNKNOWN = ("Unknown", "Unknown USB device")
    JLINK = ("JLink", "SEGGER J-Link")
    STLINK_V2 = ("STLinkV2", "STMicroelectronics ST-LINK/V2")
    STLINK_V21 = ("STLinkV21", "STMicroelectronics ST-LINK/V2.1")
    TI_ICDI = ("TI-ICDI", "Texas Instruments In-Circuit Debug Interface")
    DAPLINK = ("DAPLink", "Arm Mbed DAPLink")

    @classmethod
    def from_usb_id(cls, vendor_id: int, product_id: int) -> "ProbeFamily":
        """Get probe family of the USB device.

        :param vendor_id: USB vendor ID.
        :param product_id: USB product ID.
        :return: Matching probe family, UNKNOWN for devices not in the table.
        """
        return PROBE_USB_IDS.get((vendor_id, product_id), cls.UNKNOWN)


# (vendor ID, product ID) -> probe family
PROBE_USB_IDS: dict[tuple[int, int], ProbeFamily] = {
    (0x0D28, 0x0204): ProbeFamily.DAPLINK,
    (0x03EB, 0x2157): ProbeFamily.DAPLINK,
    (0x0483, 0x3748): ProbeFamily.STLINK_V2,
    (0x0483, 0x374B): ProbeFamily.STLINK_V21,
    (0x1366, 0x0101): ProbeFamily.JLINK,
    (0x1366, 0x0105): ProbeFamily.JLINK,
    (0x1CBE, 0x00FD): ProbeFamily.TI_ICDI,
}
