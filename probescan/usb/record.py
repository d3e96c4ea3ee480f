#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Raw USB device record.

The record holds the USB descriptor fields as reported by the host, without any
interpretation. It is the input of the probe classification.
"""

from dataclasses import dataclass
from typing import Optional

from probescan.exceptions import ProbeScanValueError
from probescan.utils.misc import get_digest

USB_ID_MAX = 0xFFFF


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class UsbRecord:
    """Immutable USB descriptor record.

    The `serial_number` together with vendor and product strings identify a single
    physical unit. The `location_id` is a platform topology address; it changes when
    the unit is plugged into another port, so it's used only to derive OS device
    path suffixes.
    """

    vendor_id: int
    product_id: int
    vendor_string: str = ""
    product_string: str = ""
    serial_number: str = ""
    location_id: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate USB identifiers.

        :raises ProbeScanValueError: Vendor or product ID is not a 16-bit number or
            location ID is not a non-negative number.
        """
        for name in ("vendor_id", "product_id"):
            value = getattr(self, name)
            if not _is_int(value) or not 0 <= value <= USB_ID_MAX:
                raise ProbeScanValueError(f"Invalid USB {name.replace('_', ' ')}: {value!r}")
        if self.location_id is not None and (not _is_int(self.location_id) or self.location_id < 0):
            raise ProbeScanValueError(f"Invalid USB location ID: {self.location_id!r}")

    @property
    def usb_id(self) -> str:
        """USB identifier in VID:PID form, e.g. "0x1366:0x0101"."""
        return f"{self.vendor_id:#06x}:{self.product_id:#06x}"

    def fingerprint(self) -> str:
        """Compute the fingerprint of the unit.

        The digest covers the concatenation of vendor string, product string and
        serial number, in this order and without separators.

        :return: SHA-1 hex digest used as logical identity of the unit.
        """
        return get_digest(self.vendor_string + self.product_string + self.serial_number)

    def __str__(self) -> str:
        location = "N/A" if self.location_id is None else f"{self.location_id:#010x}"
        return (
            f"{self.product_string} - {self.vendor_string}\n"
            f"Vendor ID: 0x{self.vendor_id:04x}\n"
            f"Product ID: 0x{self.product_id:04x}\n"
            f"Serial number: {self.serial_number}\n"
            f"Location ID: {location}"
        )
