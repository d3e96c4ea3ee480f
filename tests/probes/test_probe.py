#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the per-family probe addressing rules."""

import logging
from typing import Callable, Optional
from unittest.mock import patch

import pytest

from probescan.probes.probe import classify
from probescan.usb.record import UsbRecord

JLINK = (0x1366, 0x0101)
STLINK_V2 = (0x0483, 0x3748)
STLINK_V21 = (0x0483, 0x374B)
TI_ICDI = (0x1CBE, 0x00FD)
DAPLINK = (0x0D28, 0x0204)
UNKNOWN = (0x9999, 0x9999)


def _record(usb_id: tuple, serial_number: str = "", location_id: Optional[int] = None) -> UsbRecord:
    return UsbRecord(
        usb_id[0], usb_id[1], "Vendor", "Product", serial_number, location_id=location_id
    )


@pytest.mark.parametrize(
    "usb_id,serial_number,expected",
    [
        (JLINK, "000123456789", "jlink_serial 000123456789"),
        ((0x1366, 0x0105), "000260101234", "jlink_serial 000260101234"),
        (STLINK_V2, "55FF6B06", "hla_serial 55FF6B06"),
        (STLINK_V21, "0671FF485550", "hla_serial 0671FF485550"),
        (TI_ICDI, "0E2012AB", "hla_serial 0E2012AB"),
        (DAPLINK, "0240000032044e45", "cmsis_dap_serial 0240000032044e45"),
        ((0x03EB, 0x2157), "ATML2157", "cmsis_dap_serial ATML2157"),
        (JLINK, "", "jlink_serial "),
        (UNKNOWN, "1234", None),
    ],
)
def test_openocd_serial(usb_id: tuple, serial_number: str, expected: Optional[str]) -> None:
    assert classify(_record(usb_id, serial_number)).openocd_serial() == expected


@pytest.mark.parametrize(
    "usb_id,serial_number,location_id,expected",
    [
        (STLINK_V21, "0671FF", 0x1A03, "/dev/cu.usbmodem1a33"),
        (JLINK, "000123456789", 0x14200000, "/dev/cu.usbmodem1421"),
        (JLINK, "000123456789", None, "/dev/cu.usbmodem1"),
        (STLINK_V21, "0671FF", None, "/dev/cu.usbmodem3"),
        (DAPLINK, "0240000032044e45", 0x14200000, "/dev/cu.usbmodem1422"),
        (DAPLINK, "0240000032044e45", 0xFA130000, "/dev/cu.usbmodemfa132"),
        (TI_ICDI, "0E2012AB", 0x14200000, "/dev/cu.usbmodem0E2012A1"),
        (TI_ICDI, "0E20123", None, "/dev/cu.usbmodem0E201231"),
        (STLINK_V2, "55FF6B06", 0x14200000, None),
        (UNKNOWN, "1234567890", 0x14200000, None),
    ],
)
def test_serial_path(
    usb_id: tuple, serial_number: str, location_id: Optional[int], expected: Optional[str]
) -> None:
    assert classify(_record(usb_id, serial_number, location_id)).serial_path() == expected


def test_serial_path_custom_prefix() -> None:
    probe = classify(_record(STLINK_V21, "0671FF", 0x1A03))
    assert probe.serial_path(prefix="/dev/tty.usbmodem") == "/dev/tty.usbmodem1a33"


@pytest.mark.parametrize("serial_number", ["", "0E2012", "ABC"])
def test_ti_icdi_short_serial(serial_number: str, caplog: pytest.LogCaptureFixture) -> None:
    """Too short TI-ICDI serial number gives no serial port path."""
    probe = classify(_record(TI_ICDI, serial_number))
    with caplog.at_level(logging.WARNING, logger="probescan"):
        assert probe.serial_path() is None
    assert "shorter than 7 characters" in caplog.text
    assert probe.openocd_serial() == f"hla_serial {serial_number}"


@pytest.mark.parametrize("usb_id", [JLINK, STLINK_V2, STLINK_V21, TI_ICDI, UNKNOWN])
def test_msd_path_not_applicable(usb_id: tuple, volumes_dir: Callable[..., str]) -> None:
    root = volumes_dir({"DAPLINK": "Unique ID: 1234\n"})
    assert classify(_record(usb_id, "1234")).msd_path(volumes_dir=root) is None


def test_daplink_msd_path(volumes_dir: Callable[..., str]) -> None:
    root = volumes_dir({"DAPLINK_A": "Unique ID: ABC123\n", "DAPLINK_B": "Unique ID: XYZ999\n"})
    assert classify(_record(DAPLINK, "XYZ999")).msd_path(volumes_dir=root).endswith("DAPLINK_B")
    assert classify(_record(DAPLINK, "NOPE00")).msd_path(volumes_dir=root) is None


def test_unknown_probe_accessors() -> None:
    probe = classify(UsbRecord(0x9999, 0x9999))
    assert probe.is_unknown()
    assert probe.device_type() is None
    assert probe.openocd_serial() is None
    assert probe.serial_path() is None
    assert probe.msd_path() is None


def test_fingerprint_of_handle() -> None:
    record = _record(JLINK, "000123456789")
    assert classify(record).fingerprint() == record.fingerprint()


def test_probe_info() -> None:
    probe = classify(_record(STLINK_V21, "0671FF485550", 0x1A03))
    with patch("probescan.probes.probe.find_msd_volume") as find_msd:
        info = probe.get_info()
    find_msd.assert_not_called()
    assert f"Fingerprint: {probe.fingerprint()}" in info
    assert "Type: STLinkV21" in info
    assert "Description: STMicroelectronics ST-LINK/V2.1" in info
    assert "OpenOCD serial: hla_serial 0671FF485550" in info
    assert "Serial port: /dev/cu.usbmodem1a33" in info
    assert "Mass storage: N/A" in info
    assert str(probe) == "STLinkV21 0x0483:0x374b. S/N:0671FF485550"
    assert str(classify(_record(UNKNOWN, "1"))) == "Unknown device 0x9999:0x9999. S/N:1"
