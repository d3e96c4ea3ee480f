#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Tests of the raw USB record and its fingerprint."""

import dataclasses
import hashlib

import pytest

from probescan.exceptions import ProbeScanValueError
from probescan.usb.record import UsbRecord


def test_fingerprint_is_sha1_of_concatenated_strings() -> None:
    record = UsbRecord(0x1366, 0x0101, "SEGGER", "J-Link", "000123456789")
    expected = hashlib.sha1(b"SEGGERJ-Link000123456789").hexdigest()
    assert record.fingerprint() == expected
    assert len(record.fingerprint()) == 40


def test_fingerprint_ignores_ids_and_location() -> None:
    """Only the descriptor strings identify the unit."""
    record_1 = UsbRecord(0x1366, 0x0101, "SEGGER", "J-Link", "123", location_id=0x14200000)
    record_2 = UsbRecord(0x0D28, 0x0204, "SEGGER", "J-Link", "123", location_id=None)
    assert record_1.fingerprint() == record_2.fingerprint()


@pytest.mark.parametrize(
    "vendor_string,product_string,serial_number",
    [
        ("ARM", "DAPLink CMSIS-DAP", "0240000032044e4500"),
        ("ARM", "DAPLink CMSIS-DAP", "0240000032044e4501"),
        ("ARM ", "DAPLink CMSIS-DAP", "0240000032044e4500"),
        ("ARM", "DAPLink CMSIS-DAP ", "0240000032044e4500"),
    ],
)
def test_fingerprint_differs_for_different_strings(
    vendor_string: str, product_string: str, serial_number: str
) -> None:
    reference = UsbRecord(0x0D28, 0x0204, "ARM", "DAPLink CMSIS-DAP", "0240000032044e4500")
    record = UsbRecord(0x0D28, 0x0204, vendor_string, product_string, serial_number)
    if record == reference:
        assert record.fingerprint() == reference.fingerprint()
    else:
        assert record.fingerprint() != reference.fingerprint()


def test_fingerprint_with_empty_serial() -> None:
    record = UsbRecord(0x0483, 0x3748, "STMicroelectronics", "STM32 STLink")
    assert record.fingerprint() == hashlib.sha1(b"STMicroelectronicsSTM32 STLink").hexdigest()


def test_record_is_immutable() -> None:
    record = UsbRecord(0x0483, 0x3748)
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.serial_number = "X"  # type: ignore[misc]


@pytest.mark.parametrize(
    "vendor_id,product_id",
    [(-1, 0), (0x10000, 0), (0, 0x10000), ("1", 0), (True, 0x0101), (0x1366, False)],
)
def test_invalid_usb_ids(vendor_id: int, product_id: int) -> None:
    with pytest.raises(ProbeScanValueError):
        UsbRecord(vendor_id, product_id)


@pytest.mark.parametrize("location_id", [-1, -0x1A03, "0x1a03", 1.5, True])
def test_invalid_location_id(location_id: int) -> None:
    with pytest.raises(ProbeScanValueError):
        UsbRecord(0x1366, 0x0101, "SEGGER", "J-Link", "000123456789", location_id=location_id)


@pytest.mark.parametrize("location_id", [None, 0, 0x1A03, 0xFFFFFFFF])
def test_valid_location_id(location_id: int) -> None:
    assert UsbRecord(0x1366, 0x0101, location_id=location_id).location_id == location_id


def test_usb_id_and_str() -> None:
    record = UsbRecord(
        0x1CBE, 0x00FD, "Texas Instruments", "In-Circuit Debug Interface", "0E2012AB"
    )
    assert record.usb_id == "0x1cbe:0x00fd"
    text = str(record)
    assert "In-Circuit Debug Interface - Texas Instruments" in text
    assert "Vendor ID: 0x1cbe" in text
    assert "Product ID: 0x00fd" in text
    assert "Location ID: N/A" in text
    assert "Location ID: 0x14200000" in str(dataclasses.replace(record, location_id=0x14200000))
