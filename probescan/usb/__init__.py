#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Raw USB device records and their enumeration."""

from probescan.usb.record import UsbRecord

__all__ = ["UsbRecord"]
