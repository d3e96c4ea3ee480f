#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Debug probe classification, addressing and selection."""

from probescan.probes.family import PROBE_USB_IDS, ProbeFamily
from probescan.probes.msd import find_msd_volume
from probescan.probes.probe import ProbeHandle, classify
from probescan.probes.search import (
    ProbeFilter,
    ProbeHandles,
    enumerate_probes,
    search,
    search_probes,
    select_probe,
)

__all__ = [
    "PROBE_USB_IDS",
    "ProbeFamily",
    "ProbeFilter",
    "ProbeHandle",
    "ProbeHandles",
    "classify",
    "enumerate_probes",
    "find_msd_volume",
    "search",
    "search_probes",
    "select_probe",
]
