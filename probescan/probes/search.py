#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Debug probe enumeration, filtering and selection.

The probes are enumerated as a one-shot snapshot of the attached USB devices,
classified and then narrowed down by a `ProbeFilter`. The caller may finally pick
a single probe with `select_probe`.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

import colorama
import prettytable

from probescan import PROBESCAN_INTERACTIVE_DISABLED
from probescan.exceptions import MultipleProbesError, ProbeNotFoundError
from probescan.probes.probe import ProbeHandle, classify
from probescan.usb.record import UsbRecord
from probescan.usb.scanner import enumerate_usb_records

logger = logging.getLogger(__name__)


class ProbeHandles(list[ProbeHandle]):
    """Collection of probe handles with table representation."""

    def __str__(self) -> str:
        """Return string representation of the probes list.

        :return: Formatted table string with colored probe information.
        """
        table = prettytable.PrettyTable(["#", "Fingerprint", "Type", "USB ID", "Serial number"])
        table.align = "l"
        table.header = True
        table.border = True
        table.hrules = prettytable.HRuleStyle.HEADER
        table.vrules = prettytable.VRuleStyle.NONE
        for i, probe in enumerate(self):
            table.add_row(
                [
                    colorama.Fore.YELLOW + str(i),
                    colorama.Fore.CYAN + probe.fingerprint(),
                    colorama.Fore.WHITE + (probe.device_type() or "Unknown"),
                    colorama.Fore.WHITE + probe.record.usb_id,
                    colorama.Fore.GREEN + probe.serial_number,
                ]
            )
        return table.get_string() + colorama.Style.RESET_ALL


@dataclass(frozen=True)
class ProbeFilter:
    """Probe selection policy.

    Both criteria must be met; a criterion that is not set doesn't constrain the result.
    """

    include_unknown: bool = False
    fingerprint_prefix: Optional[str] = None

    @classmethod
    def from_options(cls, all_devices: bool = False, device: Optional[str] = None) -> "ProbeFilter":
        """Create filter from the command line options.

        :param all_devices: The `--all` flag, include unknown devices.
        :param device: The `--device` value, fingerprint prefix.
        :return: Probe filter.
        """
        return cls(include_unknown=all_devices, fingerprint_prefix=device)

    def matches(self, probe: ProbeHandle) -> bool:
        """Check whether the probe meets the filter criteria.

        :param probe: Probe handle to check.
        :return: True if the probe passes the filter.
        """
        if not self.include_unknown and probe.is_unknown():
            return False
        if self.fingerprint_prefix and not probe.fingerprint().startswith(
            self.fingerprint_prefix
        ):
            return False
        return True


def search_probes(
    probes: Iterable[ProbeHandle], probe_filter: Optional[ProbeFilter] = None
) -> ProbeHandles:
    """Filter probes.

    :param probes: Probe handles in enumeration order.
    :param probe_filter: Selection policy, defaults to known probes only.
    :return: Matching probes, in the input order.
    """
    probe_filter = probe_filter or ProbeFilter()
    return ProbeHandles(probe for probe in probes if probe_filter.matches(probe))


def enumerate_probes(
    records_provider: Optional[Callable[[], Iterable[UsbRecord]]] = None,
) -> ProbeHandles:
    """Enumerate all attached USB devices as probe handles.

    :param records_provider: Source of USB records, defaults to the host USB scan.
    :return: Classified handles of all devices, unknown ones included.
    :raises EnumerationError: The USB devices can't be enumerated.
    """
    records_provider = records_provider or enumerate_usb_records
    return ProbeHandles(classify(record) for record in records_provider())


def search(
    probe_filter: Optional[ProbeFilter] = None,
    records_provider: Optional[Callable[[], Iterable[UsbRecord]]] = None,
) -> ProbeHandles:
    """Enumerate attached probes and filter them.

    :param probe_filter: Selection policy, defaults to known probes only.
    :param records_provider: Source of USB records, defaults to the host USB scan.
    :return: Matching probes.
    :raises EnumerationError: The USB devices can't be enumerated.
    """
    probes = search_probes(enumerate_probes(records_provider), probe_filter)
    logger.debug(f"Found {len(probes)} probes matching {probe_filter or ProbeFilter()}")
    return probes


def select_probe(
    probes: ProbeHandles,
    silent: bool = False,
    print_func: Callable = print,
    input_func: Callable[[], str] = input,
) -> ProbeHandle:
    """Select one probe from available probes.

    A single probe is selected automatically, among several probes the user is asked
    to choose, unless the interactive mode is disabled.

    :param probes: List of available probes to select from.
    :param silent: If True, suppress output when only one probe is available.
    :param print_func: Custom function for output, defaults to print.
    :param input_func: Custom function for user input, defaults to input.
    :return: Selected probe.
    :raises ProbeNotFoundError: No probe found or invalid selection index.
    :raises MultipleProbesError: Multiple probes found in non-interactive mode.
    """
    probe_len = len(probes)
    if probe_len == 0:
        raise ProbeNotFoundError("Debug probe with defined parameters is not connected in system!")

    if not silent or probe_len > 1:
        print_func(str(probes))

    if probe_len == 1:
        return probes[0]

    if PROBESCAN_INTERACTIVE_DISABLED:
        raise MultipleProbesError(
            "Multiple probes found. The interactive mode is turned off. "
            "Use the device fingerprint to select one probe."
        )
    print_func("Please choose the debug probe: ")
    try:
        i_selected = int(input_func())
    except ValueError as exc:
        raise ProbeNotFoundError("The chosen probe index is not a number") from exc
    if not 0 <= i_selected < probe_len:
        raise ProbeNotFoundError("The chosen probe index is out of range")
    return probes[i_selected]
