#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Debug probe scanner.

Lists the USB debug probes attached to the host and prints the information needed
to reach a particular one: the OpenOCD serial argument, the serial port path and
the mass-storage volume.
"""

import sys
from typing import Callable, Optional

import click

from probescan.apps.utils import logger as probescan_logger
from probescan.apps.utils.common_cli_options import (
    probe_filter_options,
    probescan_apps_common_options,
)
from probescan.apps.utils.utils import ProbeScanAppError, catch_probescan_error
from probescan.probes.probe import ProbeHandle
from probescan.probes.search import ProbeFilter, search, select_probe


def _echo_err(text: str) -> None:
    click.echo(text, err=True)


def _get_single_probe(all_devices: bool, device: Optional[str]) -> ProbeHandle:
    """Find exactly one probe matching the selection options.

    :param all_devices: Include unknown devices.
    :param device: Fingerprint prefix.
    :return: Selected probe.
    """
    probes = search(ProbeFilter.from_options(all_devices, device))
    return select_probe(probes, silent=True, print_func=_echo_err)


def _print_probe_value(
    all_devices: bool,
    device: Optional[str],
    getter: Callable[[ProbeHandle], Optional[str]],
    what: str,
) -> None:
    probe = _get_single_probe(all_devices, device)
    value = getter(probe)
    if value is None:
        raise ProbeScanAppError(f"The {what} is not available for {probe}")
    click.echo(value)


@click.group(name="probescan", no_args_is_help=True)
@probescan_apps_common_options
def main(log_level: int) -> None:
    """Utility identifying USB debug probes attached to the host.

    The probes are known by their fingerprint; a unique beginning of the
    fingerprint is enough to select a probe with the -d/--device option.
    """
    probescan_logger.install(level=log_level)


@main.command(name="list", no_args_is_help=False)
@probe_filter_options
def list_probes(all_devices: bool, device: Optional[str]) -> None:
    """List attached debug probes."""
    probes = search(ProbeFilter.from_options(all_devices, device))
    if not probes:
        click.echo("No probe found")
        return
    click.echo(str(probes))


@main.command(name="info", no_args_is_help=False)
@probe_filter_options
def info(all_devices: bool, device: Optional[str]) -> None:
    """Print detailed information about attached debug probes."""
    probes = search(ProbeFilter.from_options(all_devices, device))
    if not probes:
        click.echo("No probe found")
        return
    for probe in probes:
        click.echo(probe.get_info())
        click.echo("")


@main.command(name="openocd-serial", no_args_is_help=False)
@probe_filter_options
def openocd_serial(all_devices: bool, device: Optional[str]) -> None:
    """Print OpenOCD command selecting the probe, e.g. "hla_serial 0670FF..."."""
    _print_probe_value(all_devices, device, ProbeHandle.openocd_serial, "OpenOCD serial")


@main.command(name="serial-path", no_args_is_help=False)
@probe_filter_options
def serial_path(all_devices: bool, device: Optional[str]) -> None:
    """Print path of the probe's virtual serial port."""
    _print_probe_value(all_devices, device, ProbeHandle.serial_path, "serial port path")


@main.command(name="msd-path", no_args_is_help=False)
@probe_filter_options
def msd_path(all_devices: bool, device: Optional[str]) -> None:
    """Print path of the probe's mass-storage volume."""
    _print_probe_value(all_devices, device, ProbeHandle.msd_path, "mass-storage volume")


@catch_probescan_error
def safe_main() -> None:
    """Call the main function."""
    sys.exit(main())  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    safe_main()
