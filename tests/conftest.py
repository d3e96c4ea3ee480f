#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Probescan pytest configuration and shared test fixtures."""

import logging
import os
from typing import Callable, Iterator

import pytest

from tests.cli_runner import CliRunner

os.environ["PROBESCAN_DEBUG_LOGGING_DISABLED"] = "True"
os.environ.pop("PROBESCAN_INTERACTIVE_DISABLED", None)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Get CLI runner instance for testing.

    :return: CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_probescan_logger() -> Iterator[None]:
    """Remove log handlers installed by the CLI during the test."""
    probescan_logger = logging.getLogger("probescan")
    handlers = list(probescan_logger.handlers)
    yield
    for handler in list(probescan_logger.handlers):
        if handler not in handlers:
            probescan_logger.removeHandler(handler)


@pytest.fixture
def volumes_dir(tmp_path: "os.PathLike") -> Callable[..., str]:
    """Get factory of synthetic mounted volumes folder.

    The factory takes volume name -> DETAILS.TXT content (None for no details file).

    :return: Factory returning path of the volumes folder.
    """

    def create(volumes: dict) -> str:
        root = os.path.join(str(tmp_path), "Volumes")
        os.makedirs(root, exist_ok=True)
        for name, details in volumes.items():
            volume = os.path.join(root, name)
            os.makedirs(volume, exist_ok=True)
            if details is None:
                continue
            mode = "wb" if isinstance(details, bytes) else "w"
            with open(os.path.join(volume, "DETAILS.TXT"), mode) as f:
                f.write(details)
        return root

    return create
