#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Probescan enumeration with label and description members."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class ProbeEnumMember:
    """Probescan enum member representation."""

    label: str
    description: Optional[str] = None


class ProbeEnum(ProbeEnumMember, Enum):
    """Probescan enumeration.

    Every member carries a display label and an optional human readable description.
    """
