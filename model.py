#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 14:20:37 krylon>
#
# /data/code/python/imcdnsmon/model.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the imcdnsmon inventory checker. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
imcdnsmon.model

(c) 2026 Benjamin Walkenhorst
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Final, TypeAlias

StatusOK: Final[str] = "OK"
StatusMissing: Final[str] = "missing"


class Check(Enum):
    """Check identifies one of the comparisons we perform on a Host."""

    A = "DNS A"
    PTR = "DNS PTR"
    Monitoring = "Monitoring"


def wrong(imc: str, dns: list[str]) -> str:
    """Format the status of a check where IMC and the other side disagree."""
    return f"wrong (IMC: {imc}; DNS: {', '.join(sorted(dns))})"


@dataclass(frozen=True, slots=True, kw_only=True)
class HostInfo:
    """HostInfo holds the data the inventory export has on a Host."""

    ipv4: str = ""
    model: str = ""
    unit_model: str = ""
    serial_number: str = ""
    hardware_version: str = ""
    software_version: str = ""
    firmware_version: str = ""

    @classmethod
    def field_names(cls) -> list[str]:
        """Return the names of the fields, in the order the export lists them."""
        return [f.name for f in fields(cls)]


@dataclass(slots=True, kw_only=True)
class HostRecord:
    """HostRecord is a Host from the inventory plus the results of the checks we ran on it."""

    info: HostInfo
    checks: dict[Check, str] = field(default_factory=dict)

    @property
    def deviations(self) -> dict[Check, str]:
        """Return the checks whose status is anything but OK."""
        return {k: v for k, v in self.checks.items() if v != StatusOK}


HostTable: TypeAlias = dict[str, HostRecord]

# Local Variables: #
# python-indent: 4 #
# End: #
