#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 15:11:48 krylon>
#
# /data/code/python/imcdnsmon/config.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the imcdnsmon inventory checker. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
imcdnsmon.config

(c) 2026 Benjamin Walkenhorst

This file contains the data types describing what a single run is supposed to do.
"""

import argparse
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Final, Optional

from imcdnsmon.common import ConfigurationError

default_export_dir: Final[str] = "/var/LConf/lconf.export"
default_compare: Final[str] = "DNS,Mon"


class Facility(Enum):
    """Facility represents one of the sources we compare the inventory against."""

    DNS = "DNS"
    Mon = "Mon"


def parse_compare_with(value: str) -> frozenset[Facility]:
    """Parse a comma-separated list of Facility names."""
    facilities: set[Facility] = set()
    for item in value.split(","):
        item = item.strip()
        if item == "":
            continue
        try:
            facilities.add(Facility(item))
        except ValueError as verr:
            known: Final[str] = ", ".join(f.value for f in Facility)
            raise ConfigurationError(
                f"Unsupported value for --compare-with: '{item}' (expected one of {known})"
            ) from verr

    if not facilities:
        raise ConfigurationError("--compare-with needs at least one of DNS, Mon")
    return frozenset(facilities)


def verbosity_to_level(verbose: int, debug: int) -> int:
    """Map the number of -v and -d flags to a logging level."""
    match verbose + 2 * debug:
        case 0:
            return logging.WARNING
        case 1:
            return logging.INFO
        case _:
            return logging.DEBUG


@dataclass(kw_only=True, slots=True)
class Config:
    """Config holds the options of one run."""

    input_file: Optional[Path] = None
    input_file_encoding: Optional[str] = None
    output_file: Optional[Path] = None
    input_json_file: Optional[Path] = None
    output_json_file: Optional[Path] = None
    lconf_export_dir: Path = field(default_factory=lambda: Path(default_export_dir))
    compare_with: frozenset[Facility] = frozenset(Facility)
    log_level: int = logging.WARNING

    def __post_init__(self) -> None:
        if self.input_file is None and self.input_json_file is None:
            raise ConfigurationError("Either an input file or an input JSON file is required")
        if self.input_file is not None and self.input_json_file is not None:
            raise ConfigurationError("An input file and an input JSON file cannot be used together")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'Config':
        """Create a Config from parsed command line arguments."""
        return cls(
            input_file=args.input_file,
            input_file_encoding=args.input_file_encoding,
            output_file=args.output_file,
            input_json_file=args.input_json_file,
            output_json_file=args.output_json_file,
            lconf_export_dir=args.lconf_export_dir,
            compare_with=parse_compare_with(args.compare_with),
            log_level=verbosity_to_level(args.verbose, args.debug),
        )

    @property
    def check_dns(self) -> bool:
        """Return True if the hosts should be checked against DNS."""
        return Facility.DNS in self.compare_with

    @property
    def check_monitoring(self) -> bool:
        """Return True if the hosts should be checked against the LConf export."""
        return Facility.Mon in self.compare_with


# Local Variables: #
# python-indent: 4 #
# End: #
