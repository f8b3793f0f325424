#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 16:03:25 krylon>
#
# /data/code/python/imcdnsmon/inventory.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the imcdnsmon inventory checker. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
imcdnsmon.inventory

(c) 2026 Benjamin Walkenhorst

Parse the device report exported from IMC. The export is a tab-separated
text file that starts with a few lines of preamble, followed by a header row
and one row per device.
"""

import codecs
import csv
import io
import logging
from enum import Enum, auto
from ipaddress import IPv4Address
from pathlib import Path
from typing import Final, Optional, Union

from charset_normalizer import from_bytes

from imcdnsmon import common
from imcdnsmon.common import ConfigurationError, FormatError
from imcdnsmon.model import HostInfo, HostRecord, HostTable

header_start: Final[list[str]] = ["Device Label", "IP"]


class Mode(Enum):
    """Mode is the state of the parser."""

    Header = auto()
    Body = auto()


def decode(raw: bytes, encoding: Optional[str] = None) -> str:
    """Turn the raw content of the export into text.

    If no encoding is given, we try to guess it.
    """
    log: Final[logging.Logger] = common.get_logger("inventory")

    if encoding is None:
        best = from_bytes(raw).best()
        if best is None:
            raise FormatError("Could not detect the character encoding of the input file")
        log.debug("Detected encoding %s", best.encoding)
        text = str(best)
    else:
        try:
            codecs.lookup(encoding)
        except LookupError as lerr:
            raise ConfigurationError(f"Unknown encoding '{encoding}'") from lerr
        try:
            text = raw.decode(encoding)
        except UnicodeDecodeError as uerr:
            raise FormatError(f"Input file is not valid {encoding}: {uerr}") from uerr

    return text.removeprefix("\ufeff")


def _check_ipv4(addr: str, line: int) -> str:
    if addr == "":
        return addr
    try:
        IPv4Address(addr)
    except ValueError as verr:
        raise FormatError(f"Line {line}: '{addr}' is not a valid IPv4 address") from verr
    return addr


def parse_text(text: str) -> HostTable:
    """Parse the decoded content of an inventory export."""
    log: Final[logging.Logger] = common.get_logger("inventory")
    names: Final[list[str]] = HostInfo.field_names()
    table: HostTable = {}
    mode: Mode = Mode.Header

    reader = csv.reader(io.StringIO(text, newline=""),
                        delimiter="\t",
                        quoting=csv.QUOTE_NONE)
    for row in reader:
        row = [col.strip() for col in row]
        match mode:
            case Mode.Header:
                if row[:len(header_start)] == header_start:
                    log.debug("Found header in line %d", reader.line_num)
                    mode = Mode.Body
            case Mode.Body:
                if len(row) == 0 or row[0] == "":
                    continue
                name: str = row[0]
                values = row[1:len(names)+1]
                values += [""] * (len(names) - len(values))
                data = dict(zip(names, values))
                data["ipv4"] = _check_ipv4(data["ipv4"], reader.line_num)
                if name in table:
                    log.warning("Host %s is listed more than once, line %d wins",
                                name,
                                reader.line_num)
                table[name] = HostRecord(info=HostInfo(**data))

    if mode == Mode.Header:
        raise FormatError("No header row was found, this does not look like an IMC export")

    log.info("Read %d hosts from inventory", len(table))
    return table


def parse_inventory(path: Union[str, Path], encoding: Optional[str] = None) -> HostTable:
    """Read the inventory export at <path> and return the Hosts it lists."""
    with open(path, "rb") as fh:
        raw: Final[bytes] = fh.read()
    return parse_text(decode(raw, encoding))


# Local Variables: #
# python-indent: 4 #
# End: #
