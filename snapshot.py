#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 19:14:40 krylon>
#
# /data/code/python/imcdnsmon/snapshot.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the imcdnsmon inventory checker. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
imcdnsmon.snapshot

(c) 2026 Benjamin Walkenhorst

Save and load the complete host table, including the results of the checks,
as JSON. Mainly useful to build test cases and to debug the comparison
without hitting DNS every time.
"""

import json
from pathlib import Path
from typing import Any, Final, Union

from imcdnsmon.common import FormatError
from imcdnsmon.model import Check, HostInfo, HostRecord, HostTable


def dump(table: HostTable) -> str:
    """Serialize <table> to JSON."""
    data: dict[str, Any] = {}
    for name, host in table.items():
        data[name] = {
            "info": {k: getattr(host.info, k) for k in HostInfo.field_names()},
            "checks": {c.value: status for c, status in host.checks.items()},
        }
    return json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False) + "\n"


def _load_host(name: str, item: Any) -> HostRecord:
    if not isinstance(item, dict) or not isinstance(item.get("info"), dict):
        raise FormatError(f"Snapshot entry for {name} lacks an info object")

    info: Final[dict[str, Any]] = item["info"]
    checks: Final[Any] = item.get("checks", {})
    if not isinstance(checks, dict):
        raise FormatError(f"Snapshot entry for {name} has invalid checks")

    try:
        values = {k: info[k] for k in HostInfo.field_names()}
    except KeyError as kerr:
        raise FormatError(f"Snapshot entry for {name} is missing info field {kerr}") from kerr
    if not all(isinstance(v, str) for v in values.values()):
        raise FormatError(f"Snapshot entry for {name} has non-string info fields")

    rec = HostRecord(info=HostInfo(**values))
    for cname, status in checks.items():
        if not isinstance(status, str):
            raise FormatError(f"Snapshot entry for {name} has a non-string status for {cname}")
        try:
            rec.checks[Check(cname)] = status
        except ValueError as verr:
            raise FormatError(f"Snapshot entry for {name} has unknown check '{cname}'") from verr
    return rec


def load(text: str) -> HostTable:
    """Deserialize a HostTable from JSON."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as jerr:
        raise FormatError(f"Snapshot is not valid JSON: {jerr}") from jerr

    if not isinstance(data, dict):
        raise FormatError("Snapshot must contain a JSON object")

    return {name: _load_host(name, item) for name, item in data.items()}


def dump_file(table: HostTable, path: Union[str, Path]) -> None:
    """Write <table> to the file at <path>."""
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(dump(table))


def load_file(path: Union[str, Path]) -> HostTable:
    """Read a HostTable from the file at <path>."""
    with open(path, "rb") as fh:
        raw: Final[bytes] = fh.read()
    try:
        text: Final[str] = raw.decode("utf-8")
    except UnicodeDecodeError as uerr:
        raise FormatError(f"Snapshot {path} is not valid UTF-8: {uerr}") from uerr
    return load(text)


# Local Variables: #
# python-indent: 4 #
# End: #
