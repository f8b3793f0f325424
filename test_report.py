#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 22:31:19 krylon>
#
# /data/code/python/imcdnsmon/test_report.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the imcdnsmon inventory checker. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
imcdnsmon.test_report

(c) 2026 Benjamin Walkenhorst
"""

import unittest
from typing import Final

from imcdnsmon.model import Check, HostInfo, HostRecord, HostTable
from imcdnsmon.report import build_report


def _host(**checks: str) -> HostRecord:
    rec = HostRecord(info=HostInfo(ipv4="192.0.2.1"))
    names: Final[dict[str, Check]] = {"a": Check.A, "ptr": Check.PTR, "mon": Check.Monitoring}
    for k, v in checks.items():
        rec.checks[names[k]] = v
    return rec


class TestReport(unittest.TestCase):
    """Test rendering the deviation report."""

    def test_01_no_deviations(self) -> None:
        """Test that a clean table gives an empty report."""
        test_cases: Final[list[HostTable]] = [
            {},
            {"swt01": _host()},
            {"swt01": _host(a="OK", ptr="OK", mon="OK"),
             "swt02": _host(mon="OK")},
        ]

        for c in test_cases:
            text, cnt = build_report(c)
            self.assertEqual(text, "")
            self.assertEqual(cnt, 0)

    def test_02_deviations(self) -> None:
        """Test sorting, placeholders, quoting and counting."""
        table: HostTable = {
            "swt02": _host(a="missing", ptr="missing", mon="OK"),
            "ap01": _host(a="OK", ptr="OK", mon="OK"),
            "Swt09": _host(mon="missing"),
            "swt01": _host(a="wrong (IMC: 192.0.2.1; DNS: 192.0.2.1, 192.0.2.7)",
                           ptr="OK"),
        }

        text, cnt = build_report(table)

        self.assertEqual(cnt, 4)
        self.assertEqual(text.splitlines(), [
            "Name,DNS A,DNS PTR,Monitoring",
            "Swt09,DNS A,DNS PTR,missing",
            "swt01,\"wrong (IMC: 192.0.2.1; DNS: 192.0.2.1, 192.0.2.7)\",OK,Monitoring",
            "swt02,missing,missing,OK",
        ])
        self.assertTrue(text.endswith("\n"))


# Local Variables: #
# python-indent: 4 #
# End: #
