#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 21:10:44 krylon>
#
# /data/code/python/imcdnsmon/test_dnscheck.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the imcdnsmon inventory checker. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
imcdnsmon.test_dnscheck

(c) 2026 Benjamin Walkenhorst
"""

import unittest
from typing import Any, Final, Optional, Union

from dns import rdata, rdataclass
from dns.exception import Timeout
from dns.rdatatype import RdataType
from dns.resolver import NXDOMAIN, NoNameservers

from imcdnsmon.dnscheck import DNSChecker
from imcdnsmon.model import Check, HostInfo, HostRecord, HostTable


class FakeResolver:
    """FakeResolver answers queries from a dict instead of asking the network.

    Names that are not in the dict do not exist. A value that is an Exception
    is raised instead of returning an answer.
    """

    def __init__(self,
                 records: dict[tuple[str, RdataType], Union[list[str], Exception]]) -> None:
        self.records = records
        self.queries: list[tuple[str, RdataType]] = []

    def resolve(self, qname: Any, rdtype: RdataType, search: Optional[bool] = None) -> list:
        """Look up <qname>."""
        key = (str(qname).rstrip(".").lower(), rdtype)
        self.queries.append(key)
        if key not in self.records:
            raise NXDOMAIN()
        val = self.records[key]
        if isinstance(val, Exception):
            raise val
        return [rdata.from_text(rdataclass.IN, rdtype, x) for x in val]


def _host(addr: str) -> HostRecord:
    return HostRecord(info=HostInfo(ipv4=addr, model="HPE 5130"))


class TestDNSChecker(unittest.TestCase):
    """Test comparing Hosts against DNS."""

    def test_01_forward(self) -> None:
        """Test checking A records."""
        res = FakeResolver({
            ("swt01.example.com", RdataType.A): ["192.0.2.42"],
            ("swt02.example.com", RdataType.A): ["192.0.2.43"],
            ("swt03.example.com", RdataType.A): ["192.0.2.44", "192.0.2.45"],
            ("swt04.example.com", RdataType.A): ["192.0.2.99", "192.0.2.47"],
        })
        chk = DNSChecker(res=res)

        test_cases: Final[list[tuple[str, str, str]]] = [
            ("swt01.example.com", "192.0.2.42", "OK"),
            ("swt02.example.com", "192.0.2.42",
             "wrong (IMC: 192.0.2.42; DNS: 192.0.2.43)"),
            ("swt03.example.com", "192.0.2.44",
             "wrong (IMC: 192.0.2.44; DNS: 192.0.2.44, 192.0.2.45)"),
            ("swt04.example.com", "192.0.2.46",
             "wrong (IMC: 192.0.2.46; DNS: 192.0.2.47, 192.0.2.99)"),
            ("swt05.example.com", "192.0.2.48", "missing"),
        ]

        for c in test_cases:
            status = chk.check_forward(c[0], c[1])
            self.assertEqual(status, c[2])

    def test_02_reverse(self) -> None:
        """Test checking PTR records."""
        res = FakeResolver({
            ("42.2.0.192.in-addr.arpa", RdataType.PTR): ["SWT01.Example.COM."],
            ("43.2.0.192.in-addr.arpa", RdataType.PTR): ["swt02.example.com."],
            ("44.2.0.192.in-addr.arpa", RdataType.PTR): ["swt03.example.com.",
                                                         "swt03.example.net."],
        })
        chk = DNSChecker(res=res)

        test_cases: Final[list[tuple[str, str, str]]] = [
            ("swt01.example.com", "192.0.2.42", "OK"),
            ("swt01", "192.0.2.42", "OK"),
            ("Swt01", "192.0.2.42", "OK"),
            ("swt01.example.org", "192.0.2.42",
             "wrong (IMC: swt01.example.org; DNS: SWT01.Example.COM)"),
            ("swt01", "192.0.2.43", "wrong (IMC: swt01; DNS: swt02)"),
            ("swt03", "192.0.2.44", "wrong (IMC: swt03; DNS: swt03, swt03)"),
            ("swt03.example.com", "192.0.2.44",
             "wrong (IMC: swt03.example.com; DNS: swt03.example.com, swt03.example.net)"),
            ("swt05", "192.0.2.45", "missing"),
        ]

        for c in test_cases:
            status = chk.check_reverse(c[0], c[1])
            self.assertEqual(status, c[2], c[0])

    def test_03_run(self) -> None:
        """Test checking a whole table, including failing lookups."""
        res = FakeResolver({
            ("swt01.example.com", RdataType.A): ["192.0.2.42"],
            ("42.2.0.192.in-addr.arpa", RdataType.PTR): ["swt01.example.com."],
            ("swt02", RdataType.A): Timeout(),
            ("43.2.0.192.in-addr.arpa", RdataType.PTR): NoNameservers(),
            ("swt03", RdataType.A): ["192.0.2.44"],
        })
        table: HostTable = {
            "swt01.example.com": _host("192.0.2.42"),
            "swt02": _host("192.0.2.43"),
            "swt03": _host("192.0.2.44"),
            "ap01": _host(""),
        }

        DNSChecker(res=res).run(table)

        self.assertEqual(table["swt01.example.com"].checks,
                         {Check.A: "OK", Check.PTR: "OK"})
        self.assertEqual(table["swt02"].checks, {})
        self.assertEqual(table["swt03"].checks,
                         {Check.A: "OK", Check.PTR: "missing"})
        self.assertEqual(table["ap01"].checks, {})
        self.assertNotIn(("ap01", RdataType.A), res.queries)


# Local Variables: #
# python-indent: 4 #
# End: #
