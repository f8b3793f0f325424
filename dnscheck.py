#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 17:25:09 krylon>
#
# /data/code/python/imcdnsmon/dnscheck.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the imcdnsmon inventory checker. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
imcdnsmon.dnscheck

(c) 2026 Benjamin Walkenhorst

Compare the inventory against DNS. For every Host with an IPv4 address, we
look up the A record(s) of its name and the PTR record(s) of its address.
Anything but exactly one matching answer is considered wrong.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Final, Optional

from dns import rdatatype, reversename
from dns.exception import DNSException
from dns.rdatatype import RdataType
from dns.resolver import NXDOMAIN, Resolver

from imcdnsmon import common
from imcdnsmon.common import LookupFailure
from imcdnsmon.model import (Check, HostTable, StatusMissing, StatusOK,
                             wrong)


@dataclass(kw_only=True, slots=True)
class DNSChecker:
    """DNSChecker looks up Hosts in DNS and compares the results to the inventory."""

    log: logging.Logger = field(default_factory=lambda: common.get_logger("dns"))
    # Anything that quacks like dns.resolver.Resolver will do.
    res: Any = field(default_factory=Resolver)

    def _query(self, qname: Any, rtype: RdataType) -> Optional[list[Any]]:
        """Query for <qname>. Return None if the name does not exist."""
        try:
            answer = self.res.resolve(qname, rtype, search=True)
            return list(answer)
        except NXDOMAIN:
            return None
        except DNSException as err:
            cname: Final[str] = err.__class__.__name__
            raise LookupFailure(f"{rdatatype.to_text(rtype)} query for {qname} failed: "
                                f"{cname} {err}") from err

    def check_forward(self, name: str, ipv4: str) -> str:
        """Check if <name> resolves to <ipv4> and nothing else."""
        records = self._query(name, RdataType.A)
        if records is None:
            return StatusMissing

        addresses: set[str] = {r.address for r in records}
        self.log.debug("%s resolves to %s",
                       name,
                       ", ".join(sorted(addresses)))
        if addresses == {ipv4}:
            return StatusOK
        return wrong(ipv4, list(addresses))

    def check_reverse(self, name: str, ipv4: str) -> str:
        """Check if <ipv4> resolves back to <name> and nothing else."""
        records = self._query(reversename.from_address(ipv4), RdataType.PTR)
        if records is None:
            return StatusMissing

        fqdns: set[str] = {r.target.to_text(omit_final_dot=True) for r in records}
        self.log.debug("%s resolves to %s",
                       ipv4,
                       ", ".join(sorted(fqdns)))

        # Short names are compared against the first label of the PTR target only.
        if "." not in name:
            targets = [t.split(".")[0] for t in fqdns]
        else:
            targets = list(fqdns)

        if len(targets) == 1 and targets[0].lower() == name.lower():
            return StatusOK
        return wrong(name, targets)

    def run(self, table: HostTable) -> None:
        """Check all Hosts in <table>, attaching the results to them."""
        for name, host in table.items():
            if host.info.ipv4 == "":
                self.log.debug("Host %s has no IPv4 address, skipping DNS checks", name)
                continue

            for check, method in ((Check.A, self.check_forward),
                                  (Check.PTR, self.check_reverse)):
                try:
                    host.checks[check] = method(name, host.info.ipv4)
                except LookupFailure as fail:
                    self.log.warning("Cannot check %s of %s: %s",
                                     check.value,
                                     name,
                                     fail)


# Local Variables: #
# python-indent: 4 #
# End: #
