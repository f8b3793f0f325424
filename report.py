#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 18:40:17 krylon>
#
# /data/code/python/imcdnsmon/report.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the imcdnsmon inventory checker. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
imcdnsmon.report

(c) 2026 Benjamin Walkenhorst
"""

import csv
import io
from typing import Final

from imcdnsmon import common
from imcdnsmon.model import Check, HostTable

columns: Final[list[str]] = ["Name"] + [c.value for c in Check]


def build_report(table: HostTable) -> tuple[str, int]:
    """Render the Hosts that have deviations as CSV.

    Return the CSV text and the number of deviations found. A Host that
    passed all checks does not appear in the output, and if no Host has any
    deviations, the output is empty, header included.
    """
    log = common.get_logger("report")
    rows: list[list[str]] = []
    cnt: int = 0

    for name in sorted(table):
        host = table[name]
        dev = host.deviations
        if len(dev) == 0:
            continue
        cnt += len(dev)
        # Checks that were not run show their own name as a placeholder.
        rows.append([name] + [host.checks.get(c, c.value) for c in Check])

    if len(rows) == 0:
        return "", 0

    log.info("Found %d deviations on %d hosts", cnt, len(rows))

    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(columns)
    writer.writerows(rows)
    return buf.getvalue(), cnt


# Local Variables: #
# python-indent: 4 #
# End: #
