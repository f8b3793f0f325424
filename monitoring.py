#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 18:02:51 krylon>
#
# /data/code/python/imcdnsmon/monitoring.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the imcdnsmon inventory checker. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
imcdnsmon.monitoring

(c) 2026 Benjamin Walkenhorst
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final, Union

from imcdnsmon import common
from imcdnsmon.common import ConfigurationError
from imcdnsmon.config import default_export_dir
from imcdnsmon.model import Check, HostTable, StatusMissing, StatusOK

default_suffix: Final[str] = ".cfg"


def is_match(name: str, candidates: list[str]) -> bool:
    """Return True if <name> matches any of the <candidates>.

    <candidates> are expected to be lower case already. A name matches if it is
    equal to a candidate, or if either one contains the other.
    """
    name = name.lower()
    for c in candidates:
        if name == c or name in c or c in name:
            return True
    return False


@dataclass(kw_only=True, slots=True)
class MonitoringChecker:
    """MonitoringChecker looks for Hosts in the LConf export directory."""

    log: logging.Logger = field(default_factory=lambda: common.get_logger("monitoring"))
    export_dir: Path = field(default_factory=lambda: Path(default_export_dir))
    suffix: str = default_suffix

    def _walk_error(self, err: OSError) -> None:
        raise ConfigurationError(f"Cannot read LConf export {self.export_dir}: {err}") from err

    def candidates(self) -> list[str]:
        """Return the (lower case) names of all files below the export directory."""
        if not os.path.isdir(self.export_dir):
            raise ConfigurationError(f"LConf export {self.export_dir} is not a directory")
        if not os.access(self.export_dir, os.R_OK | os.X_OK):
            raise ConfigurationError(f"LConf export {self.export_dir} is not readable")

        names: list[str] = []
        for _folder, _dirs, files in os.walk(self.export_dir, onerror=self._walk_error):
            for f in files:
                c = f.removesuffix(self.suffix).lower()
                if c != "":
                    names.append(c)

        self.log.debug("Found %d files in %s",
                       len(names),
                       self.export_dir)
        return names

    def run(self, table: HostTable) -> None:
        """Check all Hosts in <table> against the LConf export."""
        names: Final[list[str]] = self.candidates()
        for name, host in table.items():
            if is_match(name, names):
                host.checks[Check.Monitoring] = StatusOK
            else:
                self.log.info("Host %s was not found in %s", name, self.export_dir)
                host.checks[Check.Monitoring] = StatusMissing


# Local Variables: #
# python-indent: 4 #
# End: #
