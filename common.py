#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 14:02:11 krylon>
#
# /data/code/python/imcdnsmon/common.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the imcdnsmon inventory checker. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
imcdnsmon.common

(c) 2026 Benjamin Walkenhorst
"""

import logging
import sys
from threading import Lock
from typing import Final

AppName: Final[str] = "imcdnsmon"
AppVersion: Final[str] = "0.1.0"

log_level_tty: int = logging.WARNING


class ImcError(Exception):
    """Base class for application-specific Exceptions."""


class ConfigurationError(ImcError):
    """ConfigurationError indicates bad or missing run options."""


class FormatError(ImcError):
    """FormatError indicates input data we cannot make sense of."""


class LookupFailure(ImcError):
    """LookupFailure indicates a DNS query failed for a reason other than NXDOMAIN."""


_lock: Final[Lock] = Lock()  # pylint: disable-msg=C0103
_cache: Final[dict[str, logging.Logger]] = {}  # pylint: disable-msg=C0103


def set_log_level(level: int) -> None:
    """Set the level of terminal logging, including loggers handed out already."""
    global log_level_tty  # pylint: disable-msg=W0603
    with _lock:
        log_level_tty = level
        for log_obj in _cache.values():
            for handler in log_obj.handlers:
                handler.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Create and return a logger with the given name"""
    with _lock:
        if name in _cache:
            return _cache[name]

        log_format = "%(asctime)s (%(name)-10s / line %(lineno)-4d) " + \
            "- %(levelname)-8s %(message)s"

        log_obj = logging.getLogger(f"{AppName}.{name}")
        log_obj.setLevel(logging.DEBUG)
        log_obj.propagate = False

        log_fmt = logging.Formatter(log_format)
        # Diagnostics must never end up in the report, which may go to stdout.
        log_console_handler = logging.StreamHandler(sys.stderr)
        log_console_handler.setFormatter(log_fmt)
        log_console_handler.setLevel(log_level_tty)
        log_obj.addHandler(log_console_handler)

        _cache[name] = log_obj
        return log_obj


# Local Variables: #
# python-indent: 4 #
# End: #
