#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 20:31:06 krylon>
#
# /data/code/python/imcdnsmon/main.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the imcdnsmon inventory checker. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
imcdnsmon.main

(c) 2026 Benjamin Walkenhorst
"""


import argparse
import os
import pathlib
import sys
import tempfile
import traceback
from typing import Any, Final, Optional, Sequence

from imcdnsmon import common, snapshot
from imcdnsmon.common import ConfigurationError, ImcError
from imcdnsmon.config import Config, default_compare, default_export_dir
from imcdnsmon.dnscheck import DNSChecker
from imcdnsmon.inventory import parse_inventory
from imcdnsmon.model import HostTable
from imcdnsmon.monitoring import MonitoringChecker
from imcdnsmon.report import build_report

ExitOK: Final[int] = 0
ExitDeviations: Final[int] = 1
ExitError: Final[int] = 2


def make_parser() -> argparse.ArgumentParser:
    """Create the parser for our command line arguments."""
    argp: argparse.ArgumentParser = argparse.ArgumentParser(
        prog=common.AppName,
        description="Compare the IMC device inventory with DNS and the LConf monitoring export.",
        epilog="Exit status is 0 if no deviations were found, 1 if there were deviations, " +
        "and 2 on errors.")
    inp = argp.add_mutually_exclusive_group(required=True)
    inp.add_argument("-i", "--input-file",
                     type=pathlib.Path,
                     help="The tab-separated device report exported from IMC")
    inp.add_argument("-j", "--input-json-file",
                     type=pathlib.Path,
                     help="Load the host table from a JSON snapshot instead of " +
                     "parsing and checking the inventory")
    argp.add_argument("-e", "--input-file-encoding",
                      help="The encoding of the input file (detected automatically if omitted)")
    argp.add_argument("-o", "--output-file",
                      type=pathlib.Path,
                      help="Write the CSV report here instead of standard output")
    argp.add_argument("-J", "--output-json-file",
                      type=pathlib.Path,
                      help="Save the host table as a JSON snapshot after the checks")
    argp.add_argument("-l", "--lconf-export-dir",
                      type=pathlib.Path,
                      default=pathlib.Path(default_export_dir),
                      help="The directory containing the LConf export")
    argp.add_argument("-c", "--compare-with",
                      default=default_compare,
                      help="Comma-separated list of the sources to compare with (DNS, Mon)")
    argp.add_argument("-v", "--verbose",
                      action="count",
                      default=0,
                      help="Log more about what is going on (may be given multiple times)")
    argp.add_argument("-d", "--debug",
                      action="count",
                      default=0,
                      help="Log debugging output (may be given multiple times)")
    argp.add_argument("-V", "--version",
                      action="version",
                      version=f"{common.AppName} {common.AppVersion}")
    return argp


def collect(cfg: Config, res: Optional[Any] = None) -> HostTable:
    """Build the host table, either from a snapshot or by parsing and checking the inventory."""
    if cfg.input_json_file is not None:
        return snapshot.load_file(cfg.input_json_file)

    if cfg.input_file is None:
        raise ConfigurationError("No input file was given")
    table: HostTable = parse_inventory(cfg.input_file, cfg.input_file_encoding)

    if cfg.check_dns:
        checker = DNSChecker() if res is None else DNSChecker(res=res)
        checker.run(table)
    if cfg.check_monitoring:
        MonitoringChecker(export_dir=cfg.lconf_export_dir).run(table)

    return table


def write_outputs(outputs: list[tuple[pathlib.Path, str]]) -> None:
    """Write each payload to its path, either all of them or none.

    Every payload goes to a temporary file next to its destination first,
    the destinations are only replaced once all of them were written.
    """
    staged: list[tuple[str, pathlib.Path]] = []
    try:
        for path, payload in outputs:
            with tempfile.NamedTemporaryFile("w",
                                             encoding="utf-8",
                                             newline="",
                                             dir=path.parent,
                                             prefix=f".{path.name}.",
                                             delete=False) as fh:
                staged.append((fh.name, path))
                fh.write(payload)
    except OSError:
        for tmp, _ in staged:
            os.unlink(tmp)
        raise

    for tmp, path in staged:
        os.replace(tmp, path)


def run(argv: Optional[Sequence[str]] = None, res: Optional[Any] = None) -> int:
    """Run the comparison and return the exit status.

    <res> replaces the DNS resolver, if given.
    """
    log = common.get_logger("main")
    args = make_parser().parse_args(argv)

    try:
        cfg: Config = Config.from_args(args)
        common.set_log_level(cfg.log_level)

        table = collect(cfg, res)
        text, cnt = build_report(table)

        outputs: list[tuple[pathlib.Path, str]] = []
        if cfg.output_json_file is not None:
            outputs.append((cfg.output_json_file, snapshot.dump(table)))
        if cfg.output_file is not None:
            outputs.append((cfg.output_file, text))
        write_outputs(outputs)
        if cfg.output_file is None:
            sys.stdout.write(text)
    except (ImcError, OSError) as err:
        cname: Final[str] = err.__class__.__name__
        log.error("%s: %s", cname, err)
        log.debug("%s", "".join(traceback.format_exception(err)))
        return ExitError

    return ExitDeviations if cnt > 0 else ExitOK


def main() -> None:
    """Entry point for the command line."""
    sys.exit(run())


if __name__ == '__main__':
    main()

# Local Variables: #
# python-indent: 4 #
# End: #
