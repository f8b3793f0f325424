#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Time-stamp: <2026-10-19 13:48:22 krylon>
#
# /data/code/python/imcdnsmon/__init__.py
# created on 19. 10. 2026
# (c) 2026 Benjamin Walkenhorst
#
# This file is part of the imcdnsmon inventory checker. It is distributed under the
# terms of the GNU General Public License 3. See the file LICENSE for details
# or find a copy online at https://www.gnu.org/licenses/gpl-3.0

"""
imcdnsmon.__init__

(c) 2026 Benjamin Walkenhorst

Compare the device inventory exported from IMC with DNS and the LConf
monitoring export, and report the hosts that do not match up.
"""

# Local Variables: #
# python-indent: 4 #
# End: #
