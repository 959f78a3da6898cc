# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Configure-time utilities for using C headers, libraries, or OS features.
"""

from cchecker.error import CCheckerError, OSUnsupportedError
from cchecker.flags import BuildFlags
from cchecker.toolchain import CBuilder
from cchecker.checker import CChecker, ProbeArgs, makeProbeArgs
