# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import re

from cchecker.constants import CAP_APPNAME
from cchecker.cmd import Command as _Command

VERSION = '0.4.0'

#pylint: disable=line-too-long
# from https://semver.org/
SEMVER_RE = r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
#pylint: enable=line-too-long

def parseVersion(ver):
    """ Return result of re.match """
    return re.match(SEMVER_RE, ver)

def checkFormat(ver):
    """ check format of version """
    return bool(parseVersion(ver))

if not checkFormat(VERSION):
    raise RuntimeError('Version %r has invalid format' % VERSION)

def current():
    """ Get current version """
    return VERSION

class Command(_Command):
    """
    Print version of the program.
    It's implementation of command 'version'.
    """

    def _run(self, cliArgs):

        msg = "{} version {}".format(CAP_APPNAME, current())
        if cliArgs.get('verbose', 0) >= 1:
            import platform as _platform
            import yaml
            msg += '\nPyYAML version: %s' % yaml.__version__
            msg += '\nPython version: %s' % _platform.python_version()
            msg += '\nPython implementation: %s' % _platform.python_implementation()

        self._info(msg)
        return 0
