# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import sys
import re
import shlex
import shutil
import subprocess

from cchecker.pyutils import stringtype, struct
from cchecker.error import CCheckerError

_RE_TOLIST = re.compile(r"""((?:[^\s"']|"[^"]*"|'[^']*')+)""", re.ASCII)
_RE_PLATFORM_VERSION = re.compile(r'\d+$')

def platform():
    """
    Return current system platform without version suffix.
    It is always 'windows' for MS Windows.
    """

    result = sys.platform
    if result == 'cli' and os.name == 'nt':
        result = 'win32' # pragma: no cover
    elif result == 'powerpc':
        result = 'darwin' # pragma: no cover
    elif result not in ('win32', 'os2'):
        result = _RE_PLATFORM_VERSION.split(result)[0]

    if result.startswith('win32'):
        result = 'windows' # pragma: no cover
    return result

PLATFORM = platform()

def stripQuotes(val):
    """
    Strip quotes ' or " from the begin and the end of a string but do it only
    if they are the same on both sides.
    """

    if not val:
        return val

    if len(val) < 2:
        return val

    first = val[0]
    last = val[-1]
    if first == last and first in ("'", '"'):
        return val[1:-1]

    return val

def toListSimple(val):
    """
    Converts a string argument to a list by splitting it by spaces.
    Returns the object if not a string
    """
    if not isinstance(val, stringtype):
        return val
    return val.split()

def toList(val):
    """
    Converts a string argument to a list by splitting it by spaces.
    This version supports preserving quoted substrings with spaces but it works
    slower than toListSimple does.
    Returns the object if not a string
    """
    if not isinstance(val, stringtype):
        return val

    if not ('"' in val or "'" in val): # optimization
        return val.split()

    return [stripQuotes(x) for x in _RE_TOLIST.split(val)[1::2]]

def envValToBool(rawVal):
    """
    Return env val as native bool value.
    Returns False if not recognized.
    """

    result = False
    if rawVal:
        try:
            # value from os.environ is a string but it may be a digit
            result = bool(int(rawVal))
        except ValueError:
            result = rawVal in ('true', 'True', 'yes')

    return result

def envFlags(varnames, environ = None):
    """
    Gather flags from environment variables like CFLAGS/LDFLAGS into one list.
    """

    if environ is None:
        environ = os.environ

    result = []
    for name in varnames:
        result.extend(toList(environ.get(name, '')))
    return result

def findProgram(names, pathList = None):
    """
    Return full path of the first program from names found in PATH
    or in pathList. Returns None if nothing was found.
    """

    path = os.pathsep.join(pathList) if pathList else None
    for name in toList(names):
        found = shutil.which(name, path = path)
        if found:
            return found
    return None

def removeFile(path):
    """
    Remove file if it exists.
    Returns True if the file was removed.
    """

    try:
        os.remove(path)
    except FileNotFoundError:
        return False
    return True

ProcCmdResult = struct('ProcCmdResult', 'exitcode, stdout, stderr')

class ProcCmd(object):
    """
    Class to run external command in a subprocess
    """

    def __init__(self, cmdLine, captureOutput = False, stdErrToOut = True):

        """
        If stdErrToOut is True it means that captureOutput is True as well.
        """

        self._origCmdLine = cmdLine

        if isinstance(cmdLine, stringtype):
            cmdLine = shlex.split(cmdLine)

        self._cmdLine = cmdLine
        self._popenArgs = {
            'stdout' : None,
            'stderr' : None,
            'stdin' : subprocess.DEVNULL,
            'universal_newlines' : True,
            # output of test programs is not always valid text
            'errors' : 'replace',
        }

        if captureOutput:
            self._popenArgs['stdout'] = subprocess.PIPE
            self._popenArgs['stderr'] = subprocess.PIPE

        if stdErrToOut:
            self._popenArgs['stdout'] = subprocess.PIPE
            self._popenArgs['stderr'] = subprocess.STDOUT

    def run(self, cwd = None, env = None):
        """
        Run command.
        Returns ProcCmdResult.
        """

        kwargs = dict(self._popenArgs)
        kwargs.update({
            'cwd' : cwd,
            'env' : env,
        })

        try:
            with subprocess.Popen(self._cmdLine, **kwargs) as proc:
                stdout, stderr = proc.communicate()
        except (OSError, subprocess.SubprocessError) as ex:
            raise CCheckerError('Could not run %r: %s' % (self._origCmdLine, ex), ex) from ex

        return ProcCmdResult(proc.returncode, stdout, stderr)

def runCmd(cmdLine, cwd = None, env = None, captureOutput = False, stdErrToOut = False):
    """
    Run external command in a subprocess.
    If stdErrToOut is True it means that captureOutput is True as well.
    Returns ProcCmdResult.
    """

    procCmd = ProcCmd(cmdLine, captureOutput, stdErrToOut)
    return procCmd.run(cwd, env)
