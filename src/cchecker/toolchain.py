# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Thin wrapper around a gcc compatible C compiler driver to compile
 single C files and to link executables.
"""

import os

from cchecker.constants import PLATFORM, OBJ_FILE_EXT, EXE_FILE_EXT
from cchecker.constants import C_COMPILERS, COMPILE_FLAGS_ENV_VARS, LINK_FLAGS_ENV_VARS
from cchecker.pyutils import cachedprop
from cchecker.error import CCheckerError, ToolchainError
from cchecker import utils, log

def getCompilerNames(platform = PLATFORM):
    """
    Return tuple of C compiler names to look for on selected platform
    """

    return tuple(C_COMPILERS.get(platform, C_COMPILERS['default']))

def _replaceExt(path, ext):
    return os.path.splitext(path)[0] + ext

class CBuilder(object):
    """
    Compile and link C code with a C compiler.
    The compiler is selected in this order: param 'cc', env var CC,
    the first compiler from the list for the current platform found in PATH.
    """

    def __init__(self, cc = None, environ = None):
        self._environ = os.environ if environ is None else environ
        self._cc = utils.toList(cc) if cc else None

    @cachedprop
    def cc(self):
        """
        Command line of the C compiler as a list or None if not found
        """

        if self._cc:
            return list(self._cc)

        envCC = self._environ.get('CC')
        if envCC:
            return utils.toList(envCC)

        found = utils.findProgram(getCompilerNames())
        return [found] if found else None

    def haveCompiler(self):
        """ Return True if C compiler is available """
        return bool(self.cc)

    def _getCC(self):
        cc = self.cc
        if not cc:
            names = ', '.join(getCompilerNames())
            raise ToolchainError(None, -1,
                        msg = 'Could not find C compiler (tried: %s)' % names)
        return list(cc)

    def _run(self, cmdLine, target):

        log.debug('toolchain: %r', cmdLine)
        try:
            result = utils.runCmd(cmdLine, stdErrToOut = True)
        except CCheckerError as ex:
            raise ToolchainError(cmdLine, -1, msg = ex.msg) from ex

        if result.stdout:
            log.debug('toolchain output:\n%s', result.stdout)

        if result.exitcode != 0:
            raise ToolchainError(cmdLine, result.exitcode, result.stdout)

        if not os.path.isfile(target):
            msg = "Command %r didn't produce the file %r" % (cmdLine, target)
            raise ToolchainError(cmdLine, result.exitcode, msg = msg)

        return target

    def compile(self, source, includeDirs = None, compilerFlags = None):
        """
        Compile C source file into an object file.
        Returns path of the object file that is placed beside the source.
        Raises ToolchainError on failure.
        """

        objFile = _replaceExt(source, OBJ_FILE_EXT)

        cmdLine = self._getCC()
        cmdLine.extend(utils.envFlags(COMPILE_FLAGS_ENV_VARS, self._environ))
        cmdLine.extend(['-I%s' % x for x in (includeDirs or [])])
        cmdLine.extend(compilerFlags or [])
        cmdLine.extend(['-c', source, '-o', objFile])

        return self._run(cmdLine, objFile)

    def linkExecutable(self, objects, linkerFlags = None, exeFile = None):
        """
        Link object files into an executable.
        By default the executable is placed beside the first object file.
        Returns path of the executable.
        Raises ToolchainError on failure.
        """

        if isinstance(objects, str):
            objects = [objects]
        objects = list(objects)
        if not objects:
            raise CCheckerError('No object files to link')

        if exeFile is None:
            exeFile = _replaceExt(objects[0], EXE_FILE_EXT)

        cmdLine = self._getCC()
        cmdLine.extend(utils.envFlags(LINK_FLAGS_ENV_VARS, self._environ))
        cmdLine.extend(objects)
        cmdLine.extend(['-o', exeFile])
        # libraries must be after object files
        cmdLine.extend(linkerFlags or [])

        return self._run(cmdLine, exeFile)
