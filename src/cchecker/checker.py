# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Configure-time checks for C headers, libraries and OS features.

 A check writes a small C program into a file, compiles, links and runs it.
 The check is successful if the program was built and exited with 0.
 Results of successful checks (include dirs, defines, linker flags) are
 accumulated to be used in the following checks and in the final build
 configuration.
"""

import os

from cchecker.constants import TEST_SOURCE_PREFIX, TEST_SOURCE_EXT
from cchecker.pyutils import struct, stringtype, listtypes
from cchecker.error import CCheckerError, CCheckerLogicError, OSUnsupportedError
from cchecker.flags import BuildFlags
from cchecker.toolchain import CBuilder
from cchecker import utils, log

PROBE_ARGS_NAMES = 'source, includeDirs, compilerFlags, linkerFlags, define, diag'

ProbeArgs = struct('ProbeArgs', PROBE_ARGS_NAMES)
ProbeArgs.__doc__ = """
Arguments of one check:
  source        - source code of the C program, required
  includeDirs   - extra include dirs for this check only
  compilerFlags - extra compiler flags for this check only
  linkerFlags   - extra linker flags for this check only
  define        - name of symbol to define if the check succeeded
  diag          - text to append to the error message of asserting checks
"""

_ARGS_ALIASES = {
    'include_dirs' : 'includeDirs',
    'extra_compiler_flags' : 'compilerFlags',
    'extra_linker_flags' : 'linkerFlags',
}

def _replaceArgs(args, **changes):
    fields = { x:getattr(args, x) for x in ProbeArgs.__slots__ }
    fields.update(changes)
    return ProbeArgs(**fields)

def makeProbeArgs(source = None, **kwargs):
    """
    Make ProbeArgs object from a source string or from another ProbeArgs
    object and keyword arguments that override its fields.
    """

    for alias, name in _ARGS_ALIASES.items():
        if alias in kwargs:
            kwargs[name] = kwargs.pop(alias)

    try:
        if isinstance(source, ProbeArgs):
            args = _replaceArgs(source, **kwargs)
        else:
            args = ProbeArgs(source = source, **kwargs)
    except TypeError as ex:
        raise CCheckerLogicError(str(ex)) from ex

    if args.source is None:
        raise CCheckerLogicError("Expected 'source'")

    for name in ('includeDirs', 'compilerFlags', 'linkerFlags'):
        val = getattr(args, name)
        if val is not None and not isinstance(val, listtypes):
            raise CCheckerLogicError("Expected %r as a list" % name)

    return args

class CChecker(object):
    """
    Runs checks and accumulates their results.
    """

    def __init__(self, builder = None, flags = None, workdir = None):
        """
        builder - object with methods 'compile' and 'linkExecutable',
                  CBuilder by default
        flags   - BuildFlags object to store results in, it can be shared
        workdir - directory for temporary files, current directory by default
        """

        self._builder = CBuilder() if builder is None else builder
        self._flags = BuildFlags() if flags is None else flags
        self._workdir = workdir
        self._seq = 0

    @property
    def builder(self):
        """ Toolchain object """
        return self._builder

    @property
    def flags(self):
        """ BuildFlags object with accumulated results """
        return self._flags

    def includeDirs(self):
        """ Returns the currently configured include dirs as a new list """
        return self._flags.includeDirs()

    def compilerFlags(self):
        """ Returns the currently configured extra compiler flags as a new list """
        return self._flags.compilerFlags()

    def linkerFlags(self):
        """ Returns the currently configured extra linker flags as a new list """
        return self._flags.linkerFlags()

    def compile(self, source, includeDirs = None, compilerFlags = None):
        """
        Compile file with accumulated include dirs and compiler flags
        followed by the given ones.
        """

        flags = self._flags
        includeDirs = flags.includeDirs() + list(includeDirs or [])
        compilerFlags = flags.compilerFlags() + list(compilerFlags or [])
        return self._builder.compile(source, includeDirs = includeDirs,
                                     compilerFlags = compilerFlags)

    def linkExecutable(self, objects, linkerFlags = None):
        """
        Link executable with accumulated linker flags followed
        by the given ones.
        """

        linkerFlags = self._flags.linkerFlags() + list(linkerFlags or [])
        return self._builder.linkExecutable(objects, linkerFlags = linkerFlags)

    def define(self, symbol):
        """ Define symbol for all next checks and the final build """
        self._flags.addCompilerFlags(['-D%s' % symbol])

    def fail(self, diag = None):
        """ Abort configuration """
        raise OSUnsupportedError(diag)

    def _nextTestSourcePath(self):
        seq = self._seq
        self._seq += 1

        workdir = self._workdir if self._workdir else os.getcwd()
        name = '%s%d%s' % (TEST_SOURCE_PREFIX, seq, TEST_SOURCE_EXT)
        return os.path.join(workdir, name)

    def _writeSource(self, path, source):
        try:
            with open(path, 'w', encoding = 'utf-8') as file:
                file.write(source)
        except (OSError, UnicodeError) as ex:
            self._cleanup(path)
            raise CCheckerError('Cannot write %r - %s' % (path, ex), ex) from ex

    @staticmethod
    def _cleanup(path):
        if not path:
            return
        try:
            utils.removeFile(path)
        except OSError as ex:
            log.debug('checker: could not remove %r: %s', path, ex)

    def _runTestProgram(self, exeFile):

        try:
            result = utils.runCmd([os.path.abspath(exeFile)],
                                  cwd = os.path.dirname(os.path.abspath(exeFile)),
                                  stdErrToOut = True)
        except CCheckerError as ex:
            log.debug('checker: %s', ex.msg)
            return False

        if result.stdout:
            log.debug('checker: test program output:\n%s', result.stdout)
        log.debug('checker: test program exited with code %d', result.exitcode)
        return result.exitcode == 0

    def _build(self, func, *args, **kwargs):
        """
        Call compile/link function. Failure is not an error here.
        """

        try:
            return func(*args, **kwargs)
        except CCheckerError as ex:
            log.debug('checker: %s', ex.msg)
        return None

    def tryCompileRun(self, source = None, **kwargs):
        """
        Try to compile, link, and execute a C program whose source is given.
        Returns True if the program compiled and linked, and exited
        successfully. Returns False if any of these steps fail.
        The 'source' can be a string or a ProbeArgs object. Other fields of
        ProbeArgs can be set by keyword args.
        """

        args = makeProbeArgs(source, **kwargs)

        testSource = self._nextTestSourcePath()
        self._writeSource(testSource, args.source)

        try:
            testObj = self._build(self.compile, testSource,
                                  args.includeDirs, args.compilerFlags)
        finally:
            self._cleanup(testSource)

        if not testObj:
            return False

        try:
            testExe = self._build(self.linkExecutable, testObj, args.linkerFlags)
        finally:
            self._cleanup(testObj)

        if not testExe:
            return False

        try:
            success = self._runTestProgram(testExe)
        finally:
            self._cleanup(testExe)

        if not success:
            return False

        if args.define is not None:
            self.define(args.define)

        return True

    def assertCompileRun(self, source = None, **kwargs):
        """
        Calls tryCompileRun. If it fails, raises OSUnsupportedError.
        Optional keyword arg 'diag' is appended to the error message.
        """

        args = makeProbeArgs(source, **kwargs)
        if not self.tryCompileRun(args):
            self.fail(args.diag)

    def tryFindIncludeDirsFor(self, source = None, dirs = None, **kwargs):
        """
        Try to compile, link and execute the given source, using sets of
        extra include dirs from the list 'dirs' one by one.
        The first set that works is stored for further checks and
        the method returns True. Returns False if no set works.
        """

        args = makeProbeArgs(source, **kwargs)

        if not isinstance(dirs, listtypes):
            raise CCheckerLogicError("Expected 'dirs' as a list")
        for candidate in dirs:
            if not isinstance(candidate, listtypes):
                raise CCheckerLogicError("Expected 'dirs' element as a list")

        for candidate in dirs:
            candidate = list(candidate)
            log.debug('checker: trying include dirs %r', candidate)
            if not self.tryCompileRun(_replaceArgs(args, includeDirs = candidate)):
                continue

            self._flags.addIncludeDirs(candidate)
            return True

        return False

    def tryFindLibsFor(self, source = None, libs = None, **kwargs):
        """
        Try to compile, link and execute the given source, when linked
        against sets of libraries from the list 'libs' one by one. Each set
        is a string of space-separated library names, an empty string means
        no extra libraries.
        The first set that works is stored for further checks and
        the method returns True. Returns False if no set works.
        """

        args = makeProbeArgs(source, **kwargs)

        if not isinstance(libs, listtypes):
            raise CCheckerLogicError("Expected 'libs' as a list")
        for candidate in libs:
            if not isinstance(candidate, stringtype):
                raise CCheckerLogicError("Expected 'libs' element as a string")

        for candidate in libs:
            linkerFlags = ['-l%s' % x for x in utils.toListSimple(candidate)]
            log.debug('checker: trying libs %r', linkerFlags)
            if not self.tryCompileRun(_replaceArgs(args, linkerFlags = linkerFlags)):
                continue

            self._flags.addLinkerFlags(linkerFlags)
            return True

        return False

    def findIncludeDirsFor(self, source = None, dirs = None, **kwargs):
        """
        Calls tryFindIncludeDirsFor. If it fails, raises OSUnsupportedError.
        Optional keyword arg 'diag' is appended to the error message.
        """

        args = makeProbeArgs(source, **kwargs)
        if not self.tryFindIncludeDirsFor(args, dirs):
            self.fail(args.diag)

    def findLibsFor(self, source = None, libs = None, **kwargs):
        """
        Calls tryFindLibsFor. If it fails, raises OSUnsupportedError.
        Optional keyword arg 'diag' is appended to the error message.
        """

        args = makeProbeArgs(source, **kwargs)
        if not self.tryFindLibsFor(args, libs):
            self.fail(args.diag)

    def buildParams(self, **kwargs):
        """
        Returns dict with accumulated results for setuptools.Extension.
        Keyword args are added to the dict as is.
        """

        params = {
            'include_dirs'       : self.includeDirs(),
            'extra_compile_args' : self.compilerFlags(),
            'extra_link_args'    : self.linkerFlags(),
        }
        params.update(kwargs)
        return params

    def newExtension(self, name, sources, **kwargs):
        """
        Construct and return a new setuptools.Extension object,
        preconfigured with accumulated results.
        """

        from setuptools import Extension
        return Extension(name, sources, **self.buildParams(**kwargs))

    # pylint: disable = invalid-name
    # names for callers used to distutils naming style
    include_dirs = includeDirs
    extra_compiler_flags = compilerFlags
    extra_linker_flags = linkerFlags
    try_compile_run = tryCompileRun
    assert_compile_run = assertCompileRun
    try_find_include_dirs_for = tryFindIncludeDirsFor
    try_find_libs_for = tryFindLibsFor
    find_include_dirs_for = findIncludeDirsFor
    find_libs_for = findLibsFor
    # pylint: enable = invalid-name
