# coding=utf-8
#

# pylint: skip-file

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import os
import pytest

from cchecker.error import ToolchainError
from cchecker.toolchain import CBuilder
from cchecker import log, error

joinpath = os.path.join

ENV_VARS = ('CC', 'CPPFLAGS', 'CFLAGS', 'LDFLAGS', 'CCHECKER_ON_TTY')

@pytest.fixture(autouse = True)
def resetLog(monkeypatch):
    monkeypatch.setitem(log.colorSettings, 'USE', 0)
    monkeypatch.setattr(log, '_verbose', 0)
    monkeypatch.setattr(error, 'verbose', 0)

@pytest.fixture
def unsetEnviron(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising = False)

@pytest.fixture
def workdir(tmpdir, monkeypatch):
    rundir = str(tmpdir.realpath())
    monkeypatch.chdir(rundir)
    return rundir

@pytest.fixture
def needCompiler(unsetEnviron):
    if not CBuilder().haveCompiler():
        pytest.skip('no C compiler in PATH')

class FakeBuilder(object):
    """
    Builder that produces empty files instead of running a compiler.
    Functions compileOk(includeDirs, compilerFlags) and linkOk(linkerFlags)
    decide whether a step succeeds.
    """

    def __init__(self, compileOk = None, linkOk = None):
        self.compileOk = compileOk or (lambda includeDirs, compilerFlags: True)
        self.linkOk = linkOk or (lambda linkerFlags: True)
        self.compileCalls = []
        self.linkCalls = []
        self.sources = []

    def compile(self, source, includeDirs = None, compilerFlags = None):
        assert os.path.isfile(source)
        with open(source, 'r') as file:
            self.sources.append(file.read())

        includeDirs = list(includeDirs or [])
        compilerFlags = list(compilerFlags or [])
        self.compileCalls.append((source, includeDirs, compilerFlags))
        if not self.compileOk(includeDirs, compilerFlags):
            raise ToolchainError(['cc', source], 1, 'syntax error')

        objFile = os.path.splitext(source)[0] + '.o'
        with open(objFile, 'w') as file:
            file.write('obj')
        return objFile

    def linkExecutable(self, objects, linkerFlags = None):
        linkerFlags = list(linkerFlags or [])
        self.linkCalls.append((objects, linkerFlags))
        if not self.linkOk(linkerFlags):
            raise ToolchainError(['cc', objects], 1, 'undefined reference')

        exeFile = os.path.splitext(objects)[0] + '.exe'
        with open(exeFile, 'w') as file:
            file.write('exe')
        return exeFile

@pytest.fixture
def fakeBuilder():
    return FakeBuilder()
