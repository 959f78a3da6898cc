# coding=utf-8
#

# pylint: disable = missing-docstring, invalid-name, attribute-defined-outside-init

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import sys
import pytest
from cchecker.constants import APPNAME, CAP_APPNAME
from cchecker import cli

class TestSuite(object):

    @pytest.fixture(autouse = True)
    def setup(self):
        self.parser = cli.CmdLineParser('test')

    def _parseHelpArgs(self, args, capsys):
        # CLI prints help and does exit
        with pytest.raises(SystemExit) as cm:
            self.parser.parse(args)
        captured = capsys.readouterr()
        return cm.value.code, captured.out, captured.err

    def _testMainHelpMsg(self, args, capsys):
        ecode, out, err = self._parseHelpArgs(args, capsys)

        assert not err
        assert ecode == 0
        assert CAP_APPNAME in out
        assert 'configure-time' in out
        for cmd in cli.commands:
            assert cmd.name in out

    def _assertCmdArgs(self, cmdname, args, expectedArgs):

        cmd = self.parser.parse(args)
        assert cmd.name == cmdname
        assert cmd.args == expectedArgs

        # args from sys.argv
        oldargv = sys.argv
        sys.argv = [APPNAME] + args
        try:
            cmd = self.parser.parse()
        finally:
            sys.argv = oldargv
        assert cmd.name == cmdname
        assert cmd.args == expectedArgs

    def testEmpty(self, capsys):
        self._testMainHelpMsg([], capsys)

    def testHelp(self, capsys):
        self._testMainHelpMsg(['help'], capsys)

    def testHelpWrongTopic(self, capsys):
        args = ['help', 'qwerty']
        ecode, out, err = self._parseHelpArgs(args, capsys)
        assert not out
        assert 'Unknown command/topic' in err
        assert ecode != 0

    def testHelpForCmds(self, capsys):
        for cmd in cli.commands:
            for name in (cmd.name,) + tuple(cmd.aliases):
                ecode, out, err = self._parseHelpArgs(['help', name], capsys)
                assert ecode == 0
                assert not err
                assert cmd.description.capitalize() in out

    def testCmdCheck(self):

        defaults = {
            'file' : None,
            'format' : 'yaml',
            'output' : None,
            'color' : 'auto',
            'verbose' : 0,
        }

        checks = [
            (['check'], {}),
            (['chk'], {}),
            (['check', '-f', 'my.yaml'], {'file': 'my.yaml'}),
            (['check', '--file', 'my.yaml', '--format', 'json'],
                {'file': 'my.yaml', 'format' : 'json'}),
            (['check', '-o', 'out.yaml', '--color', 'no'],
                {'output': 'out.yaml', 'color' : 'no'}),
            (['check', '-vv'], {'verbose': 2}),
        ]

        for args, changes in checks:
            expectedArgs = dict(defaults)
            expectedArgs.update(changes)
            self._assertCmdArgs('check', args, expectedArgs)

    def testCmdVersion(self):

        self._assertCmdArgs('version', ['version'],
                            {'color' : 'auto', 'verbose' : 0})
        self._assertCmdArgs('version', ['ver', '-v'],
                            {'color' : 'auto', 'verbose' : 1})

    def testWrongArgs(self, capsys):

        wrongArgs = [
            ['check', '--format', 'xml'],
            ['qwerty'],
            ['version', '-f', 'my.yaml'],
        ]
        for args in wrongArgs:
            with pytest.raises(SystemExit) as cm:
                self.parser.parse(args)
            assert cm.value.code != 0
        capsys.readouterr()

def testParseAll():

    cmd = cli.parseAll([APPNAME, 'version'])
    assert cmd.name == 'version'
    assert cmd.args == {'color' : 'auto', 'verbose' : 0}
