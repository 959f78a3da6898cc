# coding=utf-8
#

# pylint: disable = missing-docstring, invalid-name

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

from cchecker import version

def testCheckFormat():

    assert version.checkFormat(version.current())
    assert version.checkFormat('1.2.3')
    assert version.checkFormat('1.2.3-dev')
    assert not version.checkFormat('1.2')
    assert not version.checkFormat('v1.2.3')

def testCommand(capsys):

    assert version.Command().run({ 'color' : 'no', 'verbose' : 0 }) == 0
    out = capsys.readouterr().out
    assert out.strip() == 'CChecker version %s' % version.VERSION

    assert version.Command().run({ 'color' : 'no', 'verbose' : 1 }) == 0
    out = capsys.readouterr().out
    assert 'PyYAML version' in out
    assert 'Python version' in out
