# coding=utf-8
#

# pylint: disable = missing-docstring, invalid-name

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import pytest
from cchecker import log

def testLevelsToStreams(capsys):

    log.info('info message')
    log.warn('warn message')
    log.error('error message')
    captured = capsys.readouterr()
    assert captured.out == 'info message\n'
    assert 'warn message' in captured.err
    assert 'error message' in captured.err
    assert 'info message' not in captured.err

def testDebug(capsys):

    log.debug('hidden message')
    assert not capsys.readouterr().out

    log.setVerbose(2)
    assert log.verbose() == 2
    log.debug('visible %s', 'message')
    assert capsys.readouterr().out == 'visible message\n'

def testPprint(capsys):

    log.pprint('GREEN', 'Checking : ', sep = '')
    log.pprint('GREEN', 'yes')
    assert capsys.readouterr().out == 'Checking : yes\n'

    log.pprint('GREEN', 'no', label = '(optional)')
    assert capsys.readouterr().out == 'no (optional)\n'

@pytest.mark.usefixtures("unsetEnviron")
def testEnableColorsByCli(monkeypatch):

    log.enableColorsByCli('yes')
    assert log.colorsEnabled()
    assert log.colors.RED == log.colorSettings['RED']
    assert log.colors('NORMAL') == log.colorSettings['NORMAL']

    log.enableColorsByCli('no')
    assert not log.colorsEnabled()
    assert log.colors.RED == ''

    monkeypatch.setenv('TERM', 'xterm')
    monkeypatch.setenv('CCHECKER_ON_TTY', 'yes')
    log.enableColorsByCli('auto')
    assert log.colorsEnabled()

    monkeypatch.setenv('CCHECKER_ON_TTY', '0')
    log.enableColorsByCli('auto')
    assert not log.colorsEnabled()

    monkeypatch.setenv('CCHECKER_ON_TTY', '1')
    monkeypatch.setenv('TERM', 'dumb')
    log.enableColorsByCli('auto')
    assert not log.colorsEnabled()
