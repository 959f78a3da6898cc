# coding=utf-8
#

# pylint: disable = missing-docstring, invalid-name

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

from cchecker.error import CCheckerError, CCheckerConfError, CCheckerProcessFailed
from cchecker.error import ToolchainError, OSUnsupportedError

def testCCheckerError():

    err = CCheckerError('some problem')
    assert err.msg == 'some problem'
    assert str(err) == 'some problem'

    try:
        raise ValueError('bad value')
    except ValueError as ex:
        err = CCheckerError(ex = ex)
    assert err.msg == 'bad value'

    assert CCheckerError().msg == ''

def testCCheckerConfError():

    err = CCheckerConfError('line1\nline2', confpath = 'ccheck.yaml')
    assert err.confpath == 'ccheck.yaml'
    assert err.msg == "Error in the file 'ccheck.yaml':\n  line1\n  line2"

    err = CCheckerConfError('problem')
    assert err.msg == 'problem'

def testProcessFailed():

    err = CCheckerProcessFailed(['cc', 'a.c'], 1)
    assert err.exitcode == 1
    assert err.cmd == ['cc', 'a.c']
    assert 'failed with exit code 1' in err.msg

    err = ToolchainError(['cc', 'a.c'], 1, 'a.c:1: error')
    assert isinstance(err, CCheckerProcessFailed)
    assert err.output == 'a.c:1: error'
    assert err.msg.endswith('Captured output:\na.c:1: error')

    err = ToolchainError(None, -1, msg = 'no compiler')
    assert err.msg == 'no compiler'

def testOSUnsupportedError():

    err = OSUnsupportedError()
    assert isinstance(err, CCheckerError)
    assert err.msg == 'OS unsupported'
    assert err.diag is None

    err = OSUnsupportedError('no socket()')
    assert str(err) == 'OS unsupported - no socket()'
    assert err.diag == 'no socket()'
