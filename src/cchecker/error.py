# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import sys
import traceback

verbose = 2

OS_UNSUPPORTED_MSG = 'OS unsupported'

class CCheckerError(Exception):
    """Base class for all CChecker errors"""

    def __init__(self, msg = None, ex = None):
        if msg is None:
            msg = ''
        super(CCheckerError, self).__init__(msg)
        self.msg = msg

        self.stack = []
        if ex:
            if not msg:
                self.msg = str(ex)
            if isinstance(ex, CCheckerError):
                self.stack = ex.stack
            else:
                self.stack = traceback.extract_tb(sys.exc_info()[2])

        if verbose > 0:
            self.stack += traceback.extract_stack()[:-1]
        self.verbose_msg = ''.join(traceback.format_list(self.stack))
        self.fullmsg = self.verbose_msg

    def __str__(self):
        return str(self.msg)

class CCheckerLogicError(CCheckerError):
    """Some logic/programming error"""

class CCheckerConfError(CCheckerError):
    """Invalid checks file error"""

    def __init__(self, msg = None, ex = None, confpath = None):
        if msg is None:
            msg = ''
        if confpath and msg:
            _msg = "Error in the file %r:" % confpath
            for line in msg.splitlines():
                _msg += "\n  %s" % line
            msg = _msg
        self.confpath = confpath
        super(CCheckerConfError, self).__init__(msg, ex)

class CCheckerProcessFailed(CCheckerError):
    """ Process failed with exitcode """

    def __init__(self, cmd, exitcode, output = None, msg = None):
        self.cmd = cmd
        self.exitcode = exitcode
        self.output = output
        if not msg:
            msg = "Command %r failed with exit code %d." % (cmd, exitcode)
            if output:
                msg += '\nCaptured output:\n'
                msg += output
        super(CCheckerProcessFailed, self).__init__(msg)

class ToolchainError(CCheckerProcessFailed):
    """ C compiler or linker could not produce its output """

class OSUnsupportedError(CCheckerError):
    """
    Required feature was not detected. It's raised by asserting checks
    to abort the configuration.
    """

    def __init__(self, diag = None):
        self.diag = diag
        msg = OS_UNSUPPORTED_MSG
        if diag is not None:
            msg += ' - %s' % diag
        super(OSUnsupportedError, self).__init__(msg)
