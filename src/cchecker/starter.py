# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

import sys
from importlib import import_module

_cmdModules = {
    'check'   : 'cchecker.actions',
    'version' : 'cchecker.version',
}

def handleCLI(args):
    """
    Handle CLI and return command object
    """
    from cchecker import cli
    return cli.parseAll(args)

def runCmd(cmd):
    """
    Run selected command.
    """

    if cmd.name not in _cmdModules:
        raise NotImplementedError('Unknown command')

    module = import_module(_cmdModules[cmd.name])
    return module.Command().run(cmd.args)

def run(args = None):
    """
    Parse CLI and run selected command. Returns exit code.
    """

    from cchecker import log, error

    if args is None:
        args = sys.argv

    cmd = None
    try:
        cmd = handleCLI(args)
        error.verbose = cmd.args.get('verbose', 0)
        return runCmd(cmd)
    except error.CCheckerError as ex:
        verbose = 0
        if cmd:
            verbose = cmd.args.get('verbose', 0)
        if verbose > 1:
            log.pprint('RED', ex.fullmsg)
        log.error(ex.msg)
        return 1
    except KeyboardInterrupt:
        log.pprint('RED', 'Interrupted')
        return 68

def main():
    """ Entry point of the console script """
    sys.exit(run())
