# coding=utf-8
#

"""
 Copyright (c) 2020, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Running of checks loaded from the checks file.
"""

import os
import io
import json

import yaml as pyyaml

from cchecker.error import OSUnsupportedError, CCheckerError
from cchecker.checker import makeProbeArgs, CChecker
from cchecker.cmd import Command as _Command
from cchecker import checksfile, log

LINE_JUST = 40

def _compileRunArgs(check):
    return {
        'includeDirs'   : check['include-dirs'],
        'compilerFlags' : check['compiler-flags'],
        'linkerFlags'   : check['linker-flags'],
    }

# map: 'do' -> (method, asserting method, func to get extra args, default msg)
_actions = {
    'compile-run' : (
        'tryCompileRun', 'assertCompileRun', _compileRunArgs, 'code snippet',
    ),
    'find-include-dirs' : (
        'tryFindIncludeDirsFor', 'findIncludeDirsFor',
        lambda check: { 'dirs' : check['dirs'] }, 'include dirs',
    ),
    'find-libs' : (
        'tryFindLibsFor', 'findLibsFor',
        lambda check: { 'libs' : check['libs'] }, 'libraries',
    ),
}

def startMsg(msg):
    """ Print the beginning of a check line """
    log.pprint('NORMAL', '%s : ' % msg.ljust(LINE_JUST), sep = '')

def endMsg(result, color = 'GREEN'):
    """ Print the result of a check line """
    log.pprint(color, result)

def _makeMsg(check, defaultMsg):
    label = check.get('msg') or check.get('define') or defaultMsg
    return 'Checking for %s' % label

def runCheck(checker, check):
    """
    Run one validated check with the checker.
    If the check is mandatory and failed then OSUnsupportedError is raised.
    Returns result of the check as bool.
    """

    tryMethod, assertMethod, getExtraArgs, defaultMsg = _actions[check['do']]

    args = makeProbeArgs(check['source'], define = check.get('define'),
                         diag = check.get('diag'))
    kwargs = getExtraArgs(check)

    startMsg(_makeMsg(check, defaultMsg))

    try:
        if check.get('mandatory', True):
            getattr(checker, assertMethod)(args, **kwargs)
            result = True
        else:
            result = getattr(checker, tryMethod)(args, **kwargs)
    except OSUnsupportedError:
        endMsg('no', 'YELLOW')
        raise

    if result:
        endMsg('yes')
    else:
        endMsg('no', 'YELLOW')
    return result

def runChecks(checker, checks):
    """
    Run validated checks one by one.
    Returns list of results.
    """

    return [runCheck(checker, x) for x in checks]

def formatResults(flags, fmt = 'yaml'):
    """
    Convert accumulated results into text of selected format
    """

    data = flags.asDict()
    if fmt == 'json':
        return json.dumps(data, indent = 2) + '\n'
    return pyyaml.safe_dump(data, default_flow_style = False, sort_keys = False)

class Command(_Command):
    """
    Run checks from the checks file and print found flags.
    It's implementation of command 'check'.
    """

    def _run(self, cliArgs):

        filepath = cliArgs.get('file')
        if not filepath:
            filepath = checksfile.findChecksFile(os.getcwd())
            if filepath is None:
                log.error('Checks file not found. Check that one of the files %s '
                          'exists in the current directory.' % \
                          ', '.join(checksfile.CHECKSFILE_FILENAMES))
                return 1

        checks = checksfile.load(filepath)

        checker = CChecker()
        try:
            runChecks(checker, checks)
        except OSUnsupportedError as ex:
            log.error(ex.msg)
            return 1

        output = formatResults(checker.flags, cliArgs.get('format', 'yaml'))

        outpath = cliArgs.get('output')
        if outpath:
            try:
                with io.open(outpath, 'wt', encoding = 'utf-8') as file:
                    file.write(output)
            except OSError as ex:
                raise CCheckerError('Could not write the file %r' % outpath, ex) from ex
        else:
            print(output, end = '')

        return 0
