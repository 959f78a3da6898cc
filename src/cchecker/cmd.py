# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

from cchecker import log

class Command(object):
    """ Base class for a CLI command """

    COLOR = 'NORMAL'

    def _info(self, msg):
        log.info(msg, extra = { 'c1': log.colors(self.COLOR) } )

    def _run(self, cliArgs):
        raise NotImplementedError

    def run(self, cliArgs):
        """ Run command """

        if 'color' in cliArgs:
            log.enableColorsByCli(cliArgs['color'])
        if 'verbose' in cliArgs:
            log.setVerbose(cliArgs['verbose'])

        return self._run(cliArgs)
