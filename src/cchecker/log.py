# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Console logging with optional colors. Messages of level INFO go to stdout,
 warnings and errors go to stderr.
"""

import os
import sys
import logging

from cchecker.constants import APPNAME, PLATFORM
from cchecker.utils import envValToBool

LOGGER_NAME = APPNAME

colorSettings = {
    'USE' : 1,
    'BOLD'  : '\x1b[01;1m',
    'RED'   : '\x1b[01;31m',
    'GREEN' : '\x1b[32m',
    'YELLOW': '\x1b[33m',
    'PINK'  : '\x1b[35m',
    'BLUE'  : '\x1b[01;34m',
    'CYAN'  : '\x1b[36m',
    'GREY'  : '\x1b[37m',
    'NORMAL': '\x1b[0m',
}

class _Colors(object):
    """
    Access to terminal color codes: colors.RED or colors('RED').
    Returns empty strings while colors are disabled.
    """

    def __call__(self, name):
        if not colorSettings['USE']:
            return ''
        return colorSettings.get(name, '')

    def __getattr__(self, name):
        return self(name)

colors = _Colors()

_verbose = 0

class _StreamHandler(logging.StreamHandler):
    """ Dispatches records to stdout or stderr depending on the level """

    def emit(self, record):
        self.stream = sys.stderr if record.levelno >= logging.WARNING else sys.stdout
        self.terminator = getattr(record, 'terminator', '\n')
        super(_StreamHandler, self).emit(record)

class _Formatter(logging.Formatter):
    """ Adds colors to messages """

    def format(self, record):
        msg = record.getMessage()
        if record.args:
            record.msg, record.args = msg, None

        color = getattr(record, 'c1', None)
        if color is None:
            if record.levelno >= logging.ERROR:
                color = colors.RED
            elif record.levelno >= logging.WARNING:
                color = colors.YELLOW
            elif record.levelno < logging.INFO:
                color = colors.CYAN
            else:
                color = ''

        if color:
            msg = '%s%s%s' % (color, msg, colors.NORMAL)
        return msg

def initLog():
    """ Set up the logger if it's not set up yet """

    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    handler = _StreamHandler()
    handler.setFormatter(_Formatter())
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    return logger

log = initLog()

def debug(*args, **kwargs):
    """ Log debug message. It's shown only in verbose mode > 1 """
    if _verbose > 1:
        log.debug(*args, **kwargs)

def info(*args, **kwargs):
    """ Log info message """
    log.info(*args, **kwargs)

def warn(*args, **kwargs):
    """ Log warning message """
    log.warning(*args, **kwargs)

def error(*args, **kwargs):
    """ Log error message """
    log.error(*args, **kwargs)

def pprint(color, msg, label = '', sep = '\n'):
    """
    Print message with selected color
    """
    if label:
        msg = '%s %s' % (msg, label)
    info('%s%s%s', colors(color), msg, colors.NORMAL,
         extra = { 'terminator' : sep, 'c1' : '' })

def enableColorsByCli(colorArg):
    """
    Set up log colors by arg from CLI
    """

    setting = {'yes' : 2, 'auto' : 1, 'no' : 0}[colorArg]
    if setting == 1:
        onTTY = os.environ.get('CCHECKER_ON_TTY')
        if onTTY:
            onTTY = envValToBool(onTTY)
        else:
            onTTY = sys.stderr.isatty() or sys.stdout.isatty()
        if not onTTY:
            setting = 0

    if setting == 1:
        defaultTerm = 'dumb'
        if PLATFORM == 'windows' and os.name != 'java':
            defaultTerm = ''
        if os.environ.get('TERM', defaultTerm) in ('dumb', 'emacs'):
            setting = 0

    colorSettings['USE'] = setting

def colorsEnabled():
    """ Return True if color output is enabled """
    return bool(colorSettings['USE'])

def verbose():
    """ Get current verbose level """
    return _verbose

def setVerbose(value):
    """ Set current verbose level """
    global _verbose # pylint: disable = global-statement
    _verbose = value
