# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Command line of cchecker: 'check', 'version' and 'help'.
"""

import sys
import argparse

from cchecker.constants import APPNAME, CAP_APPNAME, CHECKSFILE_FILENAMES
from cchecker.pyutils import struct
from cchecker import log

ParsedCommand = struct('ParsedCommand', 'name, args')

Command = struct('Command', 'name, aliases, description',
                 defaults = { 'aliases' : () })

commands = [
    Command(
        name = 'help',
        description = 'show help for a given command or a help overview',
    ),
    Command(
        name = 'check',
        aliases = ('chk',),
        description = 'run checks from the checks file and print found flags',
    ),
    Command(
        name = 'version',
        aliases = ('ver',),
        description = 'print version of %s' % APPNAME,
    ),
]

Option = struct('Option', 'names, commands, action, choices, default, help',
                defaults = { 'action' : 'store' })

options = [
    Option(
        names = ('-f', '--file'),
        commands = ('check',),
        help = 'path of the checks file, default is one of: %s' % \
                    ', '.join(CHECKSFILE_FILENAMES),
    ),
    Option(
        names = ('--format',),
        commands = ('check',),
        choices = ('yaml', 'json'),
        default = 'yaml',
        help = 'output format of found flags',
    ),
    Option(
        names = ('-o', '--output'),
        commands = ('check',),
        help = 'write found flags into the file instead of stdout',
    ),
    Option(
        names = ('--color',),
        commands = ('check', 'version'),
        choices = ('yes', 'no', 'auto'),
        default = 'auto',
        help = 'whether to use colors in output',
    ),
    Option(
        names = ('-v', '--verbose'),
        commands = ('check', 'version'),
        action = 'count',
        default = 0,
        help = 'verbosity level -v -vv',
    ),
]

def _addOption(parser, opt):
    kwargs = { 'action' : opt.action, 'help' : opt.help }
    if opt.choices:
        kwargs['choices'] = opt.choices
    if opt.default is not None:
        kwargs['default'] = opt.default
        kwargs['help'] += ' [default: %r]' % opt.default
    parser.add_argument(*opt.names, **kwargs)

class CmdLineParser(object):
    """
    CLI for CChecker.
    """

    __slots__ = ('_parser', '_cmdHelps', '_cmdNameMap')

    def __init__(self, progName):

        self._parser = argparse.ArgumentParser(
            prog = progName,
            description = '%s: configure-time checks for C headers, '
                          'libraries and OS features' % CAP_APPNAME,
            usage = "%(prog)s <command> [options]",
        )
        subparsers = self._parser.add_subparsers(
            title = 'list of commands', metavar = '', dest = 'command')

        self._cmdHelps = {}
        self._cmdNameMap = {}
        for cmd in commands:
            for name in (cmd.name,) + tuple(cmd.aliases):
                self._cmdNameMap[name] = cmd.name

            cmdParser = subparsers.add_parser(
                cmd.name, aliases = list(cmd.aliases), help = cmd.description,
                description = cmd.description.capitalize())

            if cmd.name == 'help':
                cmdParser.add_argument('topic', nargs = '?', default = 'overview')
            for opt in options:
                if cmd.name in opt.commands:
                    _addOption(cmdParser, opt)

            self._cmdHelps[cmd.name] = cmdParser.format_help()

    def _showHelp(self, topic):
        if topic == 'overview':
            self._parser.print_help()
            return True

        name = self._cmdNameMap.get(topic)
        if name is None:
            log.error("Unknown command/topic to show help: '%s'" % topic)
            return False

        print(self._cmdHelps[name])
        return True

    def parse(self, args = None):
        """
        Parse command line args and return ParsedCommand.
        Command 'help' prints help and exits.
        """

        if args is None:
            args = sys.argv[1:]
        args = list(args) or ['help']

        parsedArgs = vars(self._parser.parse_args(args))
        name = self._cmdNameMap[parsedArgs.pop('command') or 'help']

        if name == 'help':
            sys.exit(not self._showHelp(parsedArgs.get('topic', 'overview')))

        return ParsedCommand(name = name, args = parsedArgs)

def parseAll(args):
    """
    Parse all command line args including the program name.
    Returns selected command as object of ParsedCommand.
    """

    return CmdLineParser(APPNAME).parse(args[1:])
