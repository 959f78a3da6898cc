# coding=utf-8
#

"""
 Copyright (c) 2021, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Loading and validation of YAML file with checks.
"""

__all__ = [
    'load',
    'findChecksFile',
]

import os
import io

import yaml as pyyaml

from cchecker.constants import CHECKSFILE_FILENAMES
from cchecker.error import CCheckerConfError
from cchecker.pyutils import maptype, stringtype, listtypes
from cchecker.utils import toList

try:
    YamlLoader = pyyaml.CSafeLoader
except AttributeError:
    YamlLoader = pyyaml.SafeLoader

_commonScheme = {
    'do'       : { 'type': 'str', 'required' : True },
    'msg'      : { 'type': 'str' },
    'source'   : { 'type': 'str', 'required' : True },
    'define'   : { 'type': 'str' },
    'diag'     : { 'type': 'str' },
    'mandatory': { 'type': 'bool', 'default' : True },
}

def _makeScheme(extra):
    scheme = dict(_commonScheme)
    scheme.update(extra)
    return scheme

checkScheme = {
    'compile-run' : _makeScheme({
        'include-dirs'   : { 'type': 'list-of-strs', 'default' : [] },
        'compiler-flags' : { 'type': 'list-of-strs', 'default' : [] },
        'linker-flags'   : { 'type': 'list-of-strs', 'default' : [] },
    }),
    'find-include-dirs' : _makeScheme({
        'dirs' : { 'type': 'list-of-dirsets', 'required' : True },
    }),
    'find-libs' : _makeScheme({
        'libs' : { 'type': 'list-of-libsets', 'required' : True },
    }),
}

class StringIO(io.StringIO):
    """
    Customized StringIO
    """

    def __init__(self, data, name = '<file>'):
        super().__init__(data)
        # it's used in pyyaml for error reports
        self.name = name

def _handleStr(value, fullkey):
    if not isinstance(value, stringtype):
        raise CCheckerConfError("Param %r should be string" % fullkey)
    return value

def _handleBool(value, fullkey):
    if not isinstance(value, bool):
        raise CCheckerConfError("Param %r should be bool" % fullkey)
    return value

def _handleListOfStrs(value, fullkey):
    if value is None:
        return []
    value = toList(value)
    if not isinstance(value, listtypes) or \
                        not all(isinstance(x, stringtype) for x in value):
        msg = "Value `%r` is invalid for the param %r." % (value, fullkey)
        msg += " It should be string or list of strings."
        raise CCheckerConfError(msg)
    return list(value)

def _handleListOfDirSets(value, fullkey):
    if not isinstance(value, listtypes):
        raise CCheckerConfError("Param %r should be list" % fullkey)
    return [ _handleListOfStrs(x, '%s.%d' % (fullkey, i)) \
                                        for i, x in enumerate(value)]

def _handleListOfLibSets(value, fullkey):
    if not isinstance(value, listtypes):
        raise CCheckerConfError("Param %r should be list" % fullkey)
    result = []
    for i, item in enumerate(value):
        if item is None:
            item = ''
        result.append(_handleStr(item, '%s.%d' % (fullkey, i)))
    return result

_typeHandlers = {
    'str'  : _handleStr,
    'bool' : _handleBool,
    'list-of-strs'    : _handleListOfStrs,
    'list-of-dirsets' : _handleListOfDirSets,
    'list-of-libsets' : _handleListOfLibSets,
}

def _validateCheck(check, fullkey):

    if not isinstance(check, maptype):
        raise CCheckerConfError("Param %r should be dict" % fullkey)

    action = check.get('do')
    if action is None:
        raise CCheckerConfError("Param '%s.do' is required" % fullkey)
    if action not in checkScheme:
        msg = "Value %r is invalid for the param '%s.do'." % (action, fullkey)
        msg += " Allowed values: %s" % ', '.join(repr(x) for x in checkScheme)
        raise CCheckerConfError(msg)

    scheme = checkScheme[action]

    for key in check:
        if key not in scheme:
            msg = "Unknown name %r in %r for the %r check" % (key, fullkey, action)
            raise CCheckerConfError(msg)

    result = {}
    for key, attrs in scheme.items():
        paramkey = '%s.%s' % (fullkey, key)
        if key not in check:
            if attrs.get('required'):
                raise CCheckerConfError("Param %r is required" % paramkey)
            result[key] = attrs.get('default')
            continue
        handler = _typeHandlers[attrs['type']]
        result[key] = handler(check[key], paramkey)

    return result

def validate(data):
    """
    Validate loaded data and return list of checks with applied defaults
    """

    if not isinstance(data, maptype):
        raise CCheckerConfError("Invalid structure: it should be dict")

    unknown = [x for x in data if x != 'checks']
    if unknown:
        raise CCheckerConfError("Unknown name %r" % unknown[0])

    checks = data.get('checks')
    if checks is None:
        return []
    if not isinstance(checks, listtypes):
        raise CCheckerConfError("Param 'checks' should be list")

    return [_validateCheck(x, 'checks.%d' % i) for i, x in enumerate(checks)]

def findChecksFile(dirpath, fname = None):
    """
    Try to find the checks file in the dirpath.
    Returns full path to the file or None if not found.
    """

    filenames = [fname] if fname else CHECKSFILE_FILENAMES
    for name in filenames:
        filepath = os.path.join(dirpath, name)
        if os.path.isfile(filepath):
            return filepath
    return None

def load(filepath):
    """
    Load YAML file with checks. Returns validated list of checks.
    """

    try:
        with io.open(filepath, 'rt', encoding = 'utf-8') as fstream:
            stream = StringIO(fstream.read(), fstream.name)
    except OSError as ex:
        msg = "Could not read the file %r: %s" % (filepath, ex)
        raise CCheckerConfError(msg, ex) from ex

    try:
        loader = YamlLoader(stream)
        try:
            data = loader.get_single_data()
        finally:
            loader.dispose()
    except pyyaml.YAMLError as ex:
        raise CCheckerConfError(str(ex), ex, confpath = filepath) from ex

    if data is None:
        raise CCheckerConfError("File has no config data", confpath = filepath)

    try:
        return validate(data)
    except CCheckerConfError as ex:
        raise CCheckerConfError(ex.msg, confpath = filepath) from ex
