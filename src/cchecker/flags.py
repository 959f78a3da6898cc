# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.
"""

class BuildFlags(object):
    """
    Include dirs, compiler flags and linker flags confirmed by successful
    checks. Values are only appended: they are never reordered, removed or
    deduplicated. All getters return copies.
    """

    __slots__ = ('_includeDirs', '_compilerFlags', '_linkerFlags')

    def __init__(self):
        self._includeDirs = []
        self._compilerFlags = []
        self._linkerFlags = []

    def includeDirs(self):
        """ Get list of include dirs """
        return list(self._includeDirs)

    def compilerFlags(self):
        """ Get list of extra compiler flags """
        return list(self._compilerFlags)

    def linkerFlags(self):
        """ Get list of extra linker flags """
        return list(self._linkerFlags)

    def addIncludeDirs(self, dirs):
        """ Append include dirs """
        self._includeDirs.extend(dirs)

    def addCompilerFlags(self, flags):
        """ Append compiler flags """
        self._compilerFlags.extend(flags)

    def addLinkerFlags(self, flags):
        """ Append linker flags """
        self._linkerFlags.extend(flags)

    def asDict(self):
        """
        Get all values as a dict with copies of lists
        """

        return {
            'include-dirs'   : self.includeDirs(),
            'compiler-flags' : self.compilerFlags(),
            'linker-flags'   : self.linkerFlags(),
        }

    def __repr__(self):
        return 'BuildFlags(includeDirs=%r, compilerFlags=%r, linkerFlags=%r)' % \
            (self._includeDirs, self._compilerFlags, self._linkerFlags)
