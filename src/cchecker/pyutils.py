# coding=utf-8
#

"""
 Copyright (c) 2019, Alexander Magola. All rights reserved.
 license: BSD 3-Clause License, see LICENSE for more details.

 Here are some extra stuff based on python only built-in ones.
"""

#pylint: disable=invalid-name

from collections.abc import Mapping
maptype = Mapping

stringtype = str # pragma: no cover
listtypes = (list, tuple)

def struct(typename, attrnames, defaults = None):
    """
    Generate simple and fast data class.
    Attributes which are not set in __init__ get values from 'defaults' or None.
    """

    attrnames = tuple(attrnames.replace(',', ' ').split())
    reprfmt = '(' + ', '.join(name + '=%r' for name in attrnames) + ')'
    defaults = dict(defaults or {})

    def __init__(self, *args, **kwargs):
        if len(args) > len(attrnames):
            msg = "__init__() takes %d positional arguments but %d were given" \
                % (len(attrnames) + 1, len(args) + 1)
            raise AttributeError(msg)
        for name in attrnames:
            setattr(self, name, defaults.get(name))
        for name, value in zip(attrnames, args):
            setattr(self, name, value)
        for name, value in kwargs.items():
            if name not in attrnames:
                msg = "__init__() got an unexpected keyword argument '%s'" % name
                raise TypeError(msg)
            setattr(self, name, value)

    def __repr__(self):
        """ Return a nicely formatted representation string """
        return self.__class__.__name__ + \
                reprfmt % tuple(getattr(self, x) for x in attrnames)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return all(getattr(self, x) == getattr(other, x) for x in attrnames)

    namespace = {
        '__doc__'    : '%s(%s)' % (typename, ', '.join(attrnames)),
        '__slots__'  : attrnames,
        '__init__'   : __init__,
        '__repr__'   : __repr__,
        '__eq__'     : __eq__,
        '__hash__'   : None,
    }
    result = type(typename, (object,), namespace)

    return result

_NOT_FOUND = object()

class cachedprop(object):
    """
    Decorator for cached read-only properties.
    Notice that it cannot be used with __slots__.
    """

    def __init__(self, fget):
        self.fget     = fget
        self.attrname = fget.__name__
        self.__doc__  = fget.__doc__

    def __get__(self, obj, owner = None):

        if obj is None:
            return self

        try:
            cache = obj.__dict__
        except AttributeError:
            msg = "No '__dict__' attribute on %r " % type(obj).__name__
            raise TypeError(msg) from None

        value = cache.get(self.attrname, _NOT_FOUND)
        if value is _NOT_FOUND:
            value = cache[self.attrname] = self.fget(obj)

        return value
