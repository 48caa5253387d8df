"""
Conversion of domain wrapper objects to the raw values they stand for.

Wrapped functions pass every argument through ``valueof`` so that
libraries unaware of mathspace types receive plain Python and numpy data.

>>> valueof(Matrix([1, 2]))
[1, 2]
>>> valueof(Unit(3, 'm'))
3
>>> valueof('hello')
'hello'
"""
from multipledispatch import dispatch

from .matrix import Matrix
from .unit import Unit

__all__ = 'valueof',


@dispatch(Matrix)
def valueof(m):
    return m.valueof()


@dispatch(Unit)
def valueof(u):
    return u.valueof()


@dispatch(object)
def valueof(o):
    convert = getattr(o, 'valueof', None)
    if callable(convert) and not isinstance(o, type):
        return convert()
    return o
