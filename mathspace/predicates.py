"""
Predicates recognising the kinds of value a namespace can hold.

>>> isnumber(1), isnumber(2.5), isnumber(True)
(True, True, False)
>>> iscomplex(1j), isnumber(1j)
(True, False)
>>> isstring('x'), ismapping({'a': 1}), ismapping([1, 2])
(True, True, False)
"""
from collections.abc import Mapping
from numbers import Number

import numpy as np

from .unit import Unit

__all__ = ['isnumber', 'isstring', 'iscomplex', 'isunit', 'ismapping']


def iscomplex(x):
    return isinstance(x, (complex, np.complexfloating))


def isnumber(x):
    return (isinstance(x, Number) and
            not isinstance(x, (bool, np.bool_)) and
            not iscomplex(x))


def isstring(x):
    return isinstance(x, str)


def isunit(x):
    return isinstance(x, Unit)


def ismapping(x):
    return isinstance(x, Mapping)
