"""
Functions and constants every namespace starts out with.

Each function dispatches on its argument types, to Python arithmetic for
scalars, to numpy for arrays, and to the domain types for units and
matrices.

>>> add(1, 2)
3
>>> multiply(Unit(2, 'cm'), 3)
Unit(6, 'cm')
>>> sqrt(-4)
2j
"""
import cmath
import math as pymath
import operator
from numbers import Number

import numpy as np
from multipledispatch import Dispatcher

from .matrix import Matrix
from .unit import Unit

binary_names = 'add subtract multiply divide pow'.split()

unary_names = 'sqrt abs'.split()

constants = {
    'pi': pymath.pi,
    'e': pymath.e,
    'i': 1j,
}

__all__ = binary_names + unary_names + sorted(constants) + ['builtins']


_operators = {
    'add': operator.add,
    'subtract': operator.sub,
    'multiply': operator.mul,
    'divide': operator.truediv,
    'pow': operator.pow,
}

scalar = (Number, np.number)
array = (np.ndarray,)


def _matrix_op(op):
    def f(a, b):
        a = a.data if isinstance(a, Matrix) else a
        b = b.data if isinstance(b, Matrix) else b
        return Matrix(op(a, b))
    return f


_unit_ops = {
    'add': [((Unit, Unit), Unit.add)],
    'subtract': [((Unit, Unit), Unit.subtract)],
    'multiply': [((Unit, scalar), Unit.scale),
                 ((scalar, Unit), lambda a, b: b.scale(a))],
    'divide': [((Unit, scalar), lambda a, b: Unit(a.value / b, a.name))],
}


for funcname in binary_names:  # add, subtract, ...
    op = _operators[funcname]
    d = Dispatcher(funcname)
    d.add((scalar, scalar), op)
    d.add((array + scalar, array), op)
    d.add((array, scalar), op)
    d.add((Matrix, Matrix), _matrix_op(op))
    d.add((Matrix, scalar), _matrix_op(op))
    d.add((scalar, Matrix), _matrix_op(op))
    for signature, func in _unit_ops.get(funcname, []):
        d.add(signature, func)
    locals()[funcname] = d


def _sqrt(x):
    if isinstance(x, (complex, np.complexfloating)) or x < 0:
        return cmath.sqrt(x)
    return pymath.sqrt(x)


sqrt = Dispatcher('sqrt')
sqrt.add((scalar,), _sqrt)
sqrt.add((array,), np.sqrt)
sqrt.add((Matrix,), lambda m: Matrix(np.sqrt(m.data)))

abs = Dispatcher('abs')
abs.add((scalar,), operator.abs)
abs.add((array,), np.abs)
abs.add((Matrix,), lambda m: Matrix(np.abs(m.data)))
abs.add((Unit,), lambda u: Unit(operator.abs(u.value), u.name))

locals().update(constants)


def builtins():
    """ Mapping of everything above, ready to be imported """
    result = {name: globals()[name]
              for name in binary_names + unary_names}
    result.update(constants)
    return result
