"""
Sort candidate values into the categories the importer acts upon.

>>> classify(len)
<Category.FUNCTION: 'function'>
>>> classify({'a': 1})
<Category.CONTAINER: 'container'>
>>> classify([1, 2, 3])
<Category.INVALID: 'invalid'>
"""
from enum import Enum

from .predicates import isnumber, isstring, iscomplex, isunit, ismapping

__all__ = 'Category', 'classify'


class Category(Enum):
    FUNCTION = 'function'
    NUMBER = 'number'
    STRING = 'string'
    COMPLEX = 'complex'
    UNIT = 'unit'
    CONTAINER = 'container'
    INVALID = 'invalid'

    @property
    def leaf(self):
        """ Whether values of this category are installed directly """
        return self not in (Category.CONTAINER, Category.INVALID)


# Checked in order, first match wins.  Complex precedes number so that
# numpy complex scalars are not mistaken for plain numbers.
_rules = [
    (callable, Category.FUNCTION),
    (iscomplex, Category.COMPLEX),
    (isnumber, Category.NUMBER),
    (isstring, Category.STRING),
    (isunit, Category.UNIT),
    (ismapping, Category.CONTAINER),
]


def classify(value):
    for predicate, category in _rules:
        if predicate(value):
            return category
    return Category.INVALID
