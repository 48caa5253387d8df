__all__ = [
    'MathspaceException',
    'ArgumentsError',
    'ModuleLoadError',
]


class MathspaceException(Exception):
    """Exception that all mathspace exceptions derive from"""

#------------------------------------------------------------------------
# Calling errors
#------------------------------------------------------------------------

class ArgumentsError(MathspaceException, TypeError):
    """
    Raised when a function is called with the wrong number of arguments.

    >>> raise ArgumentsError('import', 3, 1, 2)
    Traceback (most recent call last):
        ...
    mathspace.error.ArgumentsError: Wrong number of arguments in function import (3 provided, 1-2 expected)
    """
    def __init__(self, fn, count, min, max=None):
        self.fn    = fn
        self.count = count
        self.min   = min
        self.max   = max
        super().__init__(str(self))

    def __str__(self):
        if self.max is None:
            expected = '%d or more' % self.min
        elif self.max == self.min:
            expected = '%d' % self.min
        else:
            expected = '%d-%d' % (self.min, self.max)

        return ('Wrong number of arguments in function %s '
                '(%d provided, %s expected)' % (self.fn, self.count, expected))

    def __reduce__(self):
        return type(self), (self.fn, self.count, self.min, self.max)

#------------------------------------------------------------------------
# Loading errors
#------------------------------------------------------------------------

class ModuleLoadError(MathspaceException, ImportError):
    """Raised when a module name is given but nothing can load it"""
