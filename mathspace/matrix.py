import numpy as np

__all__ = ['Matrix']


class Matrix:
    """ Dense matrix backed by a numpy array

    >>> m = Matrix([[1, 2], [3, 4]])
    >>> m.size()
    (2, 2)
    >>> m.valueof()
    [[1, 2], [3, 4]]
    """
    __slots__ = '_data',

    def __init__(self, data):
        if isinstance(data, Matrix):
            data = data._data
        self._data = np.asarray(data)

    @property
    def data(self):
        return self._data

    def size(self):
        return self._data.shape

    def valueof(self):
        """ Nested lists holding the matrix entries """
        return self._data.tolist()

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return False
        return (self._data.shape == other._data.shape and
                bool((self._data == other._data).all()))

    def __ne__(self, other):
        return not self == other

    __hash__ = None

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self.valueof())
