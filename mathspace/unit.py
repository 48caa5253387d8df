__all__ = ['Unit']


class Unit:
    """ A magnitude tagged with the name of a physical unit

    >>> u = Unit(5, 'cm')
    >>> u
    Unit(5, 'cm')
    >>> u.valueof()
    5
    >>> print(u)
    5 cm
    """
    __slots__ = 'value', 'name'

    def __init__(self, value, name):
        if not isinstance(name, str) or not name:
            raise ValueError('Unit name must be a non-empty string, got %r'
                             % (name,))
        self.value = value
        self.name = name

    def valueof(self):
        """ The bare magnitude, without its unit """
        return self.value

    to_number = valueof

    def _check_compatible(self, other):
        if not isinstance(other, Unit) or other.name != self.name:
            raise ValueError('Units do not match: %s and %s' % (self, other))

    def add(self, other):
        self._check_compatible(other)
        return Unit(self.value + other.value, self.name)

    def subtract(self, other):
        self._check_compatible(other)
        return Unit(self.value - other.value, self.name)

    def scale(self, factor):
        return Unit(self.value * factor, self.name)

    def __eq__(self, other):
        return (isinstance(other, Unit) and
                self.name == other.name and
                self.value == other.value)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self), self.value, self.name))

    def __repr__(self):
        return '%s(%r, %r)' % (type(self).__name__, self.value, self.name)

    def __str__(self):
        return '%s %s' % (self.value, self.name)
