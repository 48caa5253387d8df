from collections.abc import MutableMapping

from .chaining import ChainRegistry
from .importer import import_

__all__ = 'Namespace',


class Namespace(MutableMapping):
    """
    Mutable mapping of names to functions and values

    Entries are readable as attributes.  A namespace owns the chain registry
    that mirrors its imports and, optionally, a loader used to resolve
    module names given to ``import_``.

    >>> ns = Namespace()
    >>> ns['answer'] = 42
    >>> ns.answer
    42
    >>> 'answer' in ns
    True
    """

    def __init__(self, loader=None, chaining=None):
        self._data = dict()
        self.loader = loader
        self.chaining = chaining if chaining is not None else ChainRegistry()

    def __getitem__(self, key):
        return self._data[key]

    def __setitem__(self, key, value):
        self._data[key] = value

    def __delitem__(self, key):
        del self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)

    def __contains__(self, key):
        return key in self._data

    def __getattr__(self, key):
        if key.startswith('__') or key == '_data':
            raise AttributeError(key)
        try:
            return self._data[key]
        except KeyError:
            raise AttributeError('%s has no entry %r'
                                 % (type(self).__name__, key))

    def __dir__(self):
        return sorted(set(dir(type(self))) |
                      set(self.__dict__) |
                      set(k for k in self._data
                          if isinstance(k, str) and k.isidentifier()))

    def import_(self, *args):
        """ Import functions and values, see ``mathspace.importer.import_`` """
        return import_(self, *args)

    def chain(self, value):
        """ Start a fluent call chain on ``value``

        >>> ns = Namespace()
        >>> ns.import_({'double': lambda x: 2 * x})
        >>> ns.chain(4).double().double().done()
        16
        """
        return self.chaining.selector(value)

    def __repr__(self):
        return '<%s with %d entries>' % (type(self).__name__, len(self))
