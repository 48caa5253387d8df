"""
Fluent call chains over a namespace.

Every value the importer installs is announced to a ``ChainRegistry`` so
that ``Selector`` objects can resolve the same names::

    >>> registry = ChainRegistry()
    >>> registry.create_proxy('add', lambda a, b: a + b)
    >>> registry.create_proxy('ten', 10)
    >>> registry.selector(3).add(4).add(5).done()
    12
    >>> registry.selector(None).ten.add(1).done()
    11
"""
import logging

__all__ = 'ChainRegistry', 'Selector'

logger = logging.getLogger(__name__)


class ChainRegistry:
    """ Names reachable from a ``Selector``, kept in sync with a namespace """

    def __init__(self):
        self.proxies = dict()

    def create_proxy(self, name, value):
        if not isinstance(name, str):
            logger.warning('Not creating chain proxy %r: not an attribute '
                           'name', name)
            return
        if hasattr(Selector, name):
            logger.warning('Not creating chain proxy %r: it would shadow '
                           'Selector.%s', name, name)
            return
        logger.debug('Creating chain proxy %r', name)
        self.proxies[name] = value

    register = create_proxy

    def __contains__(self, name):
        return name in self.proxies

    def __len__(self):
        return len(self.proxies)

    def selector(self, value):
        return Selector(value, self)


class Selector:
    """
    Wrap a value so that namespace functions can be applied by chaining

    The wrapped value is passed as first argument to each function in the
    chain.  Use ``done()`` to get the final value out.
    """
    __slots__ = 'value', 'registry'

    def __init__(self, value, registry):
        if isinstance(value, Selector):
            value = value.value
        self.value = value
        self.registry = registry

    def done(self):
        return self.value

    valueof = done

    def __getattr__(self, key):
        if key in Selector.__slots__:
            raise AttributeError(key)
        try:
            proxy = self.registry.proxies[key]
        except KeyError:
            raise AttributeError('%r has no chain function %r'
                                 % (type(self).__name__, key))
        if callable(proxy):
            def method(*args, **kwargs):
                return Selector(proxy(self.value, *args, **kwargs),
                                self.registry)
            method.__name__ = key
            return method
        return Selector(proxy, self.registry)

    def __dir__(self):
        return sorted(set(dir(type(self))) | set(self.registry.proxies))

    def __repr__(self):
        return 'Selector(%r)' % (self.value,)

    def __str__(self):
        return str(self.value)
