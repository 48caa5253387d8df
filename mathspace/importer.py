"""
Import functions and values into a namespace.

>>> from mathspace.namespace import Namespace
>>> ns = Namespace()
>>> import_(ns, {'myvalue': 42, 'hello': lambda name: 'hello, %s!' % name})
>>> ns.myvalue * 2
84
>>> ns.hello('user')
'hello, user!'

Nested mappings are flattened into the namespace, entries that are not
functions, numbers, strings, complex values or units are skipped, and
existing names are kept unless ``override=True`` is given.
"""
import logging
from functools import wraps

from .classify import Category, classify
from .coerce import valueof
from .context import invocation
from .error import ArgumentsError, ModuleLoadError
from .options import ImportOptions
from .predicates import isstring, ismapping

__all__ = 'import_', 'Importer', 'wrap'

logger = logging.getLogger(__name__)


def import_(namespace, *args):
    """ Import functions from a mapping or a module into ``namespace``

    Parameters
    ----------
    namespace : Namespace
        Destination of every accepted entry.
    source : mapping or str
        Mapping of names to values, or the identifier of a module that the
        namespace's loader resolves to such a mapping.
    options : mapping, optional
        ``override`` (default False)
            Replace entries that already exist in the namespace.
        ``wrap`` (default True)
            Install functions behind a wrapper that converts arguments like
            ``Matrix`` to raw data like lists before calling them.

    Installation is not transactional: when an error is raised, entries
    installed before the failing point stay installed.
    """
    num = len(args)
    if num not in (1, 2):
        raise ArgumentsError('import', num, 1, 2)

    source = args[0]
    options = ImportOptions.coerce(args[1] if num == 2 else None)
    _import_source(namespace, source, options)


def _import_source(namespace, source, options):
    if isstring(source):
        loader = namespace.loader
        if loader is None:
            raise ModuleLoadError('Cannot load module: loader not available')
        _import_source(namespace, loader(source), options)
    elif ismapping(source):
        for name, value in list(source.items()):
            category = classify(value)
            if category is Category.CONTAINER:
                _import_source(namespace, value, options)
            elif category.leaf:
                _install(namespace, name, value, category, options)
            else:
                logger.debug('Skipping %r: cannot import values of type %s',
                             name, type(value).__name__)
    else:
        raise TypeError('Object or module name expected')


def _install(namespace, name, value, category, options):
    if not options.override and name in namespace:
        logger.debug('Skipping %r: already defined', name)
        return

    if options.wrap and category is Category.FUNCTION:
        namespace[name] = wrap(namespace, value)
    else:
        namespace[name] = value
    logger.debug('Installed %s %r%s', category.value, name,
                 ' (wrapped)' if namespace[name] is not value else '')

    # chain proxies see the raw value, after the namespace holds it
    namespace.chaining.create_proxy(name, value)


def wrap(namespace, func):
    """ Wrap ``func`` so that it is called with raw argument values

    Each argument goes through ``valueof``, and the call runs with
    ``namespace`` as invocation context (see ``mathspace.context``).
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        args = [valueof(arg) for arg in args]
        kwargs = {k: valueof(v) for k, v in kwargs.items()}
        with invocation(namespace):
            return func(*args, **kwargs)
    return wrapper


class Importer:
    """ ``import`` bound to a namespace, as installed by ``create`` """

    def __init__(self, namespace):
        self.namespace = namespace

    def __call__(self, *args):
        return import_(self.namespace, *args)

    def __repr__(self):
        return '<import into %s>' % type(self.namespace).__name__
