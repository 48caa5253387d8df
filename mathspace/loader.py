"""
Resolve module identifiers handed to ``import`` into mappings of exports.

Identifiers are either dotted module names, resolved with ``importlib``, or
paths to ``.py`` files.
"""
import importlib
import importlib.util
import logging
import os
from types import ModuleType

from toolz import valfilter

__all__ = 'ModuleLoader', 'exports'

logger = logging.getLogger(__name__)


def exports(module):
    """ Names a module makes public, in definition order

    ``__all__`` is honoured when present.  Otherwise every attribute not
    starting with an underscore, except submodules, is exported.

    >>> import cmath
    >>> 'sqrt' in exports(cmath)
    True
    >>> any(name.startswith('_') for name in exports(cmath))
    False
    """
    namespace = vars(module)
    names = getattr(module, '__all__', None)
    if names is not None:
        return {name: getattr(module, name) for name in names}
    public = {name: value for name, value in namespace.items()
              if not name.startswith('_')}
    return valfilter(lambda value: not isinstance(value, ModuleType), public)


def _ispath(identifier):
    return (identifier.endswith('.py') or
            os.sep in identifier or
            (os.altsep is not None and os.altsep in identifier))


class ModuleLoader:
    """ Load a module and return its exports

    Errors raised while locating or executing the module propagate
    unchanged.
    """

    def load(self, identifier):
        if _ispath(identifier):
            module = self._load_file(identifier)
        else:
            module = importlib.import_module(identifier)
        result = exports(module)
        logger.info('Loaded module %r with %d exports', identifier,
                    len(result))
        return result

    __call__ = load

    def _load_file(self, path):
        path = os.path.abspath(os.path.expanduser(path))
        if not os.path.isfile(path):
            raise FileNotFoundError('No module file at %r' % path)
        name = os.path.splitext(os.path.basename(path))[0]
        spec = importlib.util.spec_from_file_location(name, path)
        if spec is None or spec.loader is None:
            raise ImportError('Cannot load module from %r' % path, path=path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    def __repr__(self):
        return '%s()' % type(self).__name__
