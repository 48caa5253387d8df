from . import functions
from .importer import Importer, import_
from .loader import ModuleLoader
from .namespace import Namespace

__all__ = 'create', 'default_loader'

default_loader = ModuleLoader()


def create(loader=default_loader):
    """ Create a new namespace holding the built-in functions

    Namespaces are independent of each other: imports into one are not seen
    by another.  Pass ``loader=None`` to create a namespace that cannot load
    modules by name.

    >>> math = create()
    >>> math.add(2, 3)
    5
    >>> math.chain(3).add(4).multiply(2).done()
    14
    >>> getattr(math, 'import')({'myvalue': 42})
    >>> math.myvalue
    42
    """
    namespace = Namespace(loader=loader)
    import_(namespace, functions.builtins(), {'wrap': False})
    import_(namespace, {'import': Importer(namespace)}, {'wrap': False})
    return namespace
