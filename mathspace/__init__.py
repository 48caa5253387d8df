from .error import MathspaceException, ArgumentsError, ModuleLoadError
from .classify import Category, classify
from .chaining import ChainRegistry, Selector
from .coerce import valueof
from .context import current_namespace, invocation
from .core import create
from .importer import Importer, import_, wrap
from .loader import ModuleLoader
from .matrix import Matrix
from .namespace import Namespace
from .options import ImportOptions
from .unit import Unit

__version__ = '0.1.0'
