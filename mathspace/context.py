"""
Namespace in which a wrapped function is currently executing.
"""

import threading
from contextlib import contextmanager

__all__ = 'invocation', 'current_namespace'

_invocation = threading.local()


@contextmanager
def invocation(namespace):
    """
    Run the enclosed block with ``namespace`` as the invocation context.

    Contexts nest; the previous namespace is restored on exit, also when the
    block raises.

    >>> ns = object()
    >>> with invocation(ns):
    ...     current_namespace() is ns
    True
    >>> current_namespace() is None
    True
    """
    old = current_namespace()
    _invocation.namespace = namespace
    try:
        yield namespace
    finally:
        _invocation.namespace = old


def current_namespace():
    """Return the namespace of the innermost running wrapped call"""
    return getattr(_invocation, 'namespace', None)
