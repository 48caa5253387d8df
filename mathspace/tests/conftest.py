import pytest

from mathspace import ChainRegistry, ModuleLoader, Namespace, create


class RecordingRegistry(ChainRegistry):
    """Chain registry remembering each proxy request and what the namespace
    held at that moment"""

    def __init__(self, namespace=None):
        super().__init__()
        self.namespace = namespace
        self.events = []

    def create_proxy(self, name, value):
        visible = self.namespace is not None and name in self.namespace
        self.events.append((name, value, visible))
        super().create_proxy(name, value)


@pytest.fixture
def ns():
    return Namespace(loader=ModuleLoader())


@pytest.fixture
def recorded():
    namespace = Namespace(loader=ModuleLoader())
    namespace.chaining = RecordingRegistry(namespace)
    return namespace


@pytest.fixture
def math():
    return create()


@pytest.fixture
def modfile(tmpdir):
    """Path to a module file exporting a few functions and values"""
    f = tmpdir.join('extension.py')
    f.write('\n'.join([
        'import os',
        '',
        'answer = 42',
        'greeting = "hello"',
        '_private = 1',
        'constants = {"tau": 6.28}',
        '',
        'def fibonacci(n):',
        '    a, b = 0, 1',
        '    for _ in range(n):',
        '        a, b = b, a + b',
        '    return a',
    ]))
    return str(f)
