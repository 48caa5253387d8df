import pytest

from mathspace import ChainRegistry, Selector


@pytest.fixture
def registry():
    r = ChainRegistry()
    r.create_proxy('add', lambda a, b: a + b)
    r.create_proxy('neg', lambda a: -a)
    r.create_proxy('ten', 10)
    return r


def test_function_proxy(registry):
    assert registry.selector(2).add(3).neg().done() == -5


def test_value_proxy(registry):
    s = registry.selector('ignored').ten
    assert isinstance(s, Selector)
    assert s.add(1).done() == 11


def test_valueof(registry):
    assert registry.selector(4).valueof() == 4


def test_unknown_name(registry):
    with pytest.raises(AttributeError):
        registry.selector(1).nope


def test_reserved_names_refused(registry, caplog):
    registry.create_proxy('done', lambda x: 'hijacked')
    assert 'shadow' in caplog.text
    assert 'done' not in registry
    assert registry.selector(1).done() == 1


def test_register_alias(registry):
    registry.register('double', lambda x: 2 * x)
    assert registry.selector(3).double().done() == 6


def test_re_register_replaces(registry):
    registry.create_proxy('ten', 11)
    assert registry.selector(None).ten.done() == 11


def test_nested_selector_unwrapped(registry):
    inner = registry.selector(5)
    assert registry.selector(inner).done() == 5


def test_repr_and_str(registry):
    s = registry.selector(3)
    assert repr(s) == 'Selector(3)'
    assert str(s) == '3'


def test_dir_lists_proxies(registry):
    assert 'add' in dir(registry.selector(1))


def test_namespace_chain(math):
    math.import_({'square': lambda x: x * x})
    assert math.chain(3).square().add(1).done() == 10


@pytest.mark.parametrize('name', ['reserved', '__init__', '__repr__', 'value'])
def test_selector_attribute_names_refused(registry, caplog, name):
    registry.create_proxy(name, 5)
    assert name not in registry
    assert 'shadow' in caplog.text


def test_non_string_names_refused(registry, caplog):
    registry.create_proxy(1, 5)
    assert 1 not in registry
    assert 'not an attribute name' in caplog.text


def test_namespace_entry_kept_when_proxy_refused(math, caplog):
    math.import_({'done': 5})
    assert math['done'] == 5
    assert math.chain(3).done() == 3
    assert 'shadow' in caplog.text
