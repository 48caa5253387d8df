import numpy as np
import pytest

from mathspace import (ArgumentsError, ImportOptions, Matrix, Unit,
                       current_namespace, invocation, valueof)


def test_unit():
    u = Unit(5, 'cm')
    assert u.valueof() == u.to_number() == 5
    assert repr(u) == "Unit(5, 'cm')"
    assert str(u) == '5 cm'
    assert u == Unit(5, 'cm')
    assert u != Unit(5, 'm')
    assert hash(u) == hash(Unit(5, 'cm'))


def test_unit_requires_name():
    with pytest.raises(ValueError):
        Unit(1, '')


def test_matrix():
    m = Matrix(np.arange(6).reshape(2, 3))
    assert m.size() == (2, 3)
    assert m.valueof() == [[0, 1, 2], [3, 4, 5]]
    assert Matrix(m) == m
    assert m != Matrix([0, 1, 2])
    assert repr(Matrix([1, 2])) == 'Matrix([1, 2])'


def test_valueof():
    assert valueof(Matrix([1, 2])) == [1, 2]
    assert valueof(Unit(2, 'm')) == 2
    assert valueof(3) == 3
    assert valueof(Matrix) is Matrix

    class Wrapped:
        def valueof(self):
            return 'raw'

    assert valueof(Wrapped()) == 'raw'


def test_invocation_context_nests():
    a, b = object(), object()
    with invocation(a):
        with invocation(b):
            assert current_namespace() is b
        assert current_namespace() is a
    assert current_namespace() is None


def test_options_defaults():
    opts = ImportOptions()
    assert opts.override is False
    assert opts.wrap is True
    assert dict(opts.items()) == {'override': False, 'wrap': True}


def test_options_merge():
    opts = ImportOptions(wrap=False, extra=1)
    assert opts.wrap is False
    assert opts.override is False
    assert opts.extra == 1
    assert 'extra' in opts
    assert opts.get('missing', 'x') == 'x'


def test_options_read_only():
    opts = ImportOptions()
    with pytest.raises(AttributeError):
        opts.override = True
    with pytest.raises(AttributeError):
        opts.missing


def test_options_coerce():
    opts = ImportOptions(override=True)
    assert ImportOptions.coerce(opts) is opts
    assert ImportOptions.coerce({'override': True}) == opts
    assert ImportOptions.coerce(None) == ImportOptions()
    assert ImportOptions.coerce('nonsense') == ImportOptions()


def test_arguments_error_messages():
    assert 'expected' in str(ArgumentsError('f', 0, 1, 2))
    assert '(0 provided, 1 expected)' in str(ArgumentsError('f', 0, 1, 1))
    assert '(0 provided, 1 or more expected)' in str(ArgumentsError('f', 0, 1))


def test_options_from_mapping_with_any_keys():
    opts = ImportOptions({'self': True, 1: 'x', 'override': True})
    assert opts['self'] is True
    assert opts[1] == 'x'
    assert opts.override is True
    assert opts.wrap is True
    assert '1=' in repr(opts)
