import copy
import pickle

import pytest

from genobj import FalseType, false, is_false


def test_false_is_singleton_and_falsy():
    assert FalseType() is false
    assert not false
    assert bool(false) is False
    assert is_false(false)
    assert not is_false(None)


def test_chained_access_returns_itself():
    assert false.anything is false
    assert false.anything().anything_else is false
    assert false('x', y=1) is false
    assert false['key'] is false
    assert false.set_color('red').get_color() is false


def test_container_protocol_is_empty():
    assert len(false) == 0
    assert list(false) == []
    assert 'x' not in false


def test_comparison_and_hash():
    assert false == false
    assert false != False  # noqa: E712
    assert false != 0
    assert false != ''
    assert {false: 1}[false] == 1


def test_repr_and_str():
    assert repr(false) == 'false'
    assert str(false) == ''
    assert f'[{false}]' == '[]'


def test_immutable():
    with pytest.raises(AttributeError):
        false.color = 'red'

    with pytest.raises(AttributeError):
        del false.color


def test_underscore_lookups_are_not_intercepted():
    with pytest.raises(AttributeError):
        _ = false.__wrapped__
    with pytest.raises(AttributeError):
        _ = false._private
    assert getattr(false, '__missing_protocol__', None) is None


def test_copy_and_pickle_keep_identity():
    assert copy.copy(false) is false
    assert copy.deepcopy(false) is false
    assert copy.deepcopy([false])[0] is false
    assert pickle.loads(pickle.dumps(false)) is false


def test_ordering_comparisons_do_not_raise():
    assert not false < 1
    assert not false <= 1
    assert not false > 1
    assert not false >= 1
    assert not 1 < false
    assert not 'a' >= false
    assert not false < false
