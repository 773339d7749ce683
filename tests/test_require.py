'''
Tests for dbspi.core precondition helpers.
'''

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from dbspi.core import InvalidArgument, require_non_empty, require_non_null

_DRIVER_MSG = 'driver must not be empty'
_PORT_MSG = 'port must not be null'


def test_require_non_empty_returns_value() -> None:
    assert require_non_empty('jdbc', _DRIVER_MSG) == 'jdbc'


def test_require_non_empty_returns_same_object() -> None:
    value = 'postgresql://localhost:5432/app'
    assert require_non_empty(value, _DRIVER_MSG) is value


def test_require_non_empty_accepts_whitespace() -> None:
    assert require_non_empty(' ', _DRIVER_MSG) == ' '


def test_require_non_empty_rejects_empty() -> None:
    with pytest.raises(InvalidArgument, match=_DRIVER_MSG) as exc_info:
        require_non_empty('', _DRIVER_MSG)
    assert exc_info.value.message == _DRIVER_MSG
    assert str(exc_info.value) == _DRIVER_MSG


def test_require_non_empty_rejects_none() -> None:
    with pytest.raises(InvalidArgument, match=_DRIVER_MSG):
        require_non_empty(None, _DRIVER_MSG)


@pytest.mark.parametrize('value', ['a', 'h2', 'mysql', '0', 'ünïcødé'])
def test_require_non_empty_is_idempotent(value: str) -> None:
    for _ in range(3):
        assert require_non_empty(value, _DRIVER_MSG) == value


def test_require_non_null_returns_value() -> None:
    assert require_non_null(42, _PORT_MSG) == 42


def test_require_non_null_preserves_identity() -> None:
    options = {'host': 'localhost', 'port': 5432}
    assert require_non_null(options, _PORT_MSG) is options


@pytest.mark.parametrize('value', [0, '', False, [], {}, 0.0])
def test_require_non_null_accepts_falsy_values(value: object) -> None:
    assert require_non_null(value, _PORT_MSG) is value


def test_require_non_null_rejects_none() -> None:
    with pytest.raises(InvalidArgument, match=_PORT_MSG) as exc_info:
        require_non_null(None, _PORT_MSG)
    assert exc_info.value.message == _PORT_MSG


def test_message_is_carried_verbatim() -> None:
    msg = 'option [ssl] must not be null (see docs)'
    with pytest.raises(InvalidArgument) as exc_info:
        require_non_null(None, msg)
    assert exc_info.value.message == msg


def test_concurrent_calls_return_inputs() -> None:
    values = [f'db-{i}' for i in range(200)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        texts = list(pool.map(lambda v: require_non_empty(v, _DRIVER_MSG), values))
        refs = list(pool.map(lambda v: require_non_null(v, _PORT_MSG), values))

    assert texts == values
    assert all(a is b for a, b in zip(refs, values))
