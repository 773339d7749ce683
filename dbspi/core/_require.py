'''
Validate that SPI arguments are present and non-empty.

Shared precondition helpers used at SPI entry points to reject
absent references and empty strings before any work is done.
'''

from __future__ import annotations

from typing import TypeVar

from dbspi.core.errors import InvalidArgument

__all__ = ['require_non_empty', 'require_non_null']

T = TypeVar('T')


def require_non_empty(value: str | None, message: str) -> str:

    '''
    Return value if it is a non-empty string.

    Args:
        value (str | None): String to check for emptiness.
        message (str): Detail message for the raised error.

    Returns:
        str: value, unchanged.

    Raises:
        InvalidArgument: If value is empty or None.
    '''

    if not value:
        raise InvalidArgument(message)

    return value


def require_non_null(value: T | None, message: str) -> T:

    '''
    Return value if it is not None.

    Args:
        value (T | None): Reference to check for absence.
        message (str): Detail message for the raised error.

    Returns:
        T: value, the same object that was passed in.

    Raises:
        InvalidArgument: If value is None.
    '''

    if value is None:
        raise InvalidArgument(message)

    return value
