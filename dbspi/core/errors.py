'''
Exception raised when a caller-supplied argument violates a precondition.
'''

from __future__ import annotations

__all__ = ['InvalidArgument']


class InvalidArgument(ValueError):

    '''
    Raised when an argument is empty or absent where a value is required.

    Args:
        message (str): Caller-supplied description of the violated precondition
    '''

    def __init__(self, message: str) -> None:

        '''
        Store the error message.

        Args:
            message (str): Caller-supplied description of the violated precondition
        '''

        self.message = message
        super().__init__(message)
