'''
Argument validation for the dbspi service-provider interface.

Re-exports the precondition helpers and the error they raise.
'''

from __future__ import annotations

from dbspi.core._require import require_non_empty, require_non_null
from dbspi.core.errors import InvalidArgument

__all__ = ['InvalidArgument', 'require_non_empty', 'require_non_null']
