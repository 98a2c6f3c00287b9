"""
Language-extension helpers для коллекций

Обобщённые операции над MutableMapping / MutableSequence / Iterable.
"""

from src.core.lang.collection_helpers import (
    NOT_FOUND,
    PreconditionViolation,
    add_or_update,
    add_or_update_with,
    append_all,
    find_index,
    get_or_insert,
    get_or_insert_with,
    index_of,
    merge_from,
    try_insert,
)

__all__ = [
    # Constants
    "NOT_FOUND",
    # Exceptions
    "PreconditionViolation",
    # Mapping helpers
    "add_or_update",
    "add_or_update_with",
    "get_or_insert",
    "get_or_insert_with",
    "merge_from",
    "try_insert",
    # Sequence helpers
    "append_all",
    "find_index",
    "index_of",
]
