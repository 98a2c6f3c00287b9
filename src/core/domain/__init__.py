"""
Domain value objects.

Contains immutable position descriptors: Index and Range.
"""

from src.core.domain.index import Index
from src.core.domain.range import Range, take

__all__ = [
    "Index",
    "Range",
    "take",
]
