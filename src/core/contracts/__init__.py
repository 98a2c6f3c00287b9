"""
Contract Module

JSON Schema контракты сериализованных Index и Range.
"""

from .validators import (
    IndexContract,
    ModelContract,
    RangeContract,
    dump_index,
    dump_range,
    load_schema,
    validate_index,
    validate_range,
)

__all__ = [
    # Classes
    "ModelContract",
    "IndexContract",
    "RangeContract",
    # Functions
    "load_schema",
    "validate_index",
    "validate_range",
    "dump_index",
    "dump_range",
]
