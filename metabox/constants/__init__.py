"""Constants package for Metabox."""

from .fields import (
    CHECKBOX_VALUE,
    DEFAULT_DATA_TYPE,
    FALSY_SUBMISSIONS,
    DataType,
    InputKind,
    StorageType,
)

__all__ = [
    "InputKind",
    "DataType",
    "StorageType",
    "DEFAULT_DATA_TYPE",
    "FALSY_SUBMISSIONS",
    "CHECKBOX_VALUE",
]
