"""
Field Constants for Metabox

Input kinds, data types and storage types understood by the field
registry, renderer and saver.
"""

from enum import Enum


class InputKind(str, Enum):
    """Input kinds with a dedicated rendering path."""

    TEXT = "text"
    NUMBER = "number"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    SELECT = "select"
    IMAGE = "img"
    RICH_TEXT = "rich_text"


class DataType(str, Enum):
    """Types supported by value coercion."""

    STRING = "string"
    RICH_TEXT = "rich_text"
    INT = "int"
    FLOAT = "float"
    BOOLEAN = "bool"


class StorageType(str, Enum):
    """Where a field's value lives."""

    META = "meta"  # per content item
    OPTION = "option"  # site-wide


DEFAULT_DATA_TYPE = DataType.STRING

# Values a submitted string can hold and still count as "off"
FALSY_SUBMISSIONS = frozenset({"", "0"})

# Form value of every checkbox control
CHECKBOX_VALUE = "true"
