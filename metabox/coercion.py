"""
Value Coercion

Converts raw submitted form values into typed values for storage, and
stored values into the strings placed in form controls.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from markupsafe import Markup, escape

from metabox.constants import (
    CHECKBOX_VALUE,
    DEFAULT_DATA_TYPE,
    FALSY_SUBMISSIONS,
    DataType,
    InputKind,
)
from metabox.exceptions import UnknownDataTypeError

if TYPE_CHECKING:
    from metabox.fields import MetaField
    from metabox.storage.base import MetaStorage

logger = logging.getLogger(__name__)

_INT_PREFIX_RE = re.compile(r"\s*([+-]?)(\d+)")
_FLOAT_PREFIX_RE = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")

# Parsed integers saturate at the signed 64-bit range
INT_MAX = 2**63 - 1
INT_MIN = -(2**63)


def parse_int(raw: Any) -> int:
    """Parse the leading integer of a value; 0 when there is none ("42abc" -> 42)."""
    if raw is None:
        return 0
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, (int, float)):
        return int(raw)
    match = _INT_PREFIX_RE.match(str(raw))
    if not match:
        return 0
    sign, digits = match.group(1), match.group(2).lstrip("0")
    if len(digits) > len(str(INT_MAX)):
        return INT_MIN if sign == "-" else INT_MAX
    return min(max(int(sign + (digits or "0")), INT_MIN), INT_MAX)


def parse_float(raw: Any) -> float:
    """Parse the leading float of a value; 0.0 when there is none ("3.5kg" -> 3.5)."""
    if raw is None:
        return 0.0
    if isinstance(raw, (bool, int, float)):
        return float(raw)
    match = _FLOAT_PREFIX_RE.match(str(raw))
    return float(match.group(1)) if match else 0.0


def is_truthy(raw: Any) -> bool:
    """Form truthiness: empty string and "0" are off, anything else is on."""
    if raw is None:
        return False
    if isinstance(raw, str):
        return raw not in FALSY_SUBMISSIONS
    return bool(raw)


def normalize_data_type(data_type: DataType | str | None, field_name: str | None = None) -> DataType:
    """
    Resolve a declared data type.

    An empty declaration means string.

    Raises:
        UnknownDataTypeError: the declared type is not supported.
    """
    if data_type is None or data_type == "":
        return DEFAULT_DATA_TYPE
    try:
        return DataType(data_type)
    except ValueError:
        raise UnknownDataTypeError(data_type, field_name) from None


def coerce(
    submission: Mapping[str, Any],
    name: str,
    data_type: DataType | str | None,
    sanitizer: MetaStorage,
) -> Any:
    """
    Coerce the submitted value for `name` to `data_type`.

    Args:
        submission: Submitted form values
        name: Field name to read
        data_type: Declared data type of the field
        sanitizer: Collaborator providing plain-text and rich-text filtering

    Returns:
        The typed value to store

    Raises:
        UnknownDataTypeError: the declared type is not supported
    """
    resolved = normalize_data_type(data_type, name)
    raw = submission.get(name)

    if resolved is DataType.INT:
        return parse_int(raw)
    if resolved is DataType.FLOAT:
        return parse_float(raw)
    if resolved is DataType.BOOLEAN:
        # unchecked checkboxes send no key at all
        return name in submission and is_truthy(raw)
    if resolved is DataType.RICH_TEXT:
        return sanitizer.filter_rich_text(raw)
    return sanitizer.sanitize_plain_text(raw)


def stringify(value: Any) -> str:
    """Render a stored value as form text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return CHECKBOX_VALUE if value else ""
    return str(value)


def is_checked(stored: Any) -> bool:
    """A checkbox is checked when its stored value reads "true"."""
    return stringify(stored) == CHECKBOX_VALUE


def format_number(value: Any, precision: int) -> str:
    """Format to `precision` decimals with thousands separators."""
    return f"{parse_float(value):,.{int(precision)}f}"


def to_display_string(stored: Any, field: MetaField) -> str | Markup:
    """
    Convert a stored value into the value attribute of its form control.

    - number with precision: formatted to that many decimals
    - checkbox: always "true"; use `is_checked` for the checked state
    - text: HTML-escaped
    - anything else: unchanged
    """
    kind = field.input_kind
    if kind == InputKind.NUMBER.value:
        precision = getattr(field, "precision", None)
        if precision is not None:
            return format_number(stored, precision)
        return stringify(stored)
    if kind == InputKind.CHECKBOX.value:
        return CHECKBOX_VALUE
    if kind == InputKind.TEXT.value:
        return escape(stringify(stored))
    return stringify(stored)
