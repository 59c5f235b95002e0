"""Build field descriptors from loosely-typed argument dicts."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from metabox.constants import InputKind, StorageType
from metabox.exceptions import InvalidFieldError
from metabox.fields.base import (
    CheckboxField,
    ImageField,
    InputField,
    MetaField,
    NumberField,
    RadioField,
    RichTextField,
    SelectField,
    TextField,
)

logger = logging.getLogger(__name__)

_COMMON_KEYS = ("label", "description", "data_type", "before_save", "after_save")

_KIND_KEYS: dict[str, tuple[str, ...]] = {
    InputKind.TEXT.value: ("fullwidth",),
    InputKind.NUMBER.value: ("fullwidth", "step", "precision"),
    InputKind.CHECKBOX.value: (),
    InputKind.RADIO.value: ("options", "options_provider"),
    InputKind.SELECT.value: ("options", "options_provider"),
    InputKind.IMAGE.value: ("image_size",),
    InputKind.RICH_TEXT.value: ("media_buttons",),
}

_KIND_CLASSES: dict[str, type[MetaField]] = {
    InputKind.TEXT.value: TextField,
    InputKind.NUMBER.value: NumberField,
    InputKind.CHECKBOX.value: CheckboxField,
    InputKind.RADIO.value: RadioField,
    InputKind.SELECT.value: SelectField,
    InputKind.IMAGE.value: ImageField,
    InputKind.RICH_TEXT.value: RichTextField,
}

# Accepted spellings of the same argument
_ALIASES = {"get_options": "options_provider", "input_type": "input_kind"}
_KIND_ALIASES = {"image": InputKind.IMAGE.value}


def field_from_args(args: Mapping[str, Any]) -> MetaField:
    """
    Build the descriptor variant matching ``args["input_type"]``.

    Accepts the dict form hosts use to declare fields, e.g.::

        {"name": "price", "input_type": "number", "step": "0.01", "precision": 2}

    Keys that do not apply to the chosen kind are ignored.

    Raises:
        InvalidFieldError: ``name`` or ``input_type`` is missing, ``storage_type``
            is not a known storage type, or a kind specific requirement
            (number ``step``) is not met.
    """
    normalized = {_ALIASES.get(key, key): value for key, value in args.items()}

    name = normalized.get("name")
    if not name:
        raise InvalidFieldError("Field is missing required key name", missing="name")
    input_kind = normalized.get("input_kind")
    if not input_kind:
        raise InvalidFieldError(f"Field '{name}' is missing required key input_type", missing="input_type")

    input_kind = str(input_kind.value if isinstance(input_kind, InputKind) else input_kind)
    input_kind = _KIND_ALIASES.get(input_kind, input_kind)
    kind_keys = _KIND_KEYS.get(input_kind, ("fullwidth",))

    kwargs: dict[str, Any] = {"name": name}
    for key in _COMMON_KEYS + kind_keys:
        if key in normalized and normalized[key] is not None:
            kwargs[key] = normalized[key]

    if "storage_type" in normalized:
        try:
            kwargs["storage_type"] = StorageType(normalized["storage_type"])
        except ValueError:
            raise InvalidFieldError(
                f"Field '{name}' has unknown storage_type {normalized['storage_type']!r}", missing="storage_type"
            ) from None

    ignored = set(normalized) - set(kwargs) - {"input_kind", "storage_type"}
    if ignored:
        logger.debug("Ignoring arguments %s for %s field '%s'", sorted(ignored), input_kind, name)

    field_class = _KIND_CLASSES.get(input_kind)
    if field_class is None:
        return InputField(input_kind=input_kind, **kwargs)

    if field_class is NumberField and "step" not in kwargs:
        raise InvalidFieldError(f"Number field '{name}' is missing required key step", missing="step")

    return field_class(**kwargs)
