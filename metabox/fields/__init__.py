"""
Field descriptors for Metabox.

Public API:
    MetaField        - base descriptor
    InputField, TextField, NumberField, CheckboxField,
    RadioField, SelectField, ImageField, RichTextField - kind variants
    BoundField       - descriptor paired with a content item id
    field_from_args  - build a descriptor from an argument dict
"""

from .base import (
    BoundField,
    CheckboxField,
    ChoiceField,
    ImageField,
    InputField,
    MetaField,
    NumberField,
    OptionsProvider,
    RadioField,
    RichTextField,
    SaveHook,
    SelectField,
    TextField,
)
from .factory import field_from_args

__all__ = [
    "MetaField",
    "InputField",
    "TextField",
    "NumberField",
    "CheckboxField",
    "ChoiceField",
    "RadioField",
    "SelectField",
    "ImageField",
    "RichTextField",
    "BoundField",
    "SaveHook",
    "OptionsProvider",
    "field_from_args",
]
