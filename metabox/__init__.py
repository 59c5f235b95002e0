"""
Metabox - metadata fields for CMS content items.

Public API:
    MetaManager     - registers, renders and saves field queues
    FieldRegistry   - named, ordered queues of field descriptors
    MetaStorage     - storage collaborator interface
    field_from_args - build a field descriptor from an argument dict
"""

from .fields import (
    CheckboxField,
    ImageField,
    InputField,
    MetaField,
    NumberField,
    RadioField,
    RichTextField,
    SelectField,
    TextField,
    field_from_args,
)
from .registry import FieldRegistry
from .services.meta_manager import MetaManager
from .services.render_service import RenderResult
from .services.save_service import SaveResult
from .storage import InMemoryMetaStorage, MetaStorage, SQLMetaStorage

__all__ = [
    "MetaManager",
    "FieldRegistry",
    "RenderResult",
    "SaveResult",
    "MetaStorage",
    "InMemoryMetaStorage",
    "SQLMetaStorage",
    "MetaField",
    "InputField",
    "TextField",
    "NumberField",
    "CheckboxField",
    "RadioField",
    "SelectField",
    "ImageField",
    "RichTextField",
    "field_from_args",
]
