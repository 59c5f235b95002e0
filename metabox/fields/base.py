"""
Field Descriptors

One frozen dataclass per input kind. Each variant carries exactly the extras
its rendering path needs:

    TextField       - short text, value is escaped
    NumberField     - numeric input with required step and optional precision
    InputField      - any other <input> type ("email", "url", "date", ...)
    CheckboxField   - boolean toggle, always stored as a bool
    RadioField      - one radio control per option
    SelectField     - <select> with one <option> per option
    ImageField      - attachment picker storing an attachment id
    RichTextField   - delegates to the rich-text editor widget
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from metabox.constants import DataType, InputKind, StorageType

SaveHook = Callable[[Any, Any], None]
OptionsProvider = Callable[[Any], Mapping[Any, str]]


@dataclass(frozen=True, kw_only=True)
class MetaField:
    """
    Base descriptor shared by all field kinds.

    Attributes:
        name:         Storage key and form control name.
        input_kind:   Rendering path; fixed by each subclass except InputField.
        label:        Display label.
        description:  Helper text rendered under the control.
        data_type:    Coercion applied to the submitted value.
        storage_type: Per-item meta or site-wide option.
        before_save:  Called with (item_id, coerced value) before the write.
        after_save:   Called with (item_id, coerced value) after the write.
    """

    name: str
    input_kind: str = ""
    label: str = ""
    description: str = ""
    data_type: DataType | str = DataType.STRING
    storage_type: StorageType = StorageType.META
    before_save: SaveHook | None = None
    after_save: SaveHook | None = None

    @property
    def editor_id(self) -> str:
        return self.name.replace("-", "_") + "_ed"


@dataclass(frozen=True, kw_only=True)
class InputField(MetaField):
    """A plain <input> whose type attribute is the input kind."""

    input_kind: str = field()
    fullwidth: bool = False


@dataclass(frozen=True, kw_only=True)
class TextField(InputField):
    input_kind: str = field(default=InputKind.TEXT.value, init=False)


@dataclass(frozen=True, kw_only=True)
class NumberField(InputField):
    """Numeric input; `precision` formats the displayed value."""

    input_kind: str = field(default=InputKind.NUMBER.value, init=False)
    step: str | int | float
    precision: int | None = None


@dataclass(frozen=True, kw_only=True)
class CheckboxField(MetaField):
    input_kind: str = field(default=InputKind.CHECKBOX.value, init=False)
    data_type: DataType | str = DataType.BOOLEAN


@dataclass(frozen=True, kw_only=True)
class ChoiceField(MetaField):
    """
    Base for fields choosing among options.

    `options_provider`, when set, is called with the content item id at
    render time and its mapping replaces the static `options`.
    """

    options: Mapping[Any, str] = field(default_factory=dict)
    options_provider: OptionsProvider | None = None

    def resolve_options(self, item_id: Any) -> list[tuple[Any, str]]:
        options = self.options_provider(item_id) if self.options_provider is not None else self.options
        return list(options.items())


@dataclass(frozen=True, kw_only=True)
class RadioField(ChoiceField):
    input_kind: str = field(default=InputKind.RADIO.value, init=False)


@dataclass(frozen=True, kw_only=True)
class SelectField(ChoiceField):
    input_kind: str = field(default=InputKind.SELECT.value, init=False)


@dataclass(frozen=True, kw_only=True)
class ImageField(MetaField):
    """Attachment picker. `image_size` overrides the configured size hint."""

    input_kind: str = field(default=InputKind.IMAGE.value, init=False)
    image_size: str | None = None


@dataclass(frozen=True, kw_only=True)
class RichTextField(MetaField):
    """Rich-text editor. `media_buttons` of None uses the configured default."""

    input_kind: str = field(default=InputKind.RICH_TEXT.value, init=False)
    media_buttons: bool | None = None


@dataclass(frozen=True)
class BoundField:
    """A descriptor paired with the content item it is rendered for."""

    field: MetaField
    item_id: Any

    @property
    def name(self) -> str:
        return self.field.name

    @property
    def input_kind(self) -> str:
        return self.field.input_kind

    @property
    def storage_type(self) -> StorageType:
        return self.field.storage_type
