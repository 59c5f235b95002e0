"""
Field rendering service.

Walks a queue in registration order and renders each field as form markup
bound to a content item's current values. A field that cannot be rendered is
logged and skipped; the rest of the queue still renders.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from markupsafe import Markup

from metabox.coercion import is_checked, stringify, to_display_string
from metabox.config import settings
from metabox.constants import InputKind, StorageType
from metabox.exceptions import FieldRenderError, MetaBoxError
from metabox.fields import BoundField, ChoiceField, MetaField
from metabox.registry import FieldRegistry
from metabox.storage import MetaStorage
from metabox.templating import render_template

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """Markup for a queue plus the names of fields that were skipped."""

    html: Markup = field(default_factory=Markup)
    rendered: list[str] = field(default_factory=list)
    skipped: list[str | None] = field(default_factory=list)

    def __html__(self) -> str:
        return str(self.html)

    def __str__(self) -> str:
        return str(self.html)


class FieldRenderer:
    """Renders registered queues against a storage collaborator."""

    def __init__(
        self,
        registry: FieldRegistry,
        storage: MetaStorage,
        css_prefix: str | None = None,
        image_size: str | None = None,
        rich_text_media_buttons: bool | None = None,
    ) -> None:
        self.registry = registry
        self.storage = storage
        self.css_prefix = css_prefix or settings.css_prefix
        self.image_size = image_size or settings.image_size
        self.rich_text_media_buttons = (
            settings.rich_text_media_buttons if rich_text_media_buttons is None else rich_text_media_buttons
        )
        self._renderers: dict[str, Callable[[BoundField], Markup]] = {
            InputKind.CHECKBOX.value: self._render_checkbox,
            InputKind.RADIO.value: self._render_radio,
            InputKind.SELECT.value: self._render_select,
            InputKind.IMAGE.value: self._render_image,
            InputKind.RICH_TEXT.value: self._render_rich_text,
        }

    # ── Queue ─────────────────────────────────────────────────────────────────

    def render_queue(self, item_id: Any, queue_name: str = "") -> RenderResult:
        """
        Render every field of a queue for one content item.

        An unknown queue or a missing item id renders nothing.
        """
        result = RenderResult()
        if not self.registry.queue_exists(queue_name) or item_id is None or item_id == "":
            return result

        parts: list[Markup] = []
        for meta_field in self.registry.get_queue(queue_name):
            try:
                parts.append(self.render_field(meta_field, item_id))
            except MetaBoxError as exc:
                logger.error("FieldRenderer.render_queue skipped field in %s: %s", queue_name, exc.message)
                result.skipped.append(getattr(meta_field, "name", None) or None)
                continue
            result.rendered.append(meta_field.name)

        result.html = Markup("\n").join(parts)
        return result

    # ── Single field ──────────────────────────────────────────────────────────

    def render_field(self, meta_field: MetaField, item_id: Any) -> Markup:
        """
        Render one field for one content item.

        Raises:
            FieldRenderError: the field lacks a name or an input kind, or no
                item id was given.
        """
        bound = BoundField(field=meta_field, item_id=item_id)
        for key in ("item_id", "input_kind", "name"):
            if getattr(bound, key, None) in (None, ""):
                raise FieldRenderError(getattr(meta_field, "name", None), f"missing required key {key}")

        renderer = self._renderers.get(bound.input_kind, self._render_input)
        return renderer(bound)

    def get_value(self, bound: BoundField) -> Any:
        """Read a field's current value from option or per-item storage."""
        if bound.storage_type == StorageType.OPTION:
            return self.storage.get_option(bound.name)
        return self.storage.get_item_meta(bound.item_id, bound.name)

    # ── Kinds ─────────────────────────────────────────────────────────────────

    def _context(self, bound: BoundField, **extra: Any) -> dict[str, Any]:
        meta_field = bound.field
        context = {
            "prefix": self.css_prefix,
            "name": meta_field.name,
            "label": meta_field.label,
            "description": meta_field.description,
            "input_kind": meta_field.input_kind,
            "step": None,
            "checked": False,
            "fullwidth": False,
            "value": "",
        }
        context.update(extra)
        return context

    def _render_input(self, bound: BoundField) -> Markup:
        meta_field = bound.field
        value = self.get_value(bound)
        return render_template(
            "fields/input.html",
            **self._context(
                bound,
                step=getattr(meta_field, "step", None),
                fullwidth=getattr(meta_field, "fullwidth", False) is True,
                value=to_display_string(value, meta_field),
            ),
        )

    def _render_checkbox(self, bound: BoundField) -> Markup:
        value = self.get_value(bound)
        return render_template(
            "fields/checkbox.html",
            **self._context(bound, checked=is_checked(value), value=to_display_string(value, bound.field)),
        )

    def _options(self, bound: BoundField) -> list[dict[str, Any]]:
        meta_field = bound.field
        if not isinstance(meta_field, ChoiceField):
            raise FieldRenderError(meta_field.name, f"{meta_field.input_kind} field has no options")
        current = stringify(self.get_value(bound))
        return [
            {"key": key, "label": label, "selected": stringify(key) == current}
            for key, label in meta_field.resolve_options(bound.item_id)
        ]

    def _render_radio(self, bound: BoundField) -> Markup:
        return render_template("fields/radio.html", **self._context(bound, options=self._options(bound)))

    def _render_select(self, bound: BoundField) -> Markup:
        return render_template("fields/select.html", **self._context(bound, options=self._options(bound)))

    def _render_image(self, bound: BoundField) -> Markup:
        attachment_id = stringify(self.get_value(bound))
        size = getattr(bound.field, "image_size", None) or self.image_size
        image_src = self.storage.attachment_image_src(attachment_id, size) if attachment_id else None
        return render_template(
            "fields/image.html",
            **self._context(bound, attachment_id=attachment_id, image_src=image_src or ""),
        )

    def _render_rich_text(self, bound: BoundField) -> Markup:
        meta_field = bound.field
        media_buttons = getattr(meta_field, "media_buttons", None)
        editor = self.storage.render_rich_text_editor(
            self.get_value(bound),
            meta_field.editor_id,
            textarea_name=meta_field.name,
            media_buttons=self.rich_text_media_buttons if media_buttons is None else media_buttons,
        )
        return render_template("fields/rich_text.html", **self._context(bound, editor=Markup(editor)))
