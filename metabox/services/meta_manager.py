"""
MetaManager

Owns a field registry, a renderer and a saver bound to one storage
collaborator. Build one in the application's composition root and share it;
nothing here is a process-wide global.

Typical use:

    manager = MetaManager(storage)
    manager.register_meta({"name": "subtitle", "input_type": "text", "label": "Subtitle"}, "post_details")
    html = manager.render_queue(post_id, "post_details").html
    manager.save_queue(post_id, "post_details", form_data)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from metabox.config import Settings, settings as default_settings
from metabox.exceptions import InvalidFieldError
from metabox.fields import MetaField, field_from_args
from metabox.registry import FieldRegistry
from metabox.services.render_service import FieldRenderer, RenderResult
from metabox.services.save_service import QueueSaver, SaveResult
from metabox.storage import MetaStorage

logger = logging.getLogger(__name__)

FieldDefinition = MetaField | Mapping[str, Any]


class MetaManager:
    """Registers, renders and saves metadata field queues."""

    def __init__(
        self,
        storage: MetaStorage,
        registry: FieldRegistry | None = None,
        css_prefix: str | None = None,
        image_size: str | None = None,
        rich_text_media_buttons: bool | None = None,
    ) -> None:
        self.storage = storage
        self.registry = registry if registry is not None else FieldRegistry()
        self.renderer = FieldRenderer(
            self.registry,
            storage,
            css_prefix=css_prefix,
            image_size=image_size,
            rich_text_media_buttons=rich_text_media_buttons,
        )
        self.saver = QueueSaver(self.registry, storage)

    @classmethod
    def from_settings(cls, storage: MetaStorage, settings: Settings | None = None) -> MetaManager:
        settings = settings or default_settings
        return cls(
            storage,
            css_prefix=settings.css_prefix,
            image_size=settings.image_size,
            rich_text_media_buttons=settings.rich_text_media_buttons,
        )

    # ── Registration ──────────────────────────────────────────────────────────

    def register_meta(self, definition: FieldDefinition, queue_name: str = "") -> bool:
        """Register a per-item field. Invalid fields are logged and rejected."""
        meta_field = self._build(definition, queue_name)
        return meta_field is not None and self.registry.register(meta_field, queue_name)

    def register_option(self, definition: FieldDefinition, queue_name: str = "") -> bool:
        """Register a site-wide option field. Invalid fields are logged and rejected."""
        meta_field = self._build(definition, queue_name)
        return meta_field is not None and self.registry.register_option(meta_field, queue_name)

    def _build(self, definition: FieldDefinition, queue_name: str) -> MetaField | None:
        if isinstance(definition, MetaField):
            return definition
        if not isinstance(definition, Mapping):
            logger.warning(
                'Attempted to register meta to queue "%s" with missing data. args: %r', queue_name, definition
            )
            return None
        try:
            return field_from_args(definition)
        except InvalidFieldError as exc:
            logger.warning(
                'Attempted to register meta to queue "%s" with missing data (%s). args: %r',
                queue_name,
                exc.message,
                dict(definition),
            )
            return None

    def queue_exists(self, queue_name: str) -> bool:
        return self.registry.queue_exists(queue_name)

    # ── Render / save ─────────────────────────────────────────────────────────

    def render_queue(self, item_id: Any, queue_name: str = "") -> RenderResult:
        return self.renderer.render_queue(item_id, queue_name)

    def save_queue(self, item_id: Any, queue_name: str, submission: Mapping[str, Any]) -> SaveResult:
        return self.saver.save_queue(item_id, queue_name, submission)
