"""In-memory storage collaborator."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from metabox.config import settings
from metabox.storage.base import MetaStorage
from metabox.utils.sanitize import ContentFilter


class InMemoryMetaStorage(MetaStorage):
    """
    Dict-backed store.

    Attachment URLs come from `attachments` when the id is known there,
    otherwise from `attachment_url_template`.
    """

    def __init__(
        self,
        attachments: Mapping[Any, str] | None = None,
        attachment_url_template: str | None = None,
        content_filters: Iterable[ContentFilter] = (),
    ) -> None:
        super().__init__(content_filters)
        self.meta: dict[tuple[str, str], Any] = {}
        self.options: dict[str, Any] = {}
        self.attachments: dict[str, str] = {str(k): v for k, v in (attachments or {}).items()}
        self.attachment_url_template = attachment_url_template or settings.attachment_url_template

    def get_item_meta(self, item_id: Any, key: str) -> Any:
        return self.meta.get((str(item_id), key))

    def update_item_meta(self, item_id: Any, key: str, value: Any) -> None:
        self.meta[(str(item_id), key)] = value

    def get_option(self, key: str) -> Any:
        return self.options.get(key)

    def update_option(self, key: str, value: Any) -> None:
        self.options[key] = value

    def attachment_image_src(self, attachment_id: Any, size: str) -> str | None:
        if attachment_id in (None, ""):
            return None
        key = str(attachment_id)
        if key in self.attachments:
            return self.attachments[key]
        return self.attachment_url_template.format(attachment_id=key, size=size)
