"""
Storage Collaborator Base

MetaStorage: abstract interface the renderer and saver use to read and
write values, resolve attachment URLs, sanitize submissions and render the
rich-text editor widget.

Concrete stores only implement the five storage methods; sanitizing and the
editor widget have default implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from markupsafe import Markup

from metabox.templating import render_template
from metabox.utils.sanitize import ContentFilter, filter_rich_text, sanitize_plain_text


class MetaStorage(ABC):
    """
    Abstract storage collaborator.

    Args:
        content_filters: Transforms applied, in order, to rich-text values
                         after sanitizing (e.g. paragraph wrapping).
    """

    def __init__(self, content_filters: Iterable[ContentFilter] = ()) -> None:
        self.content_filters: list[ContentFilter] = list(content_filters)

    # ── Storage ───────────────────────────────────────────────────────────────

    @abstractmethod
    def get_item_meta(self, item_id: Any, key: str) -> Any:
        """Return the stored value of `key` for a content item, or None."""

    @abstractmethod
    def update_item_meta(self, item_id: Any, key: str, value: Any) -> None:
        """Store `value` under `key` for a content item."""

    @abstractmethod
    def get_option(self, key: str) -> Any:
        """Return a site-wide option value, or None."""

    @abstractmethod
    def update_option(self, key: str, value: Any) -> None:
        """Store a site-wide option value."""

    @abstractmethod
    def attachment_image_src(self, attachment_id: Any, size: str) -> str | None:
        """Return the display URL of an image attachment, or None."""

    # ── Sanitizing ────────────────────────────────────────────────────────────

    def sanitize_plain_text(self, raw: Any) -> str:
        return sanitize_plain_text(None if raw is None else str(raw))

    def filter_rich_text(self, raw: Any) -> str:
        return filter_rich_text(None if raw is None else str(raw), self.content_filters)

    def add_content_filter(self, content_filter: ContentFilter) -> None:
        """Append a transform to the rich-text pipeline."""
        self.content_filters.append(content_filter)

    # ── Widgets ───────────────────────────────────────────────────────────────

    def render_rich_text_editor(
        self,
        content: Any,
        editor_id: str,
        *,
        textarea_name: str,
        media_buttons: bool = True,
    ) -> Markup:
        """
        Render the rich-text editor bound to `textarea_name`.

        Override to plug in a different editor widget.
        """
        return render_template(
            "fields/rich_text_editor.html",
            content="" if content is None else str(content),
            editor_id=editor_id,
            textarea_name=textarea_name,
            media_buttons=media_buttons,
        )
