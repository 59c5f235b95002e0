"""SQLAlchemy-backed storage collaborator."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from metabox.config import settings
from metabox.constants import CHECKBOX_VALUE
from metabox.models import ItemMeta, SiteOption
from metabox.storage.base import MetaStorage
from metabox.utils.sanitize import ContentFilter

logger = logging.getLogger(__name__)


def serialize_value(value: Any) -> str:
    """Values are stored as text; booleans as "true" or ""."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return CHECKBOX_VALUE if value else ""
    return str(value)


class SQLMetaStorage(MetaStorage):
    """
    Store backed by the item_meta and site_options tables.

    Each call opens its own session from `session_factory` and commits
    writes immediately; the last write wins.
    """

    def __init__(
        self,
        session_factory: Callable[[], Session],
        attachment_url_template: str | None = None,
        content_filters: Iterable[ContentFilter] = (),
    ) -> None:
        super().__init__(content_filters)
        self.session_factory = session_factory
        self.attachment_url_template = attachment_url_template or settings.attachment_url_template

    def get_item_meta(self, item_id: Any, key: str) -> str | None:
        with self.session_factory() as db:
            result = db.execute(
                select(ItemMeta.meta_value).where(ItemMeta.item_id == str(item_id), ItemMeta.meta_key == key)
            )
            return result.scalar_one_or_none()

    def update_item_meta(self, item_id: Any, key: str, value: Any) -> None:
        with self.session_factory() as db:
            row = db.execute(
                select(ItemMeta).where(ItemMeta.item_id == str(item_id), ItemMeta.meta_key == key)
            ).scalar_one_or_none()
            if row is None:
                db.add(ItemMeta(item_id=str(item_id), meta_key=key, meta_value=serialize_value(value)))
            else:
                row.meta_value = serialize_value(value)
            db.commit()
        logger.debug("Stored meta %s for item %s", key, item_id)

    def get_option(self, key: str) -> str | None:
        with self.session_factory() as db:
            result = db.execute(select(SiteOption.option_value).where(SiteOption.option_name == key))
            return result.scalar_one_or_none()

    def update_option(self, key: str, value: Any) -> None:
        with self.session_factory() as db:
            row = db.execute(select(SiteOption).where(SiteOption.option_name == key)).scalar_one_or_none()
            if row is None:
                db.add(SiteOption(option_name=key, option_value=serialize_value(value)))
            else:
                row.option_value = serialize_value(value)
            db.commit()
        logger.debug("Stored option %s", key)

    def attachment_image_src(self, attachment_id: Any, size: str) -> str | None:
        if attachment_id in (None, ""):
            return None
        return self.attachment_url_template.format(attachment_id=attachment_id, size=size)
