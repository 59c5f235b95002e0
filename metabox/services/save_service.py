"""
Field saving service.

Walks a queue in registration order, coerces each submitted value, runs the
field's hooks and writes the value through the storage collaborator:

    coerce -> before_save(item_id, value) -> write -> after_save(item_id, value)

Fields are written independently; nothing is rolled back. A field whose
data type cannot be coerced is logged and skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from metabox.coercion import coerce
from metabox.constants import StorageType
from metabox.exceptions import MetaBoxError, MissingItemIdError, UnknownDataTypeError, UnknownQueueError
from metabox.fields import MetaField
from metabox.registry import FieldRegistry
from metabox.storage import MetaStorage

logger = logging.getLogger(__name__)


@dataclass
class SaveResult:
    """Outcome of saving a queue."""

    item_id: Any
    queue: str
    saved: dict[str, Any] = field(default_factory=dict)
    skipped: dict[str, str] = field(default_factory=dict)
    error: MetaBoxError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class QueueSaver:
    """Persists submitted values for registered queues."""

    def __init__(self, registry: FieldRegistry, storage: MetaStorage) -> None:
        self.registry = registry
        self.storage = storage

    def save_queue(self, item_id: Any, queue_name: str, submission: Mapping[str, Any]) -> SaveResult:
        """
        Save every field of a queue from a form submission.

        An unknown queue or missing item id is logged and nothing is written;
        the returned result carries the error.

        Args:
            item_id: Content item whose metadata is written
            queue_name: Registered queue name
            submission: Submitted form values keyed by field name

        Returns:
            SaveResult with the coerced values written, in order
        """
        result = SaveResult(item_id=item_id, queue=queue_name)

        if not self.registry.queue_exists(queue_name):
            result.error = UnknownQueueError(queue_name)
        elif item_id is None or item_id == "":
            result.error = MissingItemIdError(queue_name)
        if result.error is not None:
            logger.warning(
                'cannot save queue "%s" for item %s: %s',
                queue_name,
                item_id,
                result.error.message,
                extra={"queue": queue_name, "item_id": item_id, "error_code": result.error.error_code.value},
            )
            return result

        for meta_field in self.registry.get_queue(queue_name):
            try:
                value = coerce(submission, meta_field.name, meta_field.data_type, self.storage)
            except UnknownDataTypeError as exc:
                logger.error("Skipping field %s in queue %s: %s", meta_field.name, queue_name, exc.message)
                result.skipped[meta_field.name] = exc.message
                continue

            self.save_field(meta_field, item_id, value)
            result.saved[meta_field.name] = value

        logger.debug("Saved queue %s for item %s: %s", queue_name, item_id, list(result.saved))
        return result

    def save_field(self, meta_field: MetaField, item_id: Any, value: Any) -> None:
        """Write one coerced value, surrounded by the field's hooks."""
        if callable(meta_field.before_save):
            meta_field.before_save(item_id, value)

        if meta_field.storage_type == StorageType.OPTION:
            self.storage.update_option(meta_field.name, value)
        else:
            self.storage.update_item_meta(item_id, meta_field.name, value)

        if callable(meta_field.after_save):
            meta_field.after_save(item_id, value)
