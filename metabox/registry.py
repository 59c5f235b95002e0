"""
Field Registry

FieldRegistry: named, ordered queues of field descriptors. A queue is created
on first registration and keeps registration order; it is never reordered or
deduplicated.

Construct one registry at startup and hand it to whatever renders or saves
queues. Registration is not synchronised; concurrent registration into the
same queue has unspecified ordering.
"""

from __future__ import annotations

import dataclasses
import logging

from metabox.constants import DataType, InputKind, StorageType
from metabox.fields import MetaField

logger = logging.getLogger(__name__)


class FieldRegistry:
    """In-process registry of field queues."""

    def __init__(self) -> None:
        self._queues: dict[str, list[MetaField]] = {}

    # ── Registration ──────────────────────────────────────────────────────────

    def register(self, field: MetaField, queue_name: str = "") -> bool:
        """
        Append a per-item field to a queue.

        The field's storage type is forced to meta and a checkbox's data type
        to bool. A field without a name or input kind, or an empty queue name, is
        logged and rejected without touching any queue.

        Returns:
            True if the field was appended.
        """
        return self._append(field, queue_name, StorageType.META)

    def register_option(self, field: MetaField, queue_name: str = "") -> bool:
        """Append a site-wide option field to a queue. Same rules as register()."""
        return self._append(field, queue_name, StorageType.OPTION)

    def _append(self, field: MetaField, queue_name: str, storage_type: StorageType) -> bool:
        if not getattr(field, "name", None) or not getattr(field, "input_kind", None) or not queue_name:
            logger.warning(
                'Attempted to register meta to queue "%s" with missing data. field: %r',
                queue_name,
                field,
            )
            return False

        changes: dict = {"storage_type": storage_type}
        if field.input_kind == InputKind.CHECKBOX.value:
            changes["data_type"] = DataType.BOOLEAN
        registered = dataclasses.replace(field, **changes)

        self._ensure_queue_exists(queue_name)
        self._queues[queue_name].append(registered)
        logger.debug("Field registered: %s -> %s (%s)", registered.name, queue_name, storage_type.value)
        return True

    def _ensure_queue_exists(self, queue_name: str) -> None:
        if not self.queue_exists(queue_name):
            self._queues[queue_name] = []

    # ── Lookup ────────────────────────────────────────────────────────────────

    def queue_exists(self, queue_name: str) -> bool:
        return queue_name in self._queues

    def get_queue(self, queue_name: str) -> tuple[MetaField, ...]:
        """Return the fields of a queue in registration order (empty if unknown)."""
        return tuple(self._queues.get(queue_name, ()))

    def queue_names(self) -> list[str]:
        """Return queue names in creation order."""
        return list(self._queues)

    # ── Teardown ──────────────────────────────────────────────────────────────

    def remove_queue(self, queue_name: str) -> bool:
        """Drop a queue. Returns False if it did not exist."""
        return self._queues.pop(queue_name, None) is not None

    def clear(self) -> None:
        self._queues.clear()
