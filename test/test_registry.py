"""
Tests for the field registry
"""

import logging

from metabox.constants import DataType, StorageType
from metabox.fields import CheckboxField, InputField, SelectField, TextField
from metabox.registry import FieldRegistry


class TestRegistration:
    def test_register_creates_queue(self, registry):
        assert registry.queue_exists("details") is False
        assert registry.register(TextField(name="subtitle"), "details") is True
        assert registry.queue_exists("details") is True

    def test_registration_order_is_preserved(self, registry):
        names = [f"field_{i}" for i in range(6)]
        for name in names:
            registry.register(TextField(name=name), "details")
        assert [f.name for f in registry.get_queue("details")] == names

    def test_same_name_twice_appends_twice(self, registry):
        registry.register(TextField(name="subtitle"), "details")
        registry.register(TextField(name="subtitle", label="Again"), "details")
        queue = registry.get_queue("details")
        assert len(queue) == 2
        assert queue[1].label == "Again"

    def test_empty_queue_name_is_rejected(self, registry, caplog):
        with caplog.at_level(logging.WARNING, logger="metabox.registry"):
            assert registry.register(TextField(name="subtitle"), "") is False
        assert registry.queue_names() == []
        assert "with missing data" in caplog.text

    def test_missing_name_is_rejected(self, registry):
        registry.register(TextField(name="kept"), "details")
        assert registry.register(TextField(name=""), "details") is False
        assert [f.name for f in registry.get_queue("details")] == ["kept"]

    def test_rejected_registration_does_not_create_queue(self, registry):
        registry.register(TextField(name=""), "details")
        assert registry.queue_exists("details") is False

    def test_storage_type_forced_to_meta(self, registry):
        registry.register(TextField(name="subtitle", storage_type=StorageType.OPTION), "details")
        assert registry.get_queue("details")[0].storage_type == StorageType.META

    def test_register_option_forces_option_storage(self, registry):
        registry.register_option(TextField(name="site_tagline"), "site")
        assert registry.get_queue("site")[0].storage_type == StorageType.OPTION

    def test_checkbox_forced_to_bool(self, registry):
        registry.register(CheckboxField(name="featured", data_type=DataType.INT), "details")
        assert registry.get_queue("details")[0].data_type == DataType.BOOLEAN

    def test_generic_checkbox_kind_forced_to_bool(self, registry):
        registry.register(InputField(name="agree", input_kind="checkbox"), "details")
        assert registry.get_queue("details")[0].data_type == DataType.BOOLEAN

    def test_missing_input_kind_is_rejected(self, registry, caplog):
        with caplog.at_level(logging.WARNING, logger="metabox.registry"):
            assert registry.register(InputField(name="x", input_kind=""), "details") is False
        assert registry.queue_exists("details") is False
        assert "with missing data" in caplog.text

    def test_default_data_type_is_string(self, registry):
        registry.register(SelectField(name="size"), "details")
        assert registry.get_queue("details")[0].data_type == DataType.STRING

    def test_registered_copy_leaves_original_untouched(self, registry):
        original = TextField(name="subtitle", storage_type=StorageType.OPTION)
        registry.register(original, "details")
        assert original.storage_type == StorageType.OPTION


class TestLookupAndTeardown:
    def test_unknown_queue_is_empty(self, registry):
        assert registry.get_queue("missing") == ()

    def test_queue_names_in_creation_order(self, registry):
        registry.register(TextField(name="a"), "second")
        registry.register(TextField(name="b"), "first")
        assert registry.queue_names() == ["second", "first"]

    def test_get_queue_returns_snapshot(self, registry):
        registry.register(TextField(name="a"), "details")
        snapshot = registry.get_queue("details")
        registry.register(TextField(name="b"), "details")
        assert len(snapshot) == 1

    def test_remove_queue(self, registry):
        registry.register(TextField(name="a"), "details")
        assert registry.remove_queue("details") is True
        assert registry.remove_queue("details") is False
        assert registry.queue_exists("details") is False

    def test_clear(self, registry):
        registry.register(TextField(name="a"), "one")
        registry.register(TextField(name="b"), "two")
        registry.clear()
        assert registry.queue_names() == []

    def test_registries_are_independent(self):
        first, second = FieldRegistry(), FieldRegistry()
        first.register(TextField(name="a"), "details")
        assert second.queue_exists("details") is False
