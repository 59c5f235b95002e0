"""
Tests for MetaManager - the register / render / save pipeline end to end
"""

import logging

from metabox.config import Settings
from metabox.constants import StorageType
from metabox.fields import SelectField, TextField
from metabox.services.meta_manager import MetaManager
from metabox.storage import InMemoryMetaStorage


class TestRegistration:
    def test_register_descriptor(self, manager):
        assert manager.register_meta(TextField(name="subtitle"), "details") is True
        assert manager.queue_exists("details") is True

    def test_register_dict(self, manager):
        assert manager.register_meta({"name": "subtitle", "input_type": "text"}, "details") is True
        assert isinstance(manager.registry.get_queue("details")[0], TextField)

    def test_dict_without_name_is_rejected_without_raising(self, manager, caplog):
        with caplog.at_level(logging.WARNING, logger="metabox.services.meta_manager"):
            assert manager.register_meta({"input_type": "text", "label": "No name"}, "details") is False
        assert manager.queue_exists("details") is False
        assert "with missing data" in caplog.text

    def test_empty_queue_name_is_rejected(self, manager):
        assert manager.register_meta({"name": "subtitle", "input_type": "text"}, "") is False
        assert manager.registry.queue_names() == []

    def test_unknown_storage_type_is_rejected_without_raising(self, manager, caplog):
        definition = {"name": "x", "input_type": "text", "storage_type": "site"}
        with caplog.at_level(logging.WARNING, logger="metabox.services.meta_manager"):
            assert manager.register_meta(definition, "details") is False
        assert manager.queue_exists("details") is False
        assert "with missing data" in caplog.text

    def test_non_mapping_definition_is_rejected_without_raising(self, manager):
        assert manager.register_meta(None, "details") is False
        assert manager.register_option("subtitle", "details") is False
        assert manager.queue_exists("details") is False

    def test_register_option(self, manager):
        manager.register_option({"name": "tagline", "input_type": "text"}, "site")
        assert manager.registry.get_queue("site")[0].storage_type == StorageType.OPTION

    def test_from_settings(self):
        settings = Settings(css_prefix="acme", image_size="large", rich_text_media_buttons=False)
        manager = MetaManager.from_settings(InMemoryMetaStorage(), settings)
        assert manager.renderer.css_prefix == "acme"
        assert manager.renderer.image_size == "large"
        assert manager.renderer.rich_text_media_buttons is False

    def test_shared_registry(self, registry, storage):
        first = MetaManager(storage, registry=registry)
        second = MetaManager(storage, registry=registry)
        first.register_meta(TextField(name="subtitle"), "details")
        assert second.queue_exists("details") is True


class TestPipeline:
    def test_select_round_trip(self, manager, storage):
        manager.register_meta(
            {"name": "choice", "input_type": "select", "label": "Choice", "options": {"a": "Alpha", "b": "Beta"}},
            "details",
        )
        manager.save_queue(10, "details", {"choice": "b"})
        assert storage.get_item_meta(10, "choice") == "b"

        html = str(manager.render_queue(10, "details"))
        assert '<option value="b" selected>Beta</option>' in html
        assert '<option value="a">Alpha</option>' in html

    def test_checkbox_round_trip(self, manager):
        manager.register_meta({"name": "featured", "input_type": "checkbox", "label": "Featured"}, "details")

        manager.save_queue(1, "details", {"featured": "true"})
        assert " checked " in str(manager.render_queue(1, "details"))

        manager.save_queue(1, "details", {})
        assert "checked" not in str(manager.render_queue(1, "details"))

    def test_render_and_save_visit_the_same_order(self, manager, storage):
        names = ["one", "two", "three", "four"]
        for name in names:
            manager.register_meta(SelectField(name=name, options={"x": "X"}), "details")

        result = manager.render_queue(1, "details")
        saved = manager.save_queue(1, "details", {name: "x" for name in names})

        assert result.rendered == names
        assert list(saved.saved) == names

    def test_unknown_queue(self, manager):
        assert str(manager.render_queue(1, "nope")) == ""
        assert manager.save_queue(1, "nope", {}).ok is False
