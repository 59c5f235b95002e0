"""
Tests for the SQLAlchemy-backed storage collaborator (in-memory SQLite)
"""

from sqlalchemy import func, select

from metabox.models import ItemMeta, SiteOption
from metabox.services.meta_manager import MetaManager
from metabox.storage.sql import serialize_value


class TestSerializeValue:
    def test_booleans(self):
        assert serialize_value(True) == "true"
        assert serialize_value(False) == ""

    def test_other_values(self):
        assert serialize_value(None) == ""
        assert serialize_value(42) == "42"
        assert serialize_value(2.5) == "2.5"
        assert serialize_value("x") == "x"


class TestSQLMetaStorage:
    def test_missing_values_are_none(self, sql_storage):
        assert sql_storage.get_item_meta(1, "subtitle") is None
        assert sql_storage.get_option("tagline") is None

    def test_item_meta_upsert(self, sql_storage, sql_session_factory):
        sql_storage.update_item_meta(1, "subtitle", "first")
        sql_storage.update_item_meta(1, "subtitle", "second")
        assert sql_storage.get_item_meta(1, "subtitle") == "second"

        with sql_session_factory() as db:
            count = db.execute(select(func.count()).select_from(ItemMeta)).scalar_one()
        assert count == 1

    def test_item_meta_is_scoped_per_item(self, sql_storage):
        sql_storage.update_item_meta(1, "subtitle", "one")
        sql_storage.update_item_meta(2, "subtitle", "two")
        assert sql_storage.get_item_meta(1, "subtitle") == "one"
        assert sql_storage.get_item_meta("2", "subtitle") == "two"

    def test_option_upsert(self, sql_storage, sql_session_factory):
        sql_storage.update_option("tagline", "a")
        sql_storage.update_option("tagline", "b")
        assert sql_storage.get_option("tagline") == "b"

        with sql_session_factory() as db:
            count = db.execute(select(func.count()).select_from(SiteOption)).scalar_one()
        assert count == 1

    def test_attachment_url(self, sql_storage):
        assert sql_storage.attachment_image_src(7, "medium") == "/media/7/medium"
        assert sql_storage.attachment_image_src("", "medium") is None


class TestSQLPipeline:
    def test_checkbox_round_trip_through_text_storage(self, sql_storage):
        manager = MetaManager(sql_storage)
        manager.register_meta({"name": "featured", "input_type": "checkbox", "label": "Featured"}, "details")
        manager.register_meta({"name": "count", "input_type": "number", "step": 1, "data_type": "int"}, "details")

        manager.save_queue(5, "details", {"featured": "on", "count": "12 items"})

        assert sql_storage.get_item_meta(5, "featured") == "true"
        assert sql_storage.get_item_meta(5, "count") == "12"
        html = str(manager.render_queue(5, "details"))
        assert " checked " in html
        assert 'value="12"' in html
