"""Storage models for per-item metadata and site-wide options."""

from sqlalchemy import Column, Integer, String, Text, UniqueConstraint

from metabox.database import Base


class ItemMeta(Base):
    """One metadata value of one content item."""

    __tablename__ = "item_meta"
    __table_args__ = (UniqueConstraint("item_id", "meta_key", name="uq_item_meta_item_key"),)

    id = Column(Integer, primary_key=True, index=True)
    item_id = Column(String(64), nullable=False, index=True)
    meta_key = Column(String(255), nullable=False, index=True)
    meta_value = Column(Text, nullable=True)


class SiteOption(Base):
    """A site-wide option value."""

    __tablename__ = "site_options"

    id = Column(Integer, primary_key=True, index=True)
    option_name = Column(String(191), unique=True, nullable=False, index=True)
    option_value = Column(Text, nullable=True)
