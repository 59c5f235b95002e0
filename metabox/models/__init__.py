from .item_meta import ItemMeta, SiteOption

__all__ = ["ItemMeta", "SiteOption"]
