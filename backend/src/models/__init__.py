"""SQLAlchemy models."""
from models.base import Base
from models.category import Category, category_name_key
from models.link import Link
from models.schema import init_schema

__all__ = ["Base", "Category", "Link", "category_name_key", "init_schema"]
