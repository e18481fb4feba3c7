"""Entity package: Tag."""

from .entity import (
    DOMAIN_NAME,
    NewTag,
    Tag,
    TagFilter,
    TagNotFoundError,
    TagUniqueError,
    UpdateTag,
)
from .repository import TagRepository
from .service import TagService
from .table import TagTable

__all__ = [
    "DOMAIN_NAME",
    "NewTag",
    "Tag",
    "TagFilter",
    "TagNotFoundError",
    "TagRepository",
    "TagService",
    "TagTable",
    "TagUniqueError",
    "UpdateTag",
]
