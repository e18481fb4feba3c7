from src.ichor.core.services.database.store import SqlStore, contains
from src.ichor.entities.assets.tag import entity as tg
from src.ichor.entities.assets.tag.entity import (
    Tag,
    TagFilter,
    TagNotFoundError,
    TagUniqueError,
)
from src.ichor.entities.assets.tag.table import TagTable


class TagRepository(SqlStore[Tag, TagFilter]):
    table = TagTable
    entity = Tag
    not_found_error = TagNotFoundError
    unique_error = TagUniqueError
    default_order = tg.DEFAULT_ORDER_BY
    order_columns = {
        tg.ORDER_BY_ID: "id",
        tg.ORDER_BY_NAME: "name",
        tg.ORDER_BY_DESCRIPTION: "description",
    }

    def _apply_filter(self, stmt, flt: TagFilter):
        if flt.id is not None:
            stmt = stmt.where(TagTable.id == flt.id)
        if flt.name:
            stmt = stmt.where(contains(TagTable.name, flt.name))
        if flt.description:
            stmt = stmt.where(contains(TagTable.description, flt.description))
        return stmt
