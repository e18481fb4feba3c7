from src.ichor.core.sdk.crud import CrudService
from src.ichor.entities.assets.tag.entity import DOMAIN_NAME, NewTag, Tag, TagFilter, UpdateTag


class TagService(CrudService[Tag, NewTag, UpdateTag, TagFilter]):
    domain = DOMAIN_NAME
    entity = Tag
