from src.ichor.core.sdk.crud import CrudService
from src.ichor.entities.geography.street.entity import (
    DOMAIN_NAME,
    NewStreet,
    Street,
    StreetFilter,
    UpdateStreet,
)


class StreetService(CrudService[Street, NewStreet, UpdateStreet, StreetFilter]):
    domain = DOMAIN_NAME
    entity = Street
