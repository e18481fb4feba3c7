from src.ichor.core.sdk.crud import CrudService
from src.ichor.entities.hr.office.entity import (
    DOMAIN_NAME,
    NewOffice,
    Office,
    OfficeFilter,
    UpdateOffice,
)


class OfficeService(CrudService[Office, NewOffice, UpdateOffice, OfficeFilter]):
    domain = DOMAIN_NAME
    entity = Office
