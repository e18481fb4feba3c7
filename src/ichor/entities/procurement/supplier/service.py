from src.ichor.core.sdk.crud import CrudService
from src.ichor.entities.procurement.supplier.entity import (
    DOMAIN_NAME,
    NewSupplier,
    Supplier,
    SupplierFilter,
    UpdateSupplier,
)


class SupplierService(CrudService[Supplier, NewSupplier, UpdateSupplier, SupplierFilter]):
    domain = DOMAIN_NAME
    entity = Supplier
