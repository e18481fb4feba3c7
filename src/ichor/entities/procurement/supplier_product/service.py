from src.ichor.core.sdk.crud import CrudService
from src.ichor.entities.procurement.supplier_product.entity import (
    DOMAIN_NAME,
    NewSupplierProduct,
    SupplierProduct,
    SupplierProductFilter,
    UpdateSupplierProduct,
)


class SupplierProductService(
    CrudService[
        SupplierProduct, NewSupplierProduct, UpdateSupplierProduct, SupplierProductFilter
    ]
):
    domain = DOMAIN_NAME
    entity = SupplierProduct
