"""Supplier product endpoints."""

from src.ichor.api.http.routers.crud import crud_router
from src.ichor.application.procurement import supplier_product as supplierproductapp
from src.ichor.entities.procurement.supplier_product import SupplierProductService

router = crud_router(
    app_cls=supplierproductapp.SupplierProductApp,
    service_cls=SupplierProductService,
    table="procurement.supplier_products",
    model=supplierproductapp.SupplierProduct,
    new_model=supplierproductapp.NewSupplierProduct,
    update_model=supplierproductapp.UpdateSupplierProduct,
    query_model=supplierproductapp.SupplierProductQueryParams,
)
