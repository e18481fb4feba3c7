"""Supplier endpoints."""

from src.ichor.api.http.routers.crud import crud_router
from src.ichor.application.procurement import supplier as supplierapp
from src.ichor.entities.procurement.supplier import SupplierService

router = crud_router(
    app_cls=supplierapp.SupplierApp,
    service_cls=SupplierService,
    table="procurement.suppliers",
    model=supplierapp.Supplier,
    new_model=supplierapp.NewSupplier,
    update_model=supplierapp.UpdateSupplier,
    query_model=supplierapp.SupplierQueryParams,
)
