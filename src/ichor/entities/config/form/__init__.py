"""Entity package: Form."""

from .entity import (
    DOMAIN_NAME,
    Form,
    FormFilter,
    FormNotFoundError,
    FormUniqueError,
    NewForm,
    UpdateForm,
)
from .repository import FormRepository
from .service import FormService
from .table import FormTable

__all__ = [
    "DOMAIN_NAME",
    "Form",
    "FormFilter",
    "FormNotFoundError",
    "FormRepository",
    "FormService",
    "FormTable",
    "FormUniqueError",
    "NewForm",
    "UpdateForm",
]
