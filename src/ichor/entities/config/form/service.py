from src.ichor.core.sdk.crud import CrudService
from src.ichor.entities.config.form.entity import (
    DOMAIN_NAME,
    Form,
    FormFilter,
    NewForm,
    UpdateForm,
)


class FormService(CrudService[Form, NewForm, UpdateForm, FormFilter]):
    domain = DOMAIN_NAME
    entity = Form

    def query_by_name(self, name: str) -> Form:
        return self.storer.query_by_name(name)
