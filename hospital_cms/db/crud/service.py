# hospital_cms/db/crud/service.py
from hospital_cms.db.crud.base import CRUDResource
from hospital_cms.db.models import ServiceModel

# Unlike the other resources, an inactive service is hidden from the detail page too.
services = CRUDResource(
    ServiceModel,
    name="Service",
    order_by=(ServiceModel.created_at.desc(), ServiceModel.id.desc()),
    visibility_column=ServiceModel.is_active,
    get_by_id_visible_only=True,
)
