# hospital_cms/db/crud/management_staff.py
from hospital_cms.db.crud.base import CRUDResource
from hospital_cms.db.models import ManagementStaffModel

management_staff = CRUDResource(
    ManagementStaffModel,
    name="Management staff member",
    order_by=(ManagementStaffModel.created_at.desc(), ManagementStaffModel.id.desc()),
    visibility_column=ManagementStaffModel.is_active,
)
