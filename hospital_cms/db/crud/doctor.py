# hospital_cms/db/crud/doctor.py
from hospital_cms.db.crud.base import CRUDResource
from hospital_cms.db.models import DoctorModel

doctors = CRUDResource(
    DoctorModel,
    name="Doctor",
    order_by=(DoctorModel.created_at.desc(), DoctorModel.id.desc()),
    visibility_column=DoctorModel.is_active,
    delete_missing_raises=True,
)
