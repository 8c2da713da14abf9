# hospital_cms/db/models/management_staff.py
from sqlalchemy import Column, Integer, Text, Boolean, true
from hospital_cms.db.base import Base
from .timestamps import created_at_column, updated_at_column


class ManagementStaffModel(Base):
    __tablename__ = "management_staff"

    id         = Column(Integer, primary_key=True)
    name       = Column(Text, nullable=False)
    position   = Column(Text, nullable=False)
    photo_url  = Column(Text, nullable=True)
    is_active  = Column(Boolean, nullable=False, default=True, server_default=true())
    created_at = created_at_column()
    updated_at = updated_at_column()
