# hospital_cms/db/models/service.py
from sqlalchemy import Column, Integer, Text, Boolean, JSON, true
from hospital_cms.db.base import Base
from .timestamps import created_at_column, updated_at_column


class ServiceModel(Base):
    __tablename__ = "services"

    id          = Column(Integer, primary_key=True)
    title       = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    image_url   = Column(Text, nullable=True)
    facilities  = Column(JSON, nullable=False, default=list)  # list[str], order preserved
    is_active   = Column(Boolean, nullable=False, default=True, server_default=true())
    created_at  = created_at_column()
    updated_at  = updated_at_column()
