# hospital_cms/db/models/about_us.py
from sqlalchemy import Column, Integer, Text
from hospital_cms.db.base import Base
from .timestamps import created_at_column, updated_at_column


class AboutUsModel(Base):
    """Hospital history text. Treated as a single logical row."""

    __tablename__ = "about_us"

    id         = Column(Integer, primary_key=True)
    content    = Column(Text, nullable=False)
    created_at = created_at_column()
    updated_at = updated_at_column()
