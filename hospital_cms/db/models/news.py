# hospital_cms/db/models/news.py
from sqlalchemy import Column, Integer, Text, Boolean, false
from hospital_cms.db.base import Base
from .timestamps import created_at_column, updated_at_column


class NewsModel(Base):
    __tablename__ = "news"

    id           = Column(Integer, primary_key=True)
    title        = Column(Text, nullable=False)
    content      = Column(Text, nullable=False)
    image_url    = Column(Text, nullable=True)
    is_published = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at   = created_at_column()
    updated_at   = updated_at_column()
