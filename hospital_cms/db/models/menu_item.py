# hospital_cms/db/models/menu_item.py
from sqlalchemy import Column, Integer, Text, Boolean, true
from hospital_cms.db.base import Base
from .timestamps import created_at_column, updated_at_column


class MenuItemModel(Base):
    __tablename__ = "menu_items"

    id          = Column(Integer, primary_key=True)
    title       = Column(Text, nullable=False)
    url         = Column(Text, nullable=False)
    order_index = Column(Integer, nullable=False)
    is_active   = Column(Boolean, nullable=False, default=True, server_default=true())
    created_at  = created_at_column()
    updated_at  = updated_at_column()
