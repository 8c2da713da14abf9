# hospital_cms/db/models/contact_message.py
from sqlalchemy import Column, Integer, Text, Boolean, false
from hospital_cms.db.base import Base
from .timestamps import created_at_column


class ContactMessageModel(Base):
    __tablename__ = "contact_messages"

    id         = Column(Integer, primary_key=True)
    name       = Column(Text, nullable=False)
    email      = Column(Text, nullable=False)
    phone      = Column(Text, nullable=False)
    subject    = Column(Text, nullable=False)
    message    = Column(Text, nullable=False)
    is_read    = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = created_at_column()
    # no updated_at: only is_read ever changes
