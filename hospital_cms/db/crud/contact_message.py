# hospital_cms/db/crud/contact_message.py
from sqlalchemy.ext.asyncio import AsyncSession

from hospital_cms.db.crud.base import CRUDResource
from hospital_cms.db.models import ContactMessageModel

# Admin inbox: no visibility filter, read and unread messages are both listed.
contact_messages = CRUDResource(
    ContactMessageModel,
    name="Contact message",
    order_by=(ContactMessageModel.created_at.desc(), ContactMessageModel.id.desc()),
    has_updated_at=False,
)


async def mark_contact_message_as_read(
    db: AsyncSession, message_id: int, is_read: bool
) -> ContactMessageModel:
    """Toggle the read flag, the only mutable field of a message."""
    return await contact_messages.update(db, message_id, {"is_read": is_read})
