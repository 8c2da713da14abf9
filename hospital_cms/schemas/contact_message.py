# hospital_cms/schemas/contact_message.py
from datetime import datetime

from pydantic import EmailStr, PositiveInt

from hospital_cms.schemas.shared import RowOut, ProcedureInput


class ContactMessage(RowOut):
    name: str
    email: EmailStr
    phone: str
    subject: str
    message: str
    is_read: bool
    created_at: datetime


class CreateContactMessageInput(ProcedureInput):
    """What the public contact form posts. is_read always starts false."""
    name: str
    email: EmailStr
    phone: str
    subject: str
    message: str


class UpdateContactMessageInput(ProcedureInput):
    id: PositiveInt
    is_read: bool
