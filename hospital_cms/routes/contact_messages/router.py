from fastapi import APIRouter, Body, Depends
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from hospital_cms.db.session import get_db
from hospital_cms.db.crud.contact_message import contact_messages, mark_contact_message_as_read
from hospital_cms.schemas.shared import PaginationInput, GetByIdInput, DeleteByIdInput, DeleteResult
from hospital_cms.schemas.contact_message import (
    ContactMessage,
    CreateContactMessageInput,
    UpdateContactMessageInput,
)

router = APIRouter(prefix="/rpc", tags=["contact messages"])


@router.post("/createContactMessage", response_model=ContactMessage)
async def create_contact_message_route(
    payload: CreateContactMessageInput, db: AsyncSession = Depends(get_db)
):
    """Public contact form submission"""
    return await contact_messages.create(db, payload.model_dump())


@router.post("/getContactMessages", response_model=List[ContactMessage])
async def get_contact_messages_route(
    pagination: Optional[PaginationInput] = Body(None),
    db: AsyncSession = Depends(get_db),
):
    return await contact_messages.list(db, pagination)


@router.post("/getContactMessageById", response_model=Optional[ContactMessage])
async def get_contact_message_by_id_route(payload: GetByIdInput, db: AsyncSession = Depends(get_db)):
    return await contact_messages.get_by_id(db, payload.id)


@router.post("/markContactMessageAsRead", response_model=ContactMessage)
async def mark_contact_message_as_read_route(
    payload: UpdateContactMessageInput, db: AsyncSession = Depends(get_db)
):
    return await mark_contact_message_as_read(db, payload.id, payload.is_read)


@router.post("/deleteContactMessage", response_model=DeleteResult)
async def delete_contact_message_route(payload: DeleteByIdInput, db: AsyncSession = Depends(get_db)):
    return await contact_messages.delete(db, payload.id)
