# tests/test_contact_messages.py
import pytest

from hospital_cms.core.errors import NotFoundError
from hospital_cms.db.crud.contact_message import contact_messages, mark_contact_message_as_read
from hospital_cms.schemas.shared import PaginationInput

MESSAGE = {
    "name": "John Doe",
    "email": "john@example.com",
    "phone": "555-0100",
    "subject": "Appointment",
    "message": "Can I book a visit next week?",
}


async def test_new_message_is_unread(db):
    message = await contact_messages.create(db, MESSAGE)

    assert message.is_read is False
    assert message.created_at is not None
    assert not hasattr(message, "updated_at")


async def test_listing_includes_read_and_unread_newest_first(db):
    first = await contact_messages.create(db, MESSAGE)
    second = await contact_messages.create(db, {**MESSAGE, "name": "Jane Smith"})
    await mark_contact_message_as_read(db, first.id, True)

    result = await contact_messages.list(db)

    assert [m.id for m in result] == [second.id, first.id]


async def test_second_page_holds_the_oldest(db):
    await contact_messages.create(db, MESSAGE)
    await contact_messages.create(db, {**MESSAGE, "name": "Jane Smith"})
    await contact_messages.create(db, {**MESSAGE, "name": "Alice Johnson"})

    result = await contact_messages.list(db, PaginationInput(page=2, limit=2))

    assert [m.name for m in result] == ["John Doe"]


async def test_mark_read_and_unread(db):
    message = await contact_messages.create(db, MESSAGE)

    assert (await mark_contact_message_as_read(db, message.id, True)).is_read is True
    assert (await mark_contact_message_as_read(db, message.id, False)).is_read is False


async def test_mark_missing_message_raises(db):
    with pytest.raises(NotFoundError, match="not found"):
        await mark_contact_message_as_read(db, 999, True)


async def test_delete_message(db):
    keep = await contact_messages.create(db, MESSAGE)
    drop = await contact_messages.create(db, {**MESSAGE, "name": "Jane Smith"})

    assert await contact_messages.delete(db, drop.id) == {"success": True}
    assert [m.id for m in await contact_messages.list(db)] == [keep.id]


async def test_delete_missing_message_returns_false(db):
    assert await contact_messages.delete(db, 999) == {"success": False}


async def test_get_message_by_id(db):
    message = await contact_messages.create(db, MESSAGE)
    await mark_contact_message_as_read(db, message.id, True)

    found = await contact_messages.get_by_id(db, message.id)

    assert found.email == "john@example.com"
    assert found.is_read is True
    assert await contact_messages.get_by_id(db, 999) is None
