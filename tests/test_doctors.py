# tests/test_doctors.py
import pytest

from hospital_cms.core.errors import NotFoundError
from hospital_cms.db.crud.doctor import doctors


async def test_listing_hides_inactive_doctors(db):
    await doctors.create(db, {"name": "Dr. Active", "specialization": "Cardiology"})
    await doctors.create(
        db, {"name": "Dr. Retired", "specialization": "Surgery", "is_active": False}
    )

    result = await doctors.list(db)

    assert [d.name for d in result] == ["Dr. Active"]


async def test_inactive_doctor_still_found_by_id(db):
    retired = await doctors.create(
        db, {"name": "Dr. Retired", "specialization": "Surgery", "is_active": False}
    )

    found = await doctors.get_by_id(db, retired.id)

    assert found is not None
    assert found.name == "Dr. Retired"


async def test_get_missing_doctor_returns_none(db):
    assert await doctors.get_by_id(db, 999) is None


async def test_delete_doctor(db):
    doctor = await doctors.create(db, {"name": "Dr. Smith", "specialization": "Cardiology"})

    assert await doctors.delete(db, doctor.id) == {"success": True}
    assert await doctors.get_by_id(db, doctor.id) is None


async def test_delete_missing_doctor_raises(db):
    with pytest.raises(NotFoundError, match="not found"):
        await doctors.delete(db, 999)


async def test_doctor_crud_workflow(db):
    doctor = await doctors.create(db, {"name": "Dr. Smith", "specialization": "Cardiology"})
    updated = await doctors.update(db, doctor.id, {"is_active": False})

    assert updated.is_active is False
    assert await doctors.list(db) == []

    assert (await doctors.delete(db, doctor.id))["success"] is True
