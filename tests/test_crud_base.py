# tests/test_crud_base.py
import pytest
from sqlalchemy.exc import IntegrityError

from hospital_cms.core.errors import NotFoundError
from hospital_cms.db.crud.doctor import doctors
from hospital_cms.schemas.shared import PaginationInput


async def _make_doctors(db, count, **overrides):
    created = []
    for i in range(count):
        fields = {"name": f"Dr. {i}", "specialization": "General", **overrides}
        created.append(await doctors.create(db, fields))
    return created


async def test_create_fills_generated_fields(db):
    doctor = await doctors.create(db, {"name": "Dr. Smith", "specialization": "Cardiology"})

    assert doctor.id is not None
    assert doctor.photo_url is None
    assert doctor.is_active is True
    assert doctor.created_at is not None
    assert doctor.created_at == doctor.updated_at


async def test_create_then_get_by_id_round_trips(db):
    created = await doctors.create(
        db, {"name": "Dr. Smith", "specialization": "Cardiology", "photo_url": "https://x/p.jpg"}
    )
    snapshot = {c: getattr(created, c) for c in ("id", "name", "specialization", "photo_url",
                                                 "is_active", "created_at", "updated_at")}

    db.expunge_all()
    fetched = await doctors.get_by_id(db, created.id)

    assert {c: getattr(fetched, c) for c in snapshot} == snapshot


async def test_list_defaults_to_first_page_of_ten(db):
    await _make_doctors(db, 12)

    assert len(await doctors.list(db)) == 10
    assert len(await doctors.list(db, PaginationInput(page=2))) == 2


async def test_list_pagination_offsets(db):
    await _make_doctors(db, 5)

    page_one = await doctors.list(db, PaginationInput(page=1, limit=2))
    page_three = await doctors.list(db, PaginationInput(page=3, limit=2))

    assert len(page_one) == 2
    assert len(page_three) == 1
    assert [d.name for d in page_one] == ["Dr. 4", "Dr. 3"]
    assert page_three[0].name == "Dr. 0"


async def test_page_past_the_end_is_empty(db):
    await _make_doctors(db, 3)

    assert await doctors.list(db, PaginationInput(page=10, limit=10)) == []


async def test_update_applies_only_supplied_fields(db):
    doctor = await doctors.create(
        db, {"name": "Dr. Smith", "specialization": "Cardiology", "photo_url": "https://x/p.jpg"}
    )
    created_at = doctor.created_at
    before = doctor.updated_at

    updated = await doctors.update(db, doctor.id, {"specialization": "Neurology"})

    assert updated.specialization == "Neurology"
    assert updated.name == "Dr. Smith"
    assert updated.photo_url == "https://x/p.jpg"
    assert updated.is_active is True
    assert updated.created_at == created_at
    assert updated.updated_at > before


async def test_update_with_explicit_null_clears_nullable_field(db):
    doctor = await doctors.create(
        db, {"name": "Dr. Smith", "specialization": "Cardiology", "photo_url": "https://x/p.jpg"}
    )

    updated = await doctors.update(db, doctor.id, {"photo_url": None})

    assert updated.photo_url is None
    assert updated.name == "Dr. Smith"


async def test_update_with_empty_patch_still_touches_updated_at(db):
    doctor = await doctors.create(db, {"name": "Dr. Smith", "specialization": "Cardiology"})
    before = doctor.updated_at

    updated = await doctors.update(db, doctor.id, {})

    assert updated.updated_at > before


async def test_update_missing_id_raises_not_found(db):
    with pytest.raises(NotFoundError, match="not found"):
        await doctors.update(db, 999, {"name": "Nobody"})


async def test_storage_failure_is_propagated_unchanged(db):
    doctor = await doctors.create(db, {"name": "Dr. Smith", "specialization": "Cardiology"})
    doctor_id = doctor.id  # the rollback expires the instance

    with pytest.raises(IntegrityError):
        await doctors.update(db, doctor_id, {"name": None})

    # session is usable again and the row is unchanged
    fetched = await doctors.get_by_id(db, doctor_id)
    assert fetched is not None
    assert fetched.name == "Dr. Smith"
