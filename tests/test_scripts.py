# tests/test_scripts.py
import pytest

import hospital_cms.db.session as session_mod
from hospital_cms.db.crud.doctor import doctors
from hospital_cms.db.crud.news import news
from scripts.list_content import count_rows, active_doctors


@pytest.fixture
def script_factory(session_factory, monkeypatch):
    monkeypatch.setattr(session_mod, "_global_session_factory", None)
    session_mod.set_global_session_factory(session_factory)
    return session_factory


async def test_script_session_requires_a_factory(monkeypatch):
    monkeypatch.setattr(session_mod, "_global_session_factory", None)

    with pytest.raises(RuntimeError, match="not initialized"):
        async with session_mod.script_db_session():
            pass


async def test_list_content_counts_through_script_session(script_factory):
    async with session_mod.script_db_session() as db:
        await doctors.create(db, {"name": "Dr. B", "specialization": "Surgery"})
        await doctors.create(db, {"name": "Dr. A", "specialization": "Cardiology"})
        await doctors.create(
            db, {"name": "Dr. Gone", "specialization": "Surgery", "is_active": False}
        )
        await news.create(db, {"title": "Draft", "content": "Body"})

    async with session_mod.script_db_session() as db:
        counts = await count_rows(db)
        listed = await active_doctors(db)

    assert counts["doctors"] == 3
    assert counts["news"] == 1
    assert counts["contact_messages"] == 0
    assert [d.name for d in listed] == ["Dr. A", "Dr. B"]
