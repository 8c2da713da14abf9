# tests/test_menu_items.py
import pytest

from hospital_cms.core.errors import NotFoundError
from hospital_cms.db.crud.menu_item import menu_items, get_menu_items


async def test_menu_lists_active_items_by_order_index(db):
    await menu_items.create(db, {"title": "Second", "url": "/second", "order_index": 2})
    await menu_items.create(db, {"title": "First", "url": "/first", "order_index": 1})
    await menu_items.create(
        db, {"title": "Hidden", "url": "/hidden", "order_index": 0, "is_active": False}
    )

    result = await get_menu_items(db)

    assert [item.title for item in result] == ["First", "Second"]


async def test_menu_is_not_capped_at_a_page(db):
    for i in range(15):
        await menu_items.create(db, {"title": f"Item {i}", "url": f"/{i}", "order_index": i})

    assert len(await get_menu_items(db)) == 15


async def test_inactive_menu_item_still_found_by_id(db):
    item = await menu_items.create(
        db, {"title": "Hidden", "url": "/hidden", "order_index": 3, "is_active": False}
    )

    found = await menu_items.get_by_id(db, item.id)

    assert found is not None
    assert found.is_active is False


async def test_update_missing_menu_item_raises(db):
    with pytest.raises(NotFoundError, match="not found"):
        await menu_items.update(db, 999, {"title": "Nope"})


async def test_delete_menu_item(db):
    keep = await menu_items.create(db, {"title": "Keep", "url": "/keep", "order_index": 1})
    drop = await menu_items.create(db, {"title": "Drop", "url": "/drop", "order_index": 2})

    assert await menu_items.delete(db, drop.id) == {"success": True}
    assert await menu_items.get_by_id(db, drop.id) is None
    assert await menu_items.get_by_id(db, keep.id) is not None


async def test_delete_missing_menu_item_returns_false(db):
    assert await menu_items.delete(db, 999) == {"success": False}
