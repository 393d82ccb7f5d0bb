"""Owner scoping of the progress store."""
import pytest
from sqlalchemy import select

from questkeeper.core.errors import NotFound
from questkeeper.models.progress import SavedProgress
from questkeeper.services.credentials import CredentialStore
from questkeeper.services.progress import ProgressStore

pytestmark = pytest.mark.anyio


async def _owners(db):
    store = CredentialStore(db)
    a = await store.create_user("astra", "x", "Zel")
    b = await store.create_user("bram", "x", "Bo")
    return a.id, b.id


async def test_save_always_inserts(db):
    owner, _ = await _owners(db)
    store = ProgressStore(db)

    first = await store.save(owner, 1, 2, {"hp": 10}, ["sword"], "slot1")
    second = await store.save(owner, 1, 2, {"hp": 10}, ["sword"], "slot1")

    assert first.id != second.id
    rows = (await db.execute(select(SavedProgress).where(SavedProgress.user_id == owner))).scalars().all()
    assert len(rows) == 2


async def test_load_latest_is_newest_of_owner(db):
    a, b = await _owners(db)
    store = ProgressStore(db)

    await store.save(a, 1, 1, {"hp": 10}, [], "slot1")
    await store.save(a, 1, 2, {"hp": 8}, ["torch"], "slot2")
    await store.save(b, 1, 3, {"hp": 5}, [], "bram-slot")

    latest = await store.load_latest(a)
    assert latest.save_name == "slot2"
    assert latest.game_state == {"hp": 8}
    assert latest.inventory == ["torch"]
    assert (await store.load_latest(b)).save_name == "bram-slot"


async def test_load_latest_without_saves(db):
    a, _ = await _owners(db)
    with pytest.raises(NotFound):
        await ProgressStore(db).load_latest(a)


async def test_delete_own_slot(db):
    a, _ = await _owners(db)
    store = ProgressStore(db)
    slot = await store.save(a, 1, 1, {}, [], "slot1")

    assert await store.delete(a, slot.id) == slot.id
    with pytest.raises(NotFound):
        await store.load_latest(a)


async def test_delete_other_owners_slot_is_not_found(db):
    a, b = await _owners(db)
    store = ProgressStore(db)
    slot = await store.save(b, 1, 1, {}, [], "bram-slot")

    with pytest.raises(NotFound):
        await store.delete(a, slot.id)
    assert (await store.load_latest(b)).id == slot.id


async def test_delete_missing_slot(db):
    a, _ = await _owners(db)
    with pytest.raises(NotFound):
        await ProgressStore(db).delete(a, 12345)
