from datetime import datetime, timezone

from pilelog.core.records import RecordStates, Session
from pilelog.core.records.grouping import compute_groups

from conftest import storage_key


async def test_unknown_chat_is_idle(sessions):
    session = await sessions.get(storage_key(7))

    assert session.session_id == 7
    assert session.step is None
    assert session.record is None
    assert not session.is_active


def test_start_record_resets_previous_state():
    session = Session(session_id=1)
    session.step = RecordStates.entering_notes
    session.navigation_history.append(compute_groups([f"P-{i}" for i in range(10)], 6))
    session.offered_piles = ["P-1"]

    record = session.start_record(project_id=5, pile_field_id=2)

    assert session.record is record
    assert record.project_id == 5
    assert record.pile_field_id == 2
    assert record.pile_number is None
    assert session.step is None
    assert session.navigation_history == []
    assert session.offered_piles is None


async def test_session_survives_storage(sessions, storage):
    key = storage_key()
    session = await sessions.get(key)
    session.start_record(project_id=1, pile_field_id=3)
    session.available_piles = [f"P-{i}" for i in range(1, 21)]
    session.navigation_history.append(compute_groups(session.available_piles, 6))
    session.record.pile_number = "P-7"
    session.record.start_date = datetime(2026, 3, 1, tzinfo=timezone.utc)
    session.record.fact_pile_head = -1250
    session.step = RecordStates.entering_operator

    await sessions.save(key, session)
    restored = await sessions.get(key)

    assert await storage.get_state(key) == RecordStates.entering_operator.state
    assert restored.step == RecordStates.entering_operator
    assert restored.record == session.record
    assert restored.available_piles == session.available_piles
    assert restored.navigation_history == session.navigation_history
    assert restored.navigation_history[0][0].label == "P-1..P-4"
    assert restored.offered_piles is None


async def test_sessions_are_per_chat(sessions):
    first = await sessions.get(storage_key(1))
    first.start_record(project_id=1)
    first.step = RecordStates.selecting_pile
    await sessions.save(storage_key(1), first)

    other = await sessions.get(storage_key(2))

    assert other.step is None
    assert other.record is None


async def test_store_reset(sessions):
    key = storage_key()
    session = await sessions.get(key)
    session.start_record(project_id=1)
    session.step = RecordStates.entering_elevation
    await sessions.save(key, session)

    await sessions.reset(key)
    restored = await sessions.get(key)

    assert restored.step is None
    assert restored.record is None


async def test_record_without_step_is_dropped(sessions, storage):
    key = storage_key()
    session = Session(session_id=42)
    session.start_record(project_id=1)
    await sessions.save(key, session)

    restored = await sessions.get(key)

    assert restored.step is None
    assert restored.record is None


async def test_unknown_state_name_is_idle(sessions, storage):
    key = storage_key()
    await storage.set_state(key, "SomeOtherStates:waiting")

    session = await sessions.get(key)

    assert session.step is None
