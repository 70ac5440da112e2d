"""
Tests for the single-slot undo buffer.
"""

from datetime import timedelta

import pytest

from plant_tracker.modules.plant_management.domain.events import PlantEventType
from plant_tracker.modules.plant_management.domain.services.undo_buffer import UndoBuffer
from plant_tracker.shared.core.exceptions import ValidationError

from tests.factories import D0, fern_form, monstera_form


def delete_into(undo_buffer, store, plant_id):
    plant = store.delete_plant(plant_id)
    return plant, undo_buffer.capture(plant)


def discarded_events(event_bus):
    return event_bus.event_store.get_events(event_type=PlantEventType.PLANT_DISCARDED.value)


def test_capture_returns_deadline(undo_buffer, store):
    fern = store.add_plant(fern_form())

    _, deadline = delete_into(undo_buffer, store, fern.id)

    assert deadline == D0 + timedelta(milliseconds=30_000)
    assert undo_buffer.deadline == deadline
    assert undo_buffer.peek() == fern


def test_restore_within_window(undo_buffer, store, clock):
    fern = store.add_plant(fern_form())
    delete_into(undo_buffer, store, fern.id)
    clock.advance(seconds=10)

    restored = undo_buffer.restore()

    assert restored == fern
    assert store.get_plant(fern.id) == fern
    assert not undo_buffer.has_entry


def test_restore_works_at_the_deadline(undo_buffer, store, clock):
    fern = store.add_plant(fern_form())
    delete_into(undo_buffer, store, fern.id)
    clock.advance(milliseconds=30_000)

    assert undo_buffer.restore() == fern


def test_second_restore_returns_none(undo_buffer, store):
    fern = store.add_plant(fern_form())
    delete_into(undo_buffer, store, fern.id)

    assert undo_buffer.restore() == fern
    assert undo_buffer.restore() is None
    assert len(store) == 1


def test_restore_on_empty_buffer(undo_buffer):
    assert undo_buffer.restore() is None


def test_restore_after_window_changes_nothing(undo_buffer, store, clock, event_bus):
    fern = store.add_plant(fern_form())
    monstera = store.add_plant(monstera_form())
    delete_into(undo_buffer, store, fern.id)
    clock.advance(milliseconds=30_001)

    assert undo_buffer.restore() is None

    assert store.list_plants() == [monstera]
    assert not undo_buffer.has_entry
    assert discarded_events(event_bus)[0].payload["reason"] == "expired"


def test_new_capture_discards_previous(undo_buffer, store, event_bus):
    fern = store.add_plant(fern_form())
    monstera = store.add_plant(monstera_form())
    delete_into(undo_buffer, store, fern.id)
    delete_into(undo_buffer, store, monstera.id)

    assert undo_buffer.restore() == monstera
    assert not store.has_plant(fern.id)
    assert undo_buffer.restore() is None

    discarded = discarded_events(event_bus)
    assert [e.aggregate_id for e in discarded] == [fern.id]
    assert discarded[0].payload["reason"] == "replaced"


def test_expire_is_idempotent(undo_buffer, store, clock, event_bus):
    fern = store.add_plant(fern_form())
    delete_into(undo_buffer, store, fern.id)

    assert undo_buffer.expire() is False
    assert undo_buffer.has_entry

    clock.advance(seconds=31)
    assert undo_buffer.expire() is True
    assert undo_buffer.expire() is False
    assert undo_buffer.restore() is None
    assert len(discarded_events(event_bus)) == 1


def test_expire_with_explicit_instant(undo_buffer, store):
    fern = store.add_plant(fern_form())
    delete_into(undo_buffer, store, fern.id)

    assert undo_buffer.expire(now=D0 + timedelta(minutes=1)) is True
    assert not undo_buffer.has_entry


def test_capture_with_custom_window(undo_buffer, store, clock):
    fern = store.add_plant(fern_form())
    plant = store.delete_plant(fern.id)

    deadline = undo_buffer.capture(plant, window_ms=5_000)
    clock.advance(seconds=6)

    assert deadline == D0 + timedelta(seconds=5)
    assert undo_buffer.restore() is None


def test_zero_window_restores_only_at_the_same_instant(store, clock):
    undo_buffer = UndoBuffer(store, clock=clock, window_ms=0)
    fern = store.add_plant(fern_form())
    delete_into(undo_buffer, store, fern.id)

    assert undo_buffer.restore() == fern


def test_negative_window_is_rejected(store, clock):
    with pytest.raises(ValidationError) as exc_info:
        UndoBuffer(store, clock=clock, window_ms=-1)

    assert exc_info.value.status_code == 422
    assert exc_info.value.details["field"] == "window_ms"


def test_negative_capture_window_keeps_entry(undo_buffer, store):
    fern = store.add_plant(fern_form())
    plant = store.delete_plant(fern.id)
    undo_buffer.capture(plant)

    with pytest.raises(ValidationError) as exc_info:
        undo_buffer.capture(plant, window_ms=-5)

    assert exc_info.value.details == {"field": "window_ms", "value": "-5", "constraint": ">= 0"}
    assert undo_buffer.peek() == plant


def test_restore_conflict_keeps_entry(undo_buffer, store):
    fern = store.add_plant(fern_form())
    plant = store.delete_plant(fern.id)
    undo_buffer.capture(plant)
    store.restore_plant(plant)

    with pytest.raises(ValidationError):
        undo_buffer.restore()
    assert undo_buffer.has_entry
