import pytest

from midiseq.midi_queue import (
    MidiEventType,
    MidiQueue,
    QueueFullError,
    cc_event,
    note_off_event,
    note_on_event,
)
from midiseq.recorder import RecordingMidiService


def ticks(queue):
    return [event.tick for event in queue.events()]


def test_queue_operations():
    q = MidiQueue(RecordingMidiService())
    for tick in (99, 2, 55, 43):
        q.add_event(note_on_event(1, 1, 100, tick))

    assert len(q) == 4
    assert ticks(q) == [99, 55, 43, 2]

    q.handle_events(43)
    assert len(q) == 2
    assert ticks(q) == [99, 55]

    q.add_event(note_on_event(1, 1, 100, 999))
    assert len(q) == 3
    assert ticks(q) == [999, 99, 55]

    q.handle_events(999)
    assert len(q) == 0

    q.add_event(note_on_event(1, 1, 100, 123))
    assert len(q) == 1
    assert ticks(q) == [123]


def test_queue_side_effects():
    m = RecordingMidiService()
    q = MidiQueue(m)
    q.add_event(note_on_event(1, 1, 10, 99))
    q.add_event(note_on_event(1, 2, 11, 2))
    q.add_event(note_on_event(1, 3, 12, 55))
    q.add_event(note_on_event(1, 4, 13, 43))

    q.handle_events(43)
    assert m.messages == ["noteOn 1 2 11", "noteOn 1 4 13"]

    q.add_event(cc_event(1, 1, 7, 45))
    q.handle_events(46)
    assert len(m.messages) == 3
    assert m.messages[2] == "cc 1 1 7"


def test_note_off_sent_before_note_on_at_same_tick():
    m = RecordingMidiService()
    q = MidiQueue(m)
    q.add_event(note_on_event(1, 5, 100, 10))
    q.add_event(note_off_event(1, 4, 10))
    q.handle_events(10)
    assert m.messages == ["noteOff 1 4", "noteOn 1 5 100"]


def test_note_on_off_schedules_pair():
    m = RecordingMidiService()
    q = MidiQueue(m)
    q.note_on_off(2, 60, 90, 0, 5)
    assert [(e.type, e.tick) for e in q.events()] == [
        (MidiEventType.NOTE_OFF, 5),
        (MidiEventType.NOTE_ON, 0),
    ]
    q.handle_events(4)
    assert m.messages == ["noteOn 2 60 90"]
    q.handle_events(5)
    assert m.messages == ["noteOn 2 60 90", "noteOff 2 60"]


def test_capacity_exceeded_raises():
    q = MidiQueue(RecordingMidiService(), capacity=2)
    q.note_on(1, 1, 1, 0)
    q.note_off(1, 1, 1)
    with pytest.raises(QueueFullError):
        q.cc(1, 1, 1, 2)
    assert len(q) == 2


def test_handle_events_on_empty_queue_sends_nothing():
    m = RecordingMidiService()
    q = MidiQueue(m)
    q.handle_events(1000)
    assert m.messages == []