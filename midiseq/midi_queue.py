"""Time-ordered queue of pending MIDI events."""

from __future__ import annotations

from bisect import insort_left
from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class MidiEventType(Enum):
    NOTE_ON = "NOTE_ON"
    NOTE_OFF = "NOTE_OFF"
    CC = "CC"


@dataclass(frozen=True)
class MidiEvent:
    """A MIDI event scheduled at ``tick``."""

    type: MidiEventType
    channel: int
    tick: int
    note: int = 0
    velocity: int = 0
    controller: int = 0
    value: int = 0

    def __str__(self) -> str:
        return f"type: {self.type.value} note: {self.note} tick: {self.tick}"


def note_on_event(channel: int, note: int, velocity: int, tick: int) -> MidiEvent:
    return MidiEvent(MidiEventType.NOTE_ON, channel, tick, note=note, velocity=velocity)


def note_off_event(channel: int, note: int, tick: int) -> MidiEvent:
    return MidiEvent(MidiEventType.NOTE_OFF, channel, tick, note=note)


def cc_event(channel: int, controller: int, value: int, tick: int) -> MidiEvent:
    return MidiEvent(MidiEventType.CC, channel, tick, controller=controller, value=value)


class QueueFullError(Exception):
    """Raised when an event is added to a queue at capacity."""


class MidiOutput(Protocol):
    def note_on(self, channel: int, note: int, velocity: int) -> None: ...

    def note_off(self, channel: int, note: int) -> None: ...

    def cc(self, channel: int, controller: int, value: int) -> None: ...


def _sort_key(event: MidiEvent) -> tuple[int, bool]:
    # Latest first; within a tick note-ons sit earlier so they are sent last.
    return (-event.tick, event.type is not MidiEventType.NOTE_ON)


class MidiQueue:
    """Holds scheduled events and sends those that are due to a MIDI output."""

    def __init__(self, midi_service: MidiOutput, capacity: int = 10000) -> None:
        self.midi_service = midi_service
        self.capacity = capacity
        self._events: list[MidiEvent] = []

    def __len__(self) -> int:
        return len(self._events)

    def events(self) -> list[MidiEvent]:
        """Pending events, latest tick first."""
        return list(self._events)

    def note_on_off(
        self, channel: int, note: int, velocity: int, tick: int, duration: int
    ) -> None:
        self.note_on(channel, note, velocity, tick)
        self.note_off(channel, note, tick + duration)

    def note_on(self, channel: int, note: int, velocity: int, tick: int) -> None:
        self.add_event(note_on_event(channel, note, velocity, tick))

    def note_off(self, channel: int, note: int, tick: int) -> None:
        self.add_event(note_off_event(channel, note, tick))

    def cc(self, channel: int, controller: int, value: int, tick: int) -> None:
        self.add_event(cc_event(channel, controller, value, tick))

    def add_event(self, event: MidiEvent) -> None:
        if len(self._events) >= self.capacity:
            raise QueueFullError(f"MidiQueue at capacity ({self.capacity})")
        insort_left(self._events, event, key=_sort_key)

    def handle_events(self, cur_tick: int) -> None:
        """Send every event scheduled at or before ``cur_tick``."""
        while self._events and self._events[-1].tick <= cur_tick:
            self.handle_event(self._events.pop())

    def handle_event(self, event: MidiEvent) -> None:
        match event.type:
            case MidiEventType.NOTE_ON:
                self.midi_service.note_on(event.channel, event.note, event.velocity)
            case MidiEventType.NOTE_OFF:
                self.midi_service.note_off(event.channel, event.note)
            case MidiEventType.CC:
                self.midi_service.cc(event.channel, event.controller, event.value)