"""Step sequencer that turns per-step events into scheduled MIDI notes."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Union

from .beats import Beats, BeatUnit
from .midi_queue import MidiQueue
from .rng import RngService


@dataclass
class NoteEvent:
    """A single note held for ``duration`` ticks."""

    note: int = 0
    velocity: int = 0
    duration: int = 0


@dataclass
class RollEvent:
    """A note repeated ``num_repeats`` times, one every ``total_duration`` ticks."""

    note: int = 0
    velocity: int = 0
    num_repeats: int = 0
    total_duration: int = 0
    rest_duration: int = 0


SubEvent = Union[NoteEvent, RollEvent]


@dataclass
class Event:
    """What a sequencer step plays, and under which conditions."""

    on: bool = False
    one_shot: bool = False
    offset: int = 0
    probability: int = 100
    channel: int = 1
    sub_event: SubEvent = field(default_factory=NoteEvent)


class Sequence:
    """A looping row of ``num_steps`` steps, one step per ``step_size`` beat."""

    def __init__(
        self,
        beats: Beats,
        midi_queue: MidiQueue,
        channel: int,
        num_steps: int,
        step_size: BeatUnit,
        rng: RngService | None = None,
    ) -> None:
        if num_steps <= 0:
            raise ValueError(f"a sequence needs at least one step, got {num_steps}")
        self.beats = beats
        self.midi_queue = midi_queue
        self.channel = channel
        self.num_steps = num_steps
        self.step_size = step_size
        self.rng = rng if rng is not None else RngService()
        self.events = [Event() for _ in range(num_steps)]
        self.cur_step = 0

    def add_event(self, index: int, event: Event) -> None:
        """Place a copy of ``event`` at step ``index``."""
        if not 0 <= index < self.num_steps:
            raise IndexError(
                f"step {index} out of range for sequence of {self.num_steps} steps"
            )
        self.events[index] = replace(event)

    def tick(self, cur_tick: int) -> None:
        if not self.is_beat(cur_tick):
            return
        event = self.events[self.cur_step]
        if self.should_trigger(event):
            self.handle_event(event, cur_tick)
            if event.one_shot:
                event.on = False
        self.cur_step = (self.cur_step + 1) % self.num_steps

    def is_beat(self, cur_tick: int) -> bool:
        return self.beats.is_beat(cur_tick, self.step_size)

    def should_trigger(self, event: Event) -> bool:
        """Whether ``event`` plays now, honouring its probability in percent."""
        if event.probability == 100:
            return event.on
        return self.rng.rand(0, 99) < event.probability and event.on

    def handle_event(self, event: Event, cur_tick: int) -> None:
        """Schedule the notes of ``event`` starting at ``cur_tick``."""
        start = cur_tick + event.offset
        match event.sub_event:
            case NoteEvent(note=note, velocity=velocity, duration=duration):
                self.midi_queue.note_on_off(
                    event.channel, note, velocity, start, duration
                )
            case RollEvent() as roll:
                duration = roll.total_duration - roll.rest_duration
                for _ in range(roll.num_repeats):
                    self.midi_queue.note_on_off(
                        event.channel, roll.note, roll.velocity, start, duration
                    )
                    start += roll.total_duration