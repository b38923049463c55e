"""Generator of two-note intervals for ear training."""

from __future__ import annotations

from .beats import Beats, BeatUnit
from .guitar import GuitarString, guitar_to_midi
from .midi_queue import MidiQueue
from .rng import RngService

# Minor third, major third, perfect fourth, perfect fifth.
INTERVAL_OFFSETS = (3, 4, 5, 7)


class GeneratorInterval:
    """Plays an interval each quarter note, changing it every ``num_repeats`` beats."""

    def __init__(
        self, beats: Beats, midi_queue: MidiQueue, rng: RngService, channel: int
    ) -> None:
        self.beats = beats
        self.midi_queue = midi_queue
        self.rng = rng
        self.channel = channel
        self.low_limit = guitar_to_midi(GuitarString.D, 0)
        self.high_limit = guitar_to_midi(GuitarString.D, 5)
        self.cur_interval_low = 0
        self.prev_interval_low = 0
        self.cur_interval_high = 0
        self.num_repeats = 8
        self.counter = 0
        self.generate_next_interval()

    def tick(self, message: str, cur_tick: int) -> None:
        if self.beats.is_beat(cur_tick, BeatUnit.B_4):
            if self.counter % self.num_repeats == 0:
                self.generate_next_interval()
            self.play(cur_tick)
            self.counter += 1

    def generate_next_interval(self) -> None:
        low = self.rng.rand(self.low_limit, self.high_limit)
        while low == self.prev_interval_low:
            low = self.rng.rand(self.low_limit, self.high_limit)
        self.cur_interval_low = low
        self.prev_interval_low = low
        offset = INTERVAL_OFFSETS[self.rng.rand(0, len(INTERVAL_OFFSETS) - 1)]
        self.cur_interval_high = low + offset

    def play(self, cur_tick: int) -> None:
        length = self.beats.ticks_per_beat(BeatUnit.B_8)
        for note in (self.cur_interval_low, self.cur_interval_high):
            self.midi_queue.note_on_off(self.channel, note, 100, cur_tick, length)