"""Generator of single random notes avoiding small or octave leaps."""

from __future__ import annotations

from .beats import Beats, BeatUnit
from .guitar import GuitarString, guitar_to_midi
from .midi_queue import MidiQueue
from .rng import RngService


class GeneratorSingleNote:
    """Plays one note per quarter note, changing it every ``num_repeats`` beats."""

    def __init__(
        self, beats: Beats, midi_queue: MidiQueue, rng: RngService, channel: int
    ) -> None:
        self.beats = beats
        self.midi_queue = midi_queue
        self.rng = rng
        self.channel = channel
        self.counter = 0
        self.cur_note = 0
        self.prev_note = 0
        self.low_note = guitar_to_midi(GuitarString.G, 0)
        self.high_note = guitar_to_midi(GuitarString.HIGH_E, 4)
        self.num_repeats = 4
        self.interval_blacklist = (0, 1, 2, 12)
        self.generate_next_note()

    def tick(self, message: str, cur_tick: int) -> None:
        if self.beats.is_beat(cur_tick, BeatUnit.B_4):
            if self.counter % self.num_repeats == 0:
                self.generate_next_note()
            self.play_note(cur_tick, self.cur_note, BeatUnit.B_8)
            self.counter += 1

    def generate_next_note(self) -> None:
        note = self.rng.rand(self.low_note, self.high_note)
        while self.is_blacklisted(self.prev_note, note):
            note = self.rng.rand(self.low_note, self.high_note)
        self.cur_note = note
        self.prev_note = note

    def is_blacklisted(self, prev_note: int, cur_note: int) -> bool:
        """True when the leap between the notes is a forbidden interval."""
        return abs(prev_note - cur_note) in self.interval_blacklist

    def play_note(self, cur_tick: int, note: int, duration: BeatUnit) -> None:
        self.midi_queue.note_on_off(
            self.channel, note, 100, cur_tick, self.beats.ticks_per_beat(duration)
        )