"""Generator playing in-key chords under a repeating single-note line."""

from __future__ import annotations

from enum import Enum

from .beats import Beats, BeatUnit
from .guitar import GuitarString, guitar_to_midi
from .midi_queue import MidiQueue
from .random_chord import RandomChordService
from .rng import RngService
from .scale import Scale

_HIGHEST_DEGREE = 13


class SingleNoteMode(Enum):
    """NORMAL walks a melodic line; DEGREE repeats one scale degree."""

    NORMAL = "normal"
    DEGREE = "degree"


class GeneratorChordSingleNote:
    """Chords on quarter notes with a single-note line on eighth notes."""

    def __init__(
        self,
        beats: Beats,
        midi_queue: MidiQueue,
        rng: RngService,
        channel: int,
        mode: SingleNoteMode = SingleNoteMode.DEGREE,
    ) -> None:
        self.beats = beats
        self.midi_queue = midi_queue
        self.rng = rng
        self.root = guitar_to_midi(GuitarString.LOW_E, 8)
        self.scale_mode = 0
        self.auto_switch = False
        self.mode = mode
        self.mute_single_note_line = False
        self.random_chord_service = RandomChordService(rng, self.root, self.scale_mode)
        self.channel = channel
        self.counter = 0
        self.scale = Scale(self.root, self.scale_mode)
        self.cur_chord: list[int] = []
        self.single_note_line_length = 16
        self.single_note_line_num_notes = 7
        self.single_note_line_offset = 0
        self.single_note_line = [0] * self.single_note_line_length

        if mode is SingleNoteMode.NORMAL:
            self.single_note_line_on_off = [
                i <= self.single_note_line_num_notes
                for i in range(self.single_note_line_length)
            ]
        else:
            # Two notes on, two notes off, repeating.
            self.single_note_line_on_off = [
                i % 4 < 2 for i in range(self.single_note_line_length)
            ]

        self.generate_chord()
        self.generate_single_note_line()

    def tick(self, message: str, cur_tick: int) -> None:
        if message == "n":
            self.generate_chord()
            self.generate_single_note_line()
        elif message == "s":
            self.generate_single_note_line()
        elif message == "a":
            self.auto_switch = not self.auto_switch
        elif message == "u":
            self.mute_single_note_line = not self.mute_single_note_line

        if self.beats.is_beat(cur_tick, BeatUnit.B_8):
            if self.auto_switch and self.counter % 32 == 0:
                self.generate_chord()
                self.generate_single_note_line()
            if not self.mute_single_note_line:
                self.play_single_note(cur_tick)
            self.counter += 1

        if self.beats.is_beat(cur_tick, BeatUnit.B_4):
            self.play_chord(cur_tick, self.cur_chord, BeatUnit.B_8)

    def generate_chord(self) -> None:
        self.cur_chord = self.random_chord_service.chord()

    def generate_single_note_line(self) -> None:
        if self.mode is SingleNoteMode.NORMAL:
            self.shuffle(self.single_note_line_on_off)
            direction = -1 if self.rng.rand(0, 1) == 0 else 1
            degree = self.rng.rand(0, _HIGHEST_DEGREE)
            for i, active in enumerate(self.single_note_line_on_off):
                if active:
                    self.single_note_line[i] = (
                        self.scale.note(degree) + self.single_note_line_offset
                    )
                    degree, direction = self.next_note(degree, direction)
        else:
            degree = self.rng.rand(0, _HIGHEST_DEGREE)
            note = self.scale.note(degree) + self.single_note_line_offset
            self.single_note_line = [note] * self.single_note_line_length

    def next_note(self, note: int, direction: int) -> tuple[int, int]:
        """Step the degree by 1 or 2, bouncing off the range ends.

        Returns the new degree and the direction to keep walking in.
        """
        new_note = note + direction * self.rng.rand(1, 2)
        if not 0 <= new_note <= _HIGHEST_DEGREE:
            direction = -direction
            new_note = note + direction * self.rng.rand(1, 2)
        return new_note, direction

    def play_chord(self, cur_tick: int, chord: list[int], duration: BeatUnit) -> None:
        length = self.beats.ticks_per_beat(duration)
        for note in chord:
            self.midi_queue.note_on_off(self.channel, note, 70, cur_tick, length)

    def play_single_note(self, cur_tick: int) -> None:
        i = self.counter % self.single_note_line_length
        if self.single_note_line_on_off[i]:
            self.midi_queue.note_on_off(
                self.channel,
                self.single_note_line[i],
                100,
                cur_tick,
                self.beats.ticks_per_beat(BeatUnit.B_8),
            )

    def random_bool(self, probability: int) -> bool:
        """True with ``probability`` chances out of ten."""
        return self.rng.rand(0, 9) < probability

    def shuffle(self, values: list) -> None:
        """Shuffle ``values`` in place using the generator's random source."""
        for i in range(len(values) - 1, 0, -1):
            j = self.rng.rand(0, i)
            values[i], values[j] = values[j], values[i]