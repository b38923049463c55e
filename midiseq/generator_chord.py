"""Chord generator that plays a new triad on quarter notes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .beats import Beats, BeatUnit
from .chords import ChordInversion, ChordType, create_chord_by_lowest_note
from .guitar import GuitarString, guitar_to_midi
from .midi_queue import MidiQueue
from .random_chord import RandomChordService
from .rng import RngService


@dataclass(frozen=True)
class VoiceLeadingChord:
    """A diatonic chord voiced so that neighbours in the table share notes."""

    degree: int
    lowest_note: int
    chord_type: ChordType
    inversion: ChordInversion


_MAJ, _MIN = ChordType.MAJOR, ChordType.MINOR
_ROOT, _FIRST, _SECOND = (
    ChordInversion.ROOT,
    ChordInversion.FIRST_INV,
    ChordInversion.SECOND_INV,
)

CHORDS_VOICE_LEADING: tuple[VoiceLeadingChord, ...] = (
    VoiceLeadingChord(1, 0, _MAJ, _ROOT),
    VoiceLeadingChord(6, 0, _MIN, _FIRST),
    VoiceLeadingChord(4, 0, _MAJ, _SECOND),
    VoiceLeadingChord(2, 2, _MIN, _ROOT),
    VoiceLeadingChord(5, 2, _MAJ, _SECOND),
    VoiceLeadingChord(3, 4, _MIN, _ROOT),
    VoiceLeadingChord(1, 4, _MAJ, _FIRST),
    VoiceLeadingChord(6, 4, _MIN, _SECOND),
    VoiceLeadingChord(4, 5, _MAJ, _ROOT),
    VoiceLeadingChord(2, 5, _MIN, _FIRST),
    VoiceLeadingChord(5, 7, _MAJ, _ROOT),
    VoiceLeadingChord(3, 7, _MIN, _FIRST),
    VoiceLeadingChord(1, 7, _MAJ, _SECOND),
    VoiceLeadingChord(6, 9, _MIN, _ROOT),
    VoiceLeadingChord(4, 9, _MAJ, _FIRST),
    VoiceLeadingChord(2, 9, _MIN, _SECOND),
    VoiceLeadingChord(5, 11, _MAJ, _FIRST),
    VoiceLeadingChord(3, 11, _MIN, _SECOND),
)


class GeneratorChordMode(Enum):
    RANDOM = "random"
    VOICE_LEADING = "voice_leading"
    IN_KEY = "in_key"


class MajMinMode(Enum):
    MAJOR = "major"
    MINOR = "minor"
    MAJOR_MINOR = "major_minor"


class GeneratorChord:
    """Plays a chord every quarter note, changing it every ``num_repeats`` beats."""

    def __init__(
        self, beats: Beats, midi_queue: MidiQueue, rng: RngService, channel: int
    ) -> None:
        self.beats = beats
        self.midi_queue = midi_queue
        self.rng = rng
        self.random_chord_service = RandomChordService(
            rng, guitar_to_midi(GuitarString.LOW_E, 7), 5
        )
        self.channel = channel
        self.cur_chord: list[int] = []
        self.chord_counter = 0
        self.low_limit = guitar_to_midi(GuitarString.G, 3)
        self.high_limit = guitar_to_midi(GuitarString.G, 9)
        self.cur_lowest_note = 0
        self.prev_lowest_note = 0
        self.auto_switch = True
        self.num_repeats = 4
        self.mode = GeneratorChordMode.RANDOM
        self.maj_min_mode = MajMinMode.MAJOR
        self.voice_leading_target = 0
        self.voice_leading_index = 0
        self.voice_leading_low_limit = guitar_to_midi(GuitarString.G, 2)
        self.high_note_only = False
        self.generate_next_chord()

    def tick(self, message: str, cur_tick: int) -> None:
        if message == "n":
            self.generate_next_chord()
        elif message == "a":
            self.auto_switch = not self.auto_switch
        elif message == "h":
            self.high_note_only = not self.high_note_only

        if self.beats.is_beat(cur_tick, BeatUnit.B_4):
            if self.auto_switch and self.chord_counter % self.num_repeats == 0:
                self.generate_next_chord()
            self.play_chord(cur_tick, self.cur_chord, BeatUnit.B_8)
            self.chord_counter += 1

    def generate_next_chord(self) -> None:
        match self.mode:
            case GeneratorChordMode.RANDOM:
                self.generate_next_chord_random()
            case GeneratorChordMode.VOICE_LEADING:
                self.generate_next_chord_voice_leading()
            case GeneratorChordMode.IN_KEY:
                self.generate_next_chord_in_key()

    def generate_next_chord_random(self) -> None:
        """A chord on a random lowest note, never the same lowest note twice."""
        note = self.rng.rand(self.low_limit, self.high_limit)
        while note == self.prev_lowest_note:
            note = self.rng.rand(self.low_limit, self.high_limit)
        self.cur_lowest_note = note
        self.prev_lowest_note = note
        self.cur_chord = create_chord_by_lowest_note(
            note, self.random_chord_type(), self.random_chord_inversion()
        )

    def generate_next_chord_voice_leading(self) -> None:
        chord = CHORDS_VOICE_LEADING[self.next_voice_leading_index()]
        self.cur_chord = create_chord_by_lowest_note(
            chord.lowest_note + self.voice_leading_low_limit,
            chord.chord_type,
            chord.inversion,
        )

    def generate_next_chord_in_key(self) -> None:
        self.cur_chord = self.random_chord_service.chord()

    def next_voice_leading_index(self) -> int:
        """Step one place toward a random target in the voice-leading table."""
        while self.voice_leading_index == self.voice_leading_target:
            self.voice_leading_target = self.rng.rand(0, len(CHORDS_VOICE_LEADING) - 1)
        direction = 1 if self.voice_leading_target > self.voice_leading_index else -1
        self.voice_leading_index += direction
        return self.voice_leading_index

    def play_chord(self, cur_tick: int, chord: list[int], duration: BeatUnit) -> None:
        length = self.beats.ticks_per_beat(duration)
        notes = chord[-1:] if self.high_note_only else chord
        for note in notes:
            self.midi_queue.note_on_off(self.channel, note, 100, cur_tick, length)

    def random_chord_type(self) -> ChordType:
        match self.maj_min_mode:
            case MajMinMode.MAJOR:
                return ChordType.MAJOR
            case MajMinMode.MINOR:
                return ChordType.MINOR
            case _:
                return ChordType(self.rng.rand(0, 1))

    def random_chord_inversion(self) -> ChordInversion:
        return ChordInversion(self.rng.rand(0, 1))