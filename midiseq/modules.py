"""Playable modules, each pairing a tempo with a generator or a sequencer."""

from __future__ import annotations

from .beats import Beats, BeatUnit
from .generator_chord import GeneratorChord
from .generator_chord_single_note import GeneratorChordSingleNote
from .generator_interval import GeneratorInterval
from .generator_single_note import GeneratorSingleNote
from .midi_queue import MidiQueue
from .multi_sequence import MultiSequence
from .rng import RngService
from .sequence import Event, NoteEvent, RollEvent


class ModuleChord:
    """Random chords on channel 1."""

    def __init__(self, midi_queue: MidiQueue, rng: RngService) -> None:
        self.midi_queue = midi_queue
        self.rng = rng
        self.ticks_per_64_note = 60
        self.beats = Beats(self.ticks_per_64_note)
        self.channel = 1
        self.generator_chord = GeneratorChord(self.beats, midi_queue, rng, self.channel)

    def tick(self, message: str, cur_tick: int) -> None:
        self.generator_chord.tick(message, cur_tick)


class ModuleChordSeq:
    """Random chords on channel 1 over a four-track drum pattern on channel 2."""

    KICK_TRACK = 0
    SNARE_TRACK = 1
    CLOSED_HAT_TRACK = 2
    OPEN_HAT_TRACK = 3

    KICK_NOTE = 36
    SNARE_NOTE = 37
    CLOSED_HAT_NOTE = 38
    OPEN_HAT_NOTE = 39

    def __init__(self, midi_queue: MidiQueue, rng: RngService) -> None:
        self.midi_queue = midi_queue
        self.rng = rng
        self.ticks_per_64_note = 40
        self.beats = Beats(self.ticks_per_64_note)
        self.chord_channel = 1
        self.generator_chord = GeneratorChord(
            self.beats, midi_queue, rng, self.chord_channel
        )
        self.seq_channel = 2
        self.multi_sequence = MultiSequence(
            self.beats,
            midi_queue,
            self.seq_channel,
            8,
            BeatUnit.B_16,
            4,
            rng,
        )

        self.add_note_event(self.KICK_TRACK, 0, self.KICK_NOTE)
        self.add_note_event(self.KICK_TRACK, 4, self.KICK_NOTE)

        self.add_note_event(self.SNARE_TRACK, 4, self.SNARE_NOTE)

        hat = self.CLOSED_HAT_TRACK
        self.add_note_event(hat, 0, self.CLOSED_HAT_NOTE)
        self.add_note_prob_event(hat, 1, 50, self.CLOSED_HAT_NOTE)
        self.add_note_event(hat, 2, self.CLOSED_HAT_NOTE)
        self.add_note_prob_event(hat, 3, 30, self.CLOSED_HAT_NOTE)
        self.add_note_event(hat, 4, self.CLOSED_HAT_NOTE)
        self.add_note_prob_event(hat, 5, 10, self.CLOSED_HAT_NOTE)
        self.add_note_event(hat, 6, self.CLOSED_HAT_NOTE)
        self.add_note_prob_event(hat, 7, 5, self.CLOSED_HAT_NOTE)

    def tick(self, message: str, cur_tick: int) -> None:
        if message == "n":
            self.generator_chord.generate_next_chord()
        self.generator_chord.tick("", cur_tick)
        self.multi_sequence.tick(cur_tick)

    def _roll(self, note: int) -> RollEvent:
        return RollEvent(
            note=note,
            velocity=100,
            num_repeats=4,
            total_duration=self.beats.ticks_per_beat(BeatUnit.B_64),
            rest_duration=self.beats.ticks_per_beat(BeatUnit.B_256),
        )

    def _note(self, note: int) -> NoteEvent:
        return NoteEvent(
            note=note,
            velocity=100,
            duration=self.beats.ticks_per_beat(BeatUnit.B_16),
        )

    def add_roll_event(self, track: int, index: int, note: int) -> None:
        self.multi_sequence[track].add_event(
            index, Event(on=True, channel=self.seq_channel, sub_event=self._roll(note))
        )

    def add_roll_event_one_shot(self, track: int, index: int, note: int) -> None:
        self.multi_sequence[track].add_event(
            index,
            Event(
                on=True,
                one_shot=True,
                channel=self.seq_channel,
                sub_event=self._roll(note),
            ),
        )

    def add_note_event(self, track: int, index: int, note: int) -> None:
        self.multi_sequence[track].add_event(
            index, Event(on=True, channel=self.seq_channel, sub_event=self._note(note))
        )

    def add_note_offset_event(
        self, track: int, index: int, offset: int, note: int
    ) -> None:
        self.multi_sequence[track].add_event(
            index,
            Event(
                on=True,
                offset=offset,
                channel=self.seq_channel,
                sub_event=self._note(note),
            ),
        )

    def add_note_prob_event(
        self, track: int, index: int, probability: int, note: int
    ) -> None:
        self.multi_sequence[track].add_event(
            index,
            Event(
                on=True,
                probability=probability,
                channel=self.seq_channel,
                sub_event=self._note(note),
            ),
        )


class ModuleChordSingleNote:
    """In-key chords under a single-note line on channel 1."""

    def __init__(self, midi_queue: MidiQueue, rng: RngService) -> None:
        self.midi_queue = midi_queue
        self.rng = rng
        self.ticks_per_64_note = 50
        self.beats = Beats(self.ticks_per_64_note)
        self.channel = 1
        self.generator_chord_single_note = GeneratorChordSingleNote(
            self.beats, midi_queue, rng, self.channel
        )

    def tick(self, message: str, cur_tick: int) -> None:
        self.generator_chord_single_note.tick(message, cur_tick)


class ModuleInterval:
    """Random two-note intervals on channel 1."""

    def __init__(self, midi_queue: MidiQueue, rng: RngService) -> None:
        self.midi_queue = midi_queue
        self.rng = rng
        self.ticks_per_64_note = 50
        self.beats = Beats(self.ticks_per_64_note)
        self.channel = 1
        self.generator_interval = GeneratorInterval(
            self.beats, midi_queue, rng, self.channel
        )

    def tick(self, message: str, cur_tick: int) -> None:
        self.generator_interval.tick(message, cur_tick)


class ModuleSingleNote:
    """Random single notes on channel 1."""

    def __init__(self, midi_queue: MidiQueue, rng: RngService) -> None:
        self.midi_queue = midi_queue
        self.rng = rng
        self.ticks_per_64_note = 48
        self.beats = Beats(self.ticks_per_64_note)
        self.channel = 1
        self.generator_single_note = GeneratorSingleNote(
            self.beats, midi_queue, rng, self.channel
        )

    def tick(self, message: str, cur_tick: int) -> None:
        self.generator_single_note.tick(message, cur_tick)


class ModuleStressTest:
    """Dense five-note clusters on every sixteenth note."""

    CLUSTER = (0, 3, 7, 10, 14)

    def __init__(self, midi_queue: MidiQueue, rng: RngService) -> None:
        self.midi_queue = midi_queue
        self.rng = rng
        self.ticks_per_64_note = 50
        self.beats = Beats(self.ticks_per_64_note)
        self.channel = 1

    def tick(self, message: str, cur_tick: int) -> None:
        if self.beats.is_beat(cur_tick, BeatUnit.B_16):
            self.play(cur_tick)

    def play(self, cur_tick: int) -> None:
        base = 45 + self.rng.rand(0, 10)
        duration = self.beats.ticks_per_beat(BeatUnit.B_32)
        for step in self.CLUSTER:
            self.midi_queue.note_on_off(
                self.channel, base + step, 100, cur_tick, duration
            )