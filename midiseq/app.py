"""The sequencer application that drives the playable modules."""

from __future__ import annotations

from enum import Enum

from .midi_queue import MidiOutput, MidiQueue
from .modules import (
    ModuleChord,
    ModuleChordSeq,
    ModuleChordSingleNote,
    ModuleInterval,
    ModuleSingleNote,
    ModuleStressTest,
)
from .rng import RngService


class MidiAppMode(Enum):
    CHORD = "chord"
    INTERVAL = "interval"
    SINGLE_NOTE = "single_note"
    CHORD_SINGLE_NOTE = "chord_single_note"


def next_mode(mode: MidiAppMode) -> MidiAppMode:
    """The mode after ``mode``, wrapping round to the first."""
    modes = list(MidiAppMode)
    return modes[(modes.index(mode) + 1) % len(modes)]


class MidiApp:
    """Advances one tick per call, sending due events and running the active module.

    Messages: ``"m"`` switches mode, ``" "`` toggles play; others are passed on
    to the active module.
    """

    def __init__(self, midi_service: MidiOutput, rng: RngService | None = None) -> None:
        self.cur_tick = 0
        self.playing = False
        self.mode = MidiAppMode.CHORD
        self.midi_service = midi_service
        self.midi_queue = MidiQueue(midi_service)
        self.rng = rng if rng is not None else RngService()

        self.module_chord = ModuleChord(self.midi_queue, self.rng)
        self.module_chord_seq = ModuleChordSeq(self.midi_queue, self.rng)
        self.module_single_note = ModuleSingleNote(self.midi_queue, self.rng)
        self.module_interval = ModuleInterval(self.midi_queue, self.rng)
        self.module_stress_test = ModuleStressTest(self.midi_queue, self.rng)
        self.module_chord_single_note = ModuleChordSingleNote(self.midi_queue, self.rng)

        self._modules = {
            MidiAppMode.CHORD: self.module_chord,
            MidiAppMode.INTERVAL: self.module_interval,
            MidiAppMode.SINGLE_NOTE: self.module_single_note,
            MidiAppMode.CHORD_SINGLE_NOTE: self.module_chord_single_note,
        }

    def tick(self, message: str) -> None:
        # Events are sent one tick late so that generating for the current
        # tick never races with sending it.
        self.midi_queue.handle_events(self.cur_tick - 1)

        if message == "m":
            self.mode = next_mode(self.mode)
        elif message == " ":
            self.playing = not self.playing

        if not self.playing:
            return

        self._modules[self.mode].tick(message, self.cur_tick)
        self.cur_tick += 1