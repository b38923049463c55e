"""Tick-driven MIDI sequencer library with chord, interval and note-line generators."""

__version__ = "0.1.0"