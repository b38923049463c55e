"""Guitar string and fret positions expressed as MIDI note numbers."""

from enum import IntEnum


class GuitarString(IntEnum):
    """Strings of a guitar in standard tuning, lowest first."""

    LOW_E = 0
    A = 1
    D = 2
    G = 3
    B = 4
    HIGH_E = 5


_OPEN_STRING_NOTES = (40, 45, 50, 55, 59, 64)


def guitar_to_midi(string: GuitarString, fret: int) -> int:
    """MIDI note played on ``string`` at ``fret``."""
    return _OPEN_STRING_NOTES[GuitarString(string)] + fret