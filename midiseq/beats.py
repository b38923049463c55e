"""Musical beat units and their conversion to sequencer ticks."""

from enum import IntEnum


class BeatUnit(IntEnum):
    """Note lengths, from a 256th note up to a whole note."""

    B_256 = 0
    B_128 = 1
    B_64 = 2
    B_32 = 3
    B_16 = 4
    B_8 = 5
    B_4 = 6
    B_2 = 7
    B_1 = 8


def _div_trunc(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


class Beats:
    """Maps beat units to tick counts for a given resolution."""

    def __init__(self, ticks_per_64_note: int) -> None:
        t = ticks_per_64_note
        self._ticks = {
            BeatUnit.B_256: _div_trunc(t, 4),
            BeatUnit.B_128: _div_trunc(t, 2),
            BeatUnit.B_64: t,
            BeatUnit.B_32: t * 2,
            BeatUnit.B_16: t * 4,
            BeatUnit.B_8: t * 8,
            BeatUnit.B_4: t * 16,
            BeatUnit.B_2: t * 32,
            BeatUnit.B_1: t * 64,
        }

    def ticks_per_beat(self, unit: BeatUnit) -> int:
        """Number of ticks in one beat of ``unit``."""
        return self._ticks[BeatUnit(unit)]

    def is_beat(self, tick: int, unit: BeatUnit) -> bool:
        """True when ``tick`` falls exactly on a beat of ``unit``."""
        return tick % self.ticks_per_beat(unit) == 0

    def tick_to_beat(self, tick: int, unit: BeatUnit) -> int:
        """Index of the beat of ``unit`` that contains ``tick``."""
        return _div_trunc(tick, self.ticks_per_beat(unit))