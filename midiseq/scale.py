"""Seven-note diatonic modes."""

import logging

from .chords import ChordType

logger = logging.getLogger(__name__)

MODES: tuple[tuple[int, ...], ...] = (
    (0, 2, 4, 5, 7, 9, 11),
    (0, 2, 3, 5, 7, 9, 10),
    (0, 1, 3, 5, 7, 8, 10),
    (0, 2, 4, 6, 7, 9, 11),
    (0, 2, 4, 5, 7, 9, 10),
    (0, 2, 3, 5, 7, 8, 10),
    (0, 1, 3, 5, 6, 8, 10),
)

DIATONIC_CHORD_TYPES: tuple[ChordType, ...] = (
    ChordType.MAJOR,
    ChordType.MINOR,
    ChordType.MINOR,
    ChordType.MAJOR,
    ChordType.MAJOR,
    ChordType.MINOR,
    ChordType.DIM,
)


class Scale:
    """A mode of the major scale starting on ``root``."""

    def __init__(self, root: int, mode: int) -> None:
        if not 0 <= mode < len(MODES):
            raise ValueError(f"scale mode out of range: {mode}")
        self.root = root
        self.mode = mode
        self.intervals = MODES[mode]
        self.chord_types = DIATONIC_CHORD_TYPES[mode:] + DIATONIC_CHORD_TYPES[:mode]

    def note(self, degree: int) -> int:
        """MIDI note of the zero-based ``degree``; negative degrees give 0."""
        if degree < 0:
            logger.warning("negative degree passed to Scale.note(): %d", degree)
            return 0
        octave, step = divmod(degree, 7)
        return self.root + 12 * octave + self.intervals[step]

    def chord_type(self, degree: int) -> ChordType:
        """Quality of the diatonic triad built on ``degree``."""
        return self.chord_types[degree % 7]