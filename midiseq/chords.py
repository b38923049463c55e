"""Triad construction from a root or from the lowest sounding note."""

from enum import IntEnum


class ChordType(IntEnum):
    MAJOR = 0
    MINOR = 1
    DIM = 2


class ChordInversion(IntEnum):
    ROOT = 0
    FIRST_INV = 1
    SECOND_INV = 2


_ROOT_POSITION = {
    ChordType.MAJOR: (0, 4, 7),
    ChordType.MINOR: (0, 3, 7),
    ChordType.DIM: (0, 3, 6),
}

_BY_LOWEST_NOTE = {
    (ChordType.MAJOR, ChordInversion.ROOT): (0, 4, 7),
    (ChordType.MAJOR, ChordInversion.FIRST_INV): (0, 3, 8),
    (ChordType.MAJOR, ChordInversion.SECOND_INV): (0, 5, 9),
    (ChordType.MINOR, ChordInversion.ROOT): (0, 3, 7),
    (ChordType.MINOR, ChordInversion.FIRST_INV): (0, 4, 9),
    (ChordType.MINOR, ChordInversion.SECOND_INV): (0, 5, 8),
    (ChordType.DIM, ChordInversion.ROOT): (0, 3, 6),
    (ChordType.DIM, ChordInversion.FIRST_INV): (0, 3, 9),
    (ChordType.DIM, ChordInversion.SECOND_INV): (0, 6, 9),
}


def create_chord_by_root(
    root: int, chord_type: ChordType, inversion: ChordInversion
) -> list[int]:
    """Triad on ``root``; inversions drop the upper voices below the root."""
    first, third, fifth = _ROOT_POSITION[ChordType(chord_type)]
    inversion = ChordInversion(inversion)
    if inversion is ChordInversion.ROOT:
        offsets = [first, third, fifth]
    elif inversion is ChordInversion.FIRST_INV:
        offsets = [third - 12, fifth - 12, first]
    else:
        offsets = [fifth - 12, first, third]
    return [root + offset for offset in offsets]


def create_chord_by_lowest_note(
    lowest_note: int, chord_type: ChordType, inversion: ChordInversion
) -> list[int]:
    """Triad whose bottom note is ``lowest_note``."""
    offsets = _BY_LOWEST_NOTE[ChordType(chord_type), ChordInversion(inversion)]
    return [lowest_note + offset for offset in offsets]