"""Random diatonic triads within roughly two octaves of a scale."""

from .chords import ChordInversion
from .rng import RngService
from .scale import Scale

# Notes of each mode that fit above the second octave of the root.
MODE_UPPER_NOTES = (1, 2, 2, 1, 1, 2, 2)


class RandomChordService:
    """Picks random, possibly inverted, in-key triads without repeating the bass."""

    def __init__(self, rng: RngService, root: int, mode: int) -> None:
        self.rng = rng
        self.root = root
        self.mode = mode
        self.scale = Scale(root, mode)
        self.cur_low_degree = 0
        self.prev_low_degree = 0

    def chord(self) -> list[int]:
        """A random triad whose lowest degree differs from the previous one."""
        inversion = ChordInversion(self.rng.rand(0, 2))
        top_note = 13 + MODE_UPPER_NOTES[self.mode]
        if inversion is ChordInversion.ROOT:
            low_degree_limit = top_note - 4
        else:
            low_degree_limit = top_note - 5

        self._next_low_degree(low_degree_limit)
        low = self.cur_low_degree

        if inversion is ChordInversion.ROOT:
            degrees = (low, low + 2, low + 4)
        elif inversion is ChordInversion.FIRST_INV:
            degrees = (low, low + 2, low + 5)
        else:
            degrees = (low, low + 3, low + 5)
        return [self.scale.note(degree) for degree in degrees]

    def _next_low_degree(self, high_limit: int) -> None:
        degree = self.rng.rand(0, high_limit)
        while degree == self.prev_low_degree:
            degree = self.rng.rand(0, high_limit)
        self.cur_low_degree = degree
        self.prev_low_degree = degree