"""Several step sequences running side by side."""

from __future__ import annotations

from .beats import Beats, BeatUnit
from .midi_queue import MidiQueue
from .rng import RngService
from .sequence import Sequence


class MultiSequence:
    """A set of tracks sharing length, step size and MIDI channel."""

    def __init__(
        self,
        beats: Beats,
        midi_queue: MidiQueue,
        channel: int,
        num_steps: int,
        step_size: BeatUnit,
        num_tracks: int,
        rng: RngService | None = None,
    ) -> None:
        rng = rng if rng is not None else RngService()
        self.channel = channel
        self.num_steps = num_steps
        self.step_size = step_size
        self.tracks = [
            Sequence(beats, midi_queue, channel, num_steps, step_size, rng)
            for _ in range(num_tracks)
        ]

    def __getitem__(self, index: int) -> Sequence:
        return self.tracks[index]

    def __len__(self) -> int:
        return len(self.tracks)

    def tick(self, cur_tick: int) -> None:
        for track in self.tracks:
            track.tick(cur_tick)