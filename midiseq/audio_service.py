"""Audio render loop that fills and submits sample buffers to an output sink."""

from __future__ import annotations

import logging
import queue
from typing import Protocol

from .audio_util import scale_signal
from .sample_buffer import SampleBuffer
from .ugens import AHREnv, Env

logger = logging.getLogger(__name__)

NUM_CHANNELS = 2


class AudioSink(Protocol):
    """An event-driven stereo output of 32-bit samples."""

    samples_per_second: int
    buffer_size_frames: int
    buffer_size_bytes: int

    def wait(self) -> None:
        """Block until the sink wants more samples."""

    def current_padding(self) -> int:
        """Frames queued in the sink and not yet played."""

    def write_buffer(self, samples, num_frames: int) -> None:
        """Submit the first ``num_frames`` stereo frames of ``samples``."""

    def start(self) -> None: ...

    def stop(self) -> None: ...


class AudioService:
    """Feeds a sink with samples until a ``"quit"`` command arrives.

    A ``"trig"`` command sets :attr:`trig` for the next buffer.
    """

    def __init__(self, sink: AudioSink, commands: queue.Queue[str]) -> None:
        self.sink = sink
        self.commands = commands
        self.seconds_per_sample = 1.0 / sink.samples_per_second
        self.buffer_size_bytes = sink.buffer_size_bytes
        self.buffer_size_frames = sink.buffer_size_frames
        self.sample_buffer = SampleBuffer(self.buffer_size_bytes)
        self.sample_counter = 0

        self.env = Env()
        self.amp_env = AHREnv()
        self.mod_env = AHREnv()
        self.freq = 120.0
        self.r = 0.0
        self.trig = False

    def _drain_commands(self) -> bool:
        """Handle pending commands; return True when asked to quit."""
        self.trig = False
        while True:
            try:
                message = self.commands.get_nowait()
            except queue.Empty:
                return False
            if message == "quit":
                logger.info("audio thread: %s", message)
                return True
            if message == "trig":
                self.trig = True

    def run(self) -> None:
        self.sample_buffer.zero()
        self.sink.write_buffer(self.sample_buffer.samples, self.buffer_size_frames)
        self.sink.start()

        quit_requested = False
        while not quit_requested:
            self.sink.wait()
            quit_requested = self._drain_commands()

            padding = self.sink.current_padding()
            num_frames = self.buffer_size_frames - padding
            self.fill_sample_buffer(num_frames * NUM_CHANNELS)
            self.sink.write_buffer(self.sample_buffer.samples, num_frames)

        self.sink.stop()

    def fill_sample_buffer(self, num_samples: int) -> None:
        """Write ``num_samples`` samples, the same value to left and right."""
        for index in range(0, num_samples, NUM_CHANNELS):
            value = scale_signal(self.sample())
            self.sample_buffer[index] = value
            self.sample_buffer[index + 1] = value
            self.sample_counter += 1

    def sample(self) -> float:
        """The next output sample, in [-1, 1]; currently silence."""
        return 0.0

    def time(self) -> float:
        """Seconds of audio generated so far."""
        return self.sample_counter * self.seconds_per_sample