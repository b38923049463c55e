"""Fixed-size buffer of 32-bit audio samples."""

from array import array

SAMPLE_SIZE = 4


class SampleBuffer:
    """Holds as many 32-bit samples as fit in ``size_bytes``."""

    def __init__(self, size_bytes: int = 0) -> None:
        self.samples = array("I")
        self.resize(size_bytes)

    def resize(self, size_bytes: int) -> None:
        """Reallocate for ``size_bytes`` bytes; contents become zero."""
        if size_bytes < 0:
            raise ValueError(f"buffer size must not be negative, got {size_bytes}")
        self.samples = array("I", [0]) * (size_bytes // SAMPLE_SIZE)

    def zero(self) -> None:
        for index in range(len(self.samples)):
            self.samples[index] = 0

    def __len__(self) -> int:
        return len(self.samples)

    def __getitem__(self, index: int) -> int:
        return self.samples[index]

    def __setitem__(self, index: int, value: int) -> None:
        self.samples[index] = value