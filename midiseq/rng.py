"""Random integer source shared by the generators."""

import random


class RngService:
    """Uniform random integers; pass ``seed`` for a reproducible stream."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def rand(self, low: int, high: int) -> int:
        """Random integer between ``low`` and ``high`` inclusive."""
        if low > high:
            raise ValueError(f"empty range: {low} > {high}")
        return self._random.randint(low, high)