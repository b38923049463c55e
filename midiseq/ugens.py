"""Per-sample envelope generators."""

import math
from dataclasses import dataclass

from .audio_util import ms_to_samples


@dataclass
class Env:
    """Gate that stays at 1.0 for a hold time after each trigger."""

    timer: int = 0
    on: bool = False

    def get(self, trig: bool, hold_time: float, t: float) -> float:
        hold_samples = ms_to_samples(hold_time)
        if trig:
            self.on = True
            self.timer = 0
        out = 1.0 if self.timer < hold_samples else 0.0
        self.timer += 1
        return out


@dataclass
class AHREnv:
    """Linear attack, hold and release envelope; times in milliseconds."""

    timer: int = 0
    on: bool = False
    sig: float = 0.0

    def get(self, trig: bool, a: float, h: float, r: float, t: float) -> float:
        attack = ms_to_samples(a)
        hold = ms_to_samples(h)
        release = ms_to_samples(r)
        attack_delta = 1.0 / attack if attack else math.inf
        release_delta = 1.0 / release if release else math.inf

        if trig:
            self.sig = 0.0
            self.timer = 0

        if self.timer < attack:
            self.sig += attack_delta
        elif self.timer < attack + hold:
            self.sig = 1.0
        elif self.timer < attack + hold + release:
            self.sig -= release_delta
        else:
            self.sig = 0.0

        self.timer += 1
        return self.sig