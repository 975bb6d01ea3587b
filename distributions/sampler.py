"""
Seeded Sequence: the deterministic source of uniform draws for the forecast.

Every Bernoulli trial in the engine compares one draw from this sequence
against a payment probability. Identical seed + identical call count must give
identical draws on every machine, so that:
  - two runs with the same claims and probabilities return the same result
  - the chart does not jitter while a user drags a probability slider

Method: linear congruential recurrence on integer state
    state = (state * 9301 + 49297) mod 233280
    draw  = state / 233280            → in [0, 1)

The state stays a Python int, so the recurrence is exact; the only float
operation is the final division.
"""

from __future__ import annotations

import numpy as np

from core.config import DEFAULT_SEED

LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280


class SeededSequence:
    """
    Stateful LCG producing reproducible draws in [0, 1).

    Usage:
        seq = SeededSequence()        # seed 42
        u = seq.random()              # one draw
        block = seq.draws(2000 * 12)  # next 24000 draws as a numpy array

    There is no re-seeding; build a new instance per simulation run.
    """

    def __init__(self, seed: int = DEFAULT_SEED):
        self._state = int(seed)
        self._n_draws = 0

    @property
    def n_draws(self) -> int:
        """Number of draws produced so far."""
        return self._n_draws

    def random(self) -> float:
        self._state = (self._state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        self._n_draws += 1
        return self._state / LCG_MODULUS

    def draws(self, count: int) -> np.ndarray:
        """
        Return the next `count` draws, in order, as float64.

        Same values as calling random() `count` times.
        """
        out = np.empty(max(int(count), 0), dtype=float)
        for k in range(out.shape[0]):
            out[k] = self.random()
        return out
