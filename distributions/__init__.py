"""
Distributions package: the deterministic draw source and payment probabilities.

  1. sampler.py       : seeded LCG sequence of uniform draws in [0, 1)
  2. probabilities.py : per-status payment probabilities + default heuristic
"""

from .sampler import SeededSequence
from .probabilities import (
    DEFAULT_PROBABILITIES,
    PaymentProbabilities,
    initial_probabilities,
)

__all__ = [
    "SeededSequence",
    "DEFAULT_PROBABILITIES",
    "PaymentProbabilities",
    "initial_probabilities",
]
