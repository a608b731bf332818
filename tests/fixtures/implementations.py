"""Deliberately correct and broken implementations used across tests.

Every function takes the sampled tensor followed by the index vectors,
like the real gather implementations.
"""
import numpy as np

from src.domain.entities.trial import AggregateOutcome, IndexVector, SampledInputSet, TrialResult
from src.domain.interfaces.trial_tracker import TrialTracker
from src.infrastructure.samplers import BatchedMatrixIndexSampler


def vectorized_gather(tensor, idx1, idx2):
    """Correct NumPy fancy-indexing version."""
    tensor = np.asarray(tensor)
    return tensor[np.arange(tensor.shape[0]), idx1, idx2]


def off_by_one_gather(tensor, idx1, idx2):
    """Reads the next row. Stays in bounds because idx1 < d1 - 1."""
    tensor = np.asarray(tensor)
    return tensor[np.arange(tensor.shape[0]), np.asarray(idx1) + 1, idx2]


def noisy_gather(tensor, idx1, idx2, noise=1e-3):
    """Correct entries shifted by a constant."""
    return vectorized_gather(tensor, idx1, idx2) + noise


def swapped_gather(tensor, idx1, idx2):
    """Uses idx2 for rows and idx1 for columns."""
    tensor = np.asarray(tensor)
    return tensor[np.arange(tensor.shape[0]), idx2, idx1]


def truncated_gather(tensor, idx1, idx2):
    """Drops the last batch element."""
    return vectorized_gather(tensor, idx1, idx2)[:-1]


def out_of_bounds_sampler(rng):
    """
    Sampler that breaks its own contract: the first index equals d1 - 1,
    one past the documented exclusive bound.
    """
    inputs = BatchedMatrixIndexSampler().sample(rng)
    first = inputs.indices[0]
    values = np.array(first.values)
    values[0] = first.high
    broken = IndexVector(values=values, axis=first.axis, high=first.high)
    return SampledInputSet(
        shape=inputs.shape,
        tensor=inputs.tensor,
        indices=(broken, *inputs.indices[1:]),
    )


class RecordingTracker(TrialTracker):
    """Tracker that remembers every callback for assertions."""

    def __init__(self):
        self.started_with: int | None = None
        self.name: str | None = None
        self.results: list[TrialResult] = []
        self.outcome: AggregateOutcome | None = None

    def on_check_start(self, num_trials: int, name: str | None = None) -> None:
        self.started_with = num_trials
        self.name = name

    def on_trial_end(self, result: TrialResult) -> None:
        self.results.append(result)

    def on_check_end(self, outcome: AggregateOutcome) -> None:
        self.outcome = outcome
