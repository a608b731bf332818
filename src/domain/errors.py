"""Errors raised while checking two implementations for equivalence."""
from typing import Any


class EquivalenceError(Exception):
    """Base class for all equivalence checking errors."""


class SamplerContractViolation(EquivalenceError):
    """
    The input sampler produced a shape or index outside its documented bounds.

    This points at a bug in the test harness, not in the candidate.
    """


class TrialFailure(EquivalenceError):
    """
    A trial where the candidate disagreed with the reference.

    Attributes
    ----------
    trial : Any
        The failing ``TrialResult``, carrying the sampled inputs and both outputs.
    """

    def __init__(self, message: str, trial: Any = None):
        super().__init__(message)
        self.trial = trial


class ShapeMismatchError(TrialFailure):
    """Reference and candidate returned outputs of different shapes."""


class EquivalenceFailure(TrialFailure):
    """Reference and candidate outputs differ beyond the closeness tolerance."""


class CandidateError(TrialFailure):
    """The candidate raised while evaluating a sampled input."""
