import logging
from typing import Callable

import numpy as np

from src.domain.entities.tensor import RandomSource
from src.domain.entities.trial import AggregateOutcome, Tolerance
from src.domain.interfaces.comparator import Comparator
from src.domain.interfaces.sampler import InputSampler
from src.domain.interfaces.trial_tracker import TrialTracker
from src.domain.use_cases.check_equivalence import (
    EquivalenceCheck,
    Implementation,
    SamplerFn,
)
from src.infrastructure.comparators import NumpyComparator
from src.infrastructure.logging import suppress_tensorflow_logging

logger = logging.getLogger(__name__)

CANDIDATES = ("tensorflow", "torch")


def check_equivalence(
    reference_fn: Implementation,
    candidate_fn: Implementation,
    shape_sampler: InputSampler | SamplerFn,
    num_trials: int = 10,
    tolerance: Tolerance | float | None = None,
    rng: RandomSource | None = None,
    seed: int | None = None,
    fail_fast: bool = False,
    tracker: TrialTracker | None = None,
    comparator: Comparator | None = None,
) -> AggregateOutcome:
    """
    Check that ``candidate_fn`` agrees with ``reference_fn`` on random inputs.

    Parameters
    ----------
    reference_fn : Implementation
        Trusted implementation.
    candidate_fn : Implementation
        Implementation under test.
    shape_sampler : InputSampler | SamplerFn
        Produces one SampledInputSet per trial.
    num_trials : int
        Number of independent trials (default 10).
    tolerance : Tolerance | float | None
        Closeness tolerance, defaults to atol=1e-8 and rtol=1e-5.
    rng : RandomSource | None
        Random source; built from ``seed`` with ``numpy.random.default_rng``
        when omitted.
    seed : int | None
        Seed for the default random source. Ignored when ``rng`` is given.
    fail_fast : bool
        Stop after the first failed trial.
    tracker : TrialTracker | None
        Optional progress observer.
    comparator : Comparator | None
        Defaults to NumpyComparator.

    Returns
    -------
    AggregateOutcome
        Passes only if every trial matched within tolerance.

    Raises
    ------
    SamplerContractViolation
        If the sampler produces an out-of-bounds sample.
    ValueError
        If ``num_trials`` is not a positive integer.
    """
    if rng is None:
        rng = np.random.default_rng(seed)

    check = EquivalenceCheck(
        reference_fn=reference_fn,
        candidate_fn=candidate_fn,
        sampler=shape_sampler,
        comparator=comparator or NumpyComparator(),
        rng=rng,
        num_trials=num_trials,
        tolerance=tolerance,
        fail_fast=fail_fast,
        tracker=tracker,
    )
    return check.run()


def get_candidate(name: str) -> Callable:
    """
    Return the batched gather implementation for a tensor library.

    Parameters
    ----------
    name : str
        One of CANDIDATES.

    Returns
    -------
    Callable
        ``gather_entries`` of the requested backend.

    Raises
    ------
    ValueError
        If ``name`` is not a known candidate.
    """
    if name == "tensorflow":
        suppress_tensorflow_logging()
        from src.infrastructure.tensorflow.gather import gather_entries

        return gather_entries
    if name == "torch":
        from src.infrastructure.torch.gather import gather_entries

        return gather_entries
    raise ValueError(f"Unknown candidate {name!r}, expected one of {CANDIDATES}")
