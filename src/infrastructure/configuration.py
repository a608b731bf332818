import logging
import os
import tomllib
from dataclasses import dataclass

from src.domain.entities.trial import AggregateOutcome, Tolerance
from src.domain.interfaces.trial_tracker import TrialTracker
from src.infrastructure.equivalence import CANDIDATES, check_equivalence, get_candidate
from src.infrastructure.reference import gather_entries_naive
from src.infrastructure.samplers import BatchedMatrixIndexSampler

logger = logging.getLogger(__name__)


@dataclass
class EquivalenceConfiguration:
    """Configuration for a batched gather equivalence check."""

    candidate: str = "tensorflow"
    num_trials: int = 10
    seed: int | None = None
    atol: float = 1e-8
    rtol: float = 1e-5
    fail_fast: bool = False
    low: int = 2
    high: int = 100

    def __post_init__(self):
        """Reject unknown candidates and invalid trial counts early."""
        if self.candidate not in CANDIDATES:
            raise ValueError(
                f"Unknown candidate {self.candidate!r}, expected one of {CANDIDATES}"
            )
        if self.num_trials < 1:
            raise ValueError(f"num_trials must be positive, got {self.num_trials}")

    @property
    def tolerance(self) -> Tolerance:
        return Tolerance(atol=self.atol, rtol=self.rtol)

    @classmethod
    def load(cls, config_path: str) -> "EquivalenceConfiguration":
        """
        Load equivalence configuration from a TOML file.

        Parameters
        ----------
        config_path : str
            Filesystem path to a TOML file containing an "equivalence" table.

        Returns
        -------
        EquivalenceConfiguration
            Instance populated from the "equivalence" table; fields not
            present use their dataclass defaults.

        Raises
        ------
        FileNotFoundError
            If no file exists at `config_path`.
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found at {config_path}")

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        equivalence_data = data.get("equivalence", {})
        return cls(**equivalence_data)


def run_configured_check(
    config: EquivalenceConfiguration,
    tracker: TrialTracker | None = None,
) -> AggregateOutcome:
    """
    Check the configured gather candidate against the naive reference.

    Parameters
    ----------
    config : EquivalenceConfiguration
        Candidate, trial count, seed, tolerance and dimension bounds.
    tracker : TrialTracker | None
        Optional progress observer.

    Returns
    -------
    AggregateOutcome
        Verdict of the check.
    """
    logger.info(
        f"Running {config.num_trials} trials for {config.candidate} "
        f"(seed={config.seed}, atol={config.atol}, rtol={config.rtol})"
    )
    return check_equivalence(
        reference_fn=gather_entries_naive,
        candidate_fn=get_candidate(config.candidate),
        shape_sampler=BatchedMatrixIndexSampler(low=config.low, high=config.high),
        num_trials=config.num_trials,
        tolerance=config.tolerance,
        seed=config.seed,
        fail_fast=config.fail_fast,
        tracker=tracker,
    )
