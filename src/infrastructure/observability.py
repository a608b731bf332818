"""
Observability module for equivalence checks.

This module provides:
- TrialTracker implementations (ConsoleTracker, LoggingTracker, SilentTracker)
- Progress bar integration using tqdm
"""
import logging

from tqdm import tqdm

from src.domain.entities.trial import AggregateOutcome, TrialResult
from src.domain.interfaces.trial_tracker import TrialTracker

logger = logging.getLogger(__name__)


class ConsoleTracker(TrialTracker):
    """
    Trial tracker with a tqdm progress bar.

    The bar shows the number of failed trials as it goes and prints the
    one-line summary when the check ends.
    """

    def __init__(self) -> None:
        self._pbar: tqdm | None = None
        self._failures = 0

    def on_check_start(self, num_trials: int, name: str | None = None) -> None:
        self._failures = 0
        desc = f"Checking {name}" if name else "Checking"
        self._pbar = tqdm(total=num_trials, desc=desc, unit="trial", leave=True)

    def on_trial_end(self, result: TrialResult) -> None:
        if not result.passed:
            self._failures += 1
        if self._pbar is not None:
            self._pbar.set_postfix({"failed": self._failures})
            self._pbar.update(1)

    def on_check_end(self, outcome: AggregateOutcome) -> None:
        if self._pbar is not None:
            self._pbar.close()
            self._pbar = None
        tqdm.write(outcome.summary())


class LoggingTracker(TrialTracker):
    """
    Trial tracker that writes one log record per failed trial.

    Failed trials are logged with their sampled shape and the largest
    absolute difference so the input can be reproduced.
    """

    def __init__(self, level: int = logging.INFO) -> None:
        self.level = level
        self._name: str | None = None

    def on_check_start(self, num_trials: int, name: str | None = None) -> None:
        self._name = name
        logger.log(self.level, f"Starting {num_trials} trials for {name or 'candidate'}")

    def on_trial_end(self, result: TrialResult) -> None:
        if result.passed:
            return
        logger.log(
            self.level,
            f"Trial {result.index} failed: {result.failure_kind.value}, "
            f"shape={result.shape}, max_abs_diff={result.max_abs_diff}",
        )

    def on_check_end(self, outcome: AggregateOutcome) -> None:
        logger.log(self.level, f"{self._name or 'candidate'}: {outcome.summary()}")


class SilentTracker(TrialTracker):
    """
    Trial tracker that produces no output.

    Useful for testing or when running in non-interactive environments
    where progress output is not desired.
    """

    def on_check_start(self, num_trials: int, name: str | None = None) -> None:
        """No-op implementation."""
        pass

    def on_trial_end(self, result: TrialResult) -> None:
        """No-op implementation."""
        pass

    def on_check_end(self, outcome: AggregateOutcome) -> None:
        """No-op implementation."""
        pass
