"""
Trial Tracker Interface.

This module defines the abstract interface for observing an equivalence
check while it runs. Implementations can show a progress bar, write log
records, or stay silent.
"""
from abc import ABC, abstractmethod

from src.domain.entities.trial import AggregateOutcome, TrialResult


class TrialTracker(ABC):
    """
    Abstract interface for tracking equivalence check progress.

    The lifecycle follows:
    1. on_check_start() - called once at the beginning
    2. on_trial_end() - called after each trial
    3. on_check_end() - called once with the aggregate outcome
    """

    @abstractmethod
    def on_check_start(self, num_trials: int, name: str | None = None) -> None:
        """
        Called when the check begins.

        Parameters
        ----------
        num_trials : int
            Number of trials requested.
        name : str | None, optional
            Name of the candidate under test.
        """
        pass

    @abstractmethod
    def on_trial_end(self, result: TrialResult) -> None:
        """
        Called after each trial completes.

        Parameters
        ----------
        result : TrialResult
            The recorded trial.
        """
        pass

    @abstractmethod
    def on_check_end(self, outcome: AggregateOutcome) -> None:
        """Called once all trials have run (or the check stopped early)."""
        pass
