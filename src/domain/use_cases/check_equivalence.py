import logging
import numbers
from typing import Any, Callable

from src.domain.entities.tensor import RandomSource
from src.domain.entities.trial import (
    AggregateOutcome,
    FailureKind,
    SampledInputSet,
    Tolerance,
    TrialResult,
)
from src.domain.interfaces.comparator import Comparator
from src.domain.interfaces.sampler import InputSampler
from src.domain.interfaces.trial_tracker import TrialTracker

logger = logging.getLogger(__name__)

Implementation = Callable[..., Any]
SamplerFn = Callable[[RandomSource], SampledInputSet]


class EquivalenceCheck:
    """
    Compares a candidate implementation against a reference on random inputs,
    using dependency injection for sampling, comparison and tracking.
    """

    def __init__(
        self,
        reference_fn: Implementation,
        candidate_fn: Implementation,
        sampler: InputSampler | SamplerFn,
        comparator: Comparator,
        rng: RandomSource,
        num_trials: int = 10,
        tolerance: Tolerance | float | None = None,
        fail_fast: bool = False,
        tracker: TrialTracker | None = None,
        name: str | None = None,
    ):
        """
        Create an EquivalenceCheck.

        Parameters
        ----------
        reference_fn : Implementation
            Trusted, usually naive implementation. Called with the sampled
            tensor followed by each index vector.
        candidate_fn : Implementation
            Implementation under test, same contract as ``reference_fn``.
        sampler : InputSampler | SamplerFn
            Produces one SampledInputSet per call from ``rng``.
        comparator : Comparator
            Element-wise closeness comparison of the two outputs.
        rng : RandomSource
            Random source owned by the caller.
        num_trials : int
            Number of independent trials, must be positive.
        tolerance : Tolerance | float | None
            Closeness tolerance; a float is used for both atol and rtol.
        fail_fast : bool
            Stop after the first failed trial instead of running all of them.
        tracker : TrialTracker | None
            Optional observer notified of progress.
        name : str | None
            Label used in log messages and by the tracker.

        Raises
        ------
        ValueError
            If ``num_trials`` is not a positive integer.
        """
        if (
            isinstance(num_trials, bool)
            or not isinstance(num_trials, numbers.Integral)
            or num_trials < 1
        ):
            raise ValueError(f"num_trials must be a positive integer, got {num_trials!r}")

        self.reference_fn = reference_fn
        self.candidate_fn = candidate_fn
        self.sampler = sampler
        self.comparator = comparator
        self.rng = rng
        self.num_trials = int(num_trials)
        self.tolerance = Tolerance.coerce(tolerance)
        self.fail_fast = fail_fast
        self.tracker = tracker
        self.name = name or getattr(candidate_fn, "__name__", "candidate")

    def sample_inputs(self) -> SampledInputSet:
        """
        Draw one input set and verify it against the sampler's bounds.

        Raises:
            SamplerContractViolation: If the sample violates its own bounds.
        """
        if isinstance(self.sampler, InputSampler):
            inputs = self.sampler.sample(self.rng)
        else:
            inputs = self.sampler(self.rng)
        inputs.validate()
        return inputs

    def run_trial(self, index: int, inputs: SampledInputSet) -> TrialResult:
        """
        Evaluate both implementations on ``inputs`` and compare their outputs.

        Parameters
        ----------
        index : int
            Trial number (1-based).
        inputs : SampledInputSet
            Identical arguments handed to both implementations.

        Returns
        -------
        TrialResult
            Pass/fail for this trial. Inputs and outputs are kept only on
            failure; an exception raised by the candidate is recorded as a
            CANDIDATE_ERROR failure.
        """
        dims = inputs.shape.dims
        arguments = inputs.arguments
        reference_output = self.reference_fn(*arguments)

        try:
            candidate_output = self.candidate_fn(*arguments)
        except Exception as error:
            logger.error(
                f"Trial {index}: {self.name} raised {type(error).__name__} "
                f"on shape {dims}: {error}"
            )
            return TrialResult(
                index=index,
                passed=False,
                shape=dims,
                inputs=inputs,
                failure_kind=FailureKind.CANDIDATE_ERROR,
                reference_output=reference_output,
                error=error,
            )

        comparison = self.comparator.compare(
            reference_output, candidate_output, self.tolerance
        )
        if comparison.shapes_match and comparison.close:
            return TrialResult(index=index, passed=True, shape=dims,
                               max_abs_diff=comparison.max_abs_diff)

        kind = (
            FailureKind.SHAPE_MISMATCH
            if not comparison.shapes_match
            else FailureKind.NUMERIC_MISMATCH
        )
        return TrialResult(
            index=index,
            passed=False,
            shape=dims,
            inputs=inputs,
            failure_kind=kind,
            reference_output=reference_output,
            candidate_output=candidate_output,
            max_abs_diff=comparison.max_abs_diff,
        )

    def run(self) -> AggregateOutcome:
        """
        Run every trial and aggregate the verdict.

        For each trial, this method:
        1. Samples an input set and validates it
        2. Evaluates the reference and the candidate on it
        3. Compares both outputs element-wise
        4. Records the trial result

        Only the first failed trial keeps its inputs and outputs; later
        failures keep their verdict and dimensions.

        Returns
        -------
        AggregateOutcome
            Logical AND over all trial results, keeping the failing trials.

        Raises
        ------
        SamplerContractViolation
            As soon as the sampler produces an out-of-bounds sample.
        """
        logger.info(f"Checking {self.name} against reference over {self.num_trials} trials")
        outcome = AggregateOutcome(num_trials=self.num_trials)
        if self.tracker is not None:
            self.tracker.on_check_start(self.num_trials, name=self.name)

        failure_kept = False
        for index in range(1, self.num_trials + 1):
            inputs = self.sample_inputs()
            result = self.run_trial(index, inputs)

            if self.tracker is not None:
                self.tracker.on_trial_end(result)

            if not result.passed:
                logger.warning(
                    f"Trial {index} failed ({result.failure_kind.value}) "
                    f"on shape {result.shape}"
                )
                if failure_kept:
                    result.discard_payload()
                failure_kept = True

            outcome.trials.append(result)
            if not result.passed and self.fail_fast:
                break

        if self.tracker is not None:
            self.tracker.on_check_end(outcome)

        logger.info(f"{self.name}: {outcome.summary()}")
        return outcome
