"""Value types describing a single equivalence trial and the aggregate verdict."""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Sequence

from src.domain.entities.tensor import Tensor
from src.domain.errors import (
    CandidateError,
    EquivalenceFailure,
    SamplerContractViolation,
    ShapeMismatchError,
)


@dataclass(frozen=True)
class ShapeSpecification:
    """
    Dimensions of a sampled input tensor.

    Every dimension is drawn independently from ``[low, high)``. ``low`` is at
    least 2 so that indices drawn from ``[0, dim - 1)`` are never empty.
    """

    dims: tuple[int, ...]
    low: int = 2
    high: int = 100

    @property
    def batch_size(self) -> int:
        return self.dims[0]

    def validate(self) -> None:
        """
        Check the shape against its own sampling bounds.

        Raises
        ------
        SamplerContractViolation
            If the shape is empty, ``low`` is below 2, or a dimension falls
            outside ``[low, high)``.
        """
        if not self.dims:
            raise SamplerContractViolation("Shape specification has no dimensions")
        if self.low < 2:
            raise SamplerContractViolation(
                f"Lower dimension bound must be at least 2, got {self.low}"
            )
        for axis, dim in enumerate(self.dims):
            if not self.low <= dim < self.high:
                raise SamplerContractViolation(
                    f"Dimension {dim} on axis {axis} is outside [{self.low}, {self.high})"
                )


@dataclass(frozen=True)
class IndexVector:
    """
    A vector of per-batch indices into one axis of the sampled tensor.

    Attributes
    ----------
    values : Sequence[int]
        One index per batch element.
    axis : int
        Axis of the sampled tensor the indices address.
    high : int
        Exclusive upper bound the sampler documents for ``values``.
    """

    values: Sequence[int]
    axis: int
    high: int


@dataclass(frozen=True)
class SampledInputSet:
    """One randomly generated tensor plus its index vectors."""

    shape: ShapeSpecification
    tensor: Tensor
    indices: tuple[IndexVector, ...] = ()

    @property
    def arguments(self) -> tuple[Any, ...]:
        """Positional arguments passed to both implementations."""
        return (self.tensor, *(vector.values for vector in self.indices))

    def validate(self) -> None:
        """
        Verify that the sample honours the sampler's documented bounds.

        Raises
        ------
        SamplerContractViolation
            If the tensor shape disagrees with the shape specification, or an
            index vector has the wrong length or out-of-bounds values.
        """
        self.shape.validate()

        tensor_dims = tuple(int(dim) for dim in self.tensor.shape)
        if tensor_dims != self.shape.dims:
            raise SamplerContractViolation(
                f"Tensor shape {tensor_dims} does not match sampled shape {self.shape.dims}"
            )

        for position, vector in enumerate(self.indices):
            if not 0 < vector.axis < len(self.shape.dims):
                raise SamplerContractViolation(
                    f"Index vector {position} addresses invalid axis {vector.axis}"
                )
            if vector.high > self.shape.dims[vector.axis]:
                raise SamplerContractViolation(
                    f"Index vector {position} bound {vector.high} exceeds "
                    f"dimension {self.shape.dims[vector.axis]}"
                )
            if len(vector.values) != self.shape.batch_size:
                raise SamplerContractViolation(
                    f"Index vector {position} has length {len(vector.values)}, "
                    f"expected batch size {self.shape.batch_size}"
                )
            for value in vector.values:
                if not 0 <= value < vector.high:
                    raise SamplerContractViolation(
                        f"Index {value} in vector {position} is outside [0, {vector.high})"
                    )


@dataclass(frozen=True)
class Tolerance:
    """
    Closeness tolerance: ``|a - b| <= atol + rtol * |b|``.

    The defaults match the usual "all-close" semantics.
    """

    atol: float = 1e-8
    rtol: float = 1e-5

    def __post_init__(self):
        if not (math.isfinite(self.atol) and math.isfinite(self.rtol)):
            raise ValueError(
                f"Tolerances must be finite, got atol={self.atol}, rtol={self.rtol}"
            )
        if self.atol < 0 or self.rtol < 0:
            raise ValueError(
                f"Tolerances must be non-negative, got atol={self.atol}, rtol={self.rtol}"
            )

    @classmethod
    def coerce(cls, value: "Tolerance | float | None") -> "Tolerance":
        """
        Build a Tolerance from a Tolerance, a single float or None.

        A float is used for both the absolute and the relative part.
        """
        if value is None:
            return cls()
        if isinstance(value, Tolerance):
            return value
        return cls(atol=float(value), rtol=float(value))

    def scaled(self, factor: float) -> "Tolerance":
        """Return a tolerance with both parts multiplied by ``factor``."""
        return Tolerance(atol=self.atol * factor, rtol=self.rtol * factor)


class FailureKind(Enum):
    """Why a trial failed."""

    SHAPE_MISMATCH = "shape_mismatch"
    NUMERIC_MISMATCH = "numeric_mismatch"
    CANDIDATE_ERROR = "candidate_error"


@dataclass(frozen=True)
class Comparison:
    """Result of comparing a reference output with a candidate output."""

    shapes_match: bool
    close: bool
    max_abs_diff: float | None = None
    mismatched: int = 0


@dataclass
class TrialResult:
    """
    Outcome of one sampled input evaluated by both implementations.

    Passing trials only keep the sampled dimensions. A failed trial also keeps
    the sampled inputs, both outputs and the candidate's error, if any, until
    ``discard_payload`` drops them.
    """

    index: int
    passed: bool
    shape: tuple[int, ...]
    inputs: SampledInputSet | None = None
    failure_kind: FailureKind | None = None
    reference_output: Any = None
    candidate_output: Any = None
    max_abs_diff: float | None = None
    error: Exception | None = None

    def discard_payload(self) -> None:
        """Release the sampled tensor and the outputs, keeping the verdict."""
        self.inputs = None
        self.reference_output = None
        self.candidate_output = None


@dataclass
class AggregateOutcome:
    """Verdict across all trials of one check."""

    num_trials: int
    trials: list[TrialResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(trial.passed for trial in self.trials)

    @property
    def trials_run(self) -> int:
        return len(self.trials)

    @property
    def failures(self) -> list[TrialResult]:
        return [trial for trial in self.trials if not trial.passed]

    @property
    def first_failure(self) -> TrialResult | None:
        failures = self.failures
        return failures[0] if failures else None

    def __bool__(self) -> bool:
        return self.passed

    def summary(self) -> str:
        """
        Describe the outcome in one line.

        Returns
        -------
        str
            e.g. "PASS: 10/10 trials matched" or
            "FAIL: 3/10 trials failed (first: trial 2, numeric_mismatch, max |diff| 0.412)".
        """
        if self.passed:
            return f"PASS: {self.trials_run}/{self.num_trials} trials matched"

        first = self.first_failure
        detail = f"first: trial {first.index}, {first.failure_kind.value}"
        if first.error is not None:
            detail += f", {type(first.error).__name__}: {first.error}"
        if first.max_abs_diff is not None:
            detail += f", max |diff| {first.max_abs_diff:.3g}"
        return (
            f"FAIL: {len(self.failures)}/{self.trials_run} trials failed ({detail})"
        )

    def raise_for_failure(self) -> None:
        """
        Raise the error matching the first failed trial, if any.

        Raises
        ------
        ShapeMismatchError
            If the first failure is a shape mismatch.
        CandidateError
            If the candidate raised during the first failed trial.
        EquivalenceFailure
            If the first failure is a numeric mismatch.
        """
        first = self.first_failure
        if first is None:
            return
        if first.failure_kind is FailureKind.SHAPE_MISMATCH:
            raise ShapeMismatchError(self.summary(), trial=first)
        if first.failure_kind is FailureKind.CANDIDATE_ERROR:
            raise CandidateError(self.summary(), trial=first) from first.error
        raise EquivalenceFailure(self.summary(), trial=first)
