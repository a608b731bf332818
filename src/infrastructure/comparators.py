from typing import Any

import numpy as np

from src.domain.entities.trial import Comparison, Tolerance
from src.domain.interfaces.comparator import Comparator


def to_numpy(value: Any) -> np.ndarray:
    """
    Convert a framework tensor (NumPy, TensorFlow, PyTorch) to a NumPy array.

    Parameters:
        value (Any): Array-like value.

    Returns:
        np.ndarray: Host copy of the data.
    """
    if hasattr(value, "detach"):
        # PyTorch tensors may require grad or live on an accelerator
        value = value.detach().cpu()
    if hasattr(value, "numpy"):
        return np.asarray(value.numpy())
    return np.asarray(value)


class NumpyComparator(Comparator):
    """Concrete implementation using NumPy's ``isclose`` rule."""

    def __init__(self, equal_nan: bool = False):
        """
        Parameters:
            equal_nan (bool): Treat NaNs in the same position as equal.
        """
        self.equal_nan = equal_nan

    def compare(self, reference: Any, candidate: Any, tolerance: Tolerance) -> Comparison:
        """
        Compare outputs with ``|candidate - reference| <= atol + rtol * |reference|``.

        Returns:
            Comparison: ``shapes_match`` is False when the shapes differ, in
            which case no element-wise comparison is attempted.
        """
        expected = to_numpy(reference)
        actual = to_numpy(candidate)

        if expected.shape != actual.shape:
            return Comparison(shapes_match=False, close=False)

        if expected.size == 0:
            return Comparison(shapes_match=True, close=True, max_abs_diff=0.0)

        expected = expected.astype(np.float64)
        actual = actual.astype(np.float64)
        within = np.isclose(
            actual,
            expected,
            rtol=tolerance.rtol,
            atol=tolerance.atol,
            equal_nan=self.equal_nan,
        )
        with np.errstate(invalid="ignore"):
            diff = np.abs(actual - expected)
        finite = diff[np.isfinite(diff)]
        if np.isinf(diff).any():
            max_abs_diff = float("inf")
        elif finite.size:
            max_abs_diff = float(finite.max())
        else:
            max_abs_diff = float("nan")

        return Comparison(
            shapes_match=True,
            close=bool(within.all()),
            max_abs_diff=max_abs_diff,
            mismatched=int((~within).sum()),
        )
