from abc import ABC, abstractmethod
from typing import Any

from src.domain.entities.trial import Comparison, Tolerance


class Comparator(ABC):
    """Abstract interface for element-wise output comparison."""

    @abstractmethod
    def compare(self, reference: Any, candidate: Any, tolerance: Tolerance) -> Comparison:
        """
        Compare a candidate output with the reference output.

        Parameters:
            reference (Any): Array-like output of the reference implementation.
            candidate (Any): Array-like output of the candidate implementation.
            tolerance (Tolerance): Allowed slack; ``reference`` is the ``b`` in
                ``|a - b| <= atol + rtol * |b|``.

        Returns:
            Comparison: Whether shapes agree and, if so, whether every element is close.
        """
        pass
