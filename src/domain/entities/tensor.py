"""Tensor entity - framework-independent abstraction."""
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Tensor(Protocol):
    """Framework-independent tensor/array abstraction.

    NumPy arrays, TensorFlow eager tensors and PyTorch tensors all satisfy it.
    """
    
    @property
    def shape(self) -> tuple[int, ...]:
        """
        Get the tensor's shape.
        
        Returns:
            shape (tuple[int, ...]): Tuple of integers representing the size of each dimension.
        """
        ...

    def __getitem__(self, key: Any) -> Any:
        """
        Access an element or a slice of the tensor.
        
        Parameters:
            key (Any): Integer, tuple of integers or slice.
        
        Returns:
            Any: The selected element(s).
        """
        ...


@runtime_checkable
class RandomSource(Protocol):
    """Explicit source of pseudo-random numbers, owned by the caller.

    ``numpy.random.Generator`` satisfies this protocol.
    """

    def integers(self, low: int, high: int | None = None, size: Any = None) -> Any:
        """
        Draw integers uniformly from ``[low, high)``.
        """
        ...

    def random(self, size: Any = None) -> Any:
        """
        Draw floats uniformly from ``[0, 1)``.
        """
        ...
