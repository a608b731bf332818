import numpy as np

from src.domain.entities.tensor import RandomSource
from src.domain.entities.trial import IndexVector, SampledInputSet, ShapeSpecification
from src.domain.interfaces.sampler import InputSampler


class BatchedMatrixIndexSampler(InputSampler):
    """
    Samples a batch of matrices together with one index vector per spatial axis.

    The batch size and each spatial dimension are drawn from ``[low, high)``.
    The tensor holds uniform reals in ``[0, 1)``; the index vector for a
    spatial axis of size ``d`` holds ``batch_size`` values from ``[0, d - 1)``.
    """

    def __init__(
        self,
        low: int = 2,
        high: int = 100,
        spatial_dims: int = 2,
        square: bool = False,
        dtype: str = "float32",
    ):
        """
        Parameters
        ----------
        low : int
            Inclusive lower bound for every dimension, at least 2.
        high : int
            Exclusive upper bound for every dimension.
        spatial_dims : int
            Number of axes after the batch axis (2 for a batch of matrices).
        square : bool
            Use a single sampled size for every spatial axis.
        dtype : str
            NumPy dtype of the sampled tensor.

        Raises
        ------
        ValueError
            If the bounds leave no room for valid indices.
        """
        if low < 2:
            raise ValueError(f"low must be at least 2 so indices can be drawn, got {low}")
        if high <= low:
            raise ValueError(f"high must be greater than low, got [{low}, {high})")
        if spatial_dims < 1:
            raise ValueError(f"spatial_dims must be positive, got {spatial_dims}")

        self.low = low
        self.high = high
        self.spatial_dims = spatial_dims
        self.square = square
        self.dtype = dtype

    def sample_shape(self, rng: RandomSource) -> ShapeSpecification:
        batch_size = int(rng.integers(self.low, self.high))
        if self.square:
            size = int(rng.integers(self.low, self.high))
            spatial = (size,) * self.spatial_dims
        else:
            spatial = tuple(
                int(dim) for dim in rng.integers(self.low, self.high, size=self.spatial_dims)
            )
        return ShapeSpecification(dims=(batch_size, *spatial), low=self.low, high=self.high)

    def sample(self, rng: RandomSource) -> SampledInputSet:
        shape = self.sample_shape(rng)
        tensor = np.asarray(rng.random(shape.dims), dtype=self.dtype)

        indices = tuple(
            IndexVector(
                values=np.asarray(
                    rng.integers(0, shape.dims[axis] - 1, size=shape.batch_size),
                    dtype=np.int64,
                ),
                axis=axis,
                high=shape.dims[axis] - 1,
            )
            for axis in range(1, len(shape.dims))
        )
        return SampledInputSet(shape=shape, tensor=tensor, indices=indices)
