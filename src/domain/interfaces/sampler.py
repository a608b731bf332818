from abc import ABC, abstractmethod

from src.domain.entities.tensor import RandomSource
from src.domain.entities.trial import SampledInputSet


class InputSampler(ABC):
    """Abstract interface for random input generators."""

    @abstractmethod
    def sample(self, rng: RandomSource) -> SampledInputSet:
        """
        Draw one shape specification and a matching input set.

        Parameters
        ----------
        rng : RandomSource
            Random source owned by the caller. Implementations must draw all
            randomness from it so that a fixed seed reproduces the samples.

        Returns
        -------
        SampledInputSet
            A tensor and index vectors that stay within the sampler's
            documented bounds.
        """
        pass
