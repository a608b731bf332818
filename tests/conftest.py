"""Pytest configuration and shared fixtures."""
import numpy as np
import pytest
from fixtures.implementations import RecordingTracker

from src.infrastructure.samplers import BatchedMatrixIndexSampler


@pytest.fixture
def rng():
    """
    Provide a seeded random source so every test sees the same samples.
    
    Returns:
        numpy.random.Generator: Generator seeded with 1234.
    """
    return np.random.default_rng(1234)


@pytest.fixture
def sampler():
    """
    Provide the batched matrix sampler with dimensions drawn from [2, 100).
    
    Returns:
        BatchedMatrixIndexSampler: A new sampler instance.
    """
    return BatchedMatrixIndexSampler(low=2, high=100)


@pytest.fixture
def recording_tracker():
    """
    Provide a tracker that records every callback.
    
    Returns:
        RecordingTracker: A new RecordingTracker instance.
    """
    return RecordingTracker()
