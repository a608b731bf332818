"""End-to-end checks of the PyTorch batched gather against the reference."""
import numpy as np

from src.domain.entities.trial import FailureKind
from src.infrastructure.equivalence import check_equivalence, get_candidate
from src.infrastructure.reference import gather_entries_naive
from src.infrastructure.samplers import BatchedMatrixIndexSampler

BACKEND = "torch"


def test_gather_entries_small_example():
    """Test that advanced indexing picks tensor[i, idx1[i], idx2[i]]."""
    gather_entries = get_candidate(BACKEND)
    tensor = np.arange(2 * 3 * 3, dtype=np.float32).reshape(2, 3, 3)
    result = gather_entries(tensor, np.array([0, 1]), np.array([1, 0]))
    np.testing.assert_array_equal(result.numpy(), [tensor[0, 0, 1], tensor[1, 1, 0]])


def test_gather_entries_matches_reference(sampler):
    """Ten trials with dimensions in [2, 100) pass with a 1e-7 tolerance."""
    outcome = check_equivalence(
        gather_entries_naive,
        get_candidate(BACKEND),
        sampler,
        num_trials=10,
        tolerance=1e-7,
        seed=2024,
    )
    assert outcome.passed, outcome.summary()


def test_swapped_indices_are_detected(sampler):
    """Swapping the index vectors on rectangular matrices must fail, never crash."""
    gather_entries = get_candidate(BACKEND)

    def swapped(tensor, idx1, idx2):
        return gather_entries(tensor, idx2, idx1)

    outcome = check_equivalence(
        gather_entries_naive,
        swapped,
        sampler,
        num_trials=10,
        seed=2024,
    )
    assert not outcome.passed
    assert {trial.failure_kind for trial in outcome.failures} <= {
        FailureKind.NUMERIC_MISMATCH,
        FailureKind.CANDIDATE_ERROR,
    }


def test_swapped_indices_on_square_matrices():
    """On square matrices every index stays in bounds, so the mismatch is numeric."""
    gather_entries = get_candidate(BACKEND)

    def swapped(tensor, idx1, idx2):
        return gather_entries(tensor, idx2, idx1)

    outcome = check_equivalence(
        gather_entries_naive,
        swapped,
        BatchedMatrixIndexSampler(square=True),
        num_trials=10,
        seed=2024,
    )
    assert not outcome.passed
    assert outcome.first_failure.failure_kind is FailureKind.NUMERIC_MISMATCH
