"""Tests for configuration module."""
import pytest

from src.domain.entities.trial import Tolerance
from src.infrastructure.configuration import EquivalenceConfiguration, run_configured_check


class TestEquivalenceConfiguration:
    """Tests for EquivalenceConfiguration class."""

    def test_defaults(self):
        """Test that defaults mirror the ten-trial example and all-close tolerances."""
        config = EquivalenceConfiguration()
        assert config.candidate == "tensorflow"
        assert config.num_trials == 10
        assert config.seed is None
        assert config.tolerance == Tolerance(atol=1e-8, rtol=1e-5)
        assert (config.low, config.high) == (2, 100)

    def test_unknown_candidate(self):
        """Test that an unknown candidate is rejected."""
        with pytest.raises(ValueError):
            EquivalenceConfiguration(candidate="jax")

    def test_non_positive_trials(self):
        """Test that zero trials are rejected."""
        with pytest.raises(ValueError):
            EquivalenceConfiguration(num_trials=0)

    def test_load_from_toml(self, tmp_path):
        """Test loading configuration from TOML file."""
        config_file = tmp_path / "test_config.toml"
        config_file.write_text("""
[equivalence]
candidate = "torch"
num_trials = 25
seed = 42
atol = 1e-7
rtol = 0.0
fail_fast = true
low = 3
high = 20
""")

        config = EquivalenceConfiguration.load(str(config_file))
        assert config.candidate == "torch"
        assert config.num_trials == 25
        assert config.seed == 42
        assert config.tolerance == Tolerance(atol=1e-7, rtol=0.0)
        assert config.fail_fast is True
        assert config.low == 3
        assert config.high == 20

    def test_load_without_table_uses_defaults(self, tmp_path):
        """Test that a file without an equivalence table yields defaults."""
        config_file = tmp_path / "empty.toml"
        config_file.write_text("[other]\nvalue = 1\n")

        config = EquivalenceConfiguration.load(str(config_file))
        assert config == EquivalenceConfiguration()

    def test_load_missing_file(self):
        """Test that loading from missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            EquivalenceConfiguration.load("/nonexistent/path/config.toml")


def test_run_configured_check(tmp_path, recording_tracker):
    """Test that a configured torch check runs and passes."""
    config_file = tmp_path / "config.toml"
    config_file.write_text("""
[equivalence]
candidate = "torch"
num_trials = 3
seed = 0
high = 30
""")
    config = EquivalenceConfiguration.load(str(config_file))

    outcome = run_configured_check(config, tracker=recording_tracker)

    assert outcome.passed
    assert outcome.trials_run == 3
    assert recording_tracker.outcome is outcome
    assert all(2 <= dim < 30 for trial in outcome.trials for dim in trial.shape)
