"""Tests for synthetic data generator service."""

import numpy as np
import pytest
from academic_blog.domain.services import SyntheticDataGenerator
from academic_blog.domain.value_objects import TrainingConfig


class TestSyntheticDataGenerator:
    """Tests for SyntheticDataGenerator service."""

    def test_generate_creates_requested_shape(self) -> None:
        """Test that generator creates arrays of the requested shape."""
        dataset = SyntheticDataGenerator(seed=42).generate(
            num_samples=50, input_dim=4, output_dim=2
        )
        assert dataset.inputs.shape == (50, 4)
        assert dataset.targets.shape == (50, 2)
        assert dataset.inputs.dtype == np.float32

    def test_generate_with_seed_is_reproducible(self) -> None:
        """Test that generator with same seed produces same results."""
        data1 = SyntheticDataGenerator(seed=42).generate(10)
        data2 = SyntheticDataGenerator(seed=42).generate(10)
        np.testing.assert_array_equal(data1.inputs, data2.inputs)
        np.testing.assert_array_equal(data1.targets, data2.targets)

    def test_different_seeds_produce_different_data(self) -> None:
        """Test that different seeds give different samples."""
        data1 = SyntheticDataGenerator(seed=1).generate(10)
        data2 = SyntheticDataGenerator(seed=2).generate(10)
        assert not np.array_equal(data1.inputs, data2.inputs)

    def test_generate_for_uses_config_dimensions(self) -> None:
        """Test that generate_for follows the training config."""
        config = TrainingConfig(num_samples=30, input_dim=6, output_dim=3)
        dataset = SyntheticDataGenerator(seed=config.seed).generate_for(config)
        assert dataset.size == 30
        assert dataset.input_dim == 6
        assert dataset.output_dim == 3

    def test_generate_with_zero_samples_raises_error(self) -> None:
        """Test that generating zero samples raises ValueError."""
        with pytest.raises(ValueError, match="at least 1"):
            SyntheticDataGenerator().generate(num_samples=0)
