"""Synthetic data generator for the weight-decay tutorial.

Generates random regression data. The targets carry no signal, so any
drop in training loss comes from the network fitting noise.
"""

import numpy as np

from academic_blog.domain.value_objects import SyntheticDataset, TrainingConfig


class SyntheticDataGenerator:
    """Generator for random training inputs and targets."""

    def __init__(self, seed: int | None = None) -> None:
        """Initialize the generator.

        Args:
            seed: Random seed for reproducibility
        """
        self._rng = np.random.default_rng(seed)

    def generate(
        self,
        num_samples: int = 100,
        input_dim: int = 10,
        output_dim: int = 1,
    ) -> SyntheticDataset:
        """Generate standard-normal inputs and targets.

        Args:
            num_samples: Number of rows to generate
            input_dim: Number of input features
            output_dim: Number of targets per row

        Returns:
            SyntheticDataset with float32 arrays
        """
        if num_samples < 1:
            raise ValueError("num_samples must be at least 1")
        if input_dim < 1 or output_dim < 1:
            raise ValueError("input_dim and output_dim must be at least 1")

        inputs = self._rng.standard_normal((num_samples, input_dim)).astype(np.float32)
        targets = self._rng.standard_normal((num_samples, output_dim)).astype(np.float32)
        return SyntheticDataset(inputs=inputs, targets=targets)

    def generate_for(self, config: TrainingConfig) -> SyntheticDataset:
        """Generate a dataset matching the config dimensions."""
        return self.generate(
            num_samples=config.num_samples,
            input_dim=config.input_dim,
            output_dim=config.output_dim,
        )
