"""Synthetic dataset value object."""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SyntheticDataset:
    """Random regression inputs and targets.

    Attributes:
        inputs: Array of shape (num_samples, input_dim)
        targets: Array of shape (num_samples, output_dim)
    """

    inputs: np.ndarray
    targets: np.ndarray

    def __post_init__(self) -> None:
        """Validate array shapes."""
        if self.inputs.ndim != 2 or self.targets.ndim != 2:
            raise ValueError("inputs and targets must be 2-dimensional")
        if self.inputs.shape[0] != self.targets.shape[0]:
            raise ValueError(
                f"inputs and targets must have the same number of rows, "
                f"got {self.inputs.shape[0]} and {self.targets.shape[0]}"
            )
        if self.inputs.shape[0] == 0:
            raise ValueError("dataset must contain at least one sample")

    @property
    def size(self) -> int:
        """Return the number of samples."""
        return int(self.inputs.shape[0])

    @property
    def input_dim(self) -> int:
        return int(self.inputs.shape[1])

    @property
    def output_dim(self) -> int:
        return int(self.targets.shape[1])
