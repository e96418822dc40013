"""Regularized trainer interface.

Contract for training a model with weight decay.
"""

from abc import ABC, abstractmethod

from academic_blog.domain.value_objects import SyntheticDataset, TrainingConfig, TrainingResult


class IRegularizedTrainer(ABC):
    """Contract for weight-decay training operations."""

    @abstractmethod
    async def train(
        self, config: TrainingConfig, dataset: SyntheticDataset
    ) -> TrainingResult:
        """Train a fresh model on the dataset.

        Args:
            config: Hyper-parameters, including weight decay and seed
            dataset: Inputs and targets to fit

        Returns:
            TrainingResult with the logged loss history and metrics

        Raises:
            TrainingError: If training fails or diverges
        """
        pass
