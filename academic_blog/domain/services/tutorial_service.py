"""Tutorial service.

Domain service that runs the weight-decay walkthrough: generate random
data, train the network and report the loss every few iterations.
"""

import logging
from typing import Callable, Iterable

from academic_blog.domain.interfaces import IRegularizedTrainer
from academic_blog.domain.value_objects import TrainingConfig, TrainingResult

from .synthetic_data_generator import SyntheticDataGenerator

_LOGGER = logging.getLogger(__name__)


class TutorialService:
    """Service running the tutorial training through the trainer interface."""

    def __init__(
        self,
        trainer: IRegularizedTrainer,
        data_generator_factory: Callable[[int], SyntheticDataGenerator] = SyntheticDataGenerator,
        output: Callable[[str], None] | None = None,
    ) -> None:
        """Initialize the tutorial service.

        Args:
            trainer: Regularized trainer implementation
            data_generator_factory: Builds a data generator from a seed
            output: Optional sink for the printed loss lines (e.g. print)
        """
        self._trainer = trainer
        self._data_generator_factory = data_generator_factory
        self._output = output

    async def run(self, config: TrainingConfig | None = None) -> TrainingResult:
        """Train once and emit the loss lines.

        Args:
            config: Hyper-parameters, defaults to the tutorial defaults

        Returns:
            The training result
        """
        config = config or TrainingConfig()
        dataset = self._data_generator_factory(config.seed).generate_for(config)

        _LOGGER.info(
            "Training on %d samples (weight_decay=%g, decoupled=%s, seed=%d)",
            dataset.size,
            config.weight_decay,
            config.decoupled_weight_decay,
            config.seed,
        )
        result = await self._trainer.train(config, dataset)

        for line in result.log_lines:
            _LOGGER.debug(line)
            if self._output is not None:
                self._output(line)

        return result

    async def compare(
        self,
        config: TrainingConfig,
        weight_decays: Iterable[float],
    ) -> list[TrainingResult]:
        """Train once per weight decay value with the same seed.

        Args:
            config: Base hyper-parameters
            weight_decays: Values to compare, duplicates are skipped

        Returns:
            One result per distinct value, in the given order
        """
        distinct: list[float] = []
        for value in weight_decays:
            value = float(value)
            if value not in distinct:
                distinct.append(value)

        if not distinct:
            raise ValueError("At least one weight decay value is required")

        results = []
        for value in distinct:
            if self._output is not None:
                self._output(f"# weight_decay = {value:g}")
            results.append(await self.run(config.with_weight_decay(value)))
        return results
