"""Training result value objects.

Immutable data structures for the outcome of a tutorial training run.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime

from .training_config import TrainingConfig


def format_loss_line(iteration: int, loss: float) -> str:
    """Format one printed loss line of the tutorial."""
    return f"Iteration {iteration}: loss = {loss:.6f}"


@dataclass(frozen=True)
class LossRecord:
    """Training loss observed at a given iteration.

    Attributes:
        iteration: 1-based optimizer step
        loss: Mean squared error on the training split
    """

    iteration: int
    loss: float

    def __post_init__(self) -> None:
        """Validate loss record values."""
        if self.iteration < 1:
            raise ValueError(f"iteration must be at least 1, got {self.iteration}")
        if not math.isfinite(self.loss) or self.loss < 0:
            raise ValueError(f"loss must be finite and non-negative, got {self.loss}")

    def __str__(self) -> str:
        return format_loss_line(self.iteration, self.loss)


@dataclass(frozen=True)
class TrainingResult:
    """Outcome of a single training run.

    Attributes:
        config: Hyper-parameters used
        loss_history: Losses at every logged iteration, in order
        final_loss: Training loss after the last iteration
        parameter_norm: L2 norm over all weights and biases
        metrics: Evaluation metrics (train_mse, validation_mse, ...)
        created_at: When the run finished
    """

    config: TrainingConfig
    loss_history: tuple[LossRecord, ...]
    final_loss: float
    parameter_norm: float
    metrics: dict[str, float] = field(default_factory=dict)
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        """Validate training result values."""
        iterations = [record.iteration for record in self.loss_history]
        if iterations != sorted(set(iterations)):
            raise ValueError("loss_history must be strictly ordered by iteration")
        if self.parameter_norm < 0:
            raise ValueError(f"parameter_norm must be non-negative, got {self.parameter_norm}")

    @property
    def initial_loss(self) -> float | None:
        """Return the first logged loss, if any."""
        if not self.loss_history:
            return None
        return self.loss_history[0].loss

    @property
    def log_lines(self) -> tuple[str, ...]:
        """Return the lines printed during training."""
        return tuple(str(record) for record in self.loss_history)

    @property
    def weight_decay(self) -> float:
        """Return the weight decay coefficient used."""
        return self.config.weight_decay
