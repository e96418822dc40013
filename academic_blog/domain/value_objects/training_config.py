"""Training configuration value object.

Immutable hyper-parameters of the weight-decay tutorial.
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping


@dataclass(frozen=True)
class TrainingConfig:
    """Hyper-parameters for training the two-layer perceptron.

    Attributes:
        input_dim: Number of input features
        hidden_dim: Width of the hidden layer
        output_dim: Number of regression targets
        num_samples: Number of synthetic samples
        learning_rate: Adam step size
        weight_decay: L2 weight decay coefficient (0 disables it)
        iterations: Number of optimizer steps
        log_every: Record/print the loss every N iterations
        seed: Random seed for data and parameter initialisation
        decoupled_weight_decay: Apply decay after Adam (AdamW) instead of
            adding it to the gradient
        validation_fraction: Fraction of samples held out for validation
    """

    input_dim: int = 10
    hidden_dim: int = 32
    output_dim: int = 1
    num_samples: int = 100
    learning_rate: float = 0.01
    weight_decay: float = 1e-4
    iterations: int = 1000
    log_every: int = 100
    seed: int = 42
    decoupled_weight_decay: bool = True
    validation_fraction: float = 0.2

    def __post_init__(self) -> None:
        """Validate hyper-parameter values."""
        for name in (
            "input_dim", "hidden_dim", "output_dim", "num_samples", "iterations", "log_every"
        ):
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name} must be at least 1, got {value}")
        if self.learning_rate <= 0:
            raise ValueError(f"learning_rate must be positive, got {self.learning_rate}")
        if self.weight_decay < 0:
            raise ValueError(f"weight_decay must be non-negative, got {self.weight_decay}")
        if not 0.0 <= self.validation_fraction < 1.0:
            raise ValueError(
                f"validation_fraction must be in [0, 1), got {self.validation_fraction}"
            )
        if self.validation_fraction > 0 and self.num_samples < 2:
            raise ValueError("num_samples must be at least 2 when holding out validation data")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "TrainingConfig":
        """Create a TrainingConfig from a mapping, ignoring unknown keys."""
        if not data:
            return cls()
        defaults = {f.name: f.default for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            if key not in defaults or value is None:
                continue
            values[key] = _coerce(key, value, defaults[key])
        return cls(**values)

    def with_weight_decay(self, weight_decay: float) -> "TrainingConfig":
        """Return a copy with a different weight decay coefficient."""
        return replace(self, weight_decay=weight_decay)

    @property
    def logged_iterations(self) -> tuple[int, ...]:
        """Iterations at which the loss is recorded."""
        return tuple(range(self.log_every, self.iterations + 1, self.log_every))


def _coerce(name: str, value: Any, default: Any) -> Any:
    """Convert a raw value to the type of the field default.

    Raises:
        ValueError: If the value cannot be converted without loss
    """
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise ValueError(f"{name} must be true or false, got {value!r}")
        return value
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if isinstance(default, int):
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(f"{name} must be an integer, got {value!r}")
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"{name} must be an integer, got {value!r}") from e
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} must be a number, got {value!r}") from e
