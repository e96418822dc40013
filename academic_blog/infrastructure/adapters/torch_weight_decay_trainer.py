"""PyTorch weight-decay trainer adapter.

Infrastructure adapter that implements IRegularizedTrainer using a
two-layer perceptron and Adam with weight decay.
"""

import logging
import math

import numpy as np
import torch
from academic_blog.domain.interfaces import IRegularizedTrainer
from academic_blog.domain.value_objects import (
    LossRecord,
    SyntheticDataset,
    TrainingConfig,
    TrainingResult,
)
from sklearn.metrics import mean_squared_error
from sklearn.model_selection import train_test_split
from torch import nn

_LOGGER = logging.getLogger(__name__)


class TrainingError(Exception):
    """Raised when training fails or diverges."""

    pass


class TwoLayerPerceptron(nn.Module):
    """Fully-connected network: Linear -> ReLU -> Linear."""

    def __init__(self, input_dim: int, hidden_dim: int, output_dim: int) -> None:
        super().__init__()
        self.hidden = nn.Linear(input_dim, hidden_dim)
        self.activation = nn.ReLU()
        self.output = nn.Linear(hidden_dim, output_dim)

    def forward(self, x: torch.Tensor) -> torch.Tensor:
        return self.output(self.activation(self.hidden(x)))


class TrainState:
    """Model, optimizer and loss function of one training run."""

    def __init__(self, model: nn.Module, optimizer: torch.optim.Optimizer) -> None:
        self.model = model
        self.optimizer = optimizer
        self.loss_fn = nn.MSELoss()
        self.step = 0

    def parameter_norm(self) -> float:
        """Return the L2 norm over all weights and biases."""
        with torch.no_grad():
            squared = sum(float(p.pow(2).sum()) for p in self.model.parameters())
        return math.sqrt(squared)


def build_optimizer(model: nn.Module, config: TrainingConfig) -> torch.optim.Optimizer:
    """Build the Adam + weight decay optimizer chain.

    Decoupled decay (AdamW) shrinks the weights after the Adam update;
    coupled decay adds weight_decay * w to the gradient before it.
    """
    if config.decoupled_weight_decay:
        return torch.optim.AdamW(
            model.parameters(), lr=config.learning_rate, weight_decay=config.weight_decay
        )
    return torch.optim.Adam(
        model.parameters(), lr=config.learning_rate, weight_decay=config.weight_decay
    )


def single_train_step(state: TrainState, inputs: torch.Tensor, targets: torch.Tensor) -> float:
    """Run one full-batch optimizer step and return the loss before it."""
    state.model.train()
    state.optimizer.zero_grad(set_to_none=True)
    loss = state.loss_fn(state.model(inputs), targets)
    loss.backward()
    state.optimizer.step()
    state.step += 1
    return float(loss.detach())


class TorchWeightDecayTrainer(IRegularizedTrainer):
    """PyTorch implementation of the regularized trainer.

    Trains a TwoLayerPerceptron on the full training split each step, so
    a fixed seed yields the same loss history on every run.
    """

    def __init__(self, device: str = "cpu") -> None:
        """Initialize the trainer.

        Args:
            device: Torch device to train on
        """
        self._device = torch.device(device)

    async def train(
        self, config: TrainingConfig, dataset: SyntheticDataset
    ) -> TrainingResult:
        """Train a fresh two-layer perceptron.

        Args:
            config: Hyper-parameters
            dataset: Inputs and targets

        Returns:
            TrainingResult with the logged loss history and metrics
        """
        if dataset.input_dim != config.input_dim or dataset.output_dim != config.output_dim:
            raise ValueError(
                f"Dataset shape ({dataset.input_dim} -> {dataset.output_dim}) does not match "
                f"config ({config.input_dim} -> {config.output_dim})"
            )

        torch.manual_seed(config.seed)

        X_train, X_val, y_train, y_val = self._split(dataset, config)

        model = TwoLayerPerceptron(config.input_dim, config.hidden_dim, config.output_dim)
        model.to(self._device)
        state = TrainState(model, build_optimizer(model, config))

        inputs = torch.from_numpy(X_train).to(self._device)
        targets = torch.from_numpy(y_train).to(self._device)

        history: list[LossRecord] = []
        for iteration in range(1, config.iterations + 1):
            loss = single_train_step(state, inputs, targets)

            if not math.isfinite(loss):
                raise TrainingError(f"Loss diverged at iteration {iteration}: {loss}")

            if iteration % config.log_every == 0:
                history.append(LossRecord(iteration=iteration, loss=loss))
                _LOGGER.debug("Iteration %d: loss = %.6f", iteration, loss)

        metrics = self._evaluate(state, X_train, y_train, X_val, y_val)
        final_loss = metrics["train_mse"]

        _LOGGER.info(
            "Trained %d iterations (weight_decay=%g): final loss %.6f, parameter norm %.4f",
            config.iterations,
            config.weight_decay,
            final_loss,
            metrics["parameter_norm"],
        )

        return TrainingResult(
            config=config,
            loss_history=tuple(history),
            final_loss=final_loss,
            parameter_norm=metrics["parameter_norm"],
            metrics=metrics,
        )

    @staticmethod
    def _split(
        dataset: SyntheticDataset, config: TrainingConfig
    ) -> tuple[np.ndarray, np.ndarray | None, np.ndarray, np.ndarray | None]:
        """Split the dataset into training and validation parts."""
        X = dataset.inputs.astype(np.float32)
        y = dataset.targets.astype(np.float32)

        if config.validation_fraction == 0:
            return X, None, y, None

        X_train, X_val, y_train, y_val = train_test_split(
            X, y, test_size=config.validation_fraction, random_state=config.seed
        )
        return X_train, X_val, y_train, y_val

    def _evaluate(
        self,
        state: TrainState,
        X_train: np.ndarray,
        y_train: np.ndarray,
        X_val: np.ndarray | None,
        y_val: np.ndarray | None,
    ) -> dict[str, float]:
        """Compute evaluation metrics on the trained model."""
        state.model.eval()
        metrics = {
            "train_mse": float(mean_squared_error(y_train, self._predict(state, X_train))),
            "parameter_norm": state.parameter_norm(),
        }
        if X_val is not None and y_val is not None:
            metrics["validation_mse"] = float(
                mean_squared_error(y_val, self._predict(state, X_val))
            )
        return metrics

    def _predict(self, state: TrainState, X: np.ndarray) -> np.ndarray:
        with torch.no_grad():
            return state.model(torch.from_numpy(X).to(self._device)).cpu().numpy()
