"""Loss trend analysis.

Checks whether a logged loss curve is decreasing "monotonically-ish":
a few upticks are tolerated as long as the overall trend goes down.
"""

from typing import Sequence

from academic_blog.domain.value_objects import LossRecord


class LossTrendAnalyzer:
    """Evaluates the shape of a loss history."""

    def __init__(self, tolerance: float = 0.25) -> None:
        """Initialize the analyzer.

        Args:
            tolerance: Maximum fraction of logged steps allowed to increase
        """
        if not 0.0 <= tolerance <= 1.0:
            raise ValueError(f"tolerance must be between 0 and 1, got {tolerance}")
        self._tolerance = tolerance

    def increase_fraction(self, history: Sequence[LossRecord]) -> float:
        """Return the fraction of consecutive steps where the loss went up."""
        if len(history) < 2:
            return 0.0
        increases = sum(
            1 for previous, current in zip(history, history[1:]) if current.loss > previous.loss
        )
        return increases / (len(history) - 1)

    def is_decreasing(self, history: Sequence[LossRecord]) -> bool:
        """Check that the loss trends down.

        Args:
            history: Logged losses in iteration order

        Returns:
            True if the last loss is below the first and upticks stay
            within tolerance
        """
        if len(history) < 2:
            return False
        if history[-1].loss >= history[0].loss:
            return False
        return self.increase_fraction(history) <= self._tolerance

    def relative_improvement(self, history: Sequence[LossRecord]) -> float:
        """Return (first - last) / first, or 0.0 when undefined."""
        if len(history) < 2 or history[0].loss == 0:
            return 0.0
        return (history[0].loss - history[-1].loss) / history[0].loss
