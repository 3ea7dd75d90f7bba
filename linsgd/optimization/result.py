"""
Result container for stochastic gradient descent runs
=====================================================

Bundles the fitted parameter vector with the run settings and optional
cost diagnostics, with helpers for serialization and CLI display.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

import numpy as np

from linsgd.io.json_utils import json_safe


@dataclass
class SGDResult:
    """
    Outcome of one optimization run.

    ``parameters[0]`` is the bias weight and ``parameters[1:]`` are the
    feature weights, in the column order of the observation matrix.
    """

    parameters: np.ndarray   # Fitted [bias, w_1, ..., w_d]
    n_iterations: int        # Gradient steps performed
    batch_size: int          # Observations per step
    learning_rate: float     # Step size
    seed: int                # Seed the random stream was created with
    n_observations: int      # Rows in the training data
    computation_time: float  # Wall time (seconds)

    cost_history: Optional[List[float]] = None  # Full-data cost after each step
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def bias(self) -> float:
        return float(self.parameters[0])

    @property
    def weights(self) -> np.ndarray:
        return self.parameters[1:]

    @property
    def final_cost(self) -> Optional[float]:
        if not self.cost_history:
            return None
        return self.cost_history[-1]

    @property
    def is_finite(self) -> bool:
        """False when the run diverged to NaN/Inf parameters."""
        return bool(np.all(np.isfinite(self.parameters)))

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics for the result."""
        summary = {
            "parameters": self.parameters.tolist(),
            "n_iterations": self.n_iterations,
            "batch_size": self.batch_size,
            "learning_rate": self.learning_rate,
            "seed": self.seed,
            "n_observations": self.n_observations,
            "computation_time": self.computation_time,
            "finite": self.is_finite,
        }
        if self.final_cost is not None:
            summary["final_cost"] = self.final_cost
        return summary

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-safe dictionary."""
        result = self.get_summary()
        result.update(
            {
                "cost_history": self.cost_history,
                "timestamp": self.timestamp,
                "metadata": self.metadata,
            }
        )
        return json_safe(result)

    def format_for_display(self) -> str:
        """Format result for CLI display."""
        lines = [
            "Stochastic Gradient Descent Results",
            "=" * 40,
            f"Observations: {self.n_observations}",
            f"Iterations: {self.n_iterations}",
            f"Batch size: {self.batch_size}",
            f"Learning rate: {self.learning_rate}",
            f"Seed: {self.seed}",
            f"Computation time: {self.computation_time:.3f}s",
            "",
            f"Bias: {self.bias:.6f}",
        ]
        for i, weight in enumerate(self.weights):
            lines.append(f"Weight[{i}]: {weight:.6f}")

        if self.final_cost is not None:
            lines.append(f"Final cost: {self.final_cost:.6e}")
        if not self.is_finite:
            lines.append("WARNING: parameters diverged (non-finite values)")

        return "\n".join(lines)
