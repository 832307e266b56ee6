"""Accuracy and baseline metrics for predicted direction labels."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Sequence, Tuple

import numpy as np

from ..errors import EmptyInput, LengthMismatch


@dataclass
class EvaluationReport:
    accuracy: float
    baseline_accuracy: float
    n_samples: int
    confusion: Dict[Tuple[int, int], int] = field(default_factory=dict)

    def summary(self) -> dict:
        return {
            "accuracy": self.accuracy,
            "baseline_accuracy": self.baseline_accuracy,
            "lift": self.accuracy - self.baseline_accuracy,
            "n_samples": self.n_samples,
        }


def accuracy(predicted: Sequence[int], actual: Sequence[int]) -> float:
    """
    Fraction of positions where predicted equals actual.

    Raises:
        LengthMismatch: If the vectors differ in length
        EmptyInput: If both vectors are empty (accuracy is undefined)
    """
    pred, act = _checked(predicted, actual)
    return int(np.count_nonzero(pred == act)) / act.shape[0]


def majority_baseline(actual: Sequence[int]) -> float:
    """Accuracy of always predicting the most frequent label (ties go to the lowest label)."""
    act = np.asarray(actual)
    if act.ndim != 1:
        raise LengthMismatch(f"Label vector must be 1-D, got shape {act.shape}")
    if act.shape[0] == 0:
        raise EmptyInput("Cannot compute a baseline on zero samples")
    counts = Counter(act.tolist())
    majority = min(counts, key=lambda label: (-counts[label], label))
    return counts[majority] / act.shape[0]


def evaluate(predicted: Sequence[int], actual: Sequence[int]) -> EvaluationReport:
    pred, act = _checked(predicted, actual)
    confusion = Counter(zip(act.tolist(), pred.tolist()))
    return EvaluationReport(
        accuracy=accuracy(pred, act),
        baseline_accuracy=majority_baseline(act),
        n_samples=int(act.shape[0]),
        confusion=dict(sorted(confusion.items())),
    )


def _checked(predicted, actual) -> Tuple[np.ndarray, np.ndarray]:
    pred = np.asarray(predicted)
    act = np.asarray(actual)
    if pred.ndim != 1 or act.ndim != 1:
        raise LengthMismatch(
            f"Label vectors must be 1-D, got shapes {pred.shape} and {act.shape}"
        )
    if pred.shape[0] != act.shape[0]:
        raise LengthMismatch(f"{pred.shape[0]} predictions vs {act.shape[0]} actual labels")
    if act.shape[0] == 0:
        raise EmptyInput("Cannot compute accuracy on zero samples")
    return pred, act
