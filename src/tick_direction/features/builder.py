"""Feature matrix and next-tick label construction."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple

import numpy as np

from ..data.schemas import Observation
from ..errors import InsufficientData, ShapeMismatch


class SeriesOrder(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"
    UNORDERED = "unordered"


@dataclass
class LabeledDataset:
    """Feature rows for every observation and labels for every adjacent pair.

    ``features`` has one more row than ``labels``; the last row has no successor and
    is excluded by ``training_features``.
    """

    features: np.ndarray
    labels: np.ndarray

    def training_features(self) -> np.ndarray:
        return self.features[:-1]

    def training_pair(self) -> Tuple[np.ndarray, np.ndarray]:
        return align(self.training_features(), self.labels)


def build_features(observations: Sequence[Observation], min_length: int = 2) -> LabeledDataset:
    required = max(2, min_length)
    if len(observations) < required:
        raise InsufficientData(
            f"Need at least {required} observations to build labels, got {len(observations)}"
        )

    features = np.array(
        [[obs.price, float(obs.volume)] for obs in observations], dtype=np.float64
    )
    labels = np.array(
        [
            1 if observations[i].price < observations[i + 1].price else 0
            for i in range(len(observations) - 1)
        ],
        dtype=np.int64,
    )
    return LabeledDataset(features=features, labels=labels)


def align(features, labels) -> Tuple[np.ndarray, np.ndarray]:
    """Return features/labels as arrays, refusing to truncate or pad mismatched counts."""
    x = np.asarray(features, dtype=np.float64)
    y = np.asarray(labels)
    if x.ndim != 2:
        raise ShapeMismatch(f"features must be 2-D, got shape {x.shape}")
    if y.ndim != 1:
        raise ShapeMismatch(f"labels must be 1-D, got shape {y.shape}")
    if x.shape[0] != y.shape[0]:
        raise ShapeMismatch(
            f"{x.shape[0]} feature rows vs {y.shape[0]} labels; "
            "drop the last feature row before training"
        )
    return x, y


def check_ordering(observations: Sequence[Observation]) -> SeriesOrder:
    stamps = [obs.timestamp for obs in observations]
    pairs = list(zip(stamps, stamps[1:]))
    if all(a <= b for a, b in pairs):
        return SeriesOrder.ASCENDING
    if all(a >= b for a, b in pairs):
        return SeriesOrder.DESCENDING
    return SeriesOrder.UNORDERED


def sort_chronologically(observations: Sequence[Observation]) -> List[Observation]:
    return sorted(observations, key=lambda obs: obs.timestamp)
