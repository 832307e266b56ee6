from .builder import (
    LabeledDataset,
    SeriesOrder,
    align,
    build_features,
    check_ordering,
    sort_chronologically,
)

__all__ = [
    "LabeledDataset",
    "SeriesOrder",
    "align",
    "build_features",
    "check_ordering",
    "sort_chronologically",
]
