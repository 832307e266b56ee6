"Next-tick price direction classifier (Gaussian Naive Bayes)."

from .config import PipelineConfig
from .pipeline import DirectionPipeline, PipelineResult

__all__ = [
    "PipelineConfig",
    "DirectionPipeline",
    "PipelineResult",
]
