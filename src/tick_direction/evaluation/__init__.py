from .metrics import EvaluationReport, accuracy, evaluate, majority_baseline

__all__ = ["EvaluationReport", "accuracy", "evaluate", "majority_baseline"]
