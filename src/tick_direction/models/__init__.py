from .naive_bayes import GaussianNB, GaussianNBModel, fit, predict

__all__ = ["GaussianNB", "GaussianNBModel", "fit", "predict"]
