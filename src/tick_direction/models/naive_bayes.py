"""Gaussian Naive Bayes classifier computed from first principles.

Per-class means and population variances are accumulated with ``math.fsum`` so the
statistics are correctly rounded and do not depend on summation order. Scoring is done
entirely in log space.
"""

import logging
import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np
from scipy.special import logsumexp

from ..errors import DimensionMismatch, InsufficientClasses, InvalidFeatures, ShapeMismatch
from ..features.builder import align

logger = logging.getLogger(__name__)

LOG_2PI = math.log(2.0 * math.pi)


@dataclass(frozen=True, eq=False)
class GaussianNBModel:
    """Trained per-class statistics. Immutable once produced by ``GaussianNB.fit``."""

    classes: Tuple[int, ...]
    means: np.ndarray  # (n_classes, n_features)
    variances: np.ndarray  # (n_classes, n_features), smoothing included
    priors: np.ndarray  # (n_classes,)
    epsilon: float

    @property
    def n_features(self) -> int:
        return int(self.means.shape[1])

    def class_stats(self, label: int) -> dict:
        idx = self.classes.index(label)
        return {
            "mean": self.means[idx].tolist(),
            "variance": self.variances[idx].tolist(),
            "prior": float(self.priors[idx]),
        }


class GaussianNB:
    """Gaussian Naive Bayes with variance smoothing relative to the widest feature."""

    def __init__(self, var_smoothing: float = 1e-9) -> None:
        if not var_smoothing > 0:
            raise ValueError(f"var_smoothing must be positive, got {var_smoothing}")
        self.var_smoothing = var_smoothing

    def fit(self, features, labels) -> GaussianNBModel:
        x, y = align(features, labels)
        if x.shape[0] == 0:
            raise ShapeMismatch("Cannot fit on zero rows")
        if not np.all(np.isfinite(x)):
            raise InvalidFeatures("Features contain NaN or infinite values")

        classes = tuple(sorted(set(y.tolist())))
        if len(classes) < 2:
            raise InsufficientClasses(
                f"Need at least 2 distinct labels to fit, got {list(classes)}"
            )

        n_rows = x.shape[0]
        columns = x.T.tolist()
        widest = max(_population_variance(col) for col in columns)
        epsilon = self.var_smoothing * widest
        if epsilon == 0.0:
            # every feature is constant
            epsilon = self.var_smoothing

        means, variances, priors = [], [], []
        for label in classes:
            rows = x[y == label]
            class_columns = rows.T.tolist()
            means.append([_mean(col) for col in class_columns])
            variances.append([_population_variance(col) + epsilon for col in class_columns])
            priors.append(rows.shape[0] / n_rows)

        model = GaussianNBModel(
            classes=classes,
            means=_frozen(np.array(means, dtype=np.float64)),
            variances=_frozen(np.array(variances, dtype=np.float64)),
            priors=_frozen(np.array(priors, dtype=np.float64)),
            epsilon=epsilon,
        )
        logger.debug(
            "Fitted GaussianNB on %d rows, classes=%s priors=%s epsilon=%.3e",
            n_rows,
            list(classes),
            model.priors.tolist(),
            epsilon,
        )
        return model

    def joint_log_likelihood(self, model: GaussianNBModel, features) -> np.ndarray:
        """log P(c) + sum_d log N(x_d; mu_cd, var_cd) for every row and class."""
        x = _as_rows(features, model.n_features)
        log_norm = -0.5 * np.sum(LOG_2PI + np.log(model.variances), axis=1)
        diff = x[:, np.newaxis, :] - model.means[np.newaxis, :, :]
        quad = -0.5 * np.sum(diff**2 / model.variances[np.newaxis, :, :], axis=2)
        return np.log(model.priors)[np.newaxis, :] + log_norm[np.newaxis, :] + quad

    def predict(self, model: GaussianNBModel, features) -> np.ndarray:
        jll = self.joint_log_likelihood(model, features)
        # argmax keeps the first maximum, and classes are ascending
        winners = np.argmax(jll, axis=1) if jll.shape[0] else np.empty(0, dtype=np.int64)
        return np.asarray(model.classes, dtype=np.int64)[winners]

    def predict_proba(self, model: GaussianNBModel, features) -> np.ndarray:
        jll = self.joint_log_likelihood(model, features)
        if jll.shape[0] == 0:
            return jll
        return np.exp(jll - logsumexp(jll, axis=1, keepdims=True))


def fit(features, labels, var_smoothing: float = 1e-9) -> GaussianNBModel:
    return GaussianNB(var_smoothing=var_smoothing).fit(features, labels)


def predict(model: GaussianNBModel, features) -> np.ndarray:
    return GaussianNB().predict(model, features)


def _mean(values: Sequence[float]) -> float:
    return math.fsum(values) / len(values)


def _population_variance(values: Sequence[float]) -> float:
    mu = _mean(values)
    return math.fsum((v - mu) ** 2 for v in values) / len(values)


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


def _as_rows(features, n_features: int) -> np.ndarray:
    x = np.asarray(features, dtype=np.float64)
    if x.ndim == 1 and x.size == n_features:
        x = x.reshape(1, n_features)
    if x.ndim != 2 or x.shape[1] != n_features:
        raise DimensionMismatch(
            f"Model trained on {n_features} features, got input of shape {x.shape}"
        )
    if not np.all(np.isfinite(x)):
        raise InvalidFeatures("Features contain NaN or infinite values")
    return x
