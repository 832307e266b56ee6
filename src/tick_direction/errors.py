"""Error taxonomy for the tick direction pipeline.

Every error is a deterministic function of the input, so none of them is retried:
the caller surfaces the failure and aborts the run.
"""


class TickDirectionError(ValueError):
    """Base class for all pipeline failures."""


class MalformedInput(TickDirectionError):
    """Raw payload is missing a field or has the wrong shape."""


class InvalidFeatures(MalformedInput):
    """Feature matrix contains NaN or infinite values."""


class InsufficientData(TickDirectionError):
    """Fewer observations than needed to derive a single label."""


class ShapeMismatch(TickDirectionError):
    """Feature and label row counts (or array ranks) do not line up."""


class InsufficientClasses(TickDirectionError):
    """Fit attempted with fewer than two distinct labels."""


class DimensionMismatch(TickDirectionError):
    """Feature width at predict time differs from the trained width."""


class LengthMismatch(TickDirectionError):
    """Predicted and actual label vectors differ in length."""


class EmptyInput(TickDirectionError):
    """Evaluation requested on zero samples."""


__all__ = [
    "TickDirectionError",
    "MalformedInput",
    "InvalidFeatures",
    "InsufficientData",
    "ShapeMismatch",
    "InsufficientClasses",
    "DimensionMismatch",
    "LengthMismatch",
    "EmptyInput",
]
