"""Exceptions raised by MLX Tree estimators.

All exceptions derive from ``MLXTreeError``, which subclasses ``ValueError``
so that callers catching ``ValueError`` keep working:

- NotFittedError: Raised when a fitted attribute is needed before ``fit()``.
- InvalidDataError: Raised when training or prediction data is unusable.
- InvalidParametersError: Raised when estimator configuration is invalid.
"""


class MLXTreeError(ValueError):
    """Base class for all MLX Tree errors."""


class NotFittedError(MLXTreeError):
    """Raised when an estimator is used before it has been fitted.

    Examples:
        >>> raise NotFittedError("Model not fitted. Call fit() first.")
        Traceback (most recent call last):
        ...
        mlx_tree.exceptions.NotFittedError: Model not fitted. Call fit() first.
    """


class InvalidDataError(MLXTreeError):
    """Raised when input features or labels cannot be used.

    Covers empty datasets, mismatched label lengths, non-finite feature
    values, labels that are not non-negative integers, and prediction
    inputs whose column count differs from the training data.
    """


class InvalidParametersError(MLXTreeError):
    """Raised when an estimator hyperparameter is out of range."""
