"""Evaluation metrics for MLX Tree."""

import mlx.core as mx
import numpy as np

from mlx_tree.exceptions import InvalidDataError
from mlx_tree.utils.data import to_mlx_array


def accuracy(
    y_true: mx.array | np.ndarray | list, y_pred: mx.array | np.ndarray | list
) -> float:
    """Compute classification accuracy.

    Args:
        y_true: Ground truth labels.
        y_pred: Predicted labels.

    Returns:
        Fraction of predictions that match their target.

    Raises:
        InvalidDataError: If the inputs differ in length or are empty.
    """
    y_true = to_mlx_array(y_true).flatten()
    y_pred = to_mlx_array(y_pred).flatten()

    if y_true.size != y_pred.size:
        raise InvalidDataError(
            f"y_true and y_pred must have the same length, got {y_true.size} and {y_pred.size}."
        )
    if y_true.size == 0:
        raise InvalidDataError("Cannot compute accuracy of empty predictions.")

    return float(mx.mean((y_true == y_pred).astype(mx.float32)))
