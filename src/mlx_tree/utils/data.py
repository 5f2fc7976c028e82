"""Data utilities for MLX Tree."""

import mlx.core as mx
import numpy as np

from mlx_tree.exceptions import InvalidDataError


def to_mlx_array(data: np.ndarray | mx.array | list) -> mx.array:
    """Convert input data to MLX array.

    Args:
        data: Input data as numpy array, MLX array, or list.

    Returns:
        MLX array.

    Raises:
        TypeError: If input type is not supported.
    """
    if isinstance(data, mx.array):
        return data
    if isinstance(data, (np.ndarray, list, tuple)):
        return mx.array(np.array(data))
    raise TypeError(f"Unsupported data type: {type(data)}")


def to_numpy_array(
    data: np.ndarray | mx.array | list, dtype: type | None = None
) -> np.ndarray:
    """Convert input data to a numpy array.

    Tree construction runs entirely on numpy, so every public entry point
    funnels its inputs through here first.

    Args:
        data: Input data as numpy array, MLX array, or (nested) list.
        dtype: Optional numpy dtype to cast to.

    Returns:
        Numpy array.

    Raises:
        TypeError: If input type is not supported.
        InvalidDataError: If the data cannot be represented as a
            rectangular numeric array.
    """
    if not isinstance(data, (mx.array, np.ndarray, list, tuple)):
        raise TypeError(f"Unsupported data type: {type(data)}")

    try:
        array = np.array(data)
        if dtype is not None:
            array = array.astype(dtype)
    except (TypeError, ValueError) as exc:
        raise InvalidDataError(f"Could not convert input to a numeric array: {exc}") from exc

    return array
