"""Label statistics and candidate split helpers used during tree building."""

import math

import numpy as np


def freq(labels: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Count label frequencies.

    Args:
        labels: Integer class labels.

    Returns:
        Unique labels in ascending order and the count of each.
    """
    uniques, counts = np.unique(np.asarray(labels), return_counts=True)
    return uniques, counts


def majority_label(uniques: np.ndarray, counts: np.ndarray) -> int:
    """Return the most frequent label of a frequency table from ``freq``.

    Ties go to the smallest label, i.e. the first label in ascending
    order that reaches the maximum count.
    """
    return int(uniques[np.argmax(counts)])


def uniquify(values: np.ndarray) -> np.ndarray:
    """Deduplicate values; the result is sorted ascending."""
    return np.unique(np.asarray(values, dtype=np.float64))


def get_splits(values: np.ndarray) -> np.ndarray:
    """Candidate thresholds: midpoints between consecutive unique values.

    Args:
        values: Feature values of the rows reaching a node.

    Returns:
        Sorted midpoints, empty when fewer than two distinct values exist.
    """
    uniques = uniquify(values)
    # Halve before adding so midpoints near the float64 maximum stay finite
    return uniques[:-1] / 2.0 + uniques[1:] / 2.0


def split_by_mask(
    values: np.ndarray, mask: np.ndarray
) -> tuple[np.ndarray, np.ndarray]:
    """Partition values into (mask True, mask False), preserving order.

    Args:
        values: Array to partition.
        mask: Boolean mask aligned with ``values``.

    Returns:
        Left part (mask True) and right part (mask False).
    """
    values = np.asarray(values)
    mask = np.asarray(mask, dtype=bool)
    return values[mask], values[~mask]


def xlogy(x: float, y: float) -> float:
    """Compute ``x * ln(y)`` with ``xlogy(0, y) == 0``."""
    if x == 0:
        return 0.0
    return x * math.log(y)
