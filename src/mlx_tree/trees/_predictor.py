"""Prediction functions for classification trees.

Prediction is read-only over the built tree, so a single fitted tree can
serve any number of concurrent callers.
"""

from collections.abc import Sequence

import numpy as np

from mlx_tree.trees._tree_structure import Branch, Node, TreeArrays


def predict_row(root: Node, row: Sequence[float] | np.ndarray) -> int:
    """Predict the label of a single row by walking the tree.

    Args:
        root: Root node of a built tree.
        row: Feature values of one sample.

    Returns:
        Label of the leaf the row ends up in.
    """
    current = root
    while isinstance(current, Branch):
        if row[current.feature_index] < current.threshold:
            current = current.left
        else:
            current = current.right
    return current.label


def predict_labels(tree: TreeArrays, X: np.ndarray) -> np.ndarray:
    """Predict labels for all samples.

    All samples are moved through the tree simultaneously, one level per
    iteration; samples that already reached a leaf stay there.

    Args:
        tree: Flattened tree structure.
        X: Features of shape (n_samples, n_features).

    Returns:
        Predicted labels of shape (n_samples,), int64.
    """
    n_samples = X.shape[0]
    sample_indices = np.arange(n_samples)

    # All samples start at root (node 0)
    current_nodes = np.zeros((n_samples,), dtype=np.int64)

    for _ in range(tree.depth):
        is_leaf = tree.is_leaf[current_nodes]

        # Leaf nodes store feature -1; clamp so the gather stays in range
        safe_features = np.clip(tree.feature_indices[current_nodes], 0, None)
        feature_values = X[sample_indices, safe_features]

        goes_left = feature_values < tree.thresholds[current_nodes]
        next_nodes = np.where(
            goes_left,
            tree.left_children[current_nodes],
            tree.right_children[current_nodes],
        )
        current_nodes = np.where(is_leaf, current_nodes, next_nodes)

    return tree.values[current_nodes]
