"""Tree data structures: recursive nodes and their flattened array form."""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Leaf:
    """Terminal node predicting a single class label.

    Attributes:
        label: Majority label of the training rows that reached the node.
    """

    label: int


@dataclass(frozen=True)
class Branch:
    """Internal node routing rows on one feature.

    Rows with ``row[feature_index] < threshold`` go left, all others go
    right. Each child is owned by exactly one branch.

    Attributes:
        feature_index: Column of the feature to test.
        threshold: Split value, a midpoint between two training values.
        left: Subtree for rows below the threshold.
        right: Subtree for rows at or above the threshold.
    """

    feature_index: int
    threshold: float
    left: "Node"
    right: "Node"


Node = Leaf | Branch


@dataclass(frozen=True, eq=False)
class TreeArrays:
    """Tree stored as parallel arrays for vectorized traversal.

    Nodes are numbered in pre-order, so the root is node 0. Arrays are
    read-only once built.

    Attributes:
        feature_indices: Which feature to split on (-1 for leaf nodes).
        thresholds: Split threshold values (0.0 for leaf nodes).
        left_children: Index of left child (-1 for leaf nodes).
        right_children: Index of right child (-1 for leaf nodes).
        values: Predicted label for leaf nodes (-1 for branch nodes).
        is_leaf: Boolean mask indicating leaf nodes.
        n_nodes: Total number of nodes.
        depth: Length of the longest root-to-leaf path.
    """

    feature_indices: np.ndarray  # (n_nodes,) int64
    thresholds: np.ndarray  # (n_nodes,) float64
    left_children: np.ndarray  # (n_nodes,) int64
    right_children: np.ndarray  # (n_nodes,) int64
    values: np.ndarray  # (n_nodes,) int64
    is_leaf: np.ndarray  # (n_nodes,) bool
    n_nodes: int = 0
    depth: int = 0

    @property
    def n_leaves(self) -> int:
        """Number of leaf nodes."""
        return int(np.sum(self.is_leaf))


def flatten_tree(root: Node) -> TreeArrays:
    """Convert a recursive tree into parallel arrays.

    Args:
        root: Root node of a built tree.

    Returns:
        TreeArrays with nodes numbered in pre-order.
    """
    feature_indices: list[int] = []
    thresholds: list[float] = []
    left_children: list[int] = []
    right_children: list[int] = []
    values: list[int] = []
    max_depth = 0

    # (node, depth, parent index, is left child); left is pushed last so it
    # is numbered first
    nodes_to_process: list[tuple[Node, int, int, bool]] = [(root, 0, -1, False)]
    while nodes_to_process:
        node, depth, parent, is_left = nodes_to_process.pop()
        max_depth = max(max_depth, depth)

        idx = len(feature_indices)
        feature_indices.append(-1)
        thresholds.append(0.0)
        left_children.append(-1)
        right_children.append(-1)
        values.append(-1)

        if parent >= 0:
            if is_left:
                left_children[parent] = idx
            else:
                right_children[parent] = idx

        if isinstance(node, Leaf):
            values[idx] = node.label
            continue

        feature_indices[idx] = node.feature_index
        thresholds[idx] = node.threshold
        nodes_to_process.append((node.right, depth + 1, idx, False))
        nodes_to_process.append((node.left, depth + 1, idx, True))

    feature_arr = np.array(feature_indices, dtype=np.int64)
    arrays = TreeArrays(
        feature_indices=feature_arr,
        thresholds=np.array(thresholds, dtype=np.float64),
        left_children=np.array(left_children, dtype=np.int64),
        right_children=np.array(right_children, dtype=np.int64),
        values=np.array(values, dtype=np.int64),
        is_leaf=feature_arr == -1,
        n_nodes=len(feature_indices),
        depth=max_depth,
    )
    for array in (
        arrays.feature_indices,
        arrays.thresholds,
        arrays.left_children,
        arrays.right_children,
        arrays.values,
        arrays.is_leaf,
    ):
        array.setflags(write=False)

    return arrays
