"""Exact greedy tree builder for classification.

Every node evaluates all candidate thresholds (midpoints between
consecutive distinct values) of every feature, and keeps the split with
the lowest weighted impurity. Only row-index arrays are allocated per
node; the feature matrix and labels are shared read-only.
"""

import logging
from dataclasses import dataclass
from typing import Literal, NamedTuple

import numpy as np

from mlx_tree.trees._criterion import Criterion, get_criterion
from mlx_tree.trees._tree_structure import Branch, Leaf, Node
from mlx_tree.trees._utils import freq, get_splits, majority_label, split_by_mask

logger = logging.getLogger(__name__)


class SplitInfo(NamedTuple):
    """Information about a split decision.

    Attributes:
        feature: Index of the feature to split on (-1 if none found).
        threshold: Threshold value for the split.
        cost: Weighted impurity of the two children, or of the unsplit
            node when no split was found.
        mask: Boolean mask over the node's rows, True for rows going left.
        is_valid: Whether a split strictly improving on the node was found.
    """

    feature: int
    threshold: float
    cost: float
    mask: np.ndarray
    is_valid: bool


def find_best_split(
    X: np.ndarray,
    y: np.ndarray,
    remaining: np.ndarray,
    criterion: Criterion,
) -> SplitInfo:
    """Find the split of ``remaining`` with the lowest weighted impurity.

    Ties keep the first candidate found, i.e. the lowest feature index and
    then the lowest threshold.

    Args:
        X: Features of shape (n_samples, n_features).
        y: Class labels of shape (n_samples,).
        remaining: Row indices of the samples at this node.
        criterion: Impurity criterion.

    Returns:
        SplitInfo for the best split. ``is_valid`` is False when no
        candidate improves on leaving the node unsplit.
    """
    current_target = y[remaining]
    best = SplitInfo(
        feature=-1,
        threshold=0.0,
        cost=criterion.weighted(current_target),
        mask=np.zeros(remaining.shape[0], dtype=bool),
        is_valid=False,
    )

    for feature in range(X.shape[1]):
        current_feature = X[remaining, feature]

        for threshold in get_splits(current_feature):
            mask = current_feature < threshold
            left, right = split_by_mask(current_target, mask)
            cost = criterion.weighted(left) + criterion.weighted(right)

            if cost < best.cost:
                best = SplitInfo(
                    feature=feature,
                    threshold=float(threshold),
                    cost=cost,
                    mask=mask,
                    is_valid=True,
                )

    return best


@dataclass
class NodeInfo:
    """Information about a node to be processed.

    Attributes:
        remaining: Row indices of the samples at this node.
        depth: Depth of this node (root = 0).
        split_info: Chosen split once the node has been expanded; the
            Branch is assembled after both children are built.
    """

    remaining: np.ndarray
    depth: int
    split_info: SplitInfo | None = None


@dataclass(frozen=True)
class TreeBuilder:
    """Depth-first builder for a classification tree.

    Nodes are expanded from an explicit work stack rather than by
    recursion, so unlimited trees are not bounded by the interpreter's
    recursion limit.

    Attributes:
        criterion: Impurity criterion used to score splits.
        max_depth: Nodes at this depth become leaves. None for no limit.
        min_samples_split: Nodes with at most this many rows become
            leaves. None for no limit.
    """

    criterion: Criterion
    max_depth: int | None = None
    min_samples_split: int | None = None

    def build(self, X: np.ndarray, y: np.ndarray) -> Node:
        """Build a tree over all rows of ``X``.

        Args:
            X: Features of shape (n_samples, n_features).
            y: Non-negative integer labels of shape (n_samples,).

        Returns:
            Root node of the built tree.
        """
        remaining = np.arange(X.shape[0])
        return self.split(X, y, remaining, depth=0)

    def can_split(self, n_node_samples: int, depth: int) -> bool:
        """Check the depth and sample-count stopping criteria."""
        if self.max_depth is not None and depth >= self.max_depth:
            return False
        if self.min_samples_split is not None and n_node_samples <= self.min_samples_split:
            return False
        return True

    def split(
        self, X: np.ndarray, y: np.ndarray, remaining: np.ndarray, depth: int
    ) -> Node:
        """Build the subtree for the rows in ``remaining``.

        Left subtrees are completed before right ones, and a Branch is
        created once both of its children exist.

        Args:
            X: Features of shape (n_samples, n_features).
            y: Class labels of shape (n_samples,).
            remaining: Row indices of the samples at the subtree root.
            depth: Depth of the subtree root (root is 0).

        Returns:
            A Leaf or a Branch with both children built.
        """
        nodes_to_process = [NodeInfo(remaining=remaining, depth=depth)]
        built: list[Node] = []

        while nodes_to_process:
            current_node = nodes_to_process.pop()

            if current_node.split_info is not None:
                # Both children are on top of ``built``, right last
                right = built.pop()
                left = built.pop()
                built.append(
                    Branch(
                        feature_index=current_node.split_info.feature,
                        threshold=current_node.split_info.threshold,
                        left=left,
                        right=right,
                    )
                )
                continue

            result = self._expand(X, y, current_node)
            if isinstance(result, Leaf):
                built.append(result)
                continue

            left_indices, right_indices = split_by_mask(current_node.remaining, result.mask)
            current_node.split_info = result

            nodes_to_process.append(current_node)
            nodes_to_process.append(
                NodeInfo(remaining=right_indices, depth=current_node.depth + 1)
            )
            nodes_to_process.append(
                NodeInfo(remaining=left_indices, depth=current_node.depth + 1)
            )

        return built.pop()

    def _expand(
        self, X: np.ndarray, y: np.ndarray, node: NodeInfo
    ) -> Leaf | SplitInfo:
        """Decide whether ``node`` becomes a leaf or which split it takes."""
        remaining = node.remaining
        depth = node.depth

        current_target = y[remaining]
        labels, counts = freq(current_target)
        label = majority_label(labels, counts)

        if labels.shape[0] == 1 or not self.can_split(remaining.shape[0], depth):
            return Leaf(label=label)

        split_info = find_best_split(X, y, remaining, self.criterion)

        # No improving split, e.g. every feature constant over these rows
        if not split_info.is_valid:
            logger.debug(
                f"No improving split at depth {depth} ({remaining.shape[0]} rows), "
                f"emitting leaf {label}"
            )
            return Leaf(label=label)

        n_left = int(np.sum(split_info.mask))
        logger.debug(
            f"Depth {depth}: feature {split_info.feature} < {split_info.threshold:.6g} "
            f"splits {remaining.shape[0]} rows into {n_left}/"
            f"{remaining.shape[0] - n_left} (cost {split_info.cost:.6f})"
        )
        return split_info


def build_classification_tree(
    X: np.ndarray,
    y: np.ndarray,
    criterion: Literal["gini", "entropy"] | Criterion = "gini",
    max_depth: int | None = None,
    min_samples_split: int | None = None,
) -> Node:
    """Build a classification tree using exact greedy split search.

    Args:
        X: Features of shape (n_samples, n_features), float64.
        y: Class labels of shape (n_samples,), non-negative integers.
        criterion: Split criterion ("gini", "entropy" or a Criterion).
        max_depth: Maximum depth of the tree. None for no limit.
        min_samples_split: Nodes with at most this many samples are not
            split. None for no limit.

    Returns:
        Root node of the fitted tree.
    """
    builder = TreeBuilder(
        criterion=get_criterion(criterion),
        max_depth=max_depth,
        min_samples_split=min_samples_split,
    )
    return builder.build(X, y)
