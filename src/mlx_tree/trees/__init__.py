"""Tree implementations for MLX Tree.

Exact greedy binary decision trees for classification.
"""

from mlx_tree.trees._criterion import Criterion, Entropy, Gini, get_criterion
from mlx_tree.trees._tree_structure import Branch, Leaf, Node, TreeArrays
from mlx_tree.trees.decision_tree import DecisionTreeClassifier

__all__ = [
    "Branch",
    "Criterion",
    "DecisionTreeClassifier",
    "Entropy",
    "Gini",
    "Leaf",
    "Node",
    "TreeArrays",
    "get_criterion",
]
