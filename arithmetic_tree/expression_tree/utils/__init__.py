"""Utilities for expression trees."""

from .tree_utils import (
    get_all_nodes, calculate_tree_depth, count_nodes,
    get_literal_values, find_nodes_by_operator
)

__all__ = [
    'get_all_nodes', 'calculate_tree_depth', 'count_nodes',
    'get_literal_values', 'find_nodes_by_operator'
]
