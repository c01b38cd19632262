"""
Tree Utility Functions

Traversal and inspection helpers for expression trees. Everything here
walks through `children()`, so new node kinds need no changes; operands
without `children()` are treated as leaves.
"""

from typing import Any, List

from ..core.node import Node, LiteralNode, BinaryOpNode


def _children(node) -> tuple:
  children = getattr(node, 'children', None)
  return tuple(children()) if callable(children) else ()


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
  """
  Get all nodes in the tree using specified traversal order.

  Args:
      node: Root node of the tree
      traversal_order: 'breadth_first' (default) or 'depth_first'

  Returns:
      List of all nodes in the tree; shared subtrees appear once per parent
  """
  if traversal_order == 'breadth_first':
    return _breadth_first_traversal(node)
  elif traversal_order == 'depth_first':
    return _depth_first_traversal(node)
  else:
    raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
  nodes_to_visit = [node]
  all_nodes = []

  while nodes_to_visit:
    current_node = nodes_to_visit.pop(0)  # FIFO for breadth-first
    all_nodes.append(current_node)
    nodes_to_visit.extend(_children(current_node))

  return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
  """Pre-order, left child before right child"""
  nodes = [node]
  for child in _children(node):
    nodes.extend(_depth_first_traversal(child))
  return nodes


def calculate_tree_depth(node: Node) -> int:
  """Maximum depth of the tree (leaf nodes have depth 1)"""
  children = _children(node)
  if not children:
    return 1
  return 1 + max(calculate_tree_depth(child) for child in children)


def count_nodes(node: Node) -> int:
  return len(_depth_first_traversal(node))


def get_literal_values(node: Node) -> List[Any]:
  """Values of all literal leaves, in left-to-right order"""
  return [n.value for n in _depth_first_traversal(node) if isinstance(n, LiteralNode)]


def find_nodes_by_operator(node: Node, operator: str) -> List[BinaryOpNode]:
  return [n for n in _depth_first_traversal(node) if getattr(n, 'operator', None) == operator]
