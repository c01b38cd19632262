import sympy as sp
from typing import Optional
from ..exceptions import MissingOperandError
from .core.node import to_sympy_term
from .core.validation import is_operand
from .utils.tree_utils import calculate_tree_depth, count_nodes, get_literal_values


class Expression:
  """Expression wrapper around a root node with a cached rendering"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root):
    if not is_operand(root):
      raise MissingOperandError("Expression")
    self.root = root
    self._string_cache: Optional[str] = None

  def evaluate(self):
    return self.root.evaluate()

  def render(self) -> str:
    # Nodes are immutable, so the first rendering stays valid
    if self._string_cache is None:
      self._string_cache = self.root.render()
    return self._string_cache

  def size(self) -> int:
    return count_nodes(self.root)

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def literals(self) -> tuple:
    """Leaf values, left to right"""
    return tuple(get_literal_values(self.root))

  def to_sympy(self) -> sp.Expr:
    return to_sympy_term(self.root)

  def __str__(self) -> str:
    return self.render()

  def __repr__(self) -> str:
    return f"Expression({self.root!r})"
