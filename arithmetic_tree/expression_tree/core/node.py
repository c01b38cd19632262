import sympy as sp
from abc import ABC, abstractmethod
from typing import Callable, Optional, Tuple
from .rendering import render_literal, render_binary
from .validation import validate_literal, validate_operands, validate_divisor


def to_sympy_term(operand) -> sp.Expr:
  """Sympy form of any operand; objects without to_sympy contribute their value"""
  to_sympy = getattr(operand, "to_sympy", None)
  if callable(to_sympy):
    return to_sympy()
  return sp.sympify(operand.evaluate())


class Node(ABC):
  """Immutable expression node; attributes are set once, during construction"""

  __slots__ = ()

  def _freeze(self, **attributes):
    for name, value in attributes.items():
      object.__setattr__(self, name, value)

  def __setattr__(self, name, value):
    raise AttributeError(f"{type(self).__name__} is immutable")

  def __delattr__(self, name):
    raise AttributeError(f"{type(self).__name__} is immutable")

  @abstractmethod
  def evaluate(self):
    pass

  @abstractmethod
  def render(self) -> str:
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  def children(self) -> Tuple['Node', ...]:
    return ()

  def size(self) -> int:
    """Node count; foreign operands count as one node"""
    # Import here to avoid circular imports
    from ..utils.tree_utils import count_nodes
    return count_nodes(self)

  def depth(self) -> int:
    """Leaves have depth 1"""
    from ..utils.tree_utils import calculate_tree_depth
    return calculate_tree_depth(self)

  def __str__(self) -> str:
    return self.render()


class LiteralNode(Node):
  __slots__ = ('value', '_render')

  def __init__(self, value, *, validate: Callable = validate_literal,
               render: Callable = render_literal):
    validate(value)
    self._freeze(value=value, _render=render)

  def evaluate(self):
    return self.value

  def render(self) -> str:
    return self._render(self.value)

  def to_sympy(self) -> sp.Expr:
    return sp.sympify(self.value)

  def __repr__(self) -> str:
    return f"LiteralNode({self.value!r})"


class BinaryOpNode(Node):
  """
  Binary operation over two operands.

  Subclasses supply `operator` and `_apply`. Validation and rendering
  default to the class-level strategies and may be replaced per instance.
  """

  __slots__ = ('left', 'right', '_render')

  operator: str = ''
  default_validate = staticmethod(validate_operands)
  default_render = staticmethod(render_binary)

  def __init__(self, left, right, *, validate: Optional[Callable] = None,
               render: Optional[Callable] = None):
    if validate is None:
      validate = self.default_validate
    if render is None:
      render = self.default_render

    validate(left, right, self.operator)
    self._freeze(left=left, right=right, _render=render)

  def evaluate(self):
    left_val = self.left.evaluate()
    right_val = self.right.evaluate()
    return self._apply(left_val, right_val)

  @abstractmethod
  def _apply(self, left_val, right_val):
    pass

  def render(self) -> str:
    return self._render(self.left, self.right, self.operator)

  def children(self) -> Tuple['Node', ...]:
    return (self.left, self.right)

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.left!r}, {self.right!r})"


class AddNode(BinaryOpNode):
  __slots__ = ()
  operator = '+'

  def _apply(self, left_val, right_val):
    return left_val + right_val

  def to_sympy(self) -> sp.Expr:
    return sp.Add(to_sympy_term(self.left), to_sympy_term(self.right), evaluate=False)


class SubtractNode(BinaryOpNode):
  __slots__ = ()
  operator = '-'

  def _apply(self, left_val, right_val):
    return left_val - right_val

  def to_sympy(self) -> sp.Expr:
    return sp.Add(to_sympy_term(self.left), sp.Mul(-1, to_sympy_term(self.right), evaluate=False), evaluate=False)


class MultiplyNode(BinaryOpNode):
  __slots__ = ()
  operator = 'x'

  def _apply(self, left_val, right_val):
    return left_val * right_val

  def to_sympy(self) -> sp.Expr:
    return sp.Mul(to_sympy_term(self.left), to_sympy_term(self.right), evaluate=False)


class DivideNode(BinaryOpNode):
  __slots__ = ()
  operator = '÷'
  default_validate = staticmethod(validate_divisor)

  def _apply(self, left_val, right_val):
    return left_val / right_val

  def to_sympy(self) -> sp.Expr:
    return sp.Mul(to_sympy_term(self.left), sp.Pow(to_sympy_term(self.right), -1, evaluate=False), evaluate=False)
