"""Core expression tree components."""

from .protocol import ExpressionLike
from .node import to_sympy_term, Node, LiteralNode, BinaryOpNode, AddNode, SubtractNode, MultiplyNode, DivideNode
from .validation import is_operand, validate_literal, validate_operands, validate_divisor
from .rendering import render_literal, render_binary, INTEGRAL_FLOAT_RENDER_LIMIT
from .constructors import (
  make_literal, make_binary, make_add, make_subtract, make_multiply, make_divide,
  Literal, Add, Subtract, Multiply, Divide
)

__all__ = [
  'ExpressionLike', 'is_operand', 'to_sympy_term',
  'Node', 'LiteralNode', 'BinaryOpNode', 'AddNode', 'SubtractNode', 'MultiplyNode', 'DivideNode',
  'validate_literal', 'validate_operands', 'validate_divisor',
  'render_literal', 'render_binary', 'INTEGRAL_FLOAT_RENDER_LIMIT',
  'make_literal', 'make_binary', 'make_add', 'make_subtract', 'make_multiply', 'make_divide',
  'Literal', 'Add', 'Subtract', 'Multiply', 'Divide'
]
