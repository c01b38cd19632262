# Python

"""Arithmetic Expression Trees

Immutable binary trees of numeric literals and arithmetic operations,
validated at construction, evaluated and rendered recursively.
"""

from .exceptions import ExpressionError, InvalidLiteralError, MissingOperandError, ZeroDivisorError
from .utils import is_finite_number
from .expression_tree import (
  Expression, ExpressionLike,
  Node, LiteralNode, BinaryOpNode, AddNode, SubtractNode, MultiplyNode, DivideNode,
  validate_literal, validate_operands, validate_divisor,
  render_literal, render_binary,
  make_literal, make_binary, make_add, make_subtract, make_multiply, make_divide,
  Literal, Add, Subtract, Multiply, Divide,
  get_all_nodes, calculate_tree_depth, count_nodes,
  get_literal_values, find_nodes_by_operator
)
from .logging_system import LogLevel, configure_logging, get_logger, set_log_level

__version__ = "0.1.0"
__all__ = [
  "ExpressionError", "InvalidLiteralError", "MissingOperandError", "ZeroDivisorError",
  "is_finite_number",
  "Expression", "ExpressionLike",
  "Node", "LiteralNode", "BinaryOpNode", "AddNode", "SubtractNode", "MultiplyNode", "DivideNode",
  "validate_literal", "validate_operands", "validate_divisor",
  "render_literal", "render_binary",
  "make_literal", "make_binary", "make_add", "make_subtract", "make_multiply", "make_divide",
  "Literal", "Add", "Subtract", "Multiply", "Divide",
  "get_all_nodes", "calculate_tree_depth", "count_nodes",
  "get_literal_values", "find_nodes_by_operator",
  "LogLevel", "configure_logging", "get_logger", "set_log_level",
]
