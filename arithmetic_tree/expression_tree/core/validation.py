"""
Construction-time checks for expression nodes.

Every check raises before the node is created, so an invalid tree can never
be built. Operand checks are structural (see ExpressionLike) and never look
at class names.
"""

from ...exceptions import InvalidLiteralError, MissingOperandError, ZeroDivisorError
from ...logging_system import log_debug
from ...utils import describe_value, is_finite_number
from .protocol import ExpressionLike


def validate_literal(value) -> None:
  if not is_finite_number(value):
    log_debug(f"Rejected literal {describe_value(value)!r}")
    raise InvalidLiteralError(value)


def is_operand(candidate) -> bool:
  # Classes carry evaluate/render as unbound functions, which cannot be called without an instance
  return isinstance(candidate, ExpressionLike) and not isinstance(candidate, type)


def validate_operands(left, right, operator: str) -> None:
  if not is_operand(left) or not is_operand(right):
    log_debug(f"Rejected operands for '{operator}': {type(left).__name__}, {type(right).__name__}")
    raise MissingOperandError(operator)


def validate_divisor(left, right, operator: str) -> None:
  """Operand check plus an eager evaluation of the divisor, which must not be zero"""
  validate_operands(left, right, operator)

  if right.evaluate() == 0:
    rendered = right.render()
    log_debug(f"Rejected zero divisor {rendered}")
    raise ZeroDivisorError(rendered, operator)
