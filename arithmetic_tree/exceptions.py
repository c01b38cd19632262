"""
Expression construction errors.

All of these are raised synchronously from a node constructor, before the
node exists. Each one also derives from the builtin exception a caller
would naturally reach for, so `except ValueError` keeps working.
"""

from .utils import describe_value


class ExpressionError(Exception):
  """Base class for every error raised while building an expression tree."""


class InvalidLiteralError(ExpressionError, ValueError):
  """A literal received something that is not a finite real number."""

  def __init__(self, value):
    self.value = value
    super().__init__(f'The value "{describe_value(value)}" is not a numerical value!')


class MissingOperandError(ExpressionError, TypeError):
  """A binary operation received an operand that cannot evaluate and render."""

  def __init__(self, operator: str):
    self.operator = operator
    super().__init__(f'The operation "{operator}" is missing an operand!')


class ZeroDivisorError(ExpressionError, ZeroDivisionError):
  """The right-hand side of a division evaluates to zero."""

  def __init__(self, rendered_operand: str, operator: str = "÷"):
    self.operator = operator
    self.rendered_operand = rendered_operand
    super().__init__(
      f'The right-hand side operand "{rendered_operand}" for Divide must be non-zero!'
    )
