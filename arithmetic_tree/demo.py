"""
Builds the reference expression tree and checks its value and rendering.
"""

from .exceptions import ExpressionError
from .expression_tree import Expression, Literal, Add, Subtract, Multiply, Divide
from .logging_system import get_logger

EXPECTED_RENDERING = "((7 + ((3 - 2) x 5)) ÷ 6)"
EXPECTED_VALUE = 2


def build_demo_tree():
  return Divide(
    Add(Literal(7), Multiply(Subtract(Literal(3), Literal(2)), Literal(5))),
    Literal(6)
  )


def run_demo() -> bool:
  logger = get_logger()
  try:
    expression = Expression(build_demo_tree())
  except ExpressionError as e:
    logger.critical(f"Failed to build demo tree: {e}")
    return False

  rendering = expression.render()
  value = expression.evaluate()
  logger.result_summary({
    'Rendering': rendering,
    'Value': value,
    'Nodes': expression.size(),
    'Depth': expression.depth(),
  })

  if rendering != EXPECTED_RENDERING:
    logger.critical(f"Expected rendering {EXPECTED_RENDERING!r}, got {rendering!r}")
    return False
  if value != EXPECTED_VALUE:
    logger.critical(f"Expected value {EXPECTED_VALUE}, got {value}")
    return False

  logger.milestone("Demo tree rendered and evaluated as expected")
  return True


def main() -> int:
  return 0 if run_demo() else 1
