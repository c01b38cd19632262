import numpy as np

# Integral floats below this magnitude render without a fractional part
INTEGRAL_FLOAT_RENDER_LIMIT = 1e21


def render_literal(value) -> str:
  """Decimal text of a literal value: 2 -> '2', 2.0 -> '2', 0.5 -> '0.5', Fraction(1, 2) -> '1/2'"""
  if isinstance(value, np.generic):
    value = value.item()
  if isinstance(value, float) and value.is_integer() and abs(value) < INTEGRAL_FLOAT_RENDER_LIMIT:
    return str(int(value))
  return str(value)


def render_binary(left, right, operator: str) -> str:
  return f"({left.render()} {operator} {right.render()})"
