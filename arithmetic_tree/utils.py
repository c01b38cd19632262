# Numeric helpers shared by validation and rendering
import numbers

import numpy as np


def is_finite_number(value) -> bool:
  """True for real numbers (ints, floats, fractions, numpy scalars) within float range; bools are not numbers"""
  if isinstance(value, (bool, np.bool_)):
    return False
  if not isinstance(value, (numbers.Real, np.integer, np.floating)):
    return False
  try:
    as_float = float(value)
  except OverflowError:
    # ints and fractions beyond float range cannot be evaluated or rendered safely
    return False
  return bool(np.isfinite(as_float))


def describe_value(value) -> str:
  """str(value), or a placeholder for numbers past the interpreter's int-to-str digit limit"""
  try:
    return str(value)
  except ValueError:
    return f"<{type(value).__name__} too large to display>"
