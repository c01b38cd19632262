from numbers import Real
from typing import Protocol, runtime_checkable


@runtime_checkable
class ExpressionLike(Protocol):
  """Anything that can stand as an operand: it evaluates to a number and renders to text"""

  def evaluate(self) -> Real:
    ...

  def render(self) -> str:
    ...
