"""
Constructor factories with injectable validation and rendering strategies.

Each `make_*` returns a callable that builds one node kind with the given
strategies bound. The module-level `Literal`, `Add`, `Subtract`, `Multiply`
and `Divide` are the default-wired constructors. A new operator only needs
its own BinaryOpNode subclass, which `make_binary` can wire the same way.
"""

from functools import partial
from typing import Callable, Optional, Type

from .node import LiteralNode, BinaryOpNode, AddNode, SubtractNode, MultiplyNode, DivideNode
from .rendering import render_literal
from .validation import validate_literal


def make_literal(validate: Callable = validate_literal,
                 render: Callable = render_literal) -> Callable[..., LiteralNode]:
  return partial(LiteralNode, validate=validate, render=render)


def make_binary(node_class: Type[BinaryOpNode], validate: Optional[Callable] = None,
                render: Optional[Callable] = None) -> Callable[..., BinaryOpNode]:
  """Bind strategies to a binary node class; None keeps the class default"""
  if not (isinstance(node_class, type) and issubclass(node_class, BinaryOpNode)):
    raise TypeError(f"{node_class!r} is not a BinaryOpNode subclass")
  return partial(node_class, validate=validate, render=render)


def make_add(validate: Optional[Callable] = None, render: Optional[Callable] = None):
  return make_binary(AddNode, validate, render)


def make_subtract(validate: Optional[Callable] = None, render: Optional[Callable] = None):
  return make_binary(SubtractNode, validate, render)


def make_multiply(validate: Optional[Callable] = None, render: Optional[Callable] = None):
  return make_binary(MultiplyNode, validate, render)


def make_divide(validate: Optional[Callable] = None, render: Optional[Callable] = None):
  return make_binary(DivideNode, validate, render)


Literal = make_literal()
Add = make_add()
Subtract = make_subtract()
Multiply = make_multiply()
Divide = make_divide()
