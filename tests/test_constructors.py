import pytest

from arithmetic_tree import (
  make_literal, make_binary, make_add, make_subtract, make_multiply, make_divide,
  Literal, Add, Divide, AddNode, SubtractNode, MultiplyNode, DivideNode, LiteralNode,
  validate_operands, ZeroDivisorError, MissingOperandError,
)


def test_default_constructors_build_expected_node_kinds():
  assert isinstance(make_literal()(1), LiteralNode)
  assert isinstance(make_add()(Literal(1), Literal(2)), AddNode)
  assert isinstance(make_subtract()(Literal(1), Literal(2)), SubtractNode)
  assert isinstance(make_multiply()(Literal(1), Literal(2)), MultiplyNode)
  assert isinstance(make_divide()(Literal(1), Literal(2)), DivideNode)


def test_literal_render_strategy_is_injected():
  Money = make_literal(render=lambda value: f"${value:.2f}")
  assert Money(3).render() == "$3.00"
  assert Add(Money(3), Literal(1)).render() == "($3.00 + 1)"


def test_literal_validate_strategy_is_injected():
  seen = []
  Recorded = make_literal(validate=seen.append)
  node = Recorded(5)
  assert seen == [5]
  assert node.evaluate() == 5


def test_binary_render_strategy_is_injected():
  Prefix = make_add(render=lambda left, right, operator: f"{operator} {left.render()} {right.render()}")
  assert Prefix(Literal(1), Literal(2)).render() == "+ 1 2"
  assert Prefix(Literal(1), Literal(2)).evaluate() == 3


def test_binary_validate_strategy_receives_operator_symbol():
  seen = []

  def recording_validate(left, right, operator):
    seen.append(operator)
    validate_operands(left, right, operator)

  make_multiply(validate=recording_validate)(Literal(2), Literal(3))
  make_divide(validate=recording_validate)(Literal(2), Literal(3))
  assert seen == ["x", "÷"]


def test_divide_defaults_to_divisor_check():
  with pytest.raises(ZeroDivisorError):
    make_divide()(Literal(1), Literal(0))


def test_divide_with_plain_operand_check_skips_divisor_check():
  node = make_divide(validate=validate_operands)(Literal(1), Literal(2))
  assert node.evaluate() == 0.5
  with pytest.raises(MissingOperandError):
    make_divide(validate=validate_operands)(Literal(1), None)


def test_make_binary_rejects_non_binary_classes():
  with pytest.raises(TypeError):
    make_binary(LiteralNode)
  with pytest.raises(TypeError):
    make_binary(lambda left, right: None)


def test_make_binary_keeps_class_defaults():
  SafeDivide = make_binary(DivideNode)
  with pytest.raises(ZeroDivisorError):
    SafeDivide(Literal(1), Literal(0))


def test_module_constructors_are_default_wired():
  assert Divide(Literal(9), Literal(3)).evaluate() == 3
  with pytest.raises(ZeroDivisorError):
    Divide(Literal(9), Literal(0))
