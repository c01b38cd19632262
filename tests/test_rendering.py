from fractions import Fraction

import numpy as np
import pytest

from arithmetic_tree import render_literal, render_binary, Literal, Add


@pytest.mark.parametrize("value, expected", [
  (1, "1"),
  (-3, "-3"),
  (0, "0"),
  (2.0, "2"),
  (-0.0, "0"),
  (0.5, "0.5"),
  (0.1, "0.1"),
  (1e16, "10000000000000000"),
  (1e20, "100000000000000000000"),
  (1e21, "1e+21"),
  (Fraction(1, 2), "1/2"),
  (Fraction(4, 2), "2"),
  (np.float64(2.5), "2.5"),
  (np.int64(4), "4"),
])
def test_render_literal(value, expected):
  assert render_literal(value) == expected


def test_render_binary_parenthesizes_with_spaces():
  assert render_binary(Literal(1), Literal(2), "+") == "(1 + 2)"


def test_render_binary_recurses_into_operand_rendering():
  assert render_binary(Add(Literal(1), Literal(2)), Literal(3), "÷") == "((1 + 2) ÷ 3)"
