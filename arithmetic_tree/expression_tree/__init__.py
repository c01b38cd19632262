"""Expression Tree Module

Immutable arithmetic expression trees: literals and binary operations.
"""

from .core import (
    ExpressionLike,
    Node, LiteralNode, BinaryOpNode, AddNode, SubtractNode, MultiplyNode, DivideNode,
    validate_literal, validate_operands, validate_divisor,
    render_literal, render_binary,
    make_literal, make_binary, make_add, make_subtract, make_multiply, make_divide,
    Literal, Add, Subtract, Multiply, Divide
)
from .expression import Expression
from .utils import (
    get_all_nodes, calculate_tree_depth, count_nodes,
    get_literal_values, find_nodes_by_operator
)

__all__ = [
    "Expression", "ExpressionLike",
    "Node", "LiteralNode", "BinaryOpNode", "AddNode", "SubtractNode", "MultiplyNode", "DivideNode",
    "validate_literal", "validate_operands", "validate_divisor",
    "render_literal", "render_binary",
    "make_literal", "make_binary", "make_add", "make_subtract", "make_multiply", "make_divide",
    "Literal", "Add", "Subtract", "Multiply", "Divide",
    "get_all_nodes", "calculate_tree_depth", "count_nodes",
    "get_literal_values", "find_nodes_by_operator"
]
