"""Test function evaluate."""
import math

import pytest

from func_calc.common.evaluator import evaluate
from func_calc.common.nodes import (
    Add,
    Constant,
    ConstantKind,
    Divide,
    Expression,
    Function,
    FunctionKind,
    Multiply,
    Number,
    Pow,
    Subtract,
)


def num(value: float) -> Number:
    return Number(value=value)


@pytest.mark.parametrize("node,expected", [
    (num(2.5), 2.5),
    (Add(left=num(3), right=num(4)), 7.0),
    (Subtract(left=num(10), right=num(2)), 8.0),
    (Multiply(left=num(3), right=num(5)), 15.0),
    (Divide(left=num(8), right=num(2)), 4.0),
    (Pow(left=num(2), right=num(10)), 1024.0),
    (Pow(left=num(9), right=num(0.5)), 3.0),
])
def test_evaluate_arithmetic(node, expected):
    """Binary operators apply float arithmetic."""
    assert evaluate(node) == expected


def test_evaluate_returns_builtin_float():
    assert type(evaluate(Add(left=num(1), right=num(2)))) is float


@pytest.mark.parametrize("kind,expected", [
    (ConstantKind.PI, math.pi),
    (ConstantKind.E, math.e),
])
def test_evaluate_constants(kind, expected):
    assert evaluate(Constant(kind=kind)) == expected


@pytest.mark.parametrize("kind,argument,expected", [
    (FunctionKind.SQRT, 16.0, 4.0),
    (FunctionKind.SIN, 0.5, math.sin(0.5)),
    (FunctionKind.COS, 0.5, math.cos(0.5)),
    (FunctionKind.TAN, 0.5, math.tan(0.5)),
    (FunctionKind.ASIN, 0.5, math.asin(0.5)),
    (FunctionKind.ACOS, 0.5, math.acos(0.5)),
    (FunctionKind.ATAN, 0.5, math.atan(0.5)),
    (FunctionKind.LOG10, 1000.0, 3.0),
    (FunctionKind.LN, math.e ** 3, 3.0),
])
def test_evaluate_functions(kind, argument, expected):
    """Functions apply the matching math function to their argument."""
    assert evaluate(Function(kind=kind, argument=num(argument))) == pytest.approx(expected)


def test_evaluate_angle_conversions():
    """torad multiplies by pi/180, todegree by 180/pi."""
    assert evaluate(Function(kind=FunctionKind.TO_RADIAN, argument=num(180))) == math.pi
    assert evaluate(Function(kind=FunctionKind.TO_DEGREE, argument=Constant(kind=ConstantKind.PI))) == 180.0
    assert evaluate(Function(kind=FunctionKind.TO_RADIAN, argument=num(60))) == pytest.approx(math.pi / 3)


@pytest.mark.parametrize("node,expected", [
    (Divide(left=num(1), right=num(0)), math.inf),
    (Divide(left=num(-1), right=num(0)), -math.inf),
    (Function(kind=FunctionKind.LN, argument=num(0)), -math.inf),
    (Function(kind=FunctionKind.LOG10, argument=num(0)), -math.inf),
    (Pow(left=num(10), right=num(400)), math.inf),
    (Pow(left=num(0), right=num(-1)), math.inf),
])
def test_evaluate_infinite_results(node, expected):
    """Division by zero and overflow give infinities instead of raising."""
    assert evaluate(node) == expected


@pytest.mark.parametrize("node", [
    Divide(left=num(0), right=num(0)),
    Function(kind=FunctionKind.SQRT, argument=num(-1)),
    Function(kind=FunctionKind.ASIN, argument=num(2)),
    Function(kind=FunctionKind.ACOS, argument=num(-2)),
    Function(kind=FunctionKind.LN, argument=num(-1)),
    Pow(left=num(-8), right=Divide(left=num(1), right=num(3))),
])
def test_evaluate_domain_errors_give_nan(node):
    """Domain violations give nan instead of raising."""
    assert math.isnan(evaluate(node))


def test_evaluate_is_repeatable():
    """Evaluating the same tree twice gives the same value."""
    tree = Add(
        left=Function(kind=FunctionKind.SIN, argument=num(1.3)),
        right=Pow(left=Constant(kind=ConstantKind.E), right=num(1.7)),
    )
    assert evaluate(tree) == evaluate(tree)


def test_evaluate_unknown_node():
    with pytest.raises(TypeError):
        evaluate(Expression())


def test_evaluate_deep_left_chain():
    """A tree far deeper than the recursion limit is folded without recursion."""
    tree = num(0)
    for i in range(1, 5001):
        tree = Add(left=tree, right=num(i))
    assert evaluate(tree) == 5000 * 5001 / 2


def test_evaluate_deep_function_nesting():
    tree = num(1)
    for _ in range(5000):
        tree = Function(kind=FunctionKind.SQRT, argument=tree)
    assert evaluate(tree) == 1.0


def test_evaluate_operand_order():
    """Left operands are combined before right ones for non-commutative operators."""
    tree = Subtract(left=Divide(left=num(8), right=num(2)), right=Pow(left=num(2), right=num(3)))
    assert evaluate(tree) == -4.0
