"""Reduce an expression tree to a floating-point value."""
from typing import Callable, Dict, List, Tuple, Type

import numpy as np

from func_calc.common.nodes import (
    Add,
    BinaryOperation,
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


# Type aliases for the numpy ufuncs applied to nodes
BinaryFn = Callable[[np.float64, np.float64], np.float64]
UnaryFn = Callable[[np.float64], np.float64]

BINARY_OPERATORS: Dict[Type[BinaryOperation], BinaryFn] = {
    Add: np.add,
    Subtract: np.subtract,
    Multiply: np.multiply,
    Divide: np.divide,
    Pow: np.power,
}

FUNCTIONS: Dict[FunctionKind, UnaryFn] = {
    FunctionKind.SQRT: np.sqrt,
    FunctionKind.SIN: np.sin,
    FunctionKind.COS: np.cos,
    FunctionKind.TAN: np.tan,
    FunctionKind.ASIN: np.arcsin,
    FunctionKind.ACOS: np.arccos,
    FunctionKind.ATAN: np.arctan,
    FunctionKind.LOG10: np.log10,
    FunctionKind.LN: np.log,
    FunctionKind.TO_RADIAN: lambda x: x / 180.0 * np.pi,
    FunctionKind.TO_DEGREE: lambda x: x / np.pi * 180.0,
}

CONSTANTS: Dict[ConstantKind, float] = {
    ConstantKind.PI: np.pi,
    ConstantKind.E: np.e,
}


def _reduce(root: Expression) -> np.float64:
    """
    Fold the tree bottom-up with an explicit stack, tree depth is not bounded by the recursion limit.

    A node is pushed once to schedule its children and once more, marked done,
    to combine their values taken from the top of the value stack.
    """
    values: List[np.float64] = []
    pending: List[Tuple[Expression, bool]] = [(root, False)]

    while pending:
        node, done = pending.pop()
        if isinstance(node, Number):
            values.append(np.float64(node.value))
        elif isinstance(node, Constant):
            values.append(np.float64(CONSTANTS[node.kind]))
        elif isinstance(node, BinaryOperation):
            if done:
                right = values.pop()
                left = values.pop()
                values.append(BINARY_OPERATORS[type(node)](left, right))
            else:
                # Left is popped first, so its value lands below the right one
                pending.extend([(node, True), (node.right, False), (node.left, False)])
        elif isinstance(node, Function):
            if done:
                values.append(FUNCTIONS[node.kind](values.pop()))
            else:
                pending.extend([(node, True), (node.argument, False)])
        else:
            raise TypeError(f"Unsupported expression node: {type(node).__name__}")

    return values.pop()


def evaluate(node: Expression) -> float:
    """
    Evaluate an expression tree.

    Arithmetic follows IEEE-754 double precision: division by zero, sqrt(-1),
    asin(2), ln(0) or an overflowing power produce inf or nan instead of raising.

    :param Expression node: Root of the expression tree

    :return: Computed value
    :rtype: float
    """
    # numpy only warns on floating-point errors, silence them and keep the IEEE result
    with np.errstate(all="ignore"):
        return float(_reduce(node))
