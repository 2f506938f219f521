"""Abstract syntax tree nodes produced by the expression parser."""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class FunctionKind(str, Enum):
    """Unary mathematical functions, valued by the name used in expressions."""

    SQRT = "sqrt"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    ASIN = "asin"
    ACOS = "acos"
    ATAN = "atan"
    LOG10 = "log"
    LN = "ln"
    TO_RADIAN = "torad"
    TO_DEGREE = "todegree"


class ConstantKind(str, Enum):
    """Named constants, valued by the name used in expressions."""

    PI = "pi"
    E = "e"


class Expression(BaseModel):
    """
    Base class of every node of an expression tree.

    Nodes are immutable once built: children are created before their parent
    and each child belongs to exactly one parent.
    """

    # Make the Pydantic instance immutable (read-only), a tree can then be evaluated any number of times
    model_config = ConfigDict(frozen=True)


class Number(Expression):
    """Numeric literal."""

    value: float = Field(..., description="Literal value")


class BinaryOperation(Expression):
    """Infix operator applied to two sub-expressions."""

    left: Expression = Field(..., description="Left operand")
    right: Expression = Field(..., description="Right operand")


class Add(BinaryOperation):
    pass


class Subtract(BinaryOperation):
    pass


class Multiply(BinaryOperation):
    pass


class Divide(BinaryOperation):
    pass


class Pow(BinaryOperation):
    pass


class Function(Expression):
    """Unary mathematical function applied to a sub-expression."""

    kind: FunctionKind = Field(..., description="Function to apply")
    argument: Expression = Field(..., description="Function argument")


class Constant(Expression):
    """Named constant, takes no argument."""

    kind: ConstantKind = Field(..., description="Constant to resolve")
