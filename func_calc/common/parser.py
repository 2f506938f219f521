"""Parse arithmetic expressions into an expression tree."""
import string
from typing import Dict, Optional

from func_calc.common.logger import logger
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


# Mapping of lower-cased names to the function or constant they call
FUNCTIONS: Dict[str, FunctionKind] = {kind.value: kind for kind in FunctionKind}
CONSTANTS: Dict[str, ConstantKind] = {kind.value: kind for kind in ConstantKind}

NUMBER_CHARS: str = string.digits + "."


class ParseError(ValueError):
    """Raised when an expression does not follow the grammar."""


class ExpressionParser:
    """
    Recursive-descent parser for arithmetic expressions.

    Grammar, from loosest to tightest binding:
        - expression := term (('+' | '-') term)*
        - term := factor (('*' | '/') factor)*
        - factor := primary ('^' factor)?
        - primary := number | '(' expression ')' | name '(' [expression] ')'

    Exponentiation is right-associative: 2^3^2 is read as 2^(3^2).

    The parser reads the text once, with one character of lookahead, and never backtracks.
    It stops as soon as the top-level expression is complete: characters left after it are ignored.
    Whitespace is not part of the grammar, callers are expected to remove it first.

    Examples:
        - "1+2*3" -> Add(Number(1), Multiply(Number(2), Number(3)))
        - "sqrt(4)" -> Function(SQRT, Number(4))
        - "pi()" -> Constant(PI)
    """

    def __init__(self, text: str) -> None:
        self._text: str = text
        self._pos: int = 0

    def _peek(self) -> Optional[str]:
        """Return the next character without consuming it, None at end of input."""
        if self._pos < len(self._text):
            return self._text[self._pos]
        return None

    def _advance(self) -> Optional[str]:
        """Consume and return the next character, None at end of input."""
        char = self._peek()
        if char is not None:
            self._pos += 1
        return char

    def parse(self) -> Expression:
        """
        Parse the text into an expression tree.

        :return: Root of the expression tree
        :rtype: Expression
        :raises ParseError: On the first grammar violation found
        """
        return self._parse_expression()

    def _parse_expression(self) -> Expression:
        left = self._parse_term()
        while True:
            char = self._peek()
            if char == "+":
                self._advance()
                left = Add(left=left, right=self._parse_term())
            elif char == "-":
                self._advance()
                left = Subtract(left=left, right=self._parse_term())
            else:
                return left

    def _parse_term(self) -> Expression:
        left = self._parse_factor()
        while True:
            char = self._peek()
            if char == "*":
                self._advance()
                left = Multiply(left=left, right=self._parse_factor())
            elif char == "/":
                self._advance()
                left = Divide(left=left, right=self._parse_factor())
            else:
                return left

    def _parse_factor(self) -> Expression:
        base = self._parse_primary()
        # Recursing on the right side makes '^' right-associative
        if self._peek() == "^":
            self._advance()
            return Pow(left=base, right=self._parse_factor())
        return base

    def _parse_primary(self) -> Expression:
        char = self._peek()

        if char == "(":
            self._advance()
            inner = self._parse_expression()
            if self._advance() != ")":
                raise ParseError("Expected closing parenthesis")
            return inner

        if char is not None and char.isalpha():
            return self._parse_function()

        if char is not None and char in NUMBER_CHARS:
            return self._parse_number()

        # Also reached at end of input and on a leading '-', there is no unary minus
        raise ParseError("Unexpected character")

    def _parse_number(self) -> Number:
        """
        Parse the longest run of digits and dots as a float.

        :return: Numeric literal
        :rtype: Number
        :raises ParseError: If the run is not a valid float (e.g. "1.2.3" or ".")
        """
        start = self._pos
        while self._peek() is not None and self._peek() in NUMBER_CHARS:
            self._advance()
        literal = self._text[start:self._pos]

        try:
            return Number(value=float(literal))
        except ValueError as exc:
            raise ParseError(str(exc)) from exc

    def _parse_function(self) -> Expression:
        """
        Parse a function call such as "sin(x)" or a constant such as "pi()".

        Names are case-insensitive. A single space is tolerated between the name and "(".

        :return: Function or constant node
        :rtype: Expression
        :raises ParseError: On a missing parenthesis or an unknown name
        """
        start = self._pos
        while self._peek() is not None and self._peek().isalpha():
            self._advance()
        name = self._text[start:self._pos].lower()

        if self._peek() == " ":
            self._advance()
        if self._advance() != "(":
            raise ParseError(f"Expected parenthesis after {name}")

        if name in FUNCTIONS:
            argument = self._parse_expression()
            self._expect_closing(name)
            return Function(kind=FUNCTIONS[name], argument=argument)

        if name in CONSTANTS:
            self._expect_closing(name)
            return Constant(kind=CONSTANTS[name])

        raise ParseError(f"Unknown function: {name}")

    def _expect_closing(self, name: str) -> None:
        if self._advance() != ")":
            raise ParseError(f"Expected closing parenthesis after {name}")


def parse(text: str) -> Expression:
    """
    Parse an expression with whitespace already removed.

    Parentheses, function calls and '^' chains are parsed recursively: nesting
    deeper than the interpreter recursion limit is reported as a ParseError.

    :param str text: Expression text

    :return: Root of the expression tree
    :rtype: Expression
    :raises ParseError: If the text does not follow the grammar or is nested too deeply
    """
    try:
        return ExpressionParser(text).parse()
    except ParseError as exc:
        logger.debug(f"🧩❌ Could not parse {text!r}: {exc}")
        raise
    except RecursionError as exc:
        logger.debug(f"🧩❌ Could not parse expression of {len(text)} characters: nested too deeply")
        raise ParseError("Expression nested too deeply") from exc
