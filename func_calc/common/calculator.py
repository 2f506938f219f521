"""Entry point turning expression text into a value."""
from func_calc.common.evaluator import evaluate
from func_calc.common.logger import logger
from func_calc.common.operations import CalculationRequest, CalculationResult
from func_calc.common.parser import ParseError, parse


def calc(expression: str) -> float:
    """
    Calculate the value of an expression.

    Every space is deleted before parsing, not only leading and trailing ones:
    "1 2+3" is read as "12+3".

    :param str expression: Expression text, e.g. "2 + 4.5 * sin(pi() / 3)"

    :return: Computed value
    :rtype: float
    :raises ParseError: If the expression is malformed
    """
    text: str = expression.replace(" ", "")
    tree = parse(text)
    result: float = evaluate(tree)
    logger.debug(f"🧮 {expression!r} => {result}")
    return result


def evaluate_request(request: CalculationRequest) -> CalculationResult:
    """
    Calculate a request and report the value or the parse error message.

    :param CalculationRequest request: Expression to calculate

    :return: Result holding either the value or the error
    :rtype: CalculationResult
    """
    try:
        return CalculationResult(expression=request.expression, result=calc(request.expression))
    except ParseError as exc:
        return CalculationResult(expression=request.expression, error=str(exc))
