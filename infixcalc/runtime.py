import math
import operator
from dataclasses import dataclass, field
from typing import Callable, Optional

from infixcalc.parser import BinaryOperation, BinaryOperator, Expression, Literal, ParserError, parse
from infixcalc.tokenizer import Token, tokenize


def evaluate(expression: Expression) -> float:
    # explicit stack: a chain of + or - is as deep as the line is long
    results: list[float] = []
    pending: list[Expression | BinaryOperator] = [expression]
    while pending:
        item = pending.pop()
        if isinstance(item, BinaryOperator):
            right_res = results.pop()
            left_res = results.pop()
            results.append(BINARY_OPERATION_IMPLS[item](left_res, right_res))
        elif isinstance(item, Literal):
            results.append(widen(item.value))
        elif isinstance(item, BinaryOperation):
            if item.operator not in BINARY_OPERATION_IMPLS:
                raise RuntimeError(f"Unexpected binary operator: {item.operator}")
            pending.extend([item.operator, item.right, item.left])
        else:
            raise RuntimeError(f"Unexpected expression type: {item}")
    return results.pop()


def widen(value: int) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf


def divide(a: float, b: float) -> float:
    """True division, with IEEE-754 results instead of ZeroDivisionError"""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


BinaryOperationImpl = Callable[[float, float], float]

BINARY_OPERATION_IMPLS: dict[BinaryOperator, BinaryOperationImpl] = {
    BinaryOperator.ADD: operator.add,
    BinaryOperator.SUBTRACT: operator.sub,
    BinaryOperator.MULTIPLY: operator.mul,
    BinaryOperator.DIVIDE: divide,
}


@dataclass(frozen=True)
class Success:
    value: float
    tokens: list[Token] = field(default_factory=list, compare=False)
    expression: Optional[Expression] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Failure:
    error: ParserError

    @property
    def tokens(self) -> list[Token]:
        return self.error.tokens


LineResult = Success | Failure


def run_line(code: str) -> LineResult:
    """Evaluate one line of input; syntax errors are returned, not raised"""
    tokens = tokenize(code)
    try:
        expression = parse(tokens)
    except ParserError as e:
        return Failure(e)
    return Success(evaluate(expression), tokens=tokens, expression=expression)


def format_value(value: float) -> str:
    return f"{value:.2f}"
