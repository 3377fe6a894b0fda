import math

import pytest

from infixcalc.parser import parse
from infixcalc.runtime import evaluate
from infixcalc.tokenizer import tokenize


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("1", 1.0),
        pytest.param("1+2", 3.0),
        pytest.param("(1+2)", 3.0),
        pytest.param("(((1)))", 1.0),
        pytest.param("2+3*4", 14.0),
        pytest.param("(2+3)*4", 20.0),
        pytest.param("10-2-3", 5.0),
        pytest.param("1 * 4 + 5", 9.0),
        pytest.param("1 + 4 * 5", 21.0),
        pytest.param("10 / 5 / 2 / 2", 0.5),
        pytest.param("7 / 2", 3.5),
        pytest.param("2 - 5", -3.0),
        pytest.param("10 + 2 * (5 + 3 - 1)", 24.0),
        pytest.param("100 - (20 - 5) * 2 / (1 + 2)", 90.0),
        pytest.param("  42  ", 42.0),
    ],
)
def test_eval_arithmetic(code: str, expected_ret_val: float) -> None:
    tokens = tokenize(code)
    ast = parse(tokens)
    assert evaluate(ast) == expected_ret_val


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("1/0", math.inf),
        pytest.param("(0-1)/0", -math.inf),
        pytest.param("1/((0-1)*0)", -math.inf),
        pytest.param("3 + 1/0", math.inf),
    ],
)
def test_division_by_zero_gives_infinity(code: str, expected_ret_val: float) -> None:
    assert evaluate(parse(tokenize(code))) == expected_ret_val


@pytest.mark.parametrize("code", ["0/0", "(1/0)/(1/0)", "1/0 - 1/0", "(0/0)/0"])
def test_undefined_results_are_nan(code: str) -> None:
    assert math.isnan(evaluate(parse(tokenize(code))))


def test_huge_literal_widens_to_infinity() -> None:
    assert evaluate(parse(tokenize("1" + "0" * 400))) == math.inf


def test_float_overflow_gives_infinity() -> None:
    big = "9" * 300
    assert evaluate(parse(tokenize(f"{big} * {big}"))) == math.inf


def test_reevaluation_is_idempotent() -> None:
    code = "(8 - 3) * 7 / 2 - 1"
    first = evaluate(parse(tokenize(code)))
    second = evaluate(parse(tokenize(code)))
    assert first == second == 16.5


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("1+" * 1500 + "1", 1501.0, id="add-chain"),
        pytest.param("1-" * 1500 + "1", -1499.0, id="subtract-chain"),
        pytest.param("1*" * 1200 + "0", 0.0, id="multiply-chain"),
        pytest.param("(1+" * 200 + "1" + ")" * 200, 201.0, id="nested-sums"),
    ],
)
def test_long_lines_evaluate(code: str, expected_ret_val: float) -> None:
    assert evaluate(parse(tokenize(code))) == expected_ret_val
