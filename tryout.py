from infixcalc.parser import ParserError, parse, unparse
from infixcalc.runtime import evaluate, format_value
from infixcalc.tokenizer import tokenize

for code in [
    "5",
    "12+3*4",
    "2 + 3 * 4",
    "(2+3)*4",
    "10-2-3",
    "10 / 5/ 2",
    "7/6/2000",
    "1/0",
    "0/0",
    "(1 - 2) / 0",
    "1 + (2 * (3 + 4)) - 5",
    "(",
    "",
    ")",
    "1 + 2)",
    "3 $ 4",
    "-1",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    tokens = tokenize(code)
    print(f"tokens: {' '.join(str(t) for t in tokens)}")

    try:
        expression = parse(tokens)
    except ParserError as e:
        print(e)
        continue
    print(f"ast: {unparse(expression)}")
    print(f"result: {format_value(evaluate(expression))}")
