import enum
from dataclasses import dataclass

from infixcalc.tokenizer import Token, TokenType, untokenize
from infixcalc.utils import PrintableEnum, render_pointer


@dataclass
class ParserError(Exception):
    errmsg: str
    tokens: list[Token]
    error_token_idx: int

    @property
    def found(self) -> Token:
        if self.error_token_idx < len(self.tokens):
            return self.tokens[self.error_token_idx]
        return Token(type=TokenType.END)

    def __str__(self) -> str:
        found = self.found
        if self.error_token_idx < len(self.tokens):
            error_char_idx = found.position
        else:
            error_char_idx = len(untokenize(self.tokens))
        return "\n".join(
            [
                f"Syntax error: {self.errmsg}, found {found}",
                *render_pointer(untokenize(self.tokens), error_char_idx),
            ]
        )


class BinaryOperator(PrintableEnum):
    ADD = enum.auto()
    SUBTRACT = enum.auto()
    MULTIPLY = enum.auto()
    DIVIDE = enum.auto()


@dataclass(frozen=True)
class Literal:
    value: int


@dataclass(frozen=True)
class BinaryOperation:
    operator: BinaryOperator
    left: "Expression"
    right: "Expression"


Expression = Literal | BinaryOperation


ADDITIVE_OPERATORS = {
    TokenType.ADD: BinaryOperator.ADD,
    TokenType.SUBTRACT: BinaryOperator.SUBTRACT,
}

MULTIPLICATIVE_OPERATORS = {
    TokenType.MULTIPLY: BinaryOperator.MULTIPLY,
    TokenType.DIVIDE: BinaryOperator.DIVIDE,
}

MAX_NESTING_DEPTH = 200


def parse(tokens: list[Token]) -> Expression:
    """Build the expression tree for a whole token list.

    Grammar, lowest precedence first:

        expr   := term ( (ADD|SUBTRACT) term )*
        term   := factor ( (MULTIPLY|DIVIDE) factor )*
        factor := TERM | LPAREN expr RPAREN

    Raises ParserError on the first token that cannot start or continue a
    production, when anything but END follows the top-level expression, or
    when parentheses nest deeper than MAX_NESTING_DEPTH.
    """
    expr, i = _consume_expression(tokens, 0, depth=0)
    if _peek(tokens, i) is not TokenType.END:
        raise ParserError("expected end of input", tokens=tokens, error_token_idx=i)
    return expr


def _peek(tokens: list[Token], i: int) -> TokenType:
    if i >= len(tokens):
        return TokenType.END
    return tokens[i].type


def _consume_expression(tokens: list[Token], i: int, depth: int) -> tuple[Expression, int]:
    left, i = _consume_term(tokens, i, depth)
    while _peek(tokens, i) in ADDITIVE_OPERATORS:
        operator = ADDITIVE_OPERATORS[_peek(tokens, i)]
        right, i = _consume_term(tokens, i + 1, depth)
        left = BinaryOperation(operator=operator, left=left, right=right)
    return left, i


def _consume_term(tokens: list[Token], i: int, depth: int) -> tuple[Expression, int]:
    left, i = _consume_factor(tokens, i, depth)
    while _peek(tokens, i) in MULTIPLICATIVE_OPERATORS:
        operator = MULTIPLICATIVE_OPERATORS[_peek(tokens, i)]
        right, i = _consume_factor(tokens, i + 1, depth)
        left = BinaryOperation(operator=operator, left=left, right=right)
    return left, i


def _consume_factor(tokens: list[Token], i: int, depth: int) -> tuple[Expression, int]:
    token_type = _peek(tokens, i)
    if token_type is TokenType.TERM:
        value = tokens[i].value
        if value is None:
            raise ParserError("Internal error, term token without a value", tokens=tokens, error_token_idx=i)
        return Literal(value), i + 1
    elif token_type is TokenType.LPAREN:
        # three stack frames per level
        if depth >= MAX_NESTING_DEPTH:
            raise ParserError("expression nested too deeply", tokens=tokens, error_token_idx=i)
        expr, i = _consume_expression(tokens, i + 1, depth + 1)
        if _peek(tokens, i) is not TokenType.RPAREN:
            raise ParserError("expected ')'", tokens=tokens, error_token_idx=i)
        return expr, i + 1
    else:
        raise ParserError("expected term or '('", tokens=tokens, error_token_idx=i)


OPERATOR_SYMBOLS = {
    BinaryOperator.ADD: "+",
    BinaryOperator.SUBTRACT: "-",
    BinaryOperator.MULTIPLY: "*",
    BinaryOperator.DIVIDE: "/",
}


def unparse(expression: Expression) -> str:
    """Fully parenthesized infix text, e.g. ``(1 + (2 * 3))``

    Walks the tree with an explicit stack: a chain of ``+`` is as deep as the
    line is long, too deep for the recursive dataclass repr.
    """
    parts: list[str] = []
    stack: list[Expression | str] = [expression]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Literal):
            parts.append(str(item.value))
        elif isinstance(item, BinaryOperation):
            stack.extend([")", item.right, f" {OPERATOR_SYMBOLS[item.operator]} ", item.left, "("])
        else:
            raise RuntimeError(f"Unexpected expression type: {item}")
    return "".join(parts)
