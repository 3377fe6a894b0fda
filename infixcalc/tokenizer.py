import enum
import string
from dataclasses import dataclass, field
from typing import Optional

from infixcalc.utils import PrintableEnum


class TokenType(PrintableEnum):
    TERM = enum.auto()
    ADD = enum.auto()
    SUBTRACT = enum.auto()
    MULTIPLY = enum.auto()
    DIVIDE = enum.auto()
    LPAREN = enum.auto()
    RPAREN = enum.auto()
    INVALID = enum.auto()
    END = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[int] = None
    # source text and offset are for error reporting only
    lexeme: str = field(default="", compare=False)
    position: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


SINGLE_CHAR_TOKENS = {
    "+": TokenType.ADD,
    "-": TokenType.SUBTRACT,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


def _is_digit(s: str) -> bool:
    # str.isdigit() also accepts superscripts and other non-ASCII digits
    return s in string.digits


def tokenize(code: str) -> list[Token]:
    """Split ``code`` into tokens, terminated by a single END token.

    Never fails: characters outside the grammar become INVALID tokens and are
    left for the parser to reject.
    """
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        if _is_digit(code[i]):
            number_end_idx = i + 1
            while number_end_idx < len(code) and _is_digit(code[number_end_idx]):
                number_end_idx += 1
            lexeme = code[i:number_end_idx]
            tokens.append(Token(type=TokenType.TERM, value=int(lexeme), lexeme=lexeme, position=i))
            i = number_end_idx - 1  # to account for += 1 later
        elif code[i] in SINGLE_CHAR_TOKENS:
            tokens.append(Token(type=SINGLE_CHAR_TOKENS[code[i]], lexeme=code[i], position=i))
        elif code[i].isspace():
            pass
        else:
            tokens.append(Token(type=TokenType.INVALID, lexeme=code[i], position=i))
        i += 1

    tokens.append(Token(type=TokenType.END, lexeme="", position=len(code)))
    return tokens


def untokenize(tokens: list[Token]) -> str:
    """Lay the lexemes out again at the offsets they were read from"""
    result = ""
    for token in tokens:
        if token.position > len(result):
            result += " " * (token.position - len(result))
        result += token.lexeme
    return result
