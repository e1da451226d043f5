"""Hand-written character scanner for a small typed language."""

from __future__ import annotations

import argparse
import string
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, Sequence


class TokenType(Enum):
    """Kinds of token the scanner recognises."""

    T_FUNCTION = "fn"
    T_INT = "int"
    T_FLOAT = "float"
    T_BOOL = "bool"
    T_STRING = "string"
    T_RETURN = "return"
    T_IDENTIFIER = "identifier"
    T_INTLIT = "integer literal"
    T_STRINGLIT = "string literal"
    T_PARENL = "("
    T_PARENR = ")"
    T_BRACEL = "{"
    T_BRACER = "}"
    T_EQUALSOP = "=="
    T_ASSIGNOP = "="
    T_SEMICOLON = ";"
    T_COMMA = ","
    T_UNKNOWN = "unknown"
    T_EOF = "end of input"


@dataclass(frozen=True)
class Token:
    """A token kind together with the text it was read from."""

    type: TokenType
    value: str


_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset(string.digits)
_IDENT_START = frozenset(string.ascii_letters + "_")
_IDENT_CHARS = _IDENT_START | _DIGITS

_KEYWORDS = {
    "fn": TokenType.T_FUNCTION,
    "int": TokenType.T_INT,
    "float": TokenType.T_FLOAT,
    "bool": TokenType.T_BOOL,
    "string": TokenType.T_STRING,
    "return": TokenType.T_RETURN,
}

_SYMBOLS = {
    "(": TokenType.T_PARENL,
    ")": TokenType.T_PARENR,
    "{": TokenType.T_BRACEL,
    "}": TokenType.T_BRACER,
    ";": TokenType.T_SEMICOLON,
    ",": TokenType.T_COMMA,
}

SAMPLE_CODE = """fn int my_fn(int x, float y) {
        string my_str = "hmm";
        bool my_bool = x == 40;
        return x;
    }"""


def _skip(source: str, pos: int, chars: frozenset[str]) -> int:
    """Return the first position at or after ``pos`` not holding one of ``chars``."""
    while pos < len(source) and source[pos] in chars:
        pos += 1
    return pos


class SimpleLexer:
    """Scans source text one character at a time.

    Characters that start no token become ``T_UNKNOWN`` tokens.
    String literal values exclude the quotes but keep escape sequences as written.
    """

    def __init__(self, source: str) -> None:
        self.source = source

    def tokenize(self) -> list[Token]:
        """Return every token in the source, ending with an EOF token."""
        return list(self._scan())

    def _scan(self) -> Iterator[Token]:
        src = self.source
        length = len(src)
        pos = 0
        while True:
            pos = _skip(src, pos, _WHITESPACE)
            if pos >= length:
                break
            char = src[pos]

            if char in _IDENT_START:
                end = _skip(src, pos, _IDENT_CHARS)
                word = src[pos:end]
                yield Token(_KEYWORDS.get(word, TokenType.T_IDENTIFIER), word)
                pos = end
            elif char in _DIGITS:
                end = _skip(src, pos, _DIGITS)
                yield Token(TokenType.T_INTLIT, src[pos:end])
                pos = end
            elif char == '"':
                start = end = pos + 1
                while end < length and src[end] != '"':
                    end += 2 if src[end] == "\\" else 1
                end = min(end, length)
                yield Token(TokenType.T_STRINGLIT, src[start:end])
                pos = end + 1
            elif char == "=":
                if src.startswith("==", pos):
                    yield Token(TokenType.T_EQUALSOP, "==")
                    pos += 2
                else:
                    yield Token(TokenType.T_ASSIGNOP, "=")
                    pos += 1
            elif char in _SYMBOLS:
                yield Token(_SYMBOLS[char], char)
                pos += 1
            else:
                yield Token(TokenType.T_UNKNOWN, char)
                pos += 1
        yield Token(TokenType.T_EOF, "")


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens as ``[NAME("value")]`` items, each followed by a space."""
    parts = []
    for token in tokens:
        text = f"[{token.type.name}"
        if token.value:
            text += f'("{token.value}")'
        parts.append(text + "] ")
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Tokenize a file, or the built-in sample, and print the tokens."""
    parser = argparse.ArgumentParser(
        description="Print the tokens of a source file using the character scanner."
    )
    parser.add_argument("file", nargs="?", help="source file (default: built-in sample)")
    args = parser.parse_args(argv)

    source = Path(args.file).read_text() if args.file else SAMPLE_CODE
    print(format_tokens(SimpleLexer(source).tokenize()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())