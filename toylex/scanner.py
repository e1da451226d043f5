"""Character scanner with keywords, operators, comments and number checks."""

from __future__ import annotations

import argparse
import string
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence


@dataclass(frozen=True)
class Token:
    """A token type name together with the text it was read from."""

    type: str
    lexeme: str


class LexicalError(ValueError):
    """Raised when the source holds text that cannot form a token."""

    def __init__(self, lexeme: str) -> None:
        super().__init__(f"Invalid identifier '{lexeme}' (cannot start with digit)")
        self.lexeme = lexeme


KEYWORDS = (
    "int", "float", "string", "bool", "void",
    "fn", "return", "if", "else", "for", "while",
    "break", "continue", "true", "false",
)

# Two-character operators come first so the longest operator wins.
OPERATORS = (
    ("T_EQUALSOP", "=="),
    ("T_NOTEQOP", "!="),
    ("T_LTEQOP", "<="),
    ("T_GTEQOP", ">="),
    ("T_SHIFTLOP", "<<"),
    ("T_SHIFTROP", ">>"),
    ("T_ANDOP", "&&"),
    ("T_OROP", "||"),
    ("T_PLUSOP", "+"),
    ("T_MINUSOP", "-"),
    ("T_MULTOP", "*"),
    ("T_DIVOP", "/"),
    ("T_MODOP", "%"),
    ("T_ASSIGNOP", "="),
    ("T_LTOP", "<"),
    ("T_GTOP", ">"),
    ("T_NOTOP", "!"),
    ("T_BITANDOP", "&"),
    ("T_BITOROP", "|"),
    ("T_BITXOROP", "^"),
    ("T_BITNOTOP", "~"),
)

DELIMITERS = {
    ";": "T_SEMICOLON",
    ",": "T_COMMA",
    ".": "T_DOT",
    ":": "T_COLON",
    "(": "T_PARENL",
    ")": "T_PARENR",
    "{": "T_BRACEL",
    "}": "T_BRACER",
    "[": "T_SQUAREL",
    "]": "T_SQUARER",
}

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset(string.digits)
_IDENT_START = frozenset(string.ascii_letters + "_")
_IDENT_CHARS = _IDENT_START | _DIGITS

SAMPLE_CODE = """int 9x = 10;
        float y = 20.5;
        if (x < y) { return x; }
        else { return y; }"""


def is_keyword(word: str) -> bool:
    """Return True if the word is a reserved keyword."""
    return word in KEYWORDS


def is_identifier(text: str) -> bool:
    """Return True if the text is a letter or underscore followed by word characters."""
    return bool(text) and text[0] in _IDENT_START and all(c in _IDENT_CHARS for c in text)


def _skip(source: str, pos: int, chars: frozenset[str]) -> int:
    while pos < len(source) and source[pos] in chars:
        pos += 1
    return pos


def tokenize(source: str) -> list[Token]:
    """Return the tokens of the source.

    Comments and whitespace are skipped. Characters that start no token are
    reported on standard error and dropped. A number running straight into a
    letter or underscore raises LexicalError.
    """
    tokens: list[Token] = []
    length = len(source)
    pos = 0
    while pos < length:
        char = source[pos]

        if char in _WHITESPACE:
            pos += 1
        elif source.startswith("//", pos):
            newline = source.find("\n", pos)
            pos = length if newline < 0 else newline
        elif source.startswith("/*", pos):
            close = source.find("*/", pos + 2)
            pos = length if close < 0 else close + 2
        elif char in _DIGITS:
            end = _skip(source, pos, _DIGITS)
            if end < length and source[end] == ".":
                end = _skip(source, end + 1, _DIGITS)
                tokens.append(Token("T_FLOATLIT", source[pos:end]))
            elif end < length and source[end] in _IDENT_START:
                end = _skip(source, end, _IDENT_CHARS)
                raise LexicalError(source[pos:end])
            else:
                tokens.append(Token("T_INTLIT", source[pos:end]))
            pos = end
        elif char in _IDENT_START:
            end = _skip(source, pos, _IDENT_CHARS)
            word = source[pos:end]
            kind = f"T_{word[0].upper()}{word[1:]}" if is_keyword(word) else "T_IDENTIFIER"
            tokens.append(Token(kind, word))
            pos = end
        else:
            operator = next(
                ((name, text) for name, text in OPERATORS if source.startswith(text, pos)),
                None,
            )
            if operator is not None:
                tokens.append(Token(*operator))
                pos += len(operator[1])
            elif char in DELIMITERS:
                tokens.append(Token(DELIMITERS[char], char))
                pos += 1
            else:
                print(f"UNEXPECTED TOKEN: {char}", file=sys.stderr)
                pos += 1
    return tokens


def main(argv: Sequence[str] | None = None) -> int:
    """Tokenize a file, or the built-in sample, and print one token per line."""
    parser = argparse.ArgumentParser(
        description="Print the tokens of a source file using the character scanner."
    )
    parser.add_argument("file", nargs="?", help="source file (default: built-in sample)")
    args = parser.parse_args(argv)

    source = Path(args.file).read_text() if args.file else SAMPLE_CODE
    print(f"Input Code:\n{source}\n\nTokens:")
    try:
        tokens = tokenize(source)
    except LexicalError as exc:
        print(f"LEXICAL ERROR: {exc}", file=sys.stderr)
        return 1
    for token in tokens:
        print(f"{token.type} -> {token.lexeme}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())