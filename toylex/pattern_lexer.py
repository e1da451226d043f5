"""Lexer that splits on delimiters and classifies each word by pattern."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence


@dataclass(frozen=True)
class Token:
    """A token type name together with the text it was read from."""

    type: str
    lexeme: str


# Order matters: the first pattern that matches a whole word wins.
_DEFINITIONS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (name, re.compile(pattern, re.ASCII))
    for name, pattern in (
        ("T_INT", r"int\b"),
        ("T_FLOAT", r"float\b"),
        ("T_STRING", r"string\b"),
        ("T_BOOL", r"bool\b"),
        ("T_VOID", r"void\b"),
        ("T_FUNCTION", r"fn\b"),
        ("T_RETURN", r"return\b"),
        ("T_IF", r"if\b"),
        ("T_ELSE", r"else\b"),
        ("T_FOR", r"for\b"),
        ("T_WHILE", r"while\b"),
        ("T_BREAK", r"break\b"),
        ("T_CONTINUE", r"continue\b"),
        ("T_TRUE", r"true\b"),
        ("T_FALSE", r"false\b"),
        ("T_IDENTIFIER", r"[a-zA-Z][a-zA-Z0-9]*"),
        ("T_FLOATLIT", r"[0-9]+\.[0-9]+"),
        ("T_INTLIT", r"[0-9]+"),
        ("T_PLUSOP", r"\+"),
        ("T_MINUSOP", r"-"),
        ("T_MULTOP", r"\*"),
        ("T_DIVOP", r"/"),
        ("T_MODOP", r"%"),
        ("T_EQUALSOP", r"=="),
        ("T_NOTEQOP", r"!="),
        ("T_LTEQOP", r"<="),
        ("T_GTEQOP", r">="),
        ("T_ASSIGNOP", r"="),
        ("T_LTOP", r"<"),
        ("T_GTOP", r">"),
        ("T_ANDOP", r"&&"),
        ("T_OROP", r"\|\|"),
        ("T_NOTOP", r"!"),
        ("T_SHIFTLOP", r"<<"),
        ("T_SHIFTROP", r">>"),
        ("T_BITANDOP", r"&"),
        ("T_BITOROP", r"\|"),
        ("T_BITXOROP", r"\^"),
        ("T_BITNOTOP", r"~"),
        ("T_SEMICOLON", r";"),
        ("T_COMMA", r","),
        ("T_DOT", r"\."),
        ("T_COLON", r":"),
        ("T_PARENL", r"\("),
        ("T_PARENR", r"\)"),
        ("T_BRACEL", r"\{"),
        ("T_BRACER", r"\}"),
        ("T_SQUAREL", r"\["),
        ("T_SQUARER", r"\]"),
        ("T_WHITESPACE", r"[ \t\n\r]+"),
        ("T_COMMENT_SINGLE", r"//.*"),
        ("T_COMMENT_MULTI", r"/\*[\s\S]*?\*/"),
    )
)

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DELIMITERS = frozenset(";,(){}[]")

SAMPLE_CODE = """int x = 10;
        float y = 20.5;
        if (x < y) { return x; }
        else { return y; }"""


def match_token(word: str) -> Token | None:
    """Classify a whole word by the first pattern it matches, or return None."""
    for name, pattern in _DEFINITIONS:
        if pattern.fullmatch(word):
            return Token(name, word)
    return None


def tokenize(source: str) -> list[Token]:
    """Split the source on whitespace and delimiters and classify each piece.

    Words that match no pattern are reported on standard error and dropped.
    """
    tokens: list[Token] = []
    word: list[str] = []

    def flush() -> None:
        if not word:
            return
        text = "".join(word)
        word.clear()
        token = match_token(text)
        if token is None:
            print(f"UNEXPECTED TOKEN: {text}", file=sys.stderr)
        else:
            tokens.append(token)

    for char in source:
        if char in _WHITESPACE:
            flush()
        elif char in _DELIMITERS:
            flush()
            delimiter = match_token(char)
            if delimiter is not None:
                tokens.append(delimiter)
        else:
            word.append(char)
    flush()
    return tokens


def main(argv: Sequence[str] | None = None) -> int:
    """Tokenize a file, or the built-in sample, and print one token per line."""
    parser = argparse.ArgumentParser(
        description="Print the tokens of a source file using the word classifier."
    )
    parser.add_argument("file", nargs="?", help="source file (default: built-in sample)")
    args = parser.parse_args(argv)

    source = Path(args.file).read_text() if args.file else SAMPLE_CODE
    print(f"Input Code:\n{source}\n\nTokens:")
    for token in tokenize(source):
        print(f"{token.type} -> {token.lexeme}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())