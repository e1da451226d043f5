"""Pattern-driven lexer for a small typed language."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Sequence


class TokenType(Enum):
    """Kinds of token the pattern lexer recognises."""

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
    T_EOF = "end of input"


@dataclass(frozen=True)
class Token:
    """A token kind together with the text it was read from."""

    type: TokenType
    value: str


_TOKEN_PATTERN = re.compile(
    r"""
      (?P<T_FUNCTION>fn\b)
    | (?P<T_INT>int\b)
    | (?P<T_FLOAT>float\b)
    | (?P<T_BOOL>bool\b)
    | (?P<T_STRING>string\b)
    | (?P<T_RETURN>return\b)
    | (?P<T_IDENTIFIER>[a-zA-Z_][a-zA-Z0-9_]*)
    | (?P<T_INTLIT>[0-9]+)
    | (?P<T_STRINGLIT>"(?:\\.|[^"])*")
    | (?P<T_PARENL>\()
    | (?P<T_PARENR>\))
    | (?P<T_BRACEL>\{)
    | (?P<T_BRACER>\})
    | (?P<T_EQUALSOP>==)
    | (?P<T_ASSIGNOP>=)
    | (?P<T_SEMICOLON>;)
    | (?P<T_COMMA>,)
    """,
    re.VERBOSE | re.ASCII,
)

SAMPLE_CODE = """
        fn int my_fn(int x, float y) {
            string my_str = "hello";
            bool my_bool = x == 40;
            return x;
        }
    """


class RegexLexer:
    """Splits source text into tokens with a single alternation pattern.

    Text that no pattern recognises is skipped silently.
    """

    def __init__(self, source: str) -> None:
        self.source = source

    def tokenize(self) -> list[Token]:
        """Return every token in the source, ending with an EOF token."""
        tokens = [
            Token(TokenType[match.lastgroup], match.group())
            for match in _TOKEN_PATTERN.finditer(self.source)
            if match.lastgroup is not None
        ]
        tokens.append(Token(TokenType.T_EOF, ""))
        return tokens


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
        description="Print the tokens of a source file using the pattern lexer."
    )
    parser.add_argument("file", nargs="?", help="source file (default: built-in sample)")
    args = parser.parse_args(argv)

    source = Path(args.file).read_text() if args.file else SAMPLE_CODE
    print(format_tokens(RegexLexer(source).tokenize()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())