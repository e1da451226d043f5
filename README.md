# toylex

Four small lexers for a toy C-like language with functions (`fn`), typed
variables (`int`, `float`, `bool`, `string`), literals, operators and
delimiters. Each one takes a different approach to turning source text
into a stream of tokens:

| Module                  | Approach                                                          |
|-------------------------|-------------------------------------------------------------------|
| `toylex.regex_lexer`    | One alternation regex; every match becomes a token and text that matches nothing is skipped |
| `toylex.simple_lexer`   | Hand-written character scanner; characters that start no token become `T_UNKNOWN` tokens |
| `toylex.pattern_lexer`  | Splits on whitespace and the delimiters `; , ( ) { } [ ]`, then matches each word against an ordered table of patterns; words that match none are reported on standard error and dropped |
| `toylex.scanner`        | Hand-written scanner with `//` and `/* */` comments, float literals, a wider operator set and a `LexicalError` for a number that runs straight into a letter or underscore (such as `9x`) |

`regex_lexer` and `simple_lexer` return `Token` objects whose `type` is a
member of their own `TokenType` enum and whose `value` is the matched text;
their token stream ends with a `T_EOF` token. `pattern_lexer` and `scanner`
return `Token` objects with a string `type` (such as `"T_INTLIT"`) and a
`lexeme`; their stream has no end-of-input token.

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the tests:

```
pip install .[test]
pytest
```

## Command-line use

Each lexer has a command that tokenizes a source file and prints the
resulting tokens. With no file argument, each command uses a short
built-in sample program.

```
toylex-regex [FILE]
toylex-simple [FILE]
toylex-pattern [FILE]
toylex-scan [FILE]
```

`toylex-regex` and `toylex-simple` print the stream on one line as
`[T_NAME("value")]` entries (entries with an empty value, such as
`[T_EOF]`, have no parenthesised part). `toylex-pattern` and `toylex-scan`
first echo the input under `Input Code:`, then print one `TYPE -> lexeme`
line per token under `Tokens:`. `toylex-scan` exits with status 1 and
prints `LEXICAL ERROR: ...` on standard error when the input holds a
number followed directly by a letter or underscore.

## Library use

```python
from toylex.regex_lexer import RegexLexer, format_tokens

lexer = RegexLexer('fn int f(int x) { return x; }')
print(format_tokens(lexer.tokenize()))
```

```python
from toylex.simple_lexer import SimpleLexer, format_tokens

print(format_tokens(SimpleLexer('string s = "hi";').tokenize()))
```

In `simple_lexer` the value of a string literal excludes the quotes and
keeps escape sequences as written; in `regex_lexer` it includes the quotes.

```python
from toylex.pattern_lexer import match_token, tokenize

for token in tokenize("float y = 20.5;"):
    print(token)

match_token("while")   # Token(type='T_WHILE', lexeme='while')
match_token("@")       # None
```

```python
from toylex.scanner import LexicalError, is_identifier, is_keyword, tokenize

for token in tokenize("if (x <= y) { return x; } // done"):
    print(token)

is_keyword("while")       # True
is_identifier("_tmp1")    # True

try:
    tokenize("int 9x = 10;")
except LexicalError as error:
    print(error)          # Invalid identifier '9x' (cannot start with digit)
```

In `scanner`, keywords get a type built from the word itself
(`T_Int`, `T_While`, ...), and characters that start no token are
reported on standard error and dropped.

## What the package does not do

The package only splits text into tokens. It has no parser, no syntax
tree, no type checking and no interpreter or code generator for the
toy language, and no command that runs a program written in it.