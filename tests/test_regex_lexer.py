import pytest

from toylex.regex_lexer import RegexLexer, Token, TokenType, format_tokens, main


def types_of(source):
    return [t.type for t in RegexLexer(source).tokenize()]


def test_empty_source_yields_only_eof():
    assert RegexLexer("").tokenize() == [Token(TokenType.T_EOF, "")]


def test_keywords_are_recognised():
    assert types_of("fn int float bool string return") == [
        TokenType.T_FUNCTION,
        TokenType.T_INT,
        TokenType.T_FLOAT,
        TokenType.T_BOOL,
        TokenType.T_STRING,
        TokenType.T_RETURN,
        TokenType.T_EOF,
    ]


@pytest.mark.parametrize("word", ["fnord", "integer", "int_x", "returned", "_bool"])
def test_words_starting_with_keywords_are_identifiers(word):
    tokens = RegexLexer(word).tokenize()
    assert tokens[0] == Token(TokenType.T_IDENTIFIER, word)
    assert len(tokens) == 2


def test_equality_and_assignment_are_distinguished():
    tokens = RegexLexer("a = x == 40;").tokenize()
    assert [t.type for t in tokens] == [
        TokenType.T_IDENTIFIER,
        TokenType.T_ASSIGNOP,
        TokenType.T_IDENTIFIER,
        TokenType.T_EQUALSOP,
        TokenType.T_INTLIT,
        TokenType.T_SEMICOLON,
        TokenType.T_EOF,
    ]
    assert tokens[4].value == "40"


def test_string_literal_keeps_quotes_and_escapes():
    source = r'"a\"b"'
    tokens = RegexLexer(source).tokenize()
    assert tokens[0] == Token(TokenType.T_STRINGLIT, source)


def test_unrecognised_characters_are_skipped():
    tokens = RegexLexer("a + b").tokenize()
    assert tokens == [
        Token(TokenType.T_IDENTIFIER, "a"),
        Token(TokenType.T_IDENTIFIER, "b"),
        Token(TokenType.T_EOF, ""),
    ]


def test_punctuation():
    assert types_of("(){},") == [
        TokenType.T_PARENL,
        TokenType.T_PARENR,
        TokenType.T_BRACEL,
        TokenType.T_BRACER,
        TokenType.T_COMMA,
        TokenType.T_EOF,
    ]


def test_values_reassemble_source_without_whitespace():
    source = 'fn int my_fn(int x, float y) { string s = "hi there"; return x; }'
    tokens = RegexLexer(source).tokenize()
    joined = "".join(t.value for t in tokens)
    assert joined == source.replace(" ", "").replace('"hithere"', '"hi there"')


def test_tokenize_is_repeatable():
    lexer = RegexLexer("int x = 1;")
    expected = [
        Token(TokenType.T_INT, "int"),
        Token(TokenType.T_IDENTIFIER, "x"),
        Token(TokenType.T_ASSIGNOP, "="),
        Token(TokenType.T_INTLIT, "1"),
        Token(TokenType.T_SEMICOLON, ";"),
        Token(TokenType.T_EOF, ""),
    ]
    assert lexer.tokenize() == expected
    assert lexer.tokenize() == expected


def test_format_tokens():
    tokens = [Token(TokenType.T_IDENTIFIER, "x"), Token(TokenType.T_EOF, "")]
    assert format_tokens(tokens) == '[T_IDENTIFIER("x")] [T_EOF] '


def test_main_prints_sample(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith('[T_FUNCTION("fn")] [T_INT("int")] [T_IDENTIFIER("my_fn")]')
    assert '[T_STRINGLIT(""hello"")]' in out
    assert out.endswith("[T_EOF] \n")


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "prog.txt"
    path.write_text("return y;")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out == format_tokens(RegexLexer("return y;").tokenize()) + "\n"