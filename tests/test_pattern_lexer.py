import pytest

from toylex.pattern_lexer import SAMPLE_CODE, Token, main, match_token, tokenize


def test_sample_first_statement():
    tokens = tokenize(SAMPLE_CODE)
    assert tokens[:5] == [
        Token("T_INT", "int"),
        Token("T_IDENTIFIER", "x"),
        Token("T_ASSIGNOP", "="),
        Token("T_INTLIT", "10"),
        Token("T_SEMICOLON", ";"),
    ]


def test_sample_float_literal():
    tokens = tokenize(SAMPLE_CODE)
    assert Token("T_FLOATLIT", "20.5") in tokens


def test_sample_lexemes_cover_text_without_whitespace():
    tokens = tokenize(SAMPLE_CODE)
    assert "".join(t.lexeme for t in tokens) == "".join(SAMPLE_CODE.split())


@pytest.mark.parametrize(
    "word, expected",
    [
        ("==", "T_EQUALSOP"),
        ("!=", "T_NOTEQOP"),
        ("<=", "T_LTEQOP"),
        ("<<", "T_SHIFTLOP"),
        ("&&", "T_ANDOP"),
        ("||", "T_OROP"),
        ("=", "T_ASSIGNOP"),
        ("return", "T_RETURN"),
        ("while", "T_WHILE"),
        ("[", "T_SQUAREL"),
    ],
)
def test_match_token_types(word, expected):
    assert match_token(word) == Token(expected, word)


def test_keyword_prefix_is_identifier():
    assert match_token("integer").type == "T_IDENTIFIER"


def test_underscore_is_not_an_identifier():
    assert match_token("my_var") is None


def test_comments_become_tokens():
    assert match_token("//note").type == "T_COMMENT_SINGLE"
    assert match_token("/*x*/").type == "T_COMMENT_MULTI"


def test_unexpected_word_reported_and_dropped(capsys):
    tokens = tokenize("a_b;")
    assert tokens == [Token("T_SEMICOLON", ";")]
    assert "UNEXPECTED TOKEN: a_b" in capsys.readouterr().err


def test_trailing_word_without_delimiter():
    assert tokenize("x") == [Token("T_IDENTIFIER", "x")]


def test_empty_source():
    assert tokenize("   \n\t") == []


def test_main_sample_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Input Code:\n")
    assert "T_FLOATLIT -> 20.5" in out
    assert "T_IF -> if" in out


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "prog.txt"
    path.write_text("return y;")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "T_RETURN -> return" in out
    assert "T_SEMICOLON -> ;" in out