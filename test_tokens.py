"""Test lexer tokenization"""
import pytest

from exprcc import constants
from exprcc.compilador.errors import LexError
from exprcc.compilador.lex_expr import EOF, NUM, PUNCT, Token, tokenize


def test_numbers_and_punctuators():
    toks = tokenize("12+(3*45)/6-7")
    assert [(t.kind, t.value) for t in toks] == [
        (NUM, 12), (PUNCT, '+'), (PUNCT, '('), (NUM, 3), (PUNCT, '*'), (NUM, 45),
        (PUNCT, ')'), (PUNCT, '/'), (NUM, 6), (PUNCT, '-'), (NUM, 7), (EOF, None),
    ]


def test_offsets_and_lengths():
    toks = tokenize("  123 +\t4")
    assert toks[0] == Token(NUM, 123, 2, 3)
    assert toks[1] == Token(PUNCT, '+', 6, 1)
    assert toks[2] == Token(NUM, 4, 8, 1)
    assert toks[3] == Token(EOF, None, 9, 0)


def test_single_eof_sentinel():
    for text in ["", "   ", "1", "1 + 2\n"]:
        toks = tokenize(text)
        assert [t.kind for t in toks].count(EOF) == 1
        assert toks[-1].kind == EOF
        assert toks[-1].offset == len(text)
        assert toks[-1].length == 0


def test_whitespace_is_skipped():
    assert [t[:2] for t in tokenize("1 + 2")] == [t[:2] for t in tokenize("1+2")]
    assert [t.kind for t in tokenize("\n\t 1 \r\f\v")] == [NUM, EOF]


def test_minus_is_never_folded_into_number():
    toks = tokenize("-5")
    assert toks[0] == Token(PUNCT, '-', 0, 1)
    assert toks[1] == Token(NUM, 5, 1, 1)


def test_leading_zeros_are_decimal():
    assert tokenize("007")[0] == Token(NUM, 7, 0, 3)


def test_invalid_character():
    with pytest.raises(LexError) as exc:
        tokenize("1@2")
    assert exc.value.offset == 1
    assert exc.value.character == '@'


@pytest.mark.parametrize("text, offset", [("1.5", 1), ("x", 0), ("2 % 3", 2), ("1 + 2a", 5)])
def test_invalid_character_offsets(text, offset):
    with pytest.raises(LexError) as exc:
        tokenize(text)
    assert exc.value.offset == offset


def test_largest_literal_accepted():
    toks = tokenize(str(constants.INT_MAX))
    assert toks[0].value == constants.INT_MAX


def test_overflowing_literal_rejected():
    with pytest.raises(LexError) as exc:
        tokenize("1 + " + str(constants.INT_MAX + 1))
    assert exc.value.offset == 4
    assert exc.value.message == "number too large"


def test_lexer_is_built_once(monkeypatch):
    from exprcc.compilador import lex_expr

    def fail(**kwargs):
        raise AssertionError("lexer rebuilt")

    monkeypatch.setattr(lex_expr.lex, "lex", fail)
    assert [t.value for t in tokenize("1+2")] == [1, '+', 2, None]
    assert [t.value for t in tokenize("(3)")] == ['(', 3, ')', None]


def test_error_does_not_leak_into_next_call():
    with pytest.raises(LexError):
        tokenize("1 $ 2")
    assert tokenize("4")[0] == Token(NUM, 4, 0, 1)
