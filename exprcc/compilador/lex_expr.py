"""
Lexer for arithmetic expressions using PLY (lex).
Produces positioned tokens terminated by a single EOF sentinel.
"""
from __future__ import annotations

import logging
from typing import Any, List, NamedTuple

import ply.lex as lex

from exprcc import constants
from .errors import LexError

LOGGER = logging.getLogger('exprcc.lexer')

# Token kinds exposed to the parser
NUM = 'NUM'
PUNCT = 'PUNCT'
EOF = 'EOF'


class Token(NamedTuple):
    kind: str
    value: Any
    offset: int
    length: int


# Token names (PLY)
tokens = (
    'NUMBER',
    'PLUS',
    'MINUS',
    'TIMES',
    'DIVIDE',
    'LPAREN',
    'RPAREN',
)

# Simple tokens
t_PLUS = r"\+"
t_MINUS = r"-"
t_TIMES = r"\*"
t_DIVIDE = r"/"
t_LPAREN = r"\("
t_RPAREN = r"\)"


def t_NUMBER(t):
    r"[0-9]+"
    value = int(t.value, 10)
    if value > constants.INT_MAX:
        raise LexError(t.lexpos, t.value[0], "number too large")
    t.value = value
    return t


t_ignore = ' \t\r\n\f\v'


def t_error(t):
    raise LexError(t.lexpos, t.value[0])


def build_lexer(**kwargs):
    return lex.lex(**kwargs)


# Se construye una sola vez; cada tokenize trabaja sobre un clon
_LEXER = build_lexer()


def tokenize(text: str) -> List[Token]:
    lexer = _LEXER.clone()
    lexer.input(text)
    out = []
    while True:
        tok = lexer.token()
        if not tok:
            break
        # lexer.lexpos queda justo detrás del lexema recién reconocido
        length = lexer.lexpos - tok.lexpos
        if tok.type == 'NUMBER':
            out.append(Token(NUM, tok.value, tok.lexpos, length))
        else:
            out.append(Token(PUNCT, text[tok.lexpos], tok.lexpos, length))
    out.append(Token(EOF, None, len(text), 0))
    LOGGER.debug("tokenized %d characters into %d tokens", len(text), len(out))
    return out


if __name__ == '__main__':
    import sys
    for t in tokenize(sys.argv[1] if len(sys.argv) > 1 else "2 + 3 * (4 - 1)"):
        print(t)
