"""
Predictive parser for arithmetic expressions.

    expr    := mul ( ('+' | '-') mul )*
    mul     := primary ( ('*' | '/') primary )*
    primary := NUMBER | '(' expr ')'

Repetitions fold left, so 1-2-3 parses as (1-2)-3.

Each '(' opens a new frame holding the partially built expr/mul of the
enclosing group instead of recursing, so nesting depth is only bounded by
memory.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from .ast_expr import BinaryOp, Node, NumberLiteral, count_nodes
from .errors import ExpectedExpression, ExpectedPunctuator, UnexpectedTrailingInput
from .lex_expr import EOF, NUM, PUNCT, Token, tokenize

LOGGER = logging.getLogger('exprcc.parser')


class Frame:
    """Pending state of one expr rule: left operands and operators awaiting a right operand."""

    def __init__(self):
        self.sum_left: Optional[Node] = None
        self.sum_op: Optional[str] = None
        self.term_left: Optional[Node] = None
        self.term_op: Optional[str] = None


class Parser:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.index = 0
        self.frames = [Frame()]

    def current(self) -> Token:
        return self.tokens[self.index]

    def advance(self) -> Token:
        tok = self.tokens[self.index]
        self.index += 1
        return tok

    def at_punct(self, *symbols: str) -> bool:
        tok = self.current()
        return tok.kind == PUNCT and tok.value in symbols

    def expect(self, symbol: str) -> Token:
        if not self.at_punct(symbol):
            raise ExpectedPunctuator(self.current().offset, symbol)
        return self.advance()

    def primary(self) -> Optional[Node]:
        """Consume a number, or open a group. Returns None when a group was opened."""
        tok = self.current()
        if tok.kind == NUM:
            self.advance()
            return NumberLiteral(tok.value)
        if self.at_punct('('):
            self.advance()
            self.frames.append(Frame())
            return None
        raise ExpectedExpression(tok.offset)

    def mul(self, frame: Frame, operand: Node) -> Optional[Node]:
        """Fold operand into the frame's term. Returns the finished term, or None if '*'/'/' follows."""
        if frame.term_op is not None:
            operand = BinaryOp(frame.term_op, frame.term_left, operand)
            frame.term_op = frame.term_left = None
        if self.at_punct('*', '/'):
            frame.term_left = operand
            frame.term_op = self.advance().value
            return None
        return operand

    def add(self, frame: Frame, term: Node) -> Optional[Node]:
        """Fold term into the frame's sum. Returns the finished expr, or None if '+'/'-' follows."""
        if frame.sum_op is not None:
            term = BinaryOp(frame.sum_op, frame.sum_left, term)
            frame.sum_op = frame.sum_left = None
        if self.at_punct('+', '-'):
            frame.sum_left = term
            frame.sum_op = self.advance().value
            return None
        return term

    def expr(self) -> Node:
        while True:
            node = self.primary()
            while node is not None:
                frame = self.frames[-1]
                node = self.mul(frame, node)
                if node is None:
                    break
                node = self.add(frame, node)
                if node is None:
                    break
                if len(self.frames) == 1:
                    return node
                # grupo completo: cerrar y seguir como operando del frame padre
                self.expect(')')
                self.frames.pop()


def parse(tokens: List[Token]) -> Node:
    parser = Parser(tokens)
    root = parser.expr()
    tok = parser.current()
    if tok.kind != EOF:
        raise UnexpectedTrailingInput(tok.offset)
    if LOGGER.isEnabledFor(logging.DEBUG):
        LOGGER.debug("parsed %d tokens into %d nodes", len(tokens), count_nodes(root))
    return root


def parse_text(text: str) -> Node:
    return parse(tokenize(text))
