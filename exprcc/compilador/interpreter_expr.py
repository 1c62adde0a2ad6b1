"""
Intérprete de expresiones - evalúa el AST directamente, sin generar ensamblador.

Sigue la semántica del código generado: enteros de 64 bits en complemento a
dos, división truncada hacia cero.
"""
from __future__ import annotations

import logging

from exprcc import constants
from .ast_expr import BinaryOp, Node, NumberLiteral
from .errors import EvaluationError
from .parser_expr import parse_text

LOGGER = logging.getLogger('exprcc.interpreter')

_MASK = (1 << constants.WORD_BITS) - 1


def wrap(value: int) -> int:
    """Reduce an unbounded integer to the signed 64-bit range."""
    value &= _MASK
    if value > constants.INT_MAX:
        value -= 1 << constants.WORD_BITS
    return value


def trunc_div(a: int, b: int) -> int:
    if b == 0:
        raise EvaluationError("division by zero")
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    if not constants.INT_MIN <= q <= constants.INT_MAX:
        raise EvaluationError(f"quotient {a} / {b} overflows {constants.WORD_BITS}-bit integer")
    return q


def apply_op(op: str, left: int, right: int) -> int:
    if op == '+':
        return wrap(left + right)
    if op == '-':
        return wrap(left - right)
    if op == '*':
        return wrap(left * right)
    if op == '/':
        return trunc_div(left, right)
    raise ValueError(f"Unsupported binary op: {op}")


def evaluate(node: Node) -> int:
    values = []
    # ('node', n) evaluates a subtree, ('op', op) combines the top two values
    pending = [('node', node)]
    while pending:
        tag, item = pending.pop()
        if tag == 'op':
            right = values.pop()
            left = values.pop()
            values.append(apply_op(item, left, right))
        elif isinstance(item, NumberLiteral):
            values.append(item.value)
        elif isinstance(item, BinaryOp):
            pending.append(('op', item.op))
            pending.append(('node', item.right))
            pending.append(('node', item.left))
        else:
            raise TypeError(f"Unknown expr AST node: {item!r}")
    return values.pop()


def interpret_text(text: str) -> int:
    result = evaluate(parse_text(text))
    LOGGER.debug("interpreted %r -> %d", text, result)
    return result
