"""
AST nodes for arithmetic expressions.

Nodes are immutable tuples, like the ('num', v) / ('binop', op, l, r) tuples
the SPL parser builds, but with named fields:

    NumberLiteral(value)
    BinaryOp(op, left, right)     op in OPERATORS
"""
from __future__ import annotations

from typing import NamedTuple, Union

OPERATORS = ('+', '-', '*', '/')


class NumberLiteral(NamedTuple):
    value: int


class BinaryOp(NamedTuple):
    op: str
    left: 'Node'
    right: 'Node'


Node = Union[NumberLiteral, BinaryOp]


def count_nodes(node: Node) -> int:
    total = 0
    pending = [node]
    while pending:
        n = pending.pop()
        total += 1
        if isinstance(n, BinaryOp):
            pending.append(n.left)
            pending.append(n.right)
    return total


def dump(node: Node) -> str:
    """Render the tree fully parenthesized, e.g. ``((1 - 2) - 3)``."""
    out = []
    pending = [node]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            out.append(item)
        elif isinstance(item, NumberLiteral):
            out.append(str(item.value))
        else:
            pending.extend([')', item.right, f' {item.op} ', item.left, '('])
    return ''.join(out)
