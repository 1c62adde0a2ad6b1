"""
Stack-machine code generator: AST -> x86-64 assembly (AT&T syntax).

Each node leaves its value in the accumulator. For a binary node the right
operand is evaluated first and pushed, then the left operand is evaluated
into the accumulator and the right one is popped into the scratch register:

    <right>
    push %rax
    <left>
    pop %rdi
    add %rdi, %rax
"""
from __future__ import annotations

import logging
from typing import List

from exprcc import constants
from .ast_expr import BinaryOp, Node, NumberLiteral

LOGGER = logging.getLogger('exprcc.codegen')

ACC = f"%{constants.ACCUMULATOR}"
TMP = f"%{constants.SCRATCH}"

# op -> instrucciones que calculan ACC = ACC op TMP
OP_ASM = {
    '+': [f"add {TMP}, {ACC}"],
    '-': [f"sub {TMP}, {ACC}"],
    '*': [f"imul {TMP}, {ACC}"],
    # cqo extiende el signo de rax sobre rdx:rax antes de idiv
    '/': ["cqo", f"idiv {TMP}"],
}


def generate(node: Node) -> List[str]:
    lines = []
    # Work list: pending nodes and already-rendered instructions, popped LIFO.
    pending = [node]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            lines.append(item)
        elif isinstance(item, NumberLiteral):
            lines.append(f"mov ${item.value}, {ACC}")
        elif isinstance(item, BinaryOp):
            pending.extend(reversed(OP_ASM[item.op]))
            pending.append(f"pop {TMP}")
            pending.append(item.left)
            pending.append(f"push {ACC}")
            pending.append(item.right)
        else:
            raise TypeError(f"Unknown expr AST node: {item!r}")
    return lines


def generate_program(node: Node) -> str:
    body = generate(node)
    LOGGER.debug("generated %d instructions", len(body))
    out = [f".globl {constants.ENTRY_LABEL}", f"{constants.ENTRY_LABEL}:"]
    out.extend(body)
    out.append("ret")
    return '\n'.join(out) + '\n'
