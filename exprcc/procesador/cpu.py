"""
Emulador mínimo de x86-64 para el ensamblador que produce el generador.

Soporta el subconjunto que emite el compilador (sintaxis AT&T):
    mov $imm, %r    push %r    pop %r
    add %s, %d      sub %s, %d      imul %s, %d
    cqo             idiv %s         ret
Las etiquetas, directivas (.globl) y comentarios (#) se ignoran.
"""
from __future__ import annotations

import logging
import re
from typing import List, Tuple

import numpy as np

from exprcc import constants
from exprcc.compilador.interpreter_expr import wrap
from .memory import ProcessorError, StackMemory

LOGGER = logging.getLogger('exprcc.procesador')

reg_re = re.compile(r"%([a-z0-9]+)")
imm_re = re.compile(r"\$(-?[0-9]+)")
label_re = re.compile(r"[A-Za-z_.][A-Za-z_0-9.]*:")

_MASK = (1 << constants.WORD_BITS) - 1


def parse_register(tok: str) -> str:
    m = reg_re.fullmatch(tok.strip())
    if not m or m.group(1) not in constants.REGISTERS:
        raise ProcessorError(f'Invalid register token: {tok}')
    return m.group(1)


def parse_immediate(tok: str) -> int:
    m = imm_re.fullmatch(tok.strip())
    if not m:
        raise ProcessorError(f'Invalid immediate token: {tok}')
    value = int(m.group(1))
    if not constants.INT_MIN <= value <= constants.INT_MAX:
        raise ProcessorError(f'Immediate out of range: {tok}')
    return value


def parse_program(asm_text: str) -> List[Tuple[str, List[str]]]:
    """Split assembly text into (mnemonic, operands) pairs."""
    program = []
    for raw in asm_text.splitlines():
        line = raw.split('#')[0].strip()
        if not line or line.startswith('.') or label_re.fullmatch(line):
            continue
        parts = line.split(None, 1)
        mnemonic = parts[0].lower()
        operands = [p.strip() for p in parts[1].split(',')] if len(parts) > 1 else []
        program.append((mnemonic, operands))
    return program


class CPU:
    """Register file + stack; executes a loaded program until ``ret``."""

    def __init__(self, stack_words: int = constants.STACK_WORDS):
        self.registers = np.zeros(len(constants.REGISTERS), dtype=np.int64)
        self.stack = StackMemory(stack_words)
        self.program: List[Tuple[str, List[str]]] = []
        self.pc = 0
        self.steps = 0

    def read_register(self, name: str) -> int:
        return int(self.registers[constants.REGISTERS.index(name)])

    def write_register(self, name: str, value: int):
        self.registers[constants.REGISTERS.index(name)] = wrap(value)

    def load(self, asm_text: str):
        self.program = parse_program(asm_text)
        self.pc = 0
        self.steps = 0

    def _binary(self, operands: List[str]) -> Tuple[int, str]:
        if len(operands) != 2:
            raise ProcessorError(f'Expected two operands, got {operands}')
        src = self.read_register(parse_register(operands[0]))
        return src, parse_register(operands[1])

    def _idiv(self, operands: List[str]):
        if len(operands) != 1:
            raise ProcessorError(f'idiv expects one operand, got {operands}')
        divisor = self.read_register(parse_register(operands[0]))
        if divisor == 0:
            raise ProcessorError("divide error: division by zero")
        # dividendo de 128 bits en rdx:rax
        dividend = (self.read_register('rdx') << constants.WORD_BITS) + (self.read_register('rax') & _MASK)
        q = abs(dividend) // abs(divisor)
        if (dividend < 0) != (divisor < 0):
            q = -q
        if not constants.INT_MIN <= q <= constants.INT_MAX:
            raise ProcessorError("divide error: quotient overflow")
        self.write_register('rax', q)
        self.write_register('rdx', dividend - q * divisor)

    def step(self) -> bool:
        """Execute one instruction. Returns False once ``ret`` has executed."""
        if self.pc >= len(self.program):
            raise ProcessorError("execution ran past the end of the program without ret")
        mnemonic, operands = self.program[self.pc]
        self.pc += 1
        self.steps += 1

        if mnemonic in ('mov', 'movq', 'movabs'):
            if len(operands) != 2:
                raise ProcessorError(f'mov expects two operands, got {operands}')
            self.write_register(parse_register(operands[1]), parse_immediate(operands[0]))
        elif mnemonic in ('push', 'pushq'):
            self.stack.push(self.read_register(parse_register(operands[0])))
        elif mnemonic in ('pop', 'popq'):
            self.write_register(parse_register(operands[0]), self.stack.pop())
        elif mnemonic in ('add', 'addq'):
            src, dst = self._binary(operands)
            self.write_register(dst, self.read_register(dst) + src)
        elif mnemonic in ('sub', 'subq'):
            src, dst = self._binary(operands)
            self.write_register(dst, self.read_register(dst) - src)
        elif mnemonic in ('imul', 'imulq'):
            src, dst = self._binary(operands)
            self.write_register(dst, self.read_register(dst) * src)
        elif mnemonic == 'cqo':
            self.write_register('rdx', -1 if self.read_register('rax') < 0 else 0)
        elif mnemonic in ('idiv', 'idivq'):
            self._idiv(operands)
        elif mnemonic in ('ret', 'retq'):
            if self.stack.depth != 0:
                raise ProcessorError(f"ret with {self.stack.depth} words left on the stack")
            return False
        else:
            raise ProcessorError(f'Unknown mnemonic: {mnemonic}')
        return True

    def run(self) -> int:
        while self.step():
            pass
        LOGGER.debug("executed %d instructions, max stack depth %d", self.steps, self.stack.max_depth)
        return self.read_register(constants.ACCUMULATOR)


def run_program(asm_text: str, stack_words: int = constants.STACK_WORDS) -> int:
    cpu = CPU(stack_words)
    cpu.load(asm_text)
    return cpu.run()
