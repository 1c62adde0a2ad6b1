"""
Constantes globales del compilador de expresiones.
Target: x86-64, System V, sintaxis AT&T.
"""
from pathlib import Path

import numpy as np

# Tipo entero del target (registro de 64 bits con signo)
WORD_BITS = 64
INT_MIN = int(np.iinfo(np.int64).min)
INT_MAX = int(np.iinfo(np.int64).max)

# Registros usados por el generador de código
ACCUMULATOR = 'rax'
SCRATCH = 'rdi'
# rdx recibe la extensión de signo de cqo y el resto de idiv
REGISTERS = ('rax', 'rdi', 'rdx')

ENTRY_LABEL = 'main'

# Pila del emulador, en palabras de 64 bits
STACK_WORDS = 1 << 16


def default_out_dir() -> Path:
    return Path.cwd() / 'build'
