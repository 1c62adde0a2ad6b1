"""Procesador package: emulador x86-64 mínimo para el código generado"""

from .cpu import CPU, run_program
from .memory import ProcessorError, StackMemory

__all__ = ["CPU", "ProcessorError", "StackMemory", "run_program"]
