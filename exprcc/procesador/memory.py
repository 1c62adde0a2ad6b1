import numpy as np

from exprcc import constants


class ProcessorError(Exception):
    """Fallo del emulador: instrucción desconocida, pila, división."""
    pass


class StackMemory:
    """
    Pila de la máquina emulada.
    Array de `size` palabras de 64 bits con signo; crece hacia direcciones
    bajas, como la pila de x86-64.
    """

    def __init__(self, size: int = constants.STACK_WORDS):
        self.array: np.ndarray = np.zeros(size, dtype=np.int64)
        self.sp = size
        self.max_depth = 0

    @property
    def depth(self) -> int:
        return len(self.array) - self.sp

    def push(self, value: int):
        """Apila una palabra"""
        if self.sp == 0:
            raise ProcessorError("stack overflow")
        self.sp -= 1
        self.array[self.sp] = value
        self.max_depth = max(self.max_depth, self.depth)

    def pop(self) -> int:
        """Desapila una palabra"""
        if self.sp >= len(self.array):
            raise ProcessorError("stack underflow")
        value = int(self.array[self.sp])
        self.sp += 1
        return value
