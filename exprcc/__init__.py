"""exprcc: compilador de expresiones aritméticas a ensamblador x86-64."""

__version__ = "0.1.0"
