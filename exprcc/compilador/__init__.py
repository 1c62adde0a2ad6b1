"""Compilador package: expression lexer, parser, code generator and pipeline"""

from .errors import CompileError, EvaluationError, LexError, ParseError
from .interpreter_expr import evaluate, interpret_text
from .pipeline import compile_expression, pipeline_from_text

__all__ = [
    "CompileError",
    "EvaluationError",
    "LexError",
    "ParseError",
    "compile_expression",
    "evaluate",
    "interpret_text",
    "pipeline_from_text",
]
