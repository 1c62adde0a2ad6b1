"""
Pipeline que toma el texto de una expresión y produce ensamblador x86-64.

Flujo completo:
1. Lexer: texto -> tokens
2. Parser: tokens -> AST
3. Generador: AST -> ensamblador

Cualquier error aborta antes de producir salida.
"""
from __future__ import annotations

import logging
from pathlib import Path

from exprcc import constants
from .codegen import generate_program
from .lex_expr import tokenize
from .parser_expr import parse

LOGGER = logging.getLogger('exprcc.pipeline')


def compile_expression(source_text: str) -> str:
    """Compile one expression to a complete assembly listing.

    Raises LexError or ParseError; nothing is returned on failure.
    """
    # 1. LEXER
    toks = tokenize(source_text)
    # 2. PARSER
    ast = parse(toks)
    # 3. GENERADOR
    return generate_program(ast)


def pipeline_from_text(source_text: str, out_dir: Path = None, basename: str = 'expr', suffix: str = '.s'):
    """Compile source_text and write ``<basename><suffix>`` into out_dir.

    Returns (asm_text, path). The file is only written once compilation
    has fully succeeded.
    """
    if out_dir is None:
        out_dir = constants.default_out_dir()
    s_text = compile_expression(source_text)

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    s_path = out_dir / f'{basename}{suffix}'
    s_path.write_text(s_text, encoding='utf-8')
    LOGGER.debug("wrote %s", s_path)
    return s_text, s_path
