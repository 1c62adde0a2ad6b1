"""
Command-line driver for the expression compiler.

Usage:
    exprcc '2 + 3 * 4'              # assembly to stdout
    exprcc -o out.s '2 + 3 * 4'     # assembly to a file
    exprcc --run '(2 + 3) * 4'      # compile, execute in the emulator, print the value
    exprcc --interpret '8 / 4 / 2'  # evaluate the AST directly, print the value

Output is only written once the whole pipeline has succeeded. Compile errors
are reported on stderr as the source line plus a caret under the offending
position, with exit status 1.
"""
import argparse
import logging
import sys
from pathlib import Path

from exprcc.compilador import CompileError, EvaluationError, compile_expression, interpret_text, pipeline_from_text
from exprcc.procesador import ProcessorError, run_program

LOGGER = logging.getLogger('exprcc.driver')


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog='exprcc', description='Compile an arithmetic expression to x86-64 assembly.')
    p.add_argument('expression')
    mode = p.add_mutually_exclusive_group()
    mode.add_argument('-o', '--output', type=Path, help='write the assembly to this file')
    mode.add_argument('--run', action='store_true', help='execute the generated code in the emulator')
    mode.add_argument('--interpret', action='store_true', help='evaluate the expression without generating code')
    p.add_argument('-v', '--verbose', action='store_true')
    return p


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(stream=sys.stderr, level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(name)s: %(message)s')

    source = args.expression
    try:
        if args.interpret:
            result = str(interpret_text(source)) + '\n'
        elif args.run:
            result = str(run_program(compile_expression(source))) + '\n'
        elif args.output is not None:
            out = args.output
            _, path = pipeline_from_text(source, out_dir=out.parent, basename=out.stem, suffix=out.suffix)
            LOGGER.debug("wrote %s", path)
            return 0
        else:
            result = compile_expression(source)
    except CompileError as e:
        LOGGER.debug("compilation failed: %s", e)
        sys.stderr.write(e.diagnostic(source) + '\n')
        return 1
    except (EvaluationError, ProcessorError, OSError) as e:
        sys.stderr.write(f"error: {e}\n")
        return 1

    sys.stdout.write(result)
    return 0


if __name__ == '__main__':
    sys.exit(main())
