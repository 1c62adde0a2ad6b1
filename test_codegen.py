"""Test del generador de código"""
from exprcc.compilador.ast_expr import BinaryOp, NumberLiteral
from exprcc.compilador.codegen import generate, generate_program
from exprcc.compilador.parser_expr import parse_text


def test_literal():
    assert generate(NumberLiteral(42)) == ["mov $42, %rax"]


def test_right_operand_first():
    assert generate(parse_text("2-5")) == [
        "mov $5, %rax",
        "push %rax",
        "mov $2, %rax",
        "pop %rdi",
        "sub %rdi, %rax",
    ]


def test_operator_instructions():
    assert generate(parse_text("1+2"))[-1] == "add %rdi, %rax"
    assert generate(parse_text("1*2"))[-1] == "imul %rdi, %rax"
    assert generate(parse_text("1/2"))[-2:] == ["cqo", "idiv %rdi"]


def test_nested_order():
    # (1+2)*3: right (3) is evaluated and pushed before the whole left subtree
    assert generate(parse_text("(1+2)*3")) == [
        "mov $3, %rax",
        "push %rax",
        "mov $2, %rax",
        "push %rax",
        "mov $1, %rax",
        "pop %rdi",
        "add %rdi, %rax",
        "pop %rdi",
        "imul %rdi, %rax",
    ]


def test_push_pop_balanced():
    lines = generate(parse_text("1+2*(3-4)/5-6"))
    assert sum(1 for ln in lines if ln.startswith("push")) == sum(1 for ln in lines if ln.startswith("pop"))


def test_program_frame():
    text = generate_program(NumberLiteral(7))
    assert text == ".globl main\nmain:\nmov $7, %rax\nret\n"


def test_whitespace_insensitive():
    assert generate_program(parse_text("1 + 2")) == generate_program(parse_text("1+2"))


def test_deep_tree_does_not_hit_recursion_limit():
    node = NumberLiteral(1)
    for _ in range(20000):
        node = BinaryOp('+', node, NumberLiteral(1))
    lines = generate(node)
    assert len(lines) == 20001 + 20000 * 3
