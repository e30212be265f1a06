"""
Tests for the operand parser module.
"""

import pytest
import sys
import os

# Add repository root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from riscv_explain.errors import ParseError
from riscv_explain.operands import (
    Operand,
    OperandKind,
    parse_integer_prefix,
    parse_memory_operand,
    parse_operand,
    tokenize_line,
)
from riscv_explain.registers import REGISTERS, is_register, register_number


class TestRegisters:
    """Tests for the fixed register name list."""

    def test_thirty_two_names_in_order(self):
        assert len(REGISTERS) == 32
        assert REGISTERS[0] == 'zero'
        assert REGISTERS[2] == 'sp'
        assert REGISTERS[31] == 't6'

    def test_numeric_names_are_not_registers(self):
        """x-style names and the fp alias are not in the list."""
        assert not is_register('x1')
        assert not is_register('fp')
        assert not is_register('SP')

    def test_register_number(self):
        assert register_number('a0') == 10
        assert register_number('s11') == 27
        assert register_number('x5') is None


class TestParseIntegerPrefix:
    """Tests for the permissive integer parse."""

    @pytest.mark.parametrize("text, expected", [
        ("5", 5),
        ("-48", -48),
        ("+7", 7),
        ("0x1A", 26),
        ("0X1a", 26),
        ("0b1010", 10),
        ("0o17", 15),
        ("12abc", 12),
        ("10x", 10),
        ("00x", 0),
    ])
    def test_parses_leading_number(self, text, expected):
        assert parse_integer_prefix(text) == expected

    @pytest.mark.parametrize("text", [
        "", "loop", "-", "x1", "abc12", "0x", "0xg", "-0b", "٣", "４",
    ])
    def test_non_numeric(self, text):
        assert parse_integer_prefix(text) is None


class TestParseMemoryOperand:
    """Tests for offset(register) syntax."""

    def test_basic(self):
        op = parse_memory_operand("4(sp)")
        assert op.kind is OperandKind.MEMORY
        assert op.text == "4(sp)"
        assert op.offset == "4"
        assert op.base_register == "sp"

    def test_negative_offset(self):
        op = parse_memory_operand("-8(s0)")
        assert op.offset == "-8"
        assert op.base_register == "s0"

    def test_base_is_not_checked_against_registers(self):
        op = parse_memory_operand("0(x2)")
        assert op.base_register == "x2"

    @pytest.mark.parametrize("text", [
        "(sp)", "foo(sp)", "4(sp", "4(sp)x", "4()", "４(sp)", "٣(sp)",
    ])
    def test_invalid_syntax(self, text):
        with pytest.raises(ParseError, match="Invalid memory operand"):
            parse_memory_operand(text)


class TestParseOperand:
    """Tests for operand classification."""

    def test_register(self):
        op = parse_operand("t0")
        assert op == Operand(kind=OperandKind.REGISTER, text="t0")
        assert op.base_register is None and op.offset is None

    def test_immediate(self):
        assert parse_operand("-12").kind is OperandKind.IMMEDIATE
        assert parse_operand("0x10").kind is OperandKind.IMMEDIATE

    def test_immediate_with_trailing_garbage(self):
        op = parse_operand("12abc")
        assert op.kind is OperandKind.IMMEDIATE
        assert op.text == "12abc"

    def test_label(self):
        assert parse_operand("loop").kind is OperandKind.LABEL

    def test_numeric_register_name_is_label(self):
        assert parse_operand("x1").kind is OperandKind.LABEL

    @pytest.mark.parametrize("token", ["@#!", "٣", "４", "0x", "0xg"])
    def test_non_literals_are_labels(self, token):
        """Garbage, non-ASCII digits and bare radix prefixes fall through to labels."""
        op = parse_operand(token)
        assert op.kind is OperandKind.LABEL
        assert op.text == token

    def test_memory_wins(self):
        assert parse_operand(" 4(sp) ").kind is OperandKind.MEMORY

    def test_malformed_memory_raises(self):
        with pytest.raises(ParseError):
            parse_operand("lo(sp)")

    def test_operand_is_immutable(self):
        op = parse_operand("t0")
        with pytest.raises(AttributeError):
            op.text = "t1"

    def test_memory_parts_only_on_memory(self):
        with pytest.raises(ValueError):
            Operand(kind=OperandKind.REGISTER, text="t0", base_register="sp", offset="0")
        with pytest.raises(ValueError):
            Operand(kind=OperandKind.MEMORY, text="4(sp)")


class TestTokenizeLine:
    """Tests for line tokenization."""

    @pytest.mark.parametrize("line, expected", [
        ("add t0, t1, t2", ["add", "t0", "t1", "t2"]),
        ("add t0 t1 t2", ["add", "t0", "t1", "t2"]),
        ("  lw t0,4(sp)  ", ["lw", "t0", "4(sp)"]),
        ("add t0,,t1", ["add", "t0", "t1"]),
        ("ecall", ["ecall"]),
        ("", []),
        ("  ,  ", []),
    ])
    def test_tokenize(self, line, expected):
        assert tokenize_line(line) == expected
