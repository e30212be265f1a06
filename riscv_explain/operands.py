"""
Operand parsing.

Splits a line of assembly into tokens and classifies each operand token as a
register, immediate, memory reference or label.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .errors import ParseError
from .registers import is_register


class OperandKind(Enum):
    """Operand kinds, valued by the names used in error messages."""

    REGISTER = "register"
    IMMEDIATE = "immediate"
    MEMORY = "memory"
    LABEL = "label"


@dataclass(frozen=True)
class Operand:
    """
    A classified operand token.

    Attributes:
        kind: Operand kind
        text: Original token text
        base_register: Register inside the parentheses (memory operands only)
        offset: Offset text before the parentheses (memory operands only)
    """

    kind: OperandKind
    text: str
    base_register: Optional[str] = None
    offset: Optional[str] = None

    def __post_init__(self):
        is_memory = self.kind is OperandKind.MEMORY
        has_parts = self.base_register is not None and self.offset is not None
        if is_memory != has_parts:
            raise ValueError(
                f"base_register/offset must be set only for memory operands: {self.text}"
            )


# Leading integer literal: optional sign, then a prefixed or decimal number.
# Anything after the match is ignored. A radix prefix with no valid digit
# after it ("0x", "0xg") is not a number. ASCII digits only.
_INTEGER_PREFIX = re.compile(
    r"[+-]?(?:0[xX][0-9a-fA-F]+|0[bB][01]+|0[oO][0-7]+|0(?![xXbBoO])[0-9]*|[1-9][0-9]*)",
    re.ASCII,
)

_MEMORY_OPERAND = re.compile(r"([+-]?[0-9]+)\((\w+)\)", re.ASCII)


def parse_integer_prefix(value_str: str) -> Optional[int]:
    """
    Parse the integer literal at the start of a string.

    Supports:
    - Decimal: 123, -45, +7
    - Hexadecimal: 0x1A, 0X1a
    - Binary: 0b1010
    - Octal: 0o17

    Parsing stops at the first character that cannot continue the literal,
    so "12abc" gives 12. A bare prefix such as "0x" gives None.

    Returns:
        Integer value, or None if the string does not start with a number
    """
    match = _INTEGER_PREFIX.match(value_str.strip())
    if not match:
        return None

    literal = match.group(0)
    negative = literal.startswith("-")
    digits = literal.lstrip("+-").lower()

    if digits.startswith("0x"):
        result = int(digits, 16)
    elif digits.startswith("0b"):
        result = int(digits, 2)
    elif digits.startswith("0o"):
        result = int(digits, 8)
    else:
        result = int(digits, 10)

    return -result if negative else result


def parse_memory_operand(operand: str) -> Operand:
    """
    Parse a memory operand in the form offset(register).

    Examples:
    - "0(sp)" -> offset "0", base "sp"
    - "-48(s0)" -> offset "-48", base "s0"

    The base is any bare word; it is not checked against the register names.
    """
    match = _MEMORY_OPERAND.fullmatch(operand)
    if not match:
        raise ParseError(f"Invalid memory operand: {operand}")

    return Operand(
        kind=OperandKind.MEMORY,
        text=operand,
        offset=match.group(1),
        base_register=match.group(2),
    )


def parse_operand(token: str) -> Operand:
    """
    Classify a single operand token.

    Memory syntax wins over everything else, then register names, then
    numbers. Whatever is left is treated as a label.
    """
    token = token.strip()

    if "(" in token:
        return parse_memory_operand(token)

    if is_register(token):
        return Operand(kind=OperandKind.REGISTER, text=token)

    # A label that looks like a number is read as an immediate
    if parse_integer_prefix(token) is not None:
        return Operand(kind=OperandKind.IMMEDIATE, text=token)

    return Operand(kind=OperandKind.LABEL, text=token)


def tokenize_line(line: str) -> List[str]:
    """Split a line on commas and whitespace, dropping empty tokens."""
    return line.strip().replace(",", " ").split()
