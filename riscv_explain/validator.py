"""
Operand shape validation.

Each instruction format expects a fixed number of operands with fixed kinds.
The rules live in FORMAT_RULES; check_format() returns the first violation
as an error value, validate_format() raises it.
"""

from typing import Dict, FrozenSet, Optional, Sequence, Tuple

from .errors import ExplainError, FormatError, UnknownInstructionError
from .instructions import InstructionFormat, get_instruction
from .operands import Operand, OperandKind

_REG = frozenset({OperandKind.REGISTER})
_IMM = frozenset({OperandKind.IMMEDIATE})
_MEM = frozenset({OperandKind.MEMORY})
_TARGET = frozenset({OperandKind.IMMEDIATE, OperandKind.LABEL})

# Expected operand kinds per position; the tuple length is the arity
FORMAT_RULES: Dict[InstructionFormat, Tuple[FrozenSet[OperandKind], ...]] = {
    InstructionFormat.R: (_REG, _REG, _REG),
    InstructionFormat.I: (_REG, _REG, _IMM),
    InstructionFormat.S: (_REG, _MEM),
    InstructionFormat.B: (_REG, _REG, _TARGET),
    InstructionFormat.J: (_REG, _TARGET),
    InstructionFormat.U: (_REG, _IMM),
    InstructionFormat.E: (),
}

# Message order for kinds accepted at the same position
_KIND_ORDER = (
    OperandKind.REGISTER,
    OperandKind.IMMEDIATE,
    OperandKind.MEMORY,
    OperandKind.LABEL,
)


def describe_kinds(kinds: FrozenSet[OperandKind]) -> str:
    """Join accepted kinds for an error message, e.g. 'immediate or label'."""
    return " or ".join(k.value for k in _KIND_ORDER if k in kinds)


def check_format(mnemonic: str, operands: Sequence[Operand]) -> Optional[ExplainError]:
    """
    Check operands against the expected shape for a mnemonic.

    Args:
        mnemonic: Lowercase instruction mnemonic
        operands: Parsed operands in source order

    Returns:
        None if the operands fit, otherwise the error describing the first
        mismatch (UnknownInstructionError or FormatError)
    """
    spec = get_instruction(mnemonic)
    if spec is None:
        return UnknownInstructionError(f"Unknown instruction {mnemonic}")

    name = mnemonic.upper()
    expected = FORMAT_RULES[spec.format]

    if len(operands) != len(expected):
        return FormatError(
            f"{name}: Incorrect number of operands, "
            f"expected {len(expected)}, got {len(operands)}"
        )

    for i, (operand, kinds) in enumerate(zip(operands, expected)):
        if operand.kind not in kinds:
            return FormatError(
                f"{name}: Expect {describe_kinds(kinds)} at operand {i}, "
                f"got {operand.kind.value}"
            )

    return None


def validate_format(mnemonic: str, operands: Sequence[Operand]) -> None:
    """
    Validate operands against the expected shape for a mnemonic.

    Raises:
        UnknownInstructionError: If the mnemonic is not in the table
        FormatError: If the operand count or kinds do not match
    """
    error = check_format(mnemonic, operands)
    if error is not None:
        raise error
