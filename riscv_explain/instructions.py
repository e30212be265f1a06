"""
RISC-V instruction definitions.

This module maps each supported mnemonic to its format tag and to the function
that renders an English explanation from its (already validated) operands.
New instructions are added by registering another InstructionSpec below.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, List, Optional, Sequence

from .errors import UnknownInstructionError
from .operands import Operand, OperandKind

Renderer = Callable[[Sequence[Operand]], str]


class InstructionFormat(Enum):
    """
    Operand shape tags.

    These follow the RISC-V format letters loosely: S covers every
    register + memory instruction (loads included), and B also covers jalr.
    """

    R = "R"  # Register, register, register
    I = "I"  # Register, register, immediate
    S = "S"  # Register, memory
    B = "B"  # Register, register, immediate or label
    J = "J"  # Register, immediate or label
    U = "U"  # Register, immediate
    E = "E"  # No operands


@dataclass(frozen=True)
class InstructionSpec:
    """
    Definition of an explainable instruction.

    Attributes:
        format: Operand shape tag
        render: Builds the explanation from the operand list
        summary: Short description of the operation
    """

    format: InstructionFormat
    render: Renderer
    summary: str = ""


# =============================================================================
# Rendering helpers
# =============================================================================


def _binary(verb: str, preposition: str = "to") -> Renderer:
    """Arithmetic/logic template shared by register and immediate forms."""

    def render(ops: Sequence[Operand]) -> str:
        return (
            f"{verb} {ops[2].text} {preposition} {ops[1].text} "
            f"and store result in {ops[0].text}"
        )

    return render


def _shift(symbol: str) -> Renderer:
    def render(ops: Sequence[Operand]) -> str:
        return f"{ops[1].text} {symbol} {ops[2].text} and store result in {ops[0].text}"

    return render


def _load(width: str) -> Renderer:
    def render(ops: Sequence[Operand]) -> str:
        mem = ops[1]
        return f"Load {width} from memory[{mem.base_register} + {mem.offset}] → {ops[0].text}"

    return render


def _store(width: str) -> Renderer:
    def render(ops: Sequence[Operand]) -> str:
        mem = ops[1]
        return f"Store {width} {ops[0].text} → memory[{mem.base_register} + {mem.offset}]"

    return render


def _branch(comparison: str) -> Renderer:
    def render(ops: Sequence[Operand]) -> str:
        return f"Branch to {ops[2].text} if {ops[0].text} {comparison} {ops[1].text}"

    return render


def _target_word(operand: Operand) -> str:
    return "label" if operand.kind is OperandKind.LABEL else "offset"


def _jalr(ops: Sequence[Operand]) -> str:
    return (
        f"Jump to {_target_word(ops[2])} {ops[1].text} + {ops[2].text} "
        f"and store return address in {ops[0].text}"
    )


def _jal(ops: Sequence[Operand]) -> str:
    return (
        f"Jump to {_target_word(ops[1])} {ops[1].text} "
        f"and store return address in {ops[0].text}"
    )


def _lui(ops: Sequence[Operand]) -> str:
    return f"Save {ops[1].text} << 12 to {ops[0].text}"


def _auipc(ops: Sequence[Operand]) -> str:
    return f"Save PC + ({ops[1].text} << 12) to {ops[0].text}"


def _fixed(text: str) -> Renderer:
    return lambda ops: text


# =============================================================================
# Instruction table
# =============================================================================

_R = InstructionFormat.R
_I = InstructionFormat.I
_S = InstructionFormat.S
_B = InstructionFormat.B
_J = InstructionFormat.J
_U = InstructionFormat.U
_E = InstructionFormat.E

INSTRUCTIONS = MappingProxyType({
    # -------------------------------------------------------------------------
    # Register-register operations
    # -------------------------------------------------------------------------
    "add": InstructionSpec(_R, _binary("Add"), "rd = rs1 + rs2"),
    "sub": InstructionSpec(_R, _binary("Subtract", "from"), "rd = rs1 - rs2"),
    "xor": InstructionSpec(_R, _binary("XOR"), "rd = rs1 ^ rs2"),
    "or": InstructionSpec(_R, _binary("OR"), "rd = rs1 | rs2"),
    "and": InstructionSpec(_R, _binary("AND"), "rd = rs1 & rs2"),
    "sll": InstructionSpec(_R, _shift("<<"), "rd = rs1 << rs2"),
    "srl": InstructionSpec(_R, _shift(">>"), "rd = rs1 >> rs2 (logical)"),
    # -------------------------------------------------------------------------
    # Register-immediate operations
    # -------------------------------------------------------------------------
    "addi": InstructionSpec(_I, _binary("Add"), "rd = rs1 + imm"),
    "xori": InstructionSpec(_I, _binary("XOR"), "rd = rs1 ^ imm"),
    "ori": InstructionSpec(_I, _binary("OR"), "rd = rs1 | imm"),
    "andi": InstructionSpec(_I, _binary("AND"), "rd = rs1 & imm"),
    # -------------------------------------------------------------------------
    # Loads and stores (register + memory shape)
    # -------------------------------------------------------------------------
    "lw": InstructionSpec(_S, _load("word"), "rd = mem32[rs1 + offset]"),
    "ld": InstructionSpec(_S, _load("dword"), "rd = mem64[rs1 + offset]"),
    "sw": InstructionSpec(_S, _store("word"), "mem32[rs1 + offset] = rs2"),
    "sd": InstructionSpec(_S, _store("dword"), "mem64[rs1 + offset] = rs2"),
    # -------------------------------------------------------------------------
    # Branches
    # -------------------------------------------------------------------------
    "beq": InstructionSpec(_B, _branch("=="), "if rs1 == rs2, pc = target"),
    "bne": InstructionSpec(_B, _branch("!="), "if rs1 != rs2, pc = target"),
    "blt": InstructionSpec(_B, _branch("<"), "if rs1 < rs2, pc = target"),
    "bge": InstructionSpec(_B, _branch(">="), "if rs1 >= rs2, pc = target"),
    # jalr shares the branch operand shape
    "jalr": InstructionSpec(_B, _jalr, "rd = pc + 4, pc = rs1 + offset"),
    # -------------------------------------------------------------------------
    # Jumps
    # -------------------------------------------------------------------------
    "jal": InstructionSpec(_J, _jal, "rd = pc + 4, pc = target"),
    # -------------------------------------------------------------------------
    # Upper immediates
    # -------------------------------------------------------------------------
    "lui": InstructionSpec(_U, _lui, "rd = imm << 12"),
    "auipc": InstructionSpec(_U, _auipc, "rd = pc + (imm << 12)"),
    # -------------------------------------------------------------------------
    # Environment
    # -------------------------------------------------------------------------
    "ecall": InstructionSpec(_E, _fixed("Environment call"), "request a service from the environment"),
    "ebreak": InstructionSpec(_E, _fixed("Environment break"), "return control to a debugger"),
})


def get_instruction(mnemonic: str) -> Optional[InstructionSpec]:
    """
    Look up an instruction by mnemonic.

    Args:
        mnemonic: Instruction mnemonic (case-insensitive)

    Returns:
        InstructionSpec if found, None otherwise
    """
    return INSTRUCTIONS.get(mnemonic.lower())


def is_valid_instruction(mnemonic: str) -> bool:
    """Check if a mnemonic is a known instruction."""
    return mnemonic.lower() in INSTRUCTIONS


def get_all_mnemonics() -> List[str]:
    """Get a list of all supported instruction mnemonics."""
    return list(INSTRUCTIONS.keys())


def explain(mnemonic: str, operands: Sequence[Operand]) -> str:
    """
    Render the explanation for an instruction.

    The operands must already have passed validation for this mnemonic.

    Raises:
        UnknownInstructionError: If the mnemonic is not in the table
    """
    spec = get_instruction(mnemonic)
    if spec is None:
        raise UnknownInstructionError(f"Unknown instruction {mnemonic}")
    return spec.render(operands)
