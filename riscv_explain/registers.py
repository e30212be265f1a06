"""
RISC-V register names.

Only the ABI names (zero, ra, sp, ...) are recognized. Numeric x-names and
the fp alias are not registers as far as the explainer is concerned.
"""

from typing import Optional

# ABI names in register-number order (index == register number)
REGISTERS = (
    "zero",
    "ra",
    "sp",
    "gp",
    "tp",
    "t0",
    "t1",
    "t2",
    "s0",
    "s1",
    "a0",
    "a1",
    "a2",
    "a3",
    "a4",
    "a5",
    "a6",
    "a7",
    "s2",
    "s3",
    "s4",
    "s5",
    "s6",
    "s7",
    "s8",
    "s9",
    "s10",
    "s11",
    "t3",
    "t4",
    "t5",
    "t6",
)

_REGISTER_SET = frozenset(REGISTERS)


def is_register(name: str) -> bool:
    """Check if a token is exactly one of the known register names."""
    return name in _REGISTER_SET


def register_number(name: str) -> Optional[int]:
    """
    Get the register number for an ABI name.

    Args:
        name: Register name (e.g., "zero", "sp", "t6")

    Returns:
        Register number (0-31), or None if the name is not a register
    """
    if name not in _REGISTER_SET:
        return None
    return REGISTERS.index(name)
