"""
RISC-V Explain - Plain-English explanations for single RISC-V instructions.

This package explains one line of RV32I/RV64I assembly at a time.
"""

from .explainer import Explainer, explain_instruction
from .errors import ExplainError, ParseError, FormatError, UnknownInstructionError

__version__ = "1.0.0"
__all__ = [
    "Explainer",
    "explain_instruction",
    "ExplainError",
    "ParseError",
    "FormatError",
    "UnknownInstructionError",
]
