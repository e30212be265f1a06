"""
Line explainer.

Turns one line of assembly into an English sentence. Failures never escape:
they come back as "Error in <line>: <message>" strings.
"""

import sys
from typing import Iterable, List, Tuple

from .errors import ExplainError
from .instructions import explain, get_instruction
from .operands import parse_operand, tokenize_line
from .registers import register_number
from .validator import check_format

EMPTY_LINE = "Empty line"
ERROR_PREFIX = "Error in "


class Explainer:
    """
    Explains single lines of RISC-V assembly.

    Each call is independent; the explainer holds no state besides its
    verbosity setting.
    """

    def __init__(self, verbose: bool = False):
        """
        Initialize the explainer.

        Args:
            verbose: If True, print tracing information to stderr
        """
        self.verbose = verbose

    def log(self, message: str) -> None:
        """Print message if verbose mode is enabled."""
        if self.verbose:
            print(message, file=sys.stderr)

    def explain(self, line: str) -> str:
        """
        Explain one line of assembly.

        Args:
            line: Assembly text, e.g. "add t0, t1, t2"

        Returns:
            The explanation, "Empty line", or an "Error in ..." string
        """
        tokens = tokenize_line(line)
        if not tokens:
            self.log("Empty line")
            return EMPTY_LINE

        mnemonic = tokens[0].lower()
        self.log(f"Tokens: {tokens}")

        try:
            operands = [parse_operand(token) for token in tokens[1:]]
        except ExplainError as e:
            self.log(f"  Parse failed: {e.message}")
            return e.for_line(line)

        for i, operand in enumerate(operands):
            number = register_number(operand.text)
            suffix = f" (x{number})" if number is not None else ""
            self.log(f"  Operand {i}: {operand.kind.value} '{operand.text}'{suffix}")

        spec = get_instruction(mnemonic)
        if spec is not None:
            self.log(f"  Format: {spec.format.value}")

        error = check_format(mnemonic, operands)
        if error is not None:
            self.log(f"  Validation failed: {error.message}")
            return error.for_line(line)

        return explain(mnemonic, operands)

    def explain_lines(self, lines: Iterable[str]) -> List[Tuple[str, str]]:
        """
        Explain several lines, each one on its own.

        Returns:
            List of (line, explanation) pairs in input order
        """
        return [(line, self.explain(line)) for line in lines]


_default_explainer = Explainer()


def explain_instruction(line: str) -> str:
    """Explain one line of RISC-V assembly. Never raises."""
    return _default_explainer.explain(line)


def is_error(explanation: str) -> bool:
    """Check whether an explanation string reports an error."""
    return explanation.startswith(ERROR_PREFIX)
