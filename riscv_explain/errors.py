"""
Custom exception types for the RISC-V instruction explainer.
"""


class ExplainError(Exception):
    """Base exception for explainer errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def for_line(self, line_text: str) -> str:
        """Render the error the way the explainer reports it for a line."""
        return f"Error in {line_text}: {self.message}"


class ParseError(ExplainError):
    """Exception raised for malformed operand syntax."""

    pass


class FormatError(ExplainError):
    """Exception raised when operands do not fit the instruction format."""

    pass


class UnknownInstructionError(ExplainError):
    """Exception raised for mnemonics missing from the instruction table."""

    pass
