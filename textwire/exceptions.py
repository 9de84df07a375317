"""textwire exceptions."""

from typing import List, Optional
from dataclasses import dataclass


@dataclass
class ValidationError:
    """Single validation error."""
    message: str
    path: str = ""
    exit_code: int = 2


class ConfigValidationError(Exception):
    """Raised when a variables or rules file fails validation.

    The loader collects every problem it finds before raising, so the CLI
    can report them all at once and map the failure to an exit code.
    """

    def __init__(self, errors: List[ValidationError]):
        self.errors = errors
        self.exit_code = 2

        messages = []
        for error in errors:
            if error.path:
                messages.append(f"Validation error at '{error.path}': {error.message}")
            else:
                messages.append(f"Validation error: {error.message}")

        super().__init__("\n".join(messages))


class ConfigParseError(ConfigValidationError):
    """Raised when INI text cannot be parsed."""


class ExpressionSyntaxError(ValueError):
    """Raised by the strict evaluator on malformed arithmetic input."""

    def __init__(self, message: str, expression: str = "", position: Optional[int] = None):
        self.expression = expression
        self.position = position
        if position is not None:
            message = f"{message} at position {position}"
        super().__init__(message)
