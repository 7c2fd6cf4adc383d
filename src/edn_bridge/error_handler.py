"""Error handling implementation for EDN Bridge."""

import logging
from typing import Optional
from .types import (
    ErrorHandlerInterface,
    ErrorResponse,
    ConversionError,
    ParseError,
    ErrorType
)


class ErrorHandler(ErrorHandlerInterface):
    """
    Error handler for conversion operations.

    Rejects input that cannot be converted in any notation and turns
    conversion errors into messages the host can show to the user.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, text: str) -> None:
        """
        Validate raw input text before parsing.

        Args:
            text: Text to validate

        Raises:
            ParseError: If the text is empty or only whitespace
        """
        if not text or not text.strip():
            raise ParseError("Input is empty", text=text or "", error_type=ErrorType.EMPTY)

    def handle_conversion_error(self, error: ConversionError) -> ErrorResponse:
        """
        Handle conversion errors and suggest what the user can do.

        Args:
            error: ConversionError to handle

        Returns:
            ErrorResponse with recovery information
        """
        self.logger.error(f"Conversion error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.EMPTY:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Select some JSON or EDN text and run the command again."
            )
        elif error.error_type == ErrorType.SYNTAX:
            return self._handle_syntax_error(error)
        elif error.error_type == ErrorType.STRUCTURE:
            return ErrorResponse(
                can_recover=False,
                suggested_action="The data cannot be represented in the target notation. "
                               "Check for empty object keys or non-finite numbers."
            )
        else:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Unknown error type. Please check logs and retry."
            )

    def _handle_syntax_error(self, error: ConversionError) -> ErrorResponse:
        """Handle text that could not be parsed."""
        attempts = getattr(error, "attempts", [])
        for attempt in attempts:
            self.logger.debug(f"  {attempt.notation.value} attempt failed: {attempt.message}")

        notations = " or ".join(attempt.notation.value.upper() for attempt in attempts) or "the expected notation"
        return ErrorResponse(
            can_recover=True,
            suggested_action=f"Fix the syntax so the selection is valid {notations} and retry."
        )
