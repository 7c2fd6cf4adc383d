"""Conversion façade composing parsing, structural conversion and rendering."""

import json
import logging
from typing import Any, Callable, Dict, Optional, Tuple
from .types import (
    EdnConverterInterface,
    ConversionResult,
    ConversionError,
    EdnSyntaxError,
    Notation,
    Operation,
    ParseAttempt,
    ParseError,
    StructuralError
)
from .converter import to_edn, to_generic
from .edn.reader import parse_edn
from .error_handler import ErrorHandler
from .formatter import flatten, pretty
from .profiler import PerformanceProfiler
from .tracing import Tracer, emit

NESTING_TOO_DEEP = "nesting too deep"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"'{name}' is not valid JSON")


class EdnConverter(EdnConverterInterface):
    """
    Main implementation of the conversion façade.

    Each operation parses its input, converts the tree where the target
    notation differs, and renders the result. JSON output goes through
    the standard ``json`` module; EDN output goes through the formatter.
    Operations raise ParseError or StructuralError on failure;
    ``transform`` wraps any operation and reports failures as results.
    """

    def __init__(self, logger: Optional[logging.Logger] = None,
                 tracer: Optional[Tracer] = None,
                 profiler: Optional[PerformanceProfiler] = None,
                 json_indent: int = 2):
        """
        Initialize the converter.

        Args:
            logger: Optional logger instance
            tracer: Default tracer used when a call does not pass its own
            profiler: Optional profiler timing every operation
            json_indent: Indentation for pretty JSON output
        """
        self.logger = logger or logging.getLogger(__name__)
        self.tracer = tracer
        self.profiler = profiler
        self.json_indent = json_indent
        self.error_handler = ErrorHandler(self.logger)

        self._operations: Dict[Operation, Callable[[str, Optional[Tracer]], str]] = {
            Operation.JSON_TO_EDN: self._json_to_edn,
            Operation.EDN_TO_JSON: self._edn_to_json,
            Operation.PRETTY_PRINT_JSON: self._pretty_print_json,
            Operation.PRETTY_PRINT_EDN: self._pretty_print_edn,
            Operation.FLATTEN_JSON: self._flatten_json,
            Operation.FLATTEN_EDN: self._flatten_edn,
            Operation.PRETTY_PRINT: self._pretty_print,
            Operation.FLATTEN: self._flatten,
        }

    # ============================================================
    # Public operations
    # ============================================================

    def json_to_edn(self, text: str, tracer: Optional[Tracer] = None) -> str:
        """Convert JSON text to pretty-printed EDN with keyword keys."""
        return self.run(Operation.JSON_TO_EDN, text, tracer)

    def edn_to_json(self, text: str, tracer: Optional[Tracer] = None) -> str:
        """Convert EDN text to indented JSON."""
        return self.run(Operation.EDN_TO_JSON, text, tracer)

    def pretty_print_json(self, text: str, tracer: Optional[Tracer] = None) -> str:
        """Re-indent JSON text."""
        return self.run(Operation.PRETTY_PRINT_JSON, text, tracer)

    def pretty_print_edn(self, text: str, tracer: Optional[Tracer] = None) -> str:
        """Lay out EDN text with aligned map values."""
        return self.run(Operation.PRETTY_PRINT_EDN, text, tracer)

    def flatten_json(self, text: str, tracer: Optional[Tracer] = None) -> str:
        """Render JSON text compactly on one line."""
        return self.run(Operation.FLATTEN_JSON, text, tracer)

    def flatten_edn(self, text: str, tracer: Optional[Tracer] = None) -> str:
        """Render EDN text on one line."""
        return self.run(Operation.FLATTEN_EDN, text, tracer)

    def pretty_print(self, text: str, tracer: Optional[Tracer] = None) -> str:
        """Pretty-print text that is either JSON or EDN, trying JSON first."""
        return self.run(Operation.PRETTY_PRINT, text, tracer)

    def flatten(self, text: str, tracer: Optional[Tracer] = None) -> str:
        """Flatten text that is either JSON or EDN, trying JSON first."""
        return self.run(Operation.FLATTEN, text, tracer)

    def run(self, operation: Operation, text: str, tracer: Optional[Tracer] = None) -> str:
        """
        Run a single operation.

        Args:
            operation: Operation to perform
            text: Input text
            tracer: Optional tracer overriding the converter's default

        Returns:
            Converted text

        Raises:
            ParseError: If the input cannot be parsed
            StructuralError: If the parsed data cannot be represented in the output
                or is nested too deeply to convert
        """
        tracer = tracer if tracer is not None else self.tracer
        self.error_handler.validate_input(text)

        handler = self._operations[operation]
        try:
            if self.profiler is None:
                output = handler(text, tracer)
            else:
                with self.profiler.profile_operation(operation.value, len(text.encode("utf-8"))) as session:
                    output = handler(text, tracer)
                    session["output_size"] = len(output.encode("utf-8"))
        except RecursionError as e:
            raise StructuralError("Value is nested too deeply to convert",
                                  {"operation": operation.value}) from e

        self.logger.info(f"{operation.value}: {len(text)} -> {len(output)} characters")
        return output

    def transform(self, text: str, operation: Operation,
                  tracer: Optional[Tracer] = None) -> ConversionResult:
        """
        Run an operation and report the outcome instead of raising.

        On failure the result carries the original text unchanged.

        Args:
            text: Input text
            operation: Operation to perform
            tracer: Optional tracer overriding the converter's default

        Returns:
            ConversionResult with the output or the error details
        """
        try:
            output = self.run(operation, text, tracer)
        except ConversionError as e:
            response = self.error_handler.handle_conversion_error(e)
            return ConversionResult(
                success=False,
                text=text,
                operation=operation,
                errors=[str(e), response.suggested_action],
                error=e
            )
        return ConversionResult(success=True, text=output, operation=operation)

    # ============================================================
    # Operation implementations
    # ============================================================

    def _json_to_edn(self, text: str, tracer: Optional[Tracer]) -> str:
        data = self._read_json(text, tracer)
        return self._render(pretty(to_edn(data, tracer)), tracer)

    def _edn_to_json(self, text: str, tracer: Optional[Tracer]) -> str:
        tree = self._read_edn(text, tracer)
        return self._render(self._dump_json(to_generic(tree, tracer), self.json_indent), tracer)

    def _pretty_print_json(self, text: str, tracer: Optional[Tracer]) -> str:
        data = self._read_json(text, tracer)
        return self._render(self._dump_json(data, self.json_indent), tracer)

    def _pretty_print_edn(self, text: str, tracer: Optional[Tracer]) -> str:
        tree = self._read_edn(text, tracer)
        return self._render(pretty(tree), tracer)

    def _flatten_json(self, text: str, tracer: Optional[Tracer]) -> str:
        data = self._read_json(text, tracer)
        return self._render(self._dump_json(data, None), tracer)

    def _flatten_edn(self, text: str, tracer: Optional[Tracer]) -> str:
        tree = self._read_edn(text, tracer)
        return self._render(flatten(tree), tracer)

    def _pretty_print(self, text: str, tracer: Optional[Tracer]) -> str:
        notation, value = self._read_either(text, tracer)
        if notation == Notation.JSON:
            return self._render(self._dump_json(value, self.json_indent), tracer)
        return self._render(pretty(value), tracer)

    def _flatten(self, text: str, tracer: Optional[Tracer]) -> str:
        notation, value = self._read_either(text, tracer)
        if notation == Notation.JSON:
            return self._render(self._dump_json(value, None), tracer)
        return self._render(flatten(value), tracer)

    # ============================================================
    # Parsing and serialization helpers
    # ============================================================

    def _read_json(self, text: str, tracer: Optional[Tracer]) -> Any:
        try:
            data = json.loads(text, parse_constant=_reject_constant)
        except json.JSONDecodeError as e:
            message = f"{e.msg} at line {e.lineno}, column {e.colno}"
            emit(tracer, "parse.json.failed", message)
            raise ParseError(f"Invalid JSON: {message}", text,
                             [ParseAttempt(Notation.JSON, message)]) from e
        except ValueError as e:
            emit(tracer, "parse.json.failed", str(e))
            raise ParseError(f"Invalid JSON: {e}", text,
                             [ParseAttempt(Notation.JSON, str(e))]) from e
        except RecursionError as e:
            emit(tracer, "parse.json.failed", NESTING_TOO_DEEP)
            raise ParseError(f"Invalid JSON: {NESTING_TOO_DEEP}", text,
                             [ParseAttempt(Notation.JSON, NESTING_TOO_DEEP)]) from e
        emit(tracer, "parse.json", data)
        return data

    def _read_edn(self, text: str, tracer: Optional[Tracer]) -> Any:
        try:
            tree = parse_edn(text)
        except EdnSyntaxError as e:
            emit(tracer, "parse.edn.failed", str(e))
            raise ParseError(f"Invalid EDN: {e}", text,
                             [ParseAttempt(Notation.EDN, str(e))]) from e
        except RecursionError as e:
            emit(tracer, "parse.edn.failed", NESTING_TOO_DEEP)
            raise ParseError(f"Invalid EDN: {NESTING_TOO_DEEP}", text,
                             [ParseAttempt(Notation.EDN, NESTING_TOO_DEEP)]) from e
        emit(tracer, "parse.edn", tree)
        return tree

    def _read_either(self, text: str, tracer: Optional[Tracer]) -> Tuple[Notation, Any]:
        """Read ``text`` as JSON, falling back to EDN only if JSON fails."""
        try:
            return Notation.JSON, self._read_json(text, tracer)
        except ParseError as json_error:
            self.logger.debug(f"JSON parse failed, trying EDN: {json_error}")
            try:
                return Notation.EDN, self._read_edn(text, tracer)
            except ParseError as edn_error:
                attempts = json_error.attempts + edn_error.attempts
                details = "; ".join(f"{a.notation.value.upper()}: {a.message}" for a in attempts)
                raise ParseError(f"Input is neither valid JSON nor valid EDN ({details})",
                                 text, attempts) from edn_error

    def _dump_json(self, data: Any, indent: Optional[int]) -> str:
        separators = None if indent is not None else (",", ":")
        try:
            return json.dumps(data, indent=indent, separators=separators,
                              ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise StructuralError(f"Value cannot be written as JSON: {e}") from e

    def _render(self, output: str, tracer: Optional[Tracer]) -> str:
        emit(tracer, "render", output)
        return output
