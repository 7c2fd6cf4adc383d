"""Core type definitions for EDN Bridge."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class EdnType(Enum):
    """Enumeration of EDN value variants."""
    NULL = "nil"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    KEYWORD = "keyword"
    VECTOR = "vector"
    LIST = "list"
    MAP = "map"
    UNKNOWN = "unknown"


class GenericType(Enum):
    """Enumeration of generic (JSON-like) value variants."""
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    UNKNOWN = "unknown"


class Notation(Enum):
    """Textual notations the converter understands."""
    JSON = "json"
    EDN = "edn"


class Operation(Enum):
    """User-facing conversion operations."""
    JSON_TO_EDN = "json-to-edn"
    EDN_TO_JSON = "edn-to-json"
    PRETTY_PRINT_JSON = "pretty-print-json"
    PRETTY_PRINT_EDN = "pretty-print-edn"
    FLATTEN_JSON = "flatten-json"
    FLATTEN_EDN = "flatten-edn"
    PRETTY_PRINT = "pretty-print"
    FLATTEN = "flatten"


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    STRUCTURE = "structure"
    EMPTY = "empty"


@dataclass
class ParseAttempt:
    """One failed attempt at reading text in a given notation."""
    notation: Notation
    message: str


@dataclass
class ConversionResult:
    """Result of a single transform call."""
    success: bool
    text: str
    operation: Operation
    errors: Optional[List[str]] = None
    error: Optional["ConversionError"] = None


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str


@dataclass
class TraceEvent:
    """A single intermediate value observed during a conversion."""
    stage: str
    value: Any


@dataclass
class SelectionReport:
    """Outcome of running one operation over a batch of selections."""
    operation: Operation
    results: List[ConversionResult] = field(default_factory=list)
    replacements: List[str] = field(default_factory=list)
    skipped: int = 0

    @property
    def succeeded(self) -> int:
        return sum(1 for result in self.results if result.success)

    @property
    def failed(self) -> int:
        return sum(1 for result in self.results if not result.success)

    @property
    def message(self) -> str:
        """Status line for the host to display."""
        total = len(self.results)
        if total == 0:
            return "No text selected"
        if self.failed == 0:
            noun = "selection" if total == 1 else "selections"
            return f"Converted {total} {noun}"
        if self.succeeded == 0:
            first = next(r for r in self.results if not r.success)
            detail = first.errors[0] if first.errors else "unknown error"
            return f"Conversion failed: {detail}"
        return f"Converted {self.succeeded} of {total} selections ({self.failed} failed)"


class ConversionError(Exception):
    """Base exception for conversion failures."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class ParseError(ConversionError):
    """Input is not valid in any of the attempted notations."""

    def __init__(self, message: str, text: str, attempts: Optional[List[ParseAttempt]] = None,
                 error_type: ErrorType = ErrorType.SYNTAX):
        super().__init__(message, error_type, context={"text": text})
        self.text = text
        self.attempts = list(attempts or [])

    def attempt_for(self, notation: Notation) -> Optional[ParseAttempt]:
        """Return the failed attempt recorded for ``notation``, if any."""
        for attempt in self.attempts:
            if attempt.notation == notation:
                return attempt
        return None


class StructuralError(ConversionError):
    """A value tree violates a structural invariant."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorType.STRUCTURE, context)


class EdnSyntaxError(ValueError):
    """Raised by the EDN reader for malformed text."""

    def __init__(self, message: str, position: int):
        super().__init__(f"{message} at position {position}")
        self.message = message
        self.position = position


# Abstract base classes for interfaces

class EdnConverterInterface(ABC):
    """Abstract interface for the conversion façade."""

    @abstractmethod
    def json_to_edn(self, text: str) -> str:
        """Convert JSON text to pretty-printed EDN."""
        pass

    @abstractmethod
    def edn_to_json(self, text: str) -> str:
        """Convert EDN text to indented JSON."""
        pass

    @abstractmethod
    def pretty_print(self, text: str) -> str:
        """Pretty-print JSON or EDN text."""
        pass

    @abstractmethod
    def flatten(self, text: str) -> str:
        """Render JSON or EDN text on a single line."""
        pass

    @abstractmethod
    def transform(self, text: str, operation: Operation) -> ConversionResult:
        """Run ``operation`` without raising conversion errors."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_input(self, text: str) -> None:
        """Raise ParseError if ``text`` cannot be converted at all."""
        pass

    @abstractmethod
    def handle_conversion_error(self, error: ConversionError) -> ErrorResponse:
        """Handle conversion errors."""
        pass
