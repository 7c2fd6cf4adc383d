"""
EDN Bridge - Convert between JSON and EDN.

Converts JSON to EDN and back, and renders either notation on a single
line or over several lines with aligned map values.
"""

from .edn_converter import EdnConverter
from .converter import to_edn, to_generic
from .formatter import flatten, pretty
from .edn import parse_edn, encode_scalar
from .models import Keyword, Vector, EdnList, EdnMap
from .selections import process_selections
from .types import (
    ConversionError,
    ConversionResult,
    Operation,
    ParseError,
    SelectionReport,
    StructuralError,
)

__version__ = "1.0.0"
__all__ = [
    "EdnConverter",
    "to_edn",
    "to_generic",
    "flatten",
    "pretty",
    "parse_edn",
    "encode_scalar",
    "Keyword",
    "Vector",
    "EdnList",
    "EdnMap",
    "process_selections",
    "ConversionError",
    "ConversionResult",
    "Operation",
    "ParseError",
    "SelectionReport",
    "StructuralError",
]
