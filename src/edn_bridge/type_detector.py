"""Variant detection for EDN and generic value trees."""

from typing import Any
from .models import Keyword, Vector, EdnList, EdnMap
from .types import EdnType, GenericType


def edn_type_of(value: Any) -> EdnType:
    """
    Classify a node of an EDN tree.

    Plain Python lists and tuples count as vectors so that sequences
    built by hand can be formatted without wrapping them first.

    Args:
        value: Node to classify

    Returns:
        EdnType of the node, UNKNOWN for anything outside the model
    """
    if value is None:
        return EdnType.NULL
    elif isinstance(value, bool):
        return EdnType.BOOL
    elif isinstance(value, (int, float)):
        return EdnType.NUMBER
    elif isinstance(value, str):
        return EdnType.STRING
    elif isinstance(value, Keyword):
        return EdnType.KEYWORD
    elif isinstance(value, EdnMap):
        return EdnType.MAP
    elif isinstance(value, EdnList):
        return EdnType.LIST
    elif isinstance(value, (Vector, list, tuple)):
        return EdnType.VECTOR
    else:
        return EdnType.UNKNOWN


def generic_type_of(value: Any) -> GenericType:
    """
    Classify a node of a generic (JSON-like) tree.

    Args:
        value: Node to classify

    Returns:
        GenericType of the node, UNKNOWN for anything json can't produce
    """
    if value is None:
        return GenericType.NULL
    elif isinstance(value, bool):
        return GenericType.BOOL
    elif isinstance(value, (int, float)):
        return GenericType.NUMBER
    elif isinstance(value, str):
        return GenericType.STRING
    elif isinstance(value, dict):
        return GenericType.MAPPING
    elif isinstance(value, (list, tuple)):
        return GenericType.SEQUENCE
    else:
        return GenericType.UNKNOWN


def is_scalar(edn_type: EdnType) -> bool:
    """Return True for variants written as a single token."""
    return edn_type in (
        EdnType.NULL,
        EdnType.BOOL,
        EdnType.NUMBER,
        EdnType.STRING,
        EdnType.KEYWORD,
    )
