"""Structural conversion between EDN trees and generic (JSON-like) values."""

from typing import Any, Dict, List, Optional
from .formatter import flatten
from .models import Keyword, Vector, EdnMap
from .tracing import Tracer, emit
from .type_detector import edn_type_of, generic_type_of
from .types import EdnType, GenericType


def to_generic(value: Any, tracer: Optional[Tracer] = None) -> Any:
    """
    Convert an EDN tree into plain Python objects suitable for ``json.dumps``.

    Keyword map keys lose their leading colon. When two keys collapse to
    the same name the later value wins, keeping the first key's position.
    A keyword anywhere other than a map key becomes the string ``":name"``.

    Args:
        value: EDN value tree
        tracer: Optional observer for the input and output trees

    Returns:
        Generic value tree (dicts, lists and scalars)
    """
    emit(tracer, "convert.to_generic", value)
    result = _to_generic(value)
    emit(tracer, "convert.to_generic.result", result)
    return result


def _to_generic(value: Any) -> Any:
    edn_type = edn_type_of(value)

    if edn_type == EdnType.MAP:
        result: Dict[str, Any] = {}
        for key, item in value.pairs():
            result[map_key_name(key)] = _to_generic(item)
        return result
    elif edn_type in (EdnType.VECTOR, EdnType.LIST):
        return [_to_generic(item) for item in value]
    elif edn_type == EdnType.KEYWORD:
        return str(value)
    else:
        # nil, booleans, numbers, strings and anything unrecognised
        return value


def map_key_name(key: Any) -> str:
    """
    Name used for an EDN map key in a generic mapping.

    Args:
        key: EDN map key

    Returns:
        Keyword name without the colon, strings verbatim, anything else
        as its single-line EDN text
    """
    edn_type = edn_type_of(key)
    if edn_type == EdnType.KEYWORD:
        return key.name
    elif edn_type == EdnType.STRING:
        return key
    else:
        return flatten(key)


def to_edn(value: Any, tracer: Optional[Tracer] = None) -> Any:
    """
    Convert a generic value into an EDN tree, keywordizing mapping keys.

    Keys are used verbatim as keyword names; nothing is escaped.

    Args:
        value: Generic value tree, typically from ``json.loads``
        tracer: Optional observer for the input and output trees

    Returns:
        EDN value tree with EdnMap for mappings and Vector for sequences

    Raises:
        StructuralError: If a mapping has an empty key
    """
    emit(tracer, "convert.to_edn", value)
    result = _to_edn(value)
    emit(tracer, "convert.to_edn.result", result)
    return result


def _to_edn(value: Any) -> Any:
    generic_type = generic_type_of(value)

    if generic_type == GenericType.MAPPING:
        keys: List[Keyword] = []
        vals: List[Any] = []
        for key, item in value.items():
            keys.append(Keyword(":" + str(key)))
            vals.append(_to_edn(item))
        return EdnMap(tuple(keys), tuple(vals))
    elif generic_type == GenericType.SEQUENCE:
        return Vector(tuple(_to_edn(item) for item in value))
    else:
        return value
