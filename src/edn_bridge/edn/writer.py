"""
EDN Writer

Encodes single scalars and keywords as canonical EDN tokens. Collections
are laid out by the formatter, which calls back in here for every leaf.
"""

import math
from typing import Any

from ..models import Keyword


def encode_nil() -> str:
    return "nil"


def encode_bool(v: bool) -> str:
    return "true" if v else "false"


def encode_int(n: int) -> str:
    return str(n)


def encode_float(f: float) -> str:
    """Encode a float using the shortest round-trip representation."""
    if math.isnan(f):
        return "##NaN"
    if math.isinf(f):
        return "##Inf" if f > 0 else "##-Inf"
    return repr(f)


def escape_string(s: str) -> str:
    """Escape a string body for EDN output."""
    result = []
    for c in s:
        if c == '"':
            result.append('\\"')
        elif c == '\\':
            result.append('\\\\')
        elif c == '\n':
            result.append('\\n')
        elif c == '\r':
            result.append('\\r')
        elif c == '\t':
            result.append('\\t')
        elif c == '\b':
            result.append('\\b')
        elif c == '\f':
            result.append('\\f')
        elif ord(c) < 32:
            result.append(f"\\u{ord(c):04x}")
        else:
            result.append(c)
    return ''.join(result)


def encode_string(s: str) -> str:
    return f'"{escape_string(s)}"'


def encode_keyword(k: Keyword) -> str:
    return f":{k.name}"


def encode_scalar(value: Any) -> str:
    """
    Encode one scalar or keyword as EDN text.

    Args:
        value: None, bool, int, float, str or Keyword

    Returns:
        Canonical EDN token

    Raises:
        TypeError: If value is a collection or an unsupported type
    """
    if value is None:
        return encode_nil()
    if isinstance(value, bool):
        return encode_bool(value)
    if isinstance(value, int):
        return encode_int(value)
    if isinstance(value, float):
        return encode_float(value)
    if isinstance(value, str):
        return encode_string(value)
    if isinstance(value, Keyword):
        return encode_keyword(value)
    raise TypeError(f"cannot encode {type(value).__name__} as an EDN scalar")
