"""
Single-line and column-aligned renderers for EDN trees.

Both renderers accept EDN trees (EdnMap, Vector, EdnList, scalars,
keywords) as well as plain dicts, lists and tuples. Leaves always go
through the scalar encoder, so source formatting of numbers and strings
is normalised.
"""

from typing import Any, Iterator, List, Tuple
from .edn.writer import encode_scalar
from .type_detector import edn_type_of
from .types import EdnType


def _map_pairs(value: Any) -> Iterator[Tuple[Any, Any]]:
    if isinstance(value, dict):
        return iter(value.items())
    return value.pairs()


def _is_map(value: Any) -> bool:
    return isinstance(value, dict) or edn_type_of(value) == EdnType.MAP


def _is_sequence(value: Any) -> bool:
    return edn_type_of(value) in (EdnType.VECTOR, EdnType.LIST)


def flatten(value: Any) -> str:
    """
    Render a tree on one line with single spaces between tokens.

    Args:
        value: EDN tree or plain dict/list tree

    Returns:
        Text such as ``{:user {:id 1 :tags ["a" "b"]}}``
    """
    if _is_map(value):
        pairs = [f"{flatten(key)} {flatten(item)}" for key, item in _map_pairs(value)]
        return "{" + " ".join(pairs) + "}"
    if _is_sequence(value):
        return "[" + " ".join(flatten(item) for item in value) + "]"
    return encode_scalar(value)


def pretty(value: Any, column: int = 0) -> str:
    """
    Render a tree over several lines with map values aligned.

    Within one map every key is padded to the width of the longest
    sibling key, so all values of that map start in the same column.
    Continuation lines are indented to sit under the first key, one
    column past the opening brace.
    Sequence elements after the first go on their own line behind a
    single space; their nested content is laid out four columns in.

    Args:
        value: EDN tree or plain dict/list tree
        column: Column the rendering starts at

    Returns:
        Multi-line text without a trailing newline
    """
    if _is_map(value):
        return _pretty_map(value, column)
    if _is_sequence(value):
        return _pretty_sequence(value, column)
    return encode_scalar(value)


def _pretty_map(value: Any, column: int) -> str:
    pairs = list(_map_pairs(value))
    if not pairs:
        return "{}"

    key_column = column + 1
    key_texts = [flatten(key) for key, _ in pairs]
    width = max(len(text) for text in key_texts)
    value_column = key_column + width + 1

    entries: List[str] = []
    for index, (key_text, (_, item)) in enumerate(zip(key_texts, pairs)):
        entry = f"{key_text.ljust(width)} {pretty(item, value_column)}"
        if index > 0:
            entry = "\n" + " " * key_column + entry
        entries.append(entry)
    return "{" + "".join(entries) + "}"


def _pretty_sequence(value: Any, column: int) -> str:
    items = list(value)
    if not items:
        return "[]"

    entries: List[str] = []
    for index, item in enumerate(items):
        entry = pretty(item, column + 4)
        if index > 0:
            entry = "\n " + entry
        entries.append(entry)
    return "[" + "".join(entries) + "]"
