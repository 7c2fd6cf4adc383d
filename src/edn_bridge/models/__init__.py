"""EDN value models for EDN Bridge."""

from .keyword import Keyword
from .sequences import Vector, EdnList
from .edn_map import EdnMap

__all__ = ["Keyword", "Vector", "EdnList", "EdnMap"]
