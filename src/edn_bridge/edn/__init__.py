"""EDN reader and scalar writer."""

from .reader import parse_edn
from .writer import encode_scalar

__all__ = ["parse_edn", "encode_scalar"]
