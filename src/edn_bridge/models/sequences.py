"""EDN vector and list models."""

from dataclasses import dataclass
from typing import Any, Iterator, Tuple


@dataclass(frozen=True)
class _EdnSequence:
    """Ordered, immutable run of EDN values."""
    
    items: Tuple[Any, ...] = ()
    
    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))
    
    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)
    
    def __len__(self) -> int:
        return len(self.items)
    
    def __getitem__(self, index: int) -> Any:
        return self.items[index]


@dataclass(frozen=True)
class Vector(_EdnSequence):
    """EDN vector, written ``[a b c]``."""


@dataclass(frozen=True)
class EdnList(_EdnSequence):
    """EDN list, written ``(a b c)``."""
