"""EDN map model implementation."""

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Tuple
from ..types import StructuralError


@dataclass(frozen=True)
class EdnMap:
    """
    EDN map stored as two parallel sequences.
    
    ``keys[i]`` belongs to ``vals[i]``. Pair order is the order the map
    was read or built in. Duplicate keys are kept as-is; nothing here
    deduplicates them.
    """
    
    keys: Tuple[Any, ...] = ()
    vals: Tuple[Any, ...] = ()
    
    def __post_init__(self):
        """Freeze both sequences and check they line up."""
        keys = tuple(self.keys)
        vals = tuple(self.vals)
        if len(keys) != len(vals):
            raise StructuralError(
                f"EdnMap has {len(keys)} keys but {len(vals)} values",
                context={"keys": len(keys), "vals": len(vals)}
            )
        object.__setattr__(self, "keys", keys)
        object.__setattr__(self, "vals", vals)
    
    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[Any, Any]]) -> 'EdnMap':
        """
        Build a map from ``(key, value)`` pairs.
        
        Args:
            pairs: Iterable of key/value tuples in the desired order
            
        Returns:
            New EdnMap instance
        """
        keys = []
        vals = []
        for key, value in pairs:
            keys.append(key)
            vals.append(value)
        return cls(tuple(keys), tuple(vals))
    
    def pairs(self) -> Iterator[Tuple[Any, Any]]:
        """Yield key/value pairs in order."""
        return zip(self.keys, self.vals)
    
    def __len__(self) -> int:
        return len(self.keys)
