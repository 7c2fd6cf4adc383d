"""EDN keyword model implementation."""

from dataclasses import dataclass
from ..types import StructuralError


@dataclass(frozen=True)
class Keyword:
    """
    An EDN keyword such as ``:name`` or ``:user/id``.
    
    The name is stored without the leading colon; the colon is added
    back only when the keyword is written as EDN text.
    """
    
    name: str
    
    def __post_init__(self):
        """Strip the leading colon and validate the name."""
        name = self.name
        if not isinstance(name, str):
            raise StructuralError(f"Keyword name must be a string, got {type(name).__name__}")
        if name.startswith(":"):
            name = name[1:]
        if not name:
            raise StructuralError("Keyword name cannot be empty", context={"name": self.name})
        object.__setattr__(self, "name", name)
    
    def __str__(self) -> str:
        return f":{self.name}"
