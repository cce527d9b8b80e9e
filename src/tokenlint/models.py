# src/tokenlint/models.py
from dataclasses import dataclass

@dataclass(frozen=True)
class FileResult:
    """Immutable data class holding the size estimate of one file."""
    path: str
    chars: int
    tokens: int
