# data_models.py
from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class DirectoryMatch:
    """A directory whose total size (in MB) exceeded the search threshold."""
    path: str
    size: float

@dataclass(frozen=True)
class RemovalResult:
    """Outcome of removing a single directory from the match list."""
    path: str
    removed: bool
    error: Optional[str] = None
