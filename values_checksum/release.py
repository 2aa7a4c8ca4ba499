"""Data model for a deployed release."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Release:
    """A named, versioned installation of a set of values."""

    name: str
    namespace: str = ""
    version: int = 0
    config: dict[str, Any] = field(default_factory=dict)
