"""Ordered key/value pair containers used for canonical YAML output."""

from dataclasses import dataclass
from typing import Any


@dataclass
class MapItem:
    """A single key/value pair of a MapSlice."""

    key: Any
    value: Any


class MapSlice(list[MapItem]):
    """A mapping kept as an ordered list of pairs.

    Unlike a dict, the pair order can be rearranged in place and is written
    out verbatim when dumped to YAML.
    """
