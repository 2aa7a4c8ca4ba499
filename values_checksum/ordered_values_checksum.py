"""Logic for computing a key-order independent checksum of values."""

import hashlib
from typing import Any

from values_checksum.copy_values import copy_values
from values_checksum.sort_map_slice import sort_map_slice
from values_checksum.to_map_slice import to_map_slice
from values_checksum.values_yaml import dump_yaml


def ordered_values_checksum(values: Any) -> str:
    """Sort the values by key at every level, then compute their SHA-1 checksum.

    Two trees that differ only in key order, or in the type their keys were
    decoded as, produce the same checksum.
    """
    data = b""
    if values:
        ms = to_map_slice(copy_values(values))
        sort_map_slice(ms)
        data = dump_yaml(ms)
    return hashlib.sha1(data, usedforsecurity=False).hexdigest()
