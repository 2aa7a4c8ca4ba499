"""Logic for converting string-keyed trees to MapSlices."""

from typing import Any

from values_checksum.map_slice import MapItem, MapSlice


def to_map_slice(values: dict[str, Any]) -> MapSlice:
    """Convert a mapping to a MapSlice, keeping its iteration order.

    Nested mappings become MapSlices as well, including those found inside
    lists at any depth.
    """
    return MapSlice(MapItem(k, _to_map_slice_value(v)) for k, v in values.items())


def _to_map_slice_value(v: Any) -> Any:
    if isinstance(v, dict):
        return to_map_slice(v)
    if isinstance(v, list):
        return [_to_map_slice_value(item) for item in v]
    return v
