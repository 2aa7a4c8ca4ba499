"""Logic for recursively sorting MapSlices by key."""

from values_checksum.key_text import key_text
from values_checksum.map_slice import MapSlice


def sort_map_slice(ms: MapSlice) -> None:
    """Sort the given MapSlice by key, in place and recursively.

    Keys compare by their textual form. Nested MapSlices are sorted, and so
    are MapSlices that are direct elements of a list value. Lists nested in
    lists are not descended into.
    """
    ms.sort(key=lambda item: key_text(item.key))
    for item in ms:
        if isinstance(item.value, MapSlice):
            sort_map_slice(item.value)
        elif isinstance(item.value, list):
            for element in item.value:
                if isinstance(element, MapSlice):
                    sort_map_slice(element)
