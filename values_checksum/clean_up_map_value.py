"""Logic for converting decoded YAML trees to string-keyed mappings."""

from typing import Any

from values_checksum.key_text import key_text


def clean_up_map_value(v: Any) -> Any:
    """Convert every mapping in the tree to a ``dict[str, Any]``.

    Keys of arbitrary scalar type (ints, booleans, dates, ...) are replaced by
    their textual form. Lists are rebuilt with each element converted, so
    mappings nested inside sequences are handled at any depth. Scalars are
    returned unchanged.
    """
    if isinstance(v, list):
        return _clean_up_list(v)
    if isinstance(v, dict):
        return _clean_up_dict(v)
    return v


def _clean_up_dict(d: dict[Any, Any]) -> dict[str, Any]:
    return {key_text(k): clean_up_map_value(val) for k, val in d.items()}


def _clean_up_list(items: list[Any]) -> list[Any]:
    return [clean_up_map_value(item) for item in items]
