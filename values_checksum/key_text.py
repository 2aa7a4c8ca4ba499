"""Textual rendering of mapping keys produced by generic YAML decoding."""


def key_text(key: object) -> str:
    """Render a mapping key as text.

    Booleans and null use their YAML spelling so that ``true: x`` and
    ``"true": x`` end up with the same key.
    """
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)
