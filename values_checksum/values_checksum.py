"""Logic for computing the SHA-1 checksum of values."""

import hashlib
import logging
from typing import Any

import yaml

from values_checksum.values_yaml import dump_yaml

logger = logging.getLogger(__name__)

EMPTY_CHECKSUM = hashlib.sha1(b"", usedforsecurity=False).hexdigest()


def values_checksum(values: Any) -> str:
    """Compute the SHA-1 checksum of values as they are ordered.

    Empty values hash the empty byte string. The result depends on key
    order; use ordered_values_checksum to ignore it.
    """
    data = b""
    if values:
        try:
            data = dump_yaml(values)
        except yaml.YAMLError:
            logger.debug(
                "Could not encode values, hashing empty document", exc_info=True
            )
    return hashlib.sha1(data, usedforsecurity=False).hexdigest()
