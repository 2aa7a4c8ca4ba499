"""Logic for copying values into a uniform, string-keyed form."""

import logging
from typing import Any

import yaml

from values_checksum.clean_up_map_value import clean_up_map_value
from values_checksum.values_yaml import values_yaml

logger = logging.getLogger(__name__)


def copy_values(values: Any) -> dict[str, Any]:
    """Return a deep copy of values with every mapping keyed by strings.

    The values are encoded to YAML and decoded again so that any
    decoder-specific representation (MapSlices, subclassed dicts, ...) is
    flattened into plain dicts, lists and scalars before the keys are
    normalized. Encode or decode failures are not raised; whatever could
    be recovered, usually an empty dict, is returned instead.
    """
    try:
        copied = yaml.safe_load(values_yaml(values))
    except yaml.YAMLError:
        logger.debug("Could not round-trip values, using empty copy", exc_info=True)
        return {}

    if not isinstance(copied, dict):
        return {}
    return clean_up_map_value(copied)
