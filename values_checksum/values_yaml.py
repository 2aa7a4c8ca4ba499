"""Canonical YAML encoding of values trees."""

from typing import Any

import yaml

from values_checksum.map_slice import MapSlice


class ValuesDumper(yaml.SafeDumper):
    """Safe YAML dumper that writes MapSlices in pair order and never aliases."""

    def ignore_aliases(self, data: Any) -> bool:  # noqa: ARG002
        """Write repeated objects out in full instead of using anchors."""
        return True


def _represent_map_slice(dumper: ValuesDumper, data: MapSlice) -> yaml.MappingNode:
    return dumper.represent_mapping(
        "tag:yaml.org,2002:map", [(item.key, item.value) for item in data]
    )


ValuesDumper.add_representer(MapSlice, _represent_map_slice)
# Subclasses such as OrderedDict or defaultdict are written like their base type.
ValuesDumper.add_multi_representer(dict, yaml.SafeDumper.represent_dict)
ValuesDumper.add_multi_representer(list, yaml.SafeDumper.represent_list)
ValuesDumper.add_multi_representer(tuple, yaml.SafeDumper.represent_list)


def values_yaml(values: Any) -> str:
    """Serialize values to a YAML document without reordering keys.

    Raises yaml.YAMLError if the tree holds a value the safe dumper cannot
    represent.
    """
    return yaml.dump(
        values,
        Dumper=ValuesDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def dump_yaml(values: Any) -> bytes:
    """Serialize values to the UTF-8 bytes of their YAML document."""
    return values_yaml(values).encode("utf-8")
