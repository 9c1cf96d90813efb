from typing import Any, Mapping

import attr
import yaml

from .mode import OutputMode


@attr.s(slots=True, frozen=True)
class Config:
    """Plugin configuration, validated once when it is built."""

    output: OutputMode = attr.ib(converter=OutputMode.from_value)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "Config":
        return cls(output=mapping.get("output"))


def load_config(path: str) -> Config:
    """Load plugin configuration from a YAML file.

    :param path: File holding a mapping with an ``output`` key.
    """
    with open(path, encoding="utf-8") as fd:
        data = yaml.safe_load(fd)
    if not isinstance(data, dict):
        data = {}
    return Config.from_mapping(data)
