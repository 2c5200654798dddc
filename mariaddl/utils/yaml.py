from __future__ import annotations

import typing as t

from ruamel import yaml
from ruamel.yaml.error import YAMLError

from mariaddl.utils.errors import ConfigError


def YAML(typ: t.Optional[str] = "safe") -> yaml.YAML:
    return yaml.YAML(typ=typ)


def load(
    source: str,
    raise_if_empty: bool = True,
    allow_duplicate_keys: bool = False,
) -> t.Dict:
    """Loads a YAML object from a raw string."""
    yaml = YAML()
    yaml.allow_duplicate_keys = allow_duplicate_keys
    try:
        contents = yaml.load(source)
    except YAMLError as ex:
        raise ConfigError(f"Invalid YAML source: {ex}") from ex

    if contents is None:
        if raise_if_empty:
            raise ConfigError("YAML source can't be empty.")
        return {}

    if not isinstance(contents, dict):
        raise ConfigError(f"YAML source must be a mapping, got '{type(contents).__name__}'.")

    return contents
