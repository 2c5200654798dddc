from __future__ import annotations

import logging
import typing as t

from mariaddl.core.table_options import DEFAULT_TABLE_OPTIONS_CONFIG, TableOptionsConfig
from mariaddl.utils import yaml
from mariaddl.utils.errors import ConfigError
from mariaddl.utils.pydantic import ValidationError

logger = logging.getLogger(__name__)

CONFIG_FIELDS = {"tokens", "engines", "default_keywords"}


def table_options_config_from_dict(
    values: t.Mapping[str, t.Any],
    extend: bool = True,
    base: t.Optional[TableOptionsConfig] = None,
) -> TableOptionsConfig:
    """Builds the table option lookup tables from a mapping.

    Args:
        values: May contain `tokens`, `engines` and `default_keywords`.
        extend: Whether tokens and engines are merged on top of the base config instead of replacing it.
        base: The config to extend, the built-in tables by default.

    Returns:
        The config.

    Raises:
        ConfigError: If the mapping has unknown fields, the wrong types or references unknown keywords.
    """
    unknown = set(values) - CONFIG_FIELDS - {"extend"}
    if unknown:
        raise ConfigError(f"Unknown table options config fields: {', '.join(sorted(unknown))}.")

    fields = {k: v for k, v in values.items() if k in CONFIG_FIELDS}
    for name in ("tokens", "engines"):
        if not isinstance(fields.get(name) or {}, dict):
            raise ConfigError(f"Table options config field '{name}' must be a mapping.")

    if extend:
        base = base or DEFAULT_TABLE_OPTIONS_CONFIG
        fields = {
            "tokens": {**base.tokens, **(fields.get("tokens") or {})},
            "engines": {**base.engines, **(fields.get("engines") or {})},
            "default_keywords": fields.get("default_keywords") or base.default_keywords,
        }

    try:
        config = TableOptionsConfig.parse_obj(fields)
    except ValidationError as ex:
        raise ConfigError(f"Invalid table options config: {ex}") from ex

    logger.debug("Loaded table options for engines: %s", ", ".join(config.engines))
    return config


def load_table_options_config(source: str) -> TableOptionsConfig:
    """Builds the table option lookup tables from YAML text.

    Example:
        engines:
          Mroonga:
            - AUTO_INCREMENT
            - WITH_SYSTEM_VERSIONING
    """
    values = yaml.load(source)
    return table_options_config_from_dict(values, extend=bool(values.get("extend", True)))
