from __future__ import annotations

import logging
import types
import typing as t

from pydantic import Field

from mariaddl.core.constants import (
    DEFAULT_ENGINE_KEYWORDS,
    TABLE_OPTION_SEPARATOR,
    TABLE_OPTION_TOKENS,
    TABLE_OPTIONS_BY_ENGINE,
    WITH_SYSTEM_VERSIONING,
)
from mariaddl.core.dialect import escape_for_literal
from mariaddl.core.options import normalize_option_value
from mariaddl.utils.errors import UnknownKeywordError
from mariaddl.utils.pydantic import PydanticModel, field_validator, model_validator

logger = logging.getLogger(__name__)


class TableOptionsConfig(PydanticModel):
    """The lookup tables that drive table option rendering.

    Args:
        tokens: Table option keyword to the option name written in SQL.
        engines: Storage engine to the ordered keywords it accepts.
        default_keywords: Keywords used when the engine isn't in `engines`.
    """

    tokens: t.Mapping[str, str] = Field(
        default_factory=lambda: dict(TABLE_OPTION_TOKENS), validate_default=True
    )
    engines: t.Mapping[str, t.Tuple[str, ...]] = Field(
        default_factory=lambda: dict(TABLE_OPTIONS_BY_ENGINE), validate_default=True
    )
    default_keywords: t.Tuple[str, ...] = DEFAULT_ENGINE_KEYWORDS

    @field_validator("tokens", "engines", mode="after")
    @classmethod
    def _read_only(cls, v: t.Mapping[str, t.Any]) -> t.Mapping[str, t.Any]:
        # Copied so that changes to the source mapping don't leak into the config.
        return types.MappingProxyType(dict(v))

    @model_validator(mode="after")
    def _validate_keywords(self) -> TableOptionsConfig:
        for engine, keywords in {"<default>": self.default_keywords, **self.engines}.items():
            for keyword in keywords:
                if keyword not in self.tokens:
                    raise UnknownKeywordError(engine, keyword)
        return self

    def keywords_for(self, engine: t.Optional[str]) -> t.Tuple[str, ...]:
        if engine and engine in self.engines:
            return self.engines[engine]
        logger.debug("Engine '%s' isn't recognized, using the default table options", engine)
        return self.default_keywords


DEFAULT_TABLE_OPTIONS_CONFIG = TableOptionsConfig()


class TableOptionsRenderer:
    """Renders the table options clause of a CREATE TABLE statement.

    Args:
        config: The keyword lookup tables. They are read only and can be shared between renderers.
    """

    def __init__(self, config: t.Optional[TableOptionsConfig] = None):
        self.config = config or DEFAULT_TABLE_OPTIONS_CONFIG

    def render(self, options: t.Optional[t.Mapping[str, t.Any]] = None) -> str:
        """Renders the table options as `key = value` pairs.

        CHARSET, COLLATE, ENGINE and COMMENT come first, followed by the options that the engine
        accepts in the order they're configured. Options without a value are left out.

        Args:
            options: The host's table options keyed by keyword.

        Returns:
            The options prefixed with a space, or an empty string if there are none.
        """
        options = options or {}
        engine = options.get("ENGINE")
        clauses = self._charset_clauses(options)

        if engine:
            clauses.append(f"ENGINE = {engine}")

        description = options.get("description")
        if description:
            clauses.append(f"COMMENT = '{escape_for_literal(description)}'")

        for keyword in self.config.keywords_for(engine):
            clause = self._option_clause(keyword, options.get(keyword))
            if clause is None:
                logger.debug("Table option '%s' has no value, skipping", keyword)
                continue
            clauses.append(clause)

        if not clauses:
            return ""

        return " " + TABLE_OPTION_SEPARATOR.join(clauses)

    def _charset_clauses(self, options: t.Mapping[str, t.Any]) -> t.List[str]:
        if options.get("defaultCharSet"):
            return []

        clauses = []
        if options.get("characterSet"):
            clauses.append(f"CHARSET={options['characterSet']}")
        if options.get("collation"):
            clauses.append(f"COLLATE={options['collation']}")
        return clauses

    def _option_clause(self, keyword: str, value: t.Any) -> t.Optional[str]:
        token = self.config.tokens[keyword]

        # System versioning is a bare clause without a value.
        if keyword == WITH_SYSTEM_VERSIONING:
            return token if value else None

        normalized = normalize_option_value(keyword, value)
        if normalized is None:
            return None
        return f"{token} = {normalized}"


def render_table_options(
    options: t.Optional[t.Mapping[str, t.Any]] = None,
    config: t.Optional[TableOptionsConfig] = None,
) -> str:
    return TableOptionsRenderer(config).render(options)
