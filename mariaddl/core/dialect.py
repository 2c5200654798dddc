from __future__ import annotations

import re
import typing as t

from mariaddl.core.constants import IDENTIFIER_QUOTE, LITERAL_QUOTE

UNESCAPED_QUOTE_RE = re.compile(r"(?<!\\)(['\"`])")


def wrap(value: t.Any, start: str = LITERAL_QUOTE, end: t.Optional[str] = None) -> str:
    """Surrounds text with delimiters, end defaults to start."""
    return f"{start}{value}{start if end is None else end}"


def quote_name(name: str, schema: t.Optional[str] = None) -> str:
    """Quotes an identifier, optionally qualifying it with a schema.

    Backticks embedded in the names are not escaped, names are expected to be validated upstream.

    Example:
        >>> quote_name("customer", "sales")
        '`sales`.`customer`'

    Args:
        name: The identifier to quote.
        schema: The schema to qualify the identifier with.

    Returns:
        The quoted identifier.
    """
    quoted = wrap(name, IDENTIFIER_QUOTE)
    if schema:
        return f"{wrap(schema, IDENTIFIER_QUOTE)}.{quoted}"
    return quoted


def quote_alias(name: t.Optional[str], alias: t.Optional[str] = None) -> str:
    """Quotes a column name, appending an alias when there is one."""
    if not name:
        return ""
    if alias:
        return f"{quote_name(name)} as {quote_name(alias)}"
    return quote_name(name)


def escape_for_literal(value: t.Optional[str] = None) -> str:
    """Escapes text embedded in a quoted literal such as a table comment.

    Quotes and backticks that aren't already preceded by a backslash get one, newlines become a literal \\n.
    """
    if value is None:
        return ""
    return UNESCAPED_QUOTE_RE.sub(r"\\\1", value).replace("\n", "\\n")


def escape_quotes(value: t.Optional[str] = None) -> str:
    """Escapes text for a single quoted literal by doubling single quotes. Newlines become a literal \\n."""
    if value is None:
        return ""
    return value.replace("'", "''").replace("\n", "\\n")
