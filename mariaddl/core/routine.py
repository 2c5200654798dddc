from __future__ import annotations

import typing as t

from pydantic import Field

from mariaddl.core.dialect import escape_quotes, wrap
from mariaddl.utils import to_text
from mariaddl.utils.pydantic import HostModel, field_validator


class RoutineCharacteristics(HostModel):
    language: t.Any = None
    deterministic: t.Optional[str] = None
    sql_security: t.Optional[str] = Field(default=None, alias="sqlSecurity")
    comment: t.Optional[str] = None

    @field_validator("deterministic", "sql_security", "comment", mode="before")
    @classmethod
    def _host_text(cls, v: t.Any) -> t.Optional[str]:
        return to_text(v)


def render_characteristics(
    spec: t.Optional[t.Union[RoutineCharacteristics, t.Mapping[str, t.Any]]] = None,
) -> t.List[str]:
    """Renders the characteristics of a stored routine.

    The order is always language, determinism, security and comment. Joining them is up to the caller.
    """
    characteristics: t.List[str] = []
    spec = RoutineCharacteristics.from_host(spec)
    if spec is None:
        return characteristics

    # Only SQL is supported, the language value itself doesn't matter.
    if spec.language:
        characteristics.append("LANGUAGE SQL")

    if spec.deterministic:
        characteristics.append(spec.deterministic)

    if spec.sql_security:
        characteristics.append(f"SQL SECURITY {spec.sql_security}")

    if spec.comment:
        characteristics.append(f"COMMENT {wrap(escape_quotes(spec.comment))}")

    return characteristics
