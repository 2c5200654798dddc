from __future__ import annotations

import typing as t

from pydantic import Field

from mariaddl.core.dialect import quote_alias, quote_name
from mariaddl.utils import to_text
from mariaddl.utils.pydantic import HostModel, PydanticModel, field_validator


class ViewKey(HostModel):
    """A column reference in a view's projection."""

    name: t.Optional[str] = None
    alias: t.Optional[str] = None
    table_name: t.Optional[str] = Field(default=None, alias="tableName")
    is_activated: t.Any = Field(default=None, alias="isActivated")

    @field_validator("name", "alias", "table_name", mode="before")
    @classmethod
    def _host_text(cls, v: t.Any) -> t.Optional[str]:
        return to_text(v)


class ViewColumn(PydanticModel):
    """A table qualified column. is_activated is passed through for the caller to decide on inclusion."""

    statement: str
    is_activated: t.Any = Field(default=None, alias="isActivated")

    def as_dict(self) -> t.Dict[str, t.Any]:
        return {"statement": self.statement, "isActivated": self.is_activated}


class ViewData(PydanticModel):
    tables: t.List[str] = []
    columns: t.List[t.Union[str, ViewColumn]] = []

    def as_dict(self) -> t.Dict[str, t.List[t.Any]]:
        return {
            "tables": list(self.tables),
            "columns": [
                column.as_dict() if isinstance(column, ViewColumn) else column
                for column in self.columns
            ],
        }


def build_view_data(keys: t.Any) -> ViewData:
    """Splits a view's column references into the referenced tables and the projected columns.

    Columns without a table are projected as is. Columns with a table are qualified by it and the table
    is collected once, in the order it was first seen.

    Args:
        keys: A list of ViewKeys or of the host's key mappings.

    Returns:
        The referenced tables and the projected columns.
    """
    if not isinstance(keys, (list, tuple)):
        return ViewData()

    tables: t.List[str] = []
    columns: t.List[t.Union[str, ViewColumn]] = []

    for key in keys:
        if not key:
            continue
        key = ViewKey.from_host(key)
        if key is None:
            continue
        column = quote_alias(key.name, key.alias)

        if not key.table_name:
            columns.append(column)
            continue

        table = quote_name(key.table_name)
        if table not in tables:
            tables.append(table)

        columns.append(ViewColumn(statement=f"{table}.{column}", is_activated=key.is_activated))

    return ViewData(tables=tables, columns=columns)
