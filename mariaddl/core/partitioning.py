from __future__ import annotations

import logging
import typing as t

from pydantic import Field

from mariaddl.core.constants import (
    PARTITION_CLAUSE_SEPARATOR,
    PARTITION_DEFINITION_SEPARATOR,
    SYSTEM_TIME,
)
from mariaddl.core.dialect import wrap
from mariaddl.utils import format_number, to_number, to_text
from mariaddl.utils.pydantic import HostModel, field_validator

logger = logging.getLogger(__name__)


class PartitionDefinition(HostModel):
    partition_definition: t.Optional[str] = Field(default=None, alias="partitionDefinition")
    subpartition_definition: t.Optional[str] = Field(default=None, alias="subpartitionDefinition")

    @field_validator("partition_definition", "subpartition_definition", mode="before")
    @classmethod
    def _host_text(cls, v: t.Any) -> t.Optional[str]:
        return to_text(v)


class PartitioningSpec(HostModel):
    """The partitioning scheme of a table.

    Field aliases follow the names used by the host schema model, eg. `partitionType` and `LINEAR`.
    """

    partition_type: t.Optional[str] = Field(default=None, alias="partitionType")
    linear: t.Any = Field(default=None, alias="LINEAR")
    partitioning_expression: t.Optional[str] = None
    interval: t.Any = None
    time_unit: t.Optional[str] = None
    partitions: t.Any = None
    subpartition_type: t.Optional[str] = Field(default=None, alias="subpartitionType")
    sublinear: t.Any = Field(default=None, alias="SUBLINEAR")
    subpartitioning_expression: t.Optional[str] = None
    subpartitions: t.Any = None
    partition_definitions: t.Optional[t.List[PartitionDefinition]] = None

    @field_validator("partition_definitions", mode="before")
    @classmethod
    def _only_definition_lists(cls, v: t.Any) -> t.Any:
        if not isinstance(v, (list, tuple)):
            return None
        return [d for d in v if isinstance(d, (dict, PartitionDefinition))]

    @field_validator(
        "partition_type",
        "partitioning_expression",
        "time_unit",
        "subpartition_type",
        "subpartitioning_expression",
        mode="before",
    )
    @classmethod
    def _host_text(cls, v: t.Any) -> t.Optional[str]:
        return to_text(v)


def _linear(linear: t.Any) -> str:
    return "LINEAR " if linear else ""


def _wrap_expression(expression: t.Optional[str]) -> str:
    return wrap((expression or "").strip(), "(", ")")


def _count(value: t.Any) -> str:
    number = to_number(value)
    return str(value) if number is None else format_number(number)


def _interval(spec: PartitioningSpec) -> str:
    number = to_number(spec.interval)
    if number is None or not number:
        return ""

    interval = spec.interval if isinstance(spec.interval, str) else format_number(number)
    text = f" INTERVAL {interval}"
    if spec.time_unit:
        text += f" {spec.time_unit}"
    return text


def render_partition_by(spec: PartitioningSpec) -> str:
    """Renders the partitioning method that follows PARTITION BY."""
    if spec.partition_type == SYSTEM_TIME:
        return f"{SYSTEM_TIME}{_interval(spec)}"

    return f"{_linear(spec.linear)}{spec.partition_type}{_wrap_expression(spec.partitioning_expression)}"


def render_subpartition_by(spec: PartitioningSpec) -> str:
    if not spec.subpartition_type:
        return ""

    return (
        f"SUBPARTITION BY {_linear(spec.sublinear)}{spec.subpartition_type}"
        f"{_wrap_expression(spec.subpartitioning_expression)}"
    )


def render_partition_definitions(spec: PartitioningSpec) -> str:
    """Renders the parenthesized list of partition definitions.

    Definitions without text are skipped. A definition's subpartitions are appended in parentheses.
    """
    definitions = []
    for definition in spec.partition_definitions or []:
        if not definition.partition_definition:
            continue
        if definition.subpartition_definition:
            definitions.append(
                f"{definition.partition_definition} {wrap(definition.subpartition_definition, '(', ')')}"
            )
        else:
            definitions.append(definition.partition_definition)

    if not definitions:
        return ""

    return wrap(
        f"\n\t\t{PARTITION_DEFINITION_SEPARATOR.join(definitions)}\n\t",
        "(",
        ")",
    )


def render_partitioning(
    spec: t.Optional[t.Union[PartitioningSpec, t.Mapping[str, t.Any]]] = None,
) -> str:
    """Renders the partitioning clauses of a CREATE TABLE statement.

    Args:
        spec: The partitioning scheme, either as a PartitioningSpec or as the host's mapping.

    Returns:
        The clauses each on their own line, or an empty string if no partition type is set.
    """
    spec = PartitioningSpec.from_host(spec)
    if spec is None or not spec.partition_type:
        return ""

    clauses = [
        f"PARTITION BY {render_partition_by(spec)}",
        f"PARTITIONS {_count(spec.partitions)}" if spec.partitions else "",
        render_subpartition_by(spec),
        f"SUBPARTITIONS {_count(spec.subpartitions)}" if spec.subpartitions else "",
        render_partition_definitions(spec),
    ]
    clauses = [clause for clause in clauses if clause]

    logger.debug("Rendered %d partitioning clauses for type '%s'", len(clauses), spec.partition_type)
    return PARTITION_CLAUSE_SEPARATOR + PARTITION_CLAUSE_SEPARATOR.join(clauses)
