from __future__ import annotations

import logging
import typing as t

import pydantic
from pydantic import ValidationError as ValidationError

logger = logging.getLogger(__name__)

if t.TYPE_CHECKING:
    Model = t.TypeVar("Model", bound="PydanticModel")


def field_validator(*args: t.Any, **kwargs: t.Any) -> t.Callable[[t.Any], t.Any]:
    return pydantic.field_validator(*args, **kwargs)


def model_validator(*args: t.Any, **kwargs: t.Any) -> t.Callable[[t.Any], t.Any]:
    return pydantic.model_validator(*args, **kwargs)


class PydanticModel(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(
        arbitrary_types_allowed=True,
        extra="forbid",
        protected_namespaces=(),
        populate_by_name=True,
        frozen=True,
    )

    @classmethod
    def parse_obj(cls: t.Type["Model"], obj: t.Any) -> "Model":
        return super().model_validate(obj)

    @classmethod
    def coerce(cls: t.Type["Model"], obj: t.Any) -> "Model":
        """Returns obj unchanged when it is already an instance, otherwise validates it as a mapping.

        None is treated as an empty mapping.
        """
        if isinstance(obj, cls):
            return obj
        return cls.parse_obj(obj or {})


class HostModel(PydanticModel):
    """Base for objects handed over by the host schema model.

    Hosts send camelCase and upper case keys alongside keys we don't care about, so unknown keys are
    ignored rather than rejected.
    """

    model_config = pydantic.ConfigDict(extra="ignore")

    @classmethod
    def from_host(cls: t.Type["Model"], obj: t.Any) -> t.Optional["Model"]:
        """Like coerce, but returns None instead of raising when the host object can't be read."""
        try:
            return cls.coerce(obj)
        except ValidationError as ex:
            logger.debug("Ignoring malformed %s: %s", cls.__name__, ex)
            return None
