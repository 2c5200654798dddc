from __future__ import annotations

import typing as t
from dataclasses import dataclass
from enum import auto

from sqlglot.helper import AutoName

from mariaddl.core.constants import KEYWORD_VALUES, RAW_OPTIONS, UPPERCASED_OPTIONS
from mariaddl.core.dialect import wrap
from mariaddl.utils import Number, format_number, to_number


class OptionKind(AutoName):
    NUMBER = auto()
    STRING = auto()
    BOOL = auto()
    RAW = auto()


@dataclass(frozen=True)
class OptionValue:
    """A table option value whose kind was decided when it was read from the host model."""

    kind: OptionKind
    value: t.Union[Number, str, bool]

    @classmethod
    def from_raw(cls, raw: t.Any) -> t.Optional[OptionValue]:
        """Classifies a raw host value.

        Args:
            raw: The value as it was found in the table options.

        Returns:
            The tagged value, or None if there is no value at all.
        """
        if raw is None:
            return None
        if isinstance(raw, OptionValue):
            return raw
        if isinstance(raw, bool):
            return cls(OptionKind.BOOL, raw)
        if isinstance(raw, (int, float)):
            number = to_number(raw)
            return None if number is None else cls(OptionKind.NUMBER, number)
        if isinstance(raw, str):
            number = to_number(raw)
            if number is not None:
                return cls(OptionKind.NUMBER, number)
            return cls(OptionKind.STRING, raw)
        return cls(OptionKind.RAW, str(raw))

    @property
    def text(self) -> str:
        if self.kind == OptionKind.NUMBER:
            return format_number(self.value)  # type: ignore
        if self.kind == OptionKind.BOOL:
            return "true" if self.value else "false"
        return str(self.value)

    def __str__(self) -> str:
        return self.text


def normalize_option_value(keyword: str, value: t.Any) -> t.Optional[str]:
    """Converts a table option value into the SQL written after `<option> =`.

    Args:
        keyword: The table option keyword, eg. ROW_FORMAT.
        value: A raw host value or an already classified OptionValue.

    Returns:
        The SQL text, or None if the option should be left out.
    """
    option = OptionValue.from_raw(value)
    if option is None:
        return None

    if keyword in UPPERCASED_OPTIONS:
        raw = value.value if isinstance(value, OptionValue) else value
        if not raw:
            return None
        return option.text.upper()

    if keyword in RAW_OPTIONS:
        return option.text

    if option.text.upper() in KEYWORD_VALUES:
        return option.text.upper()

    if option.kind == OptionKind.NUMBER:
        return option.text

    if option.kind == OptionKind.STRING and option.value:
        return wrap(option.value)

    if option.kind == OptionKind.BOOL:
        return "YES" if option.value else "NO"

    return None
