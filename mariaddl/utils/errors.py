from __future__ import annotations

import typing as t
from pathlib import Path


class MariaDDLError(Exception):
    pass


class ConfigError(MariaDDLError):
    location: t.Optional[Path] = None

    def __init__(self, message: str | Exception, location: t.Optional[Path | str] = None) -> None:
        super().__init__(message)
        if location:
            self.location = Path(location) if isinstance(location, str) else location


class UnknownKeywordError(ConfigError):
    """Raised when an engine's keyword list references a keyword that has no SQL token."""

    def __init__(self, engine: str, keyword: str) -> None:
        self.engine = engine
        self.keyword = keyword
        super().__init__(f"Engine '{engine}' references unknown table option keyword '{keyword}'.")
