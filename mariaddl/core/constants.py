from __future__ import annotations

import types
import typing as t

IDENTIFIER_QUOTE = "`"
"""Identifier quote character"""
LITERAL_QUOTE = "'"
"""String literal quote character"""

TABLE_OPTION_SEPARATOR = ",\n\t"
"""Separator between rendered table options"""
PARTITION_CLAUSE_SEPARATOR = "\n\t"
"""Separator between partitioning clauses"""
PARTITION_DEFINITION_SEPARATOR = ",\n\t\t"
"""Separator between partition definitions"""

ROW_FORMAT = "ROW_FORMAT"
INSERT_METHOD = "INSERT_METHOD"
UNION = "UNION"
WITH_SYSTEM_VERSIONING = "WITH_SYSTEM_VERSIONING"
SYSTEM_TIME = "SYSTEM_TIME"

UPPERCASED_OPTIONS = frozenset({ROW_FORMAT, INSERT_METHOD})
"""Options whose value is emitted uppercased and omitted when empty"""
RAW_OPTIONS = frozenset({UNION})
"""Options whose value is a caller supplied SQL fragment"""
KEYWORD_VALUES = frozenset({"YES", "NO", "DEFAULT"})
"""Values that are emitted as bare keywords"""

TABLE_OPTION_TOKENS: t.Mapping[str, str] = types.MappingProxyType(
    {
        "ENGINE": "ENGINE",
        "AUTO_INCREMENT": "AUTO_INCREMENT",
        "AVG_ROW_LENGTH": "AVG_ROW_LENGTH",
        "CHECKSUM": "CHECKSUM",
        "DATA_DIRECTORY": "DATA DIRECTORY",
        "DELAY_KEY_WRITE": "DELAY_KEY_WRITE",
        "ENCRYPTED": "ENCRYPTED",
        "ENCRYPTION_KEY_ID": "ENCRYPTION_KEY_ID",
        "IETF_QUOTES": "IETF_QUOTES",
        "INDEX_DIRECTORY": "INDEX DIRECTORY",
        INSERT_METHOD: "INSERT_METHOD",
        "KEY_BLOCK_SIZE": "KEY_BLOCK_SIZE",
        "MAX_ROWS": "MAX_ROWS",
        "MIN_ROWS": "MIN_ROWS",
        "PACK_KEYS": "PACK_KEYS",
        "PAGE_CHECKSUM": "PAGE_CHECKSUM",
        "PAGE_COMPRESSED": "PAGE_COMPRESSED",
        "PAGE_COMPRESSION_LEVEL": "PAGE_COMPRESSION_LEVEL",
        ROW_FORMAT: "ROW_FORMAT",
        "SEQUENCE": "SEQUENCE",
        "STATS_AUTO_RECALC": "STATS_AUTO_RECALC",
        "STATS_PERSISTENT": "STATS_PERSISTENT",
        "STATS_SAMPLE_PAGES": "STATS_SAMPLE_PAGES",
        "TRANSACTIONAL": "TRANSACTIONAL",
        UNION: "UNION",
        WITH_SYSTEM_VERSIONING: "WITH SYSTEM VERSIONING",
    }
)
"""Table option keyword to the option name written in SQL"""

DEFAULT_ENGINE_KEYWORDS: t.Tuple[str, ...] = ("KEY_BLOCK_SIZE", "PACK_KEYS", WITH_SYSTEM_VERSIONING)
"""Keywords allowed when the engine isn't recognized"""

_COMMON_KEYWORDS = (
    "AUTO_INCREMENT",
    "AVG_ROW_LENGTH",
    "CHECKSUM",
    "KEY_BLOCK_SIZE",
    "MAX_ROWS",
    "MIN_ROWS",
    "PACK_KEYS",
)

TABLE_OPTIONS_BY_ENGINE: t.Mapping[str, t.Tuple[str, ...]] = types.MappingProxyType(
    {
        "InnoDB": (
            *_COMMON_KEYWORDS,
            "DATA_DIRECTORY",
            "ENCRYPTED",
            "ENCRYPTION_KEY_ID",
            "PAGE_COMPRESSED",
            "PAGE_COMPRESSION_LEVEL",
            ROW_FORMAT,
            "SEQUENCE",
            "STATS_AUTO_RECALC",
            "STATS_PERSISTENT",
            "STATS_SAMPLE_PAGES",
            WITH_SYSTEM_VERSIONING,
        ),
        "MyISAM": (
            *_COMMON_KEYWORDS,
            "DATA_DIRECTORY",
            "DELAY_KEY_WRITE",
            "INDEX_DIRECTORY",
            ROW_FORMAT,
            "SEQUENCE",
            WITH_SYSTEM_VERSIONING,
        ),
        "Aria": (
            *_COMMON_KEYWORDS,
            "DATA_DIRECTORY",
            "DELAY_KEY_WRITE",
            "INDEX_DIRECTORY",
            "PAGE_CHECKSUM",
            ROW_FORMAT,
            "SEQUENCE",
            "TRANSACTIONAL",
            WITH_SYSTEM_VERSIONING,
        ),
        "MERGE": (
            "AUTO_INCREMENT",
            "CHECKSUM",
            INSERT_METHOD,
            UNION,
            WITH_SYSTEM_VERSIONING,
        ),
        "MEMORY": (
            "AUTO_INCREMENT",
            "MAX_ROWS",
            "MIN_ROWS",
            WITH_SYSTEM_VERSIONING,
        ),
        "CSV": ("IETF_QUOTES", WITH_SYSTEM_VERSIONING),
        "ARCHIVE": ("AUTO_INCREMENT", "AVG_ROW_LENGTH", "MAX_ROWS", "MIN_ROWS"),
        "BLACKHOLE": (WITH_SYSTEM_VERSIONING,),
        "ColumnStore": (),
    }
)
"""Storage engine to the ordered table option keywords it accepts"""
