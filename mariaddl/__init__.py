"""
Renders MariaDB / MySQL DDL fragments (table options, partitioning, view projections and routine
characteristics) from the host's schema metadata.
"""

from __future__ import annotations

import logging
import sys
import typing as t

from mariaddl.core.config import (
    load_table_options_config as load_table_options_config,
    table_options_config_from_dict as table_options_config_from_dict,
)
from mariaddl.core.dialect import (
    escape_for_literal as escape_for_literal,
    escape_quotes as escape_quotes,
    quote_alias as quote_alias,
    quote_name as quote_name,
)
from mariaddl.core.options import (
    OptionKind as OptionKind,
    OptionValue as OptionValue,
    normalize_option_value as normalize_option_value,
)
from mariaddl.core.partitioning import (
    PartitioningSpec as PartitioningSpec,
    render_partitioning as render_partitioning,
)
from mariaddl.core.routine import (
    RoutineCharacteristics as RoutineCharacteristics,
    render_characteristics as render_characteristics,
)
from mariaddl.core.table_options import (
    DEFAULT_TABLE_OPTIONS_CONFIG as DEFAULT_TABLE_OPTIONS_CONFIG,
    TableOptionsConfig as TableOptionsConfig,
    TableOptionsRenderer as TableOptionsRenderer,
    render_table_options as render_table_options,
)
from mariaddl.core.view import (
    ViewData as ViewData,
    ViewKey as ViewKey,
    build_view_data as build_view_data,
)
from mariaddl.utils import debug_mode_enabled

try:
    from mariaddl._version import __version__ as __version__
except ImportError:
    pass


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s (%(filename)s:%(lineno)d)"


class CustomFormatter(logging.Formatter):
    """Custom logging formatter."""

    grey = "\x1b[38;20m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"

    FORMATS = {
        logging.DEBUG: grey + LOG_FORMAT + reset,
        logging.INFO: grey + LOG_FORMAT + reset,
        logging.WARNING: yellow + LOG_FORMAT + reset,
        logging.ERROR: red + LOG_FORMAT + reset,
        logging.CRITICAL: bold_red + LOG_FORMAT + reset,
    }

    def format(self, record: logging.LogRecord) -> str:
        log_fmt = self.FORMATS.get(record.levelno)
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)


def configure_logging(
    force_debug: bool = False,
    write_to_stdout: bool = True,
    handler: t.Optional[logging.Handler] = None,
) -> None:
    """Attaches a handler to the package logger. Hosts that configure logging themselves don't need this."""
    logger = logging.getLogger(__name__)
    debug = force_debug or debug_mode_enabled()

    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)

    if handler is None and write_to_stdout:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(CustomFormatter())

    if handler is not None:
        handler.setLevel(level)
        logger.addHandler(handler)
