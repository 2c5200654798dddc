import logging

import pytest

from mariaddl import TableOptionsConfig


@pytest.fixture
def custom_config() -> TableOptionsConfig:
    return TableOptionsConfig(
        tokens={
            "AUTO_INCREMENT": "AUTO_INCREMENT",
            "DATA_DIRECTORY": "DATA DIRECTORY",
            "WITH_SYSTEM_VERSIONING": "WITH SYSTEM VERSIONING",
        },
        engines={"Mroonga": ("DATA_DIRECTORY", "AUTO_INCREMENT")},
        default_keywords=("WITH_SYSTEM_VERSIONING",),
    )


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.DEBUG, logger="mariaddl")
    return caplog
