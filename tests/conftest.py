import logging

import pytest

from fastsort.config import reset_settings
from fastsort.logger import HANDLER_NAME_PREFIX


SORT_ENV_VARS = [
    "SORT_PARAMETER",
    "SORT_PROPERTY_DELIMITER",
    "SORT_QUALIFIER_DELIMITER",
    "SORT_FALLBACK",
    "LOG_LEVEL",
    "LOG_OUTPUT",
    "LOG_FORMAT",
    "LOG_FILE",
]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run every test with default settings, away from any local .env file."""
    for name in SORT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    monkeypatch.chdir(tmp_path)
    reset_settings()

    yield

    reset_settings()


@pytest.fixture(autouse=True)
def isolated_root_logger():
    """Drop the handlers and level set on the root logger by setup_logging."""
    root = logging.getLogger()
    level = root.level

    yield

    for handler in list(root.handlers):
        if (handler.get_name() or "").startswith(HANDLER_NAME_PREFIX):
            root.removeHandler(handler)
            handler.close()

    root.setLevel(level)
