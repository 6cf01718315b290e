import logging

import pytest

from equipment_rental.config import Settings
from equipment_rental.infrastructure.logging_setup import configure_logging


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_applies_level_and_format(restore_root_logger):
    settings = Settings(_env_file=None, log_level="debug", log_format="%(levelname)s|%(message)s")

    configure_logging(settings)

    assert restore_root_logger.level == logging.DEBUG
    formatter = restore_root_logger.handlers[0].formatter
    record = logging.LogRecord("rental", logging.INFO, __file__, 1, "hello", None, None)
    assert formatter.format(record) == "INFO|hello"
