from __future__ import annotations

import logging

import pytest

from exocomp.logger import COLLABORATOR_LOGGERS, LOGGER_NAME
from tests.helpers import FakeEntityStore


@pytest.fixture
def store() -> FakeEntityStore:
    return FakeEntityStore()


@pytest.fixture(autouse=True)
def reset_exocomp_logging():
    yield
    for name in (LOGGER_NAME, *COLLABORATOR_LOGGERS):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)
