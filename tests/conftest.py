"""Pytest configuration and fixtures."""

import pytest
import pytz
from loguru import logger

from schedtime.utils.time_utils import get_default_timezone, set_default_timezone

SHANGHAI = pytz.timezone("Asia/Shanghai")
TOKYO = pytz.timezone("Asia/Tokyo")
NEW_YORK = pytz.timezone("America/New_York")


@pytest.fixture(autouse=True)
def pinned_default_timezone():
    """Run every test with Asia/Shanghai as the default zone."""
    previous = get_default_timezone()
    set_default_timezone(SHANGHAI)
    yield SHANGHAI
    set_default_timezone(previous)


@pytest.fixture
def caplog(caplog):
    """Route loguru records into pytest's caplog."""
    handler_id = logger.add(caplog.handler, format="{message}", level=0)
    yield caplog
    logger.remove(handler_id)


@pytest.fixture
def shanghai():
    return SHANGHAI


@pytest.fixture
def new_york():
    return NEW_YORK
