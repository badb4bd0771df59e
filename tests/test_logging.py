import logging

import pytest

from smart_deals_api.app.core.logging_config import APP_LOGGER, setup_logging


@pytest.fixture(autouse=True)
def restore_levels():
    names = (APP_LOGGER, "pymongo")
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_project_level_follows_setting():
    setup_logging("DEBUG")
    assert logging.getLogger(APP_LOGGER).level == logging.DEBUG
    assert logging.getLogger("smart_deals_api.app.services.deal_service").getEffectiveLevel() == logging.DEBUG


def test_driver_loggers_stay_quiet():
    setup_logging("DEBUG")
    assert logging.getLogger("pymongo").level == logging.WARNING
    setup_logging("error")
    assert logging.getLogger("pymongo").level == logging.ERROR


def test_unknown_level_falls_back_to_info():
    setup_logging("chatty")
    assert logging.getLogger(APP_LOGGER).level == logging.INFO


def test_existing_root_handlers_are_kept():
    root = logging.getLogger()
    before = list(root.handlers)
    setup_logging("INFO")
    assert root.handlers == before
