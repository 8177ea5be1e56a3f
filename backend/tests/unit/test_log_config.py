"""Unit tests for per-category log levels."""

import logging

import pytest

from construction_portal.config import Settings
from construction_portal.infrastructure.logging import log_config


@pytest.fixture
def restore_levels():
    names = [name for names in log_config._CATEGORY_MAP.values() for name in names]
    saved = {name: logging.getLogger(name).level for name in names}
    root_level = logging.getLogger().level
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)
    logging.getLogger().setLevel(root_level)


def test_each_category_sets_its_own_loggers(monkeypatch, restore_levels):
    settings = Settings(
        _env_file=None, log_level_http="ERROR", log_level_upstream="debug", log_level_sql="nope"
    )
    monkeypatch.setattr(log_config, "get_settings", lambda: settings)

    log_config.setup_logging()

    assert logging.getLogger("httpx").level == logging.ERROR
    assert logging.getLogger("httpcore").level == logging.ERROR
    assert logging.getLogger("construction_portal.infrastructure.api").level == logging.DEBUG
    assert logging.getLogger("sqlalchemy.engine").level == logging.INFO
