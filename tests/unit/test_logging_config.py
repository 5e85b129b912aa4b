"""Tests for the structlog/stdlib logging bridge."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from healthmate.core.config import ObservabilityConfig
from healthmate.core.logging_config import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    package = logging.getLogger("healthmate")
    handlers, level, package_level = root.handlers[:], root.level, package.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    package.setLevel(package_level)
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


class TestSetupLogging:
    def test_stdlib_extra_fields_reach_the_json_output(self, capsys, restore_root_logger):
        setup_logging(ObservabilityConfig(log_level="INFO"))

        logging.getLogger("healthmate.tests").warning("fallback used", extra={"errors": 3})

        line = capsys.readouterr().err.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "fallback used"
        assert record["errors"] == 3
        assert record["level"] == "warning"
        assert record["service"] == "healthmate"

    def test_level_filters_stdlib_records(self, capsys, restore_root_logger):
        setup_logging(ObservabilityConfig(log_level="WARNING"))

        logging.getLogger("healthmate.tests").info("quiet")

        assert "quiet" not in capsys.readouterr().err
