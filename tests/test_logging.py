"""Tests for structlog setup."""

from __future__ import annotations

import logging
import os
from unittest.mock import patch

import structlog

from khulnasoft_migrate.core.logging import setup_logging


class TestSetupLogging:
    def test_defaults_to_info(self):
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("KHULNASOFT_MIGRATE_LOG_LEVEL", None)
            setup_logging()
        assert logging.getLogger("khulnasoft_migrate").level == logging.INFO

    def test_env_level(self):
        with patch.dict(os.environ, {"KHULNASOFT_MIGRATE_LOG_LEVEL": "warning"}):
            setup_logging()
        assert logging.getLogger("khulnasoft_migrate").level == logging.WARNING

    def test_argument_overrides_env(self):
        with patch.dict(os.environ, {"KHULNASOFT_MIGRATE_LOG_LEVEL": "ERROR"}):
            setup_logging(level="debug")
        assert logging.getLogger("khulnasoft_migrate").level == logging.DEBUG

    def test_json_renderer(self):
        setup_logging(fmt="json")
        handlers = [
            h
            for h in logging.getLogger().handlers
            if isinstance(h.formatter, structlog.stdlib.ProcessorFormatter)
        ]
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter.processors[-1], structlog.processors.JSONRenderer)
