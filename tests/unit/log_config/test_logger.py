"""Tests for ContextualLogger."""

import logging

from eventhub.log_config.logger import ContextualLogger


class TestContextualLogger:
    def test_prefixes_context(self, caplog):
        log = ContextualLogger(logging.getLogger("eventhub.test"), channel="auth", event="signIn")
        with caplog.at_level(logging.INFO, logger="eventhub.test"):
            log.info("Dispatching %d", 3)
        assert "[channel=auth] [event=signIn] Dispatching 3" in caplog.text

    def test_no_context_leaves_message_alone(self, caplog):
        log = ContextualLogger(logging.getLogger("eventhub.test"))
        with caplog.at_level(logging.WARNING, logger="eventhub.test"):
            log.warning("plain")
        assert caplog.records[-1].getMessage() == "plain"

    def test_respects_logger_level(self, caplog):
        log = ContextualLogger(logging.getLogger("eventhub.test"), event="signIn")
        with caplog.at_level(logging.INFO, logger="eventhub.test"):
            log.debug("hidden")
        assert "hidden" not in caplog.text
