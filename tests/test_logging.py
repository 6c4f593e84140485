import io
import json
import logging

import pytest
import structlog


def _json_formatter() -> structlog.stdlib.ProcessorFormatter:
    for handler in logging.getLogger().handlers:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            return handler.formatter
    pytest.fail("No structlog ProcessorFormatter installed on the root logger")


class TestStructuredLogging:
    def test_events_render_as_json(self):
        name = "storefront.tests.logging"
        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(_json_formatter())
        std_logger = logging.getLogger(name)
        std_logger.addHandler(handler)
        try:
            structlog.get_logger(name).info("order.created", order_id="ORD-001")
        finally:
            std_logger.removeHandler(handler)

        payload = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert payload["event"] == "order.created"
        assert payload["order_id"] == "ORD-001"
        assert payload["level"] == "info"
        assert payload["logger"] == name
        assert "timestamp" in payload

    def test_stdlib_records_share_the_format(self):
        name = "storefront.tests.stdlib"
        stream = io.StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(_json_formatter())
        std_logger = logging.getLogger(name)
        std_logger.addHandler(handler)
        try:
            std_logger.warning("plain stdlib message")
        finally:
            std_logger.removeHandler(handler)

        payload = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert payload["event"] == "plain stdlib message"
        assert payload["level"] == "warning"
