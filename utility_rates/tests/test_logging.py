import structlog

from utility_quotes.config import QuotesSettings
from utility_rates.config import AppSettings
from utility_rates.logging import _service_context, init_logging


def test_events_carry_service_context():
    add = _service_context("utilities-rates", "staging")

    event = add(None, "info", {"event": "rates_quoted"})
    assert event == {"event": "rates_quoted", "service": "utilities-rates", "env": "staging"}

    # explicit values win
    event = add(None, "info", {"event": "x", "service": "other"})
    assert event["service"] == "other"


def test_renderer_follows_log_format():
    init_logging(AppSettings(log_format="console"))
    assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)

    init_logging(QuotesSettings(log_format="json"))
    assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)


def test_request_context_is_merged():
    init_logging(AppSettings())
    assert structlog.contextvars.merge_contextvars in structlog.get_config()["processors"]
