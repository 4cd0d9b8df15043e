# tests/test_logging.py
import asyncio

from loguru import logger

from shopsdk.config import configure_logging


def test_sdk_is_silent_unless_logging_is_configured(backend, store):
    messages = []
    sink = logger.add(messages.append, level="DEBUG")
    try:
        asyncio.run(store.fetch_products())
        assert messages == []
    finally:
        logger.remove(sink)


def test_configure_logging_turns_sdk_traces_on(backend, store):
    configure_logging("DEBUG")
    messages = []
    sink = logger.add(messages.append, level="DEBUG")
    try:
        asyncio.run(store.fetch_products())
        assert any("GET http://backend.test/products" in m for m in messages)
        assert any("loading: idle -> busy" in m for m in messages)
    finally:
        logger.remove(sink)
        logger.disable("shopsdk")
