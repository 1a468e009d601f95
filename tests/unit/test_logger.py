import logging

import pytest

from textmine.logging.logger import Log


class TestLog:
    def test_configure_sets_level(self) -> None:
        Log.configure("debug")
        assert logging.getLogger("textmine").level == logging.DEBUG

    def test_configure_adds_single_handler(self) -> None:
        Log.configure("info")
        Log.configure("info")
        assert len(logging.getLogger("textmine").handlers) == 1

    def test_messages_reach_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        Log.configure("debug")
        with caplog.at_level(logging.DEBUG, logger="textmine"):
            Log.info("scored 3 terms")
            Log.warning("corpus is small")

        assert "scored 3 terms" in caplog.text
        assert "corpus is small" in caplog.text
