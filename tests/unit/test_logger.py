import io
import logging
from collections.abc import Iterator

import pytest

from paper_planner.logging.logger import Log


@pytest.fixture()
def bare_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("paper_planner")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    logger.handlers.clear()
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


class TestLogConfigure:
    def test_writes_formatted_messages_to_stream(self, bare_logger: logging.Logger) -> None:
        stream = io.StringIO()
        Log.configure("INFO", stream=stream)
        Log.info("extracted 42 chars")
        assert "[INFO] extracted 42 chars" in stream.getvalue()

    def test_respects_level(self, bare_logger: logging.Logger) -> None:
        stream = io.StringIO()
        Log.configure("WARNING", stream=stream)
        Log.info("quiet")
        Log.warning("loud")
        output = stream.getvalue()
        assert "quiet" not in output
        assert "[WARNING] loud" in output

    def test_second_configure_only_changes_level(self, bare_logger: logging.Logger) -> None:
        stream = io.StringIO()
        Log.configure("INFO", stream=stream)
        Log.configure("debug", stream=io.StringIO())
        assert len(bare_logger.handlers) == 1
        assert bare_logger.level == logging.DEBUG

    def test_exception_includes_traceback(self, bare_logger: logging.Logger) -> None:
        stream = io.StringIO()
        Log.configure("INFO", stream=stream)
        try:
            raise ValueError("boom")
        except ValueError:
            Log.exception("import failed")
        output = stream.getvalue()
        assert "[ERROR] import failed" in output
        assert "ValueError: boom" in output

    def test_every_level_method_writes_its_level(self, bare_logger: logging.Logger) -> None:
        stream = io.StringIO()
        Log.configure("DEBUG", stream=stream)
        Log.debug("page loop")
        Log.info("extracted")
        Log.warning("truncated")
        Log.error("gateway down")
        output = stream.getvalue()
        for line in ("[DEBUG] page loop", "[INFO] extracted", "[WARNING] truncated", "[ERROR] gateway down"):
            assert line in output
