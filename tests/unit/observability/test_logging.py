"""Unit tests for logging configuration and context binding."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import orjson
import pytest

from pantry.observability.logging import (
    bind_context,
    clear_context,
    get_context,
    get_logger,
    logger,
    setup_logging,
    unbind_context,
)


pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    clear_context()
    yield
    clear_context()
    logger.remove()


class TestContext:
    """Tests for context helpers."""

    def test_bind_and_unbind(self) -> None:
        """Should add and remove context keys."""
        bind_context(operation="cook_now", recipes=3)
        assert get_context() == {"operation": "cook_now", "recipes": 3}

        unbind_context("recipes", "missing")
        assert get_context() == {"operation": "cook_now"}

    def test_get_context_returns_copy(self) -> None:
        """Should not let callers mutate bound context."""
        bind_context(operation="match_all")
        get_context()["operation"] = "changed"
        assert get_context() == {"operation": "match_all"}

    def test_clear(self) -> None:
        """Should drop all context."""
        bind_context(a=1)
        clear_context()
        assert get_context() == {}


class TestSetupLogging:
    """Tests for sink configuration."""

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Should write one JSON object per record with bound context."""
        setup_logging("INFO", "json")
        bind_context(operation="cook_now")

        get_logger("pantry.test").info("Matched recipes", results=2)

        line = capsys.readouterr().out.strip()
        record = orjson.loads(line)
        assert record["message"] == "Matched recipes"
        assert record["level"] == "INFO"
        assert record["operation"] == "cook_now"
        assert record["results"] == 2
        assert record["name"] == "pantry.test"
        assert "_json" not in record

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Should drop records below the configured level."""
        setup_logging("WARNING", "json")
        get_logger(__name__).info("hidden")
        assert capsys.readouterr().out == ""

    def test_text_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Should produce readable lines with braces in context escaped."""
        setup_logging("DEBUG", "text")
        get_logger(__name__).debug("Loaded table", table={"a": 1})

        out = capsys.readouterr().out
        assert "Loaded table" in out
        assert "table={'a': 1}" in out

    def test_stdlib_logging_is_intercepted(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Should route standard library records through Loguru."""
        setup_logging("INFO", "json")
        logging.getLogger("third.party").warning("from stdlib")

        record = orjson.loads(capsys.readouterr().out.strip())
        assert record["message"] == "from stdlib"
        assert record["level"] == "WARNING"

    def test_file_sink(self, tmp_path: Path) -> None:
        """Should also write JSON lines to the configured file."""
        log_file = tmp_path / "logs" / "pantry.log"
        setup_logging("INFO", "text", log_file=log_file)

        get_logger(__name__).info("to file")
        logger.complete()

        record = orjson.loads(log_file.read_text().splitlines()[-1])
        assert record["message"] == "to file"
