"""
Tests for logging_manager module.

Tests WeaverLogger file output, the NullLogger/safe_logger pair and CLI
error reporting.
"""
import pytest
from unittest.mock import MagicMock

from webweaver.core.logging_manager import (
    NullLogger,
    WeaverLogger,
    handle_cli_error,
    safe_logger,
)


@pytest.fixture
def weaver_logger(tmp_path):
    """WeaverLogger writing to a temporary directory."""
    logger = WeaverLogger(tmp_path / "logs", "test")
    yield logger
    logger.close()


class TestWeaverLogger:
    """Tests for WeaverLogger."""

    def test_creates_log_directory(self, tmp_path):
        """Log directory is created on initialization."""
        logger = WeaverLogger(tmp_path / "nested" / "logs", "test")
        logger.close()
        assert (tmp_path / "nested" / "logs").is_dir()

    def test_operation_written_to_component_log(self, weaver_logger):
        """log_operation writes JSON details to <component>.log."""
        weaver_logger.log_operation("materialize_complete", {"count": 3})
        weaver_logger.close()

        text = (weaver_logger.log_dir / "test.log").read_text(encoding="utf-8")
        assert "OPERATION - materialize_complete" in text
        assert '"count": 3' in text

    def test_debug_written_to_component_log(self, weaver_logger):
        """log_debug messages reach the component log."""
        weaver_logger.log_debug("Wrote file", {"source": "a.adoc"})
        weaver_logger.close()

        text = (weaver_logger.log_dir / "test.log").read_text(encoding="utf-8")
        assert "DEBUG - Wrote file" in text

    def test_error_written_to_errors_log(self, weaver_logger):
        """log_error writes the error and its context to errors.log."""
        weaver_logger.log_error(ValueError("bad name"), {"file": "x.adoc"})
        weaver_logger.close()

        text = (weaver_logger.log_dir / "errors.log").read_text(encoding="utf-8")
        assert "ValueError: bad name" in text
        assert "file=x.adoc" in text

    def test_log_cli_error_message(self, weaver_logger):
        """log_cli_error returns a short message without traceback by default."""
        message = weaver_logger.log_cli_error(KeyError("missing"))
        assert message.startswith("❌ KeyError")
        assert "Traceback" not in message


class TestNullLogger:
    """Tests for NullLogger class."""

    def test_all_methods_are_no_ops(self):
        """NullLogger accepts every logging call silently."""
        logger = NullLogger()
        logger.log_operation("op", {"key": "value"})
        logger.log_error(ValueError("x"), {"context": "test"})
        logger.log_debug("debug", {"key": "value"})
        logger.log_info("info")
        logger.log_warning("warning")

    def test_log_cli_error_returns_formatted(self):
        """NullLogger.log_cli_error still formats the message."""
        result = NullLogger().log_cli_error(ValueError("test error"))
        assert result == "❌ ValueError: test error"


class TestSafeLogger:
    """Tests for safe_logger function."""

    def test_returns_logger_when_provided(self):
        """safe_logger returns the same logger when not None."""
        mock_logger = MagicMock(spec=WeaverLogger)
        assert safe_logger(mock_logger) is mock_logger

    def test_returns_null_logger_when_none(self):
        """safe_logger returns the shared NullLogger for None."""
        assert isinstance(safe_logger(None), NullLogger)
        assert safe_logger(None) is safe_logger(None)

    def test_forwards_calls(self):
        """Calls through safe_logger reach the wrapped logger."""
        mock_logger = MagicMock(spec=WeaverLogger)
        safe_logger(mock_logger).log_operation("process", {"file": "a"})
        mock_logger.log_operation.assert_called_once_with("process", {"file": "a"})


class TestHandleCliError:
    """Tests for handle_cli_error."""

    def test_echoes_and_exits(self, capsys):
        """Error is echoed to stderr and the process exits with code 1."""
        ctx = MagicMock()
        ctx.obj = {"logger": None, "verbose": False}

        with pytest.raises(SystemExit) as exc_info:
            handle_cli_error(ctx, ValueError("boom"), "build")

        assert exc_info.value.code == 1
        assert "❌ ValueError: boom" in capsys.readouterr().err

    def test_logs_with_context(self):
        """Error is logged with the operation and extra context."""
        logger = MagicMock(spec=WeaverLogger)
        logger.log_cli_error.return_value = "❌ ValueError: boom"
        ctx = MagicMock()
        ctx.obj = {"logger": logger, "verbose": True}
        error = ValueError("boom")

        with pytest.raises(SystemExit):
            handle_cli_error(ctx, error, "build", {"input": "x"}, exit_code=2)

        logger.log_cli_error.assert_called_once_with(
            error, {"operation": "build", "input": "x"}, show_traceback=True
        )
