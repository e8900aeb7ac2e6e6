"""Tests for structured logging setup."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import structlog
from structlog.testing import capture_logs

from dnd_sheet.core.config import Settings
from dnd_sheet.core.logging import (
    add_app_context,
    bind_context,
    clear_context,
    configure_from_settings,
    configure_logging,
    get_logger,
)
from dnd_sheet.rules.diagnostics import FallbackDiagnostics


if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def restore_structlog() -> Generator[None, None, None]:
    """Undo any structlog configuration made by a test."""
    yield
    structlog.reset_defaults()
    clear_context()


class TestConfigure:
    """Tests for configure_logging and configure_from_settings."""

    @pytest.mark.usefixtures("restore_structlog")
    def test_json_format(self) -> None:
        configure_logging(level="WARNING", json_format=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    @pytest.mark.usefixtures("restore_structlog")
    def test_from_debug_settings(self) -> None:
        configure_from_settings(Settings(debug=True, log_level="DEBUG"))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_app_context(self) -> None:
        event = add_app_context(None, "info", {"event": "x"})

        assert event["app"] == "dnd_sheet"


class TestContext:
    """Tests for bound context and fallback warnings."""

    @pytest.mark.usefixtures("restore_structlog")
    def test_bind_context(self) -> None:
        bind_context(character="Elowen")

        assert structlog.contextvars.get_contextvars() == {"character": "Elowen"}

        clear_context()

        assert structlog.contextvars.get_contextvars() == {}

    def test_fallback_logged_as_warning(self) -> None:
        diagnostics = FallbackDiagnostics()

        with capture_logs() as logs:
            diagnostics.record("unknown_coin", "zz", pack_id="explorers-pack")

        assert logs == [
            {
                "event": "Permissive fallback applied",
                "kind": "unknown_coin",
                "value": "zz",
                "pack_id": "explorers-pack",
                "log_level": "warning",
            }
        ]

    def test_get_logger(self) -> None:
        assert get_logger(__name__) is not None
