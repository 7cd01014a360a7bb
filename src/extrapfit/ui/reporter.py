"""Console-based reporter implementation using Rich."""

from __future__ import annotations

from extrapfit.core.shared.reporter import Reporter
from extrapfit.ui.messages import action, error, info, success, warning


class ConsoleReporter:
    """Reporter implementation printing through the styled console.

    Example:
        >>> from extrapfit.ui.reporter import ConsoleReporter
        >>> reporter = ConsoleReporter()
        >>> reporter.action("Loading samples...")
        >>> reporter.success("Loaded 7 samples")
    """

    def action(self, message: str) -> None:
        action(message)

    def info(self, message: str) -> None:
        info(message)

    def warning(self, message: str) -> None:
        warning(message)

    def error(self, message: str) -> None:
        error(message)

    def success(self, message: str) -> None:
        success(message)


# Verify protocol compliance at import time
if not isinstance(ConsoleReporter(), Reporter):
    raise TypeError("ConsoleReporter must satisfy Reporter protocol")
