"""UI messages and status indicators."""

from __future__ import annotations

from extrapfit.ui.console import console, icon
from extrapfit.ui.logging import log

__all__ = [
    "action",
    "error",
    "info",
    "print_next_steps",
    "show_error_with_details",
    "success",
    "warning",
]


def success(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display a success message."""
    spaces = "  " * indent
    console.print(f"{spaces}[success]{icon('check')}[/success] {message}")
    if do_log:
        log(message)


def warning(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display a warning message."""
    spaces = "  " * indent
    console.print(f"{spaces}[warning]{icon('warn')}[/warning]  {message}")
    if do_log:
        log(message, level="warning")


def error(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display an error message."""
    spaces = "  " * indent
    console.print(f"{spaces}[error]{icon('error')}[/error] {message}")
    if do_log:
        log(message, level="error")


def info(message: str, indent: int = 0, do_log: bool = True) -> None:
    """Display an info message."""
    spaces = "  " * indent
    console.print(f"{spaces}[dim]{icon('info')}[/dim] {message}")
    if do_log:
        log(message)


def action(message: str) -> None:
    """Display an action/process message."""
    console.print(f"[bold yellow]-[/bold yellow] {message}")
    log(message)


def show_error_with_details(
    context: str,
    err: Exception,
    suggestion: str | None = None,
) -> None:
    """Display an error with details in a panel."""
    from extrapfit.ui.panels import create_panel

    error(f"{context} failed")

    error_panel = create_panel(
        f"[error]{type(err).__name__}[/error]: {err!s}",
        title="Error Details",
        style="error",
    )
    console.print(error_panel)

    if suggestion:
        info(f"Suggestion: {suggestion}")


def print_next_steps(steps: list[str]) -> None:
    """Print suggested next steps for the user."""
    console.print("\n[header]Next steps:[/header]")
    for i, step in enumerate(steps, 1):
        console.print(f"  {i}. {step}")
    console.print()
