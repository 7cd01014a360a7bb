"""UI panels for displaying boxed content."""

from __future__ import annotations

from rich import box
from rich.panel import Panel

from extrapfit.ui.console import console

__all__ = [
    "create_panel",
]


def create_panel(
    content: str,
    title: str | None = None,
    style: str = "info",
) -> Panel:
    """Create a standard panel with consistent styling.

    Args:
        content: Panel content
        title: Optional panel title
        style: Border style (info, success, warning, error)
    """
    return Panel(
        content,
        title=title,
        title_align="left",
        border_style=style,
        box=box.ROUNDED,
    )

