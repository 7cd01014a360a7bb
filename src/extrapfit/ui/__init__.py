"""UI and terminal output styling for ExtrapFit.

Submodules:
- console: Theme and console instance
- logging: File logging utilities
- branding: Banner, version display
- messages: Status messages (success, error, warning, etc.)
- tables: Fit and sweep tables
- panels: Panel display utilities
- reporter: Reporter protocol implementation on the console
"""

from extrapfit.ui.branding import show_banner, show_version
from extrapfit.ui.console import (
    EXTRAPFIT_THEME,
    VERSION,
    console,
    icon,
)
from extrapfit.ui.logging import close_logging, log, log_dict, log_section, setup_logging
from extrapfit.ui.messages import (
    action,
    error,
    info,
    print_next_steps,
    show_error_with_details,
    success,
    warning,
)
from extrapfit.ui.panels import create_panel
from extrapfit.ui.reporter import ConsoleReporter
from extrapfit.ui.tables import create_table, print_fit_table, print_summary, print_sweep_table

__all__ = [
    "EXTRAPFIT_THEME",
    "VERSION",
    "ConsoleReporter",
    "action",
    "close_logging",
    "console",
    "create_panel",
    "create_table",
    "error",
    "icon",
    "info",
    "log",
    "log_dict",
    "log_section",
    "print_fit_table",
    "print_next_steps",
    "print_summary",
    "print_sweep_table",
    "setup_logging",
    "show_banner",
    "show_error_with_details",
    "show_version",
    "success",
    "warning",
]
