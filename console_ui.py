#!/usr/bin/env python3
"""
Console UI Module using Rich

Styled diagnostics on standard error, plain report lines on standard output.
Keeping the two apart lets the report be piped while errors and progress
notes stay visible on the terminal.
"""

from typing import Optional

from rich.console import Console


class ConsoleUI:
    """Console UI handler using Rich for CLI output"""

    def __init__(self, force_terminal: Optional[bool] = None):
        """Initialize consoles with optional terminal forcing"""
        self.console = Console(force_terminal=force_terminal, highlight=False, soft_wrap=True)
        self.err_console = Console(stderr=True, force_terminal=force_terminal, highlight=False, soft_wrap=True)

    # Styled diagnostics (stderr)
    def print_error(self, message: str):
        """Print error message in red"""
        self.err_console.print(message, style="red bold", markup=False)

    def print_warning(self, message: str):
        """Print warning message in yellow"""
        self.err_console.print(message, style="yellow", markup=False)

    def print_info(self, message: str):
        """Print info message in cyan"""
        self.err_console.print(message, style="cyan", markup=False)

    def print_progress(self, message: str):
        """Print progress message in dim white"""
        self.err_console.print(message, style="white dim", markup=False)

    # Report output (stdout)
    def print_plain(self, message: str):
        """Print a report line verbatim

        Paths may contain brackets or colons, so markup and emoji codes are
        left alone, and long lines are never wrapped.
        """
        self.console.print(message, markup=False, emoji=False, highlight=False, soft_wrap=True)

    def write_raw(self, text: str):
        """Write text to stdout untouched (no tab expansion or styling)"""
        self.console.file.write(text)
        self.console.file.flush()
