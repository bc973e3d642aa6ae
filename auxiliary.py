#!/usr/bin/env python3
"""
Auxiliary utility functions for Megethos

Size and path formatting shared by the scanner and its report.
"""

import pathlib
from typing import Optional

BINARY_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB", "EiB")
DECIMAL_UNITS = ("kB", "MB", "GB", "TB", "PB", "EB")


def format_bytes(size_bytes: int, decimal: bool = False) -> str:
    """Format byte size into human-readable string

    Args:
        size_bytes: Size in bytes to format
        decimal: Use powers of 1000 (kB, MB, ...) instead of 1024 (KiB, MiB, ...)

    Returns:
        Formatted string like "1.46 GiB", "345 MiB", "12.5 kB", or "789 B"
    """
    base = 1000 if decimal else 1024
    units = DECIMAL_UNITS if decimal else BINARY_UNITS

    if size_bytes < base:
        return f"{size_bytes} B"

    value = float(size_bytes)
    unit_index = -1
    while value >= base and unit_index < len(units) - 1:
        value /= base
        unit_index += 1

    # Two decimals at most, trailing zeros dropped ("1 KiB", "1.5 KiB")
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {units[unit_index]}"


def format_path_for_display(path: str, home_path: Optional[str] = None) -> str:
    """Format file path for display by replacing home directory with ~

    Args:
        path: File path to format
        home_path: Home directory path (defaults to platform home)

    Returns:
        Path with home directory replaced by ~ if applicable
    """
    if home_path is None:
        home_path = str(pathlib.Path.home())

    # Only replace whole leading components, so /home/al never matches /home/alex
    home = home_path.rstrip("/")
    if home and (path == home or path.startswith(home + "/")):
        return "~" + path[len(home) :]
    return path
