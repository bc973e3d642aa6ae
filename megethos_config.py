#!/usr/bin/env python3
"""
Configuration for Megethos

Reads tool defaults from the "megethos" section of the shared kosmos
configuration file (~/.kosmos/config.json). Command-line flags always take
precedence. Megethos only reads this file; scans persist nothing.
"""

import json
import pathlib
from dataclasses import asdict, dataclass
from typing import Optional

DEFAULT_NUMFILES = 10
TOOL_NAME = "megethos"


@dataclass
class MegethosConfig:
    """Default scan options for Megethos"""

    numfiles: int = DEFAULT_NUMFILES
    decimal_units: bool = False
    skip_hidden: bool = False
    same_file_system: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "MegethosConfig":
        """Create from dictionary, ignoring values of the wrong type"""
        config = cls.default()

        numfiles = data.get("numfiles")
        # bool is an int subclass; reject it here
        if isinstance(numfiles, int) and not isinstance(numfiles, bool) and numfiles >= 0:
            config.numfiles = numfiles

        for key in ("decimal_units", "skip_hidden", "same_file_system"):
            value = data.get(key)
            if isinstance(value, bool):
                setattr(config, key, value)

        return config

    @classmethod
    def default(cls) -> "MegethosConfig":
        """Create default configuration"""
        return cls()


class SharedConfigManager:
    """Loads the Megethos section of the shared kosmos configuration"""

    def __init__(self, kosmos_dir: Optional[pathlib.Path] = None):
        """Initialize configuration manager

        Args:
            kosmos_dir: Override default .kosmos directory location
        """
        if kosmos_dir:
            self.kosmos_dir = kosmos_dir
        else:
            self.kosmos_dir = pathlib.Path.home() / ".kosmos"

        self.config_file = self.kosmos_dir / "config.json"

    def load(self) -> MegethosConfig:
        """Load configuration from file"""
        if not self.config_file.exists():
            return MegethosConfig.default()

        try:
            with self.config_file.open() as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError):
            # If config is corrupted or unreadable, return default
            return MegethosConfig.default()

        section = data.get(TOOL_NAME) if isinstance(data, dict) else None
        if not isinstance(section, dict):
            return MegethosConfig.default()
        return MegethosConfig.from_dict(section)
