"""
Settings management for Archive Browser
"""

import json
import os
from dataclasses import dataclass, asdict
from typing import TYPE_CHECKING, Optional

from .logger import debug

if TYPE_CHECKING:
    from ..core.models import FileFilter

CONFIG_DIR = os.path.expanduser("~/.config/archive-browser")
CONFIG_FILE = os.path.join(CONFIG_DIR, "settings.json")


@dataclass
class Settings:
    """Application settings"""

    # Backend REST server
    api_host: str = "127.0.0.1"
    api_port: int = 9042

    # Request timeout in seconds for file list and job feed calls
    request_timeout: int = 30

    # Forced file list requests run the scan before answering
    scan_timeout: int = 3600

    # Initial filter values when a panel mounts
    default_max_size: str = "50"
    default_mode: str = "tree"

    # How often the job feed is polled while a listing is pending
    job_poll_interval_ms: int = 1000

    # Delay before a typed search string is committed
    search_debounce_ms: int = 300

    # Server side: where listing caches and borg json-lines dumps live
    cache_dir: str = os.path.expanduser("~/.cache/archive-browser")
    source_dir: str = os.path.expanduser("~/.local/share/archive-browser/listings")

    def default_filter(self) -> "FileFilter":
        """Filter used when a panel mounts or its archive changes"""
        from ..core.models import FileFilter, ListMode

        try:
            mode = ListMode(self.default_mode)
        except ValueError:
            mode = ListMode.TREE
        return FileFilter(mode=mode, max_size=self.default_max_size)

    def save(self):
        """Save settings to config file"""
        os.makedirs(CONFIG_DIR, exist_ok=True)
        with open(CONFIG_FILE, "w") as f:
            json.dump(asdict(self), f, indent=2)

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from config file, or return defaults"""
        if not os.path.exists(CONFIG_FILE):
            return cls()

        try:
            with open(CONFIG_FILE, "r") as f:
                data = json.load(f)

            if not isinstance(data, dict):
                debug("[Settings] Settings file is not an object, using defaults")
                return cls()

            # Obsolete keys are ignored
            valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
            filtered_data = {k: v for k, v in data.items() if k in valid_fields}

            return cls(**filtered_data)
        except (OSError, ValueError, TypeError) as e:
            debug(f"[Settings] Unreadable settings file, using defaults: {e}")
            return cls()


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def save_settings():
    """Save the global settings"""
    if _settings is not None:
        _settings.save()
