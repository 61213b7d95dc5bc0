"""
Export utilities for hourrs.
Handles export directory management for reports.
"""
import os
from typing import Optional

EXPORT_PATH_ENV = 'HOURRS_EXPORT_PATH'


def get_export_directory(export_root: Optional[str] = None) -> str:
    """
    Determine where exports should be written.

    Priority:
    1. Explicit ``export_root`` argument
    2. `HOURRS_EXPORT_PATH` environment variable (expanded)
    3. Local `exports/` directory inside the working directory
    """
    if export_root:
        target = os.path.expanduser(export_root)
    else:
        env_path = os.getenv(EXPORT_PATH_ENV)
        if env_path:
            target = os.path.expanduser(env_path)
        else:
            target = os.path.join(os.getcwd(), 'exports')

    os.makedirs(target, exist_ok=True)
    return target


def safe_filename(text: str) -> str:
    """Strip a free-form label down to something usable in a file name."""
    safe = "".join(c for c in text if c.isalnum() or c in (' ', '-', '_')).strip()
    return safe.replace(' ', '_')


def write_file(data: bytes, target_path: str) -> str:
    """Write an encoded report to target_path, creating parent folders; returns the path."""
    os.makedirs(os.path.dirname(target_path) or ".", exist_ok=True)
    with open(target_path, "wb") as f:
        f.write(data)
    return target_path
