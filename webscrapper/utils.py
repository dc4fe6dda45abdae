import os
import sys
from pathlib import Path
from typing import Optional


def read_user_dirs(name: str = "XDG_DESKTOP_DIR") -> Optional[Path]:
    """Look up a folder in the freedesktop ``user-dirs.dirs`` file.
    Args:
        name: Key to find, e.g. "XDG_DESKTOP_DIR".
    Returns:
        The folder with ``$HOME`` expanded, or None if the file or key is missing.
    """
    config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(str(Path.home()), ".config")
    user_dirs = os.path.join(config_home, "user-dirs.dirs")
    if not os.path.isfile(user_dirs):
        return None
    with open(user_dirs, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            if key.strip() == name:
                value = value.strip().strip('"')
                return Path(value.replace("$HOME", str(Path.home())))
    return None


def get_desktop_dir(override: Optional[str] = None) -> Path:
    """Find the current user's desktop directory.
    Args:
        override: Explicit directory, wins over everything else.
    Returns:
        Path to the desktop directory. It is not checked for existence.
    """
    if override:
        return Path(override)
    if os.environ.get("WEBSCRAPPER_DESKTOP_DIR"):
        return Path(os.environ["WEBSCRAPPER_DESKTOP_DIR"])
    if sys.platform == "win32":
        profile = os.environ.get("USERPROFILE") or str(Path.home())
        return Path(profile) / "Desktop"
    return read_user_dirs("XDG_DESKTOP_DIR") or Path.home() / "Desktop"


def target_path(desktop_dir: Path, subdir: str, file_name: str) -> Path:
    """Join the output path for a download.
    The file name is used verbatim, path separators and ``..`` included.
    Args:
        desktop_dir: Base directory.
        subdir: Folder under the base directory, e.g. "webs".
        file_name: Name given by the user.
    Returns:
        The joined path.
    """
    return Path(desktop_dir) / subdir / file_name


__all__ = [
    "read_user_dirs",
    "get_desktop_dir",
    "target_path",
]
