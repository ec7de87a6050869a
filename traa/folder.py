"""Path string helpers and well-known folders."""

from __future__ import annotations

import os
import sys
import tempfile
from typing import Optional

_SEPARATORS = "\\/" if os.name == "nt" else "/"
_EXTENSION_SEPARATOR = "."


def _is_separator(char: str) -> bool:
    return bool(char) and char in _SEPARATORS


def get_filename(path: str) -> str:
    """Return the part of ``path`` after its last separator; empty if it ends in one."""
    if not path:
        return ""
    # The first separator kind that occurs at all decides the split.
    for separator in _SEPARATORS:
        pos = path.rfind(separator)
        if pos != -1:
            return path[pos + 1 :]
    return path


def get_directory(path: str) -> str:
    """Return ``path`` up to and including its last separator, or an empty string.

    A separator in the first position is not considered.
    """
    if len(path) <= 1:
        return ""
    for index in range(len(path) - 1, 0, -1):
        if _is_separator(path[index]):
            return path[: index + 1]
    return ""


def get_file_extension(path: str) -> str:
    """Return the extension of the file name in ``path``, dot included."""
    filename = get_filename(path)
    pos = filename.rfind(_EXTENSION_SEPARATOR)
    return filename[pos:] if pos != -1 else ""


def is_directory(path: str) -> bool:
    """Whether ``path`` names a directory, judged by a trailing separator."""
    return bool(path) and _is_separator(path[-1])


def append_filename(path: str, filename: Optional[str]) -> str:
    """Join ``filename`` onto ``path`` with a separator where one is needed."""
    if not path:
        return filename or ""
    if not filename:
        return path
    if _is_separator(path[-1]):
        return path + filename
    return path + _SEPARATORS[0] + filename


def get_current_folder() -> str:
    """Folder holding the running executable."""
    return os.path.dirname(os.path.abspath(sys.executable))


def get_config_folder() -> str:
    """Per-user folder for application configuration."""
    if os.name == "nt":
        local = os.environ.get("LOCALAPPDATA")
        if local:
            return local
        return os.path.join(os.path.expanduser("~"), "AppData", "Local")
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg and os.path.isabs(xdg):
        return xdg
    return os.path.join(os.path.expanduser("~"), ".config")


def get_temp_folder() -> str:
    """Per-user folder for temporary files."""
    return tempfile.gettempdir()


def create_folder(folder: str) -> bool:
    """Create ``folder``; true if it was created or already exists."""
    if not folder:
        return False
    try:
        os.mkdir(folder)
    except FileExistsError:
        return True
    except OSError:
        return False
    return True