from __future__ import annotations

import logging
from pathlib import Path

from whatpicturepath.constants import SUPPORTED_EXTENSIONS

LOGGER = logging.getLogger(__name__)


def extension_of(path: str) -> str:
    """Return the lower-cased extension (with dot) of the last path segment.

    Unlike ``Path.suffix`` a leading dot counts, so ``.jpg`` yields ``.jpg``.
    """
    name = Path(path).name
    if "." not in name:
        return ""
    return "." + name.rsplit(".", 1)[1].lower()


def has_supported_extension(path: str) -> bool:
    ext = extension_of(path)
    return bool(ext) and ext in SUPPORTED_EXTENSIONS


def is_valid_file(path: str) -> bool:
    if not path:
        return False
    try:
        exists = Path(path).is_file()
    except (OSError, ValueError) as exc:
        LOGGER.debug("cannot stat %r: %s", path, exc)
        return False
    if not exists:
        return False
    return has_supported_extension(path)
