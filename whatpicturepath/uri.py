from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from whatpicturepath.constants import COMMA_SEPARATOR
from whatpicturepath.errors import ConversionError
from whatpicturepath.models import OutputMode

LOGGER = logging.getLogger(__name__)


def to_uri(path: str) -> str:
    """Return the absolute ``file:`` URI for ``path``.

    Relative paths are resolved against the current working directory
    (symlinks are left alone). Raises :class:`ConversionError` for blank
    input or paths that cannot be encoded.
    """
    if not path or not path.strip():
        raise ConversionError(path, "empty path")
    try:
        return Path(path).absolute().as_uri()
    except (ValueError, UnicodeError, OSError) as exc:
        raise ConversionError(path, str(exc)) from exc


def try_to_uri(path: str) -> str | None:
    try:
        return to_uri(path)
    except ConversionError as exc:
        LOGGER.warning("skipping %s", exc)
        return None


def convert_all(paths: Iterable[str]) -> list[str]:
    uris: list[str] = []
    for path in paths:
        uri = try_to_uri(path)
        if uri is not None:
            uris.append(uri)
    return uris


def format_uris(paths: Iterable[str], mode: OutputMode = OutputMode.NEWLINE) -> str:
    uris = convert_all(paths)
    if mode is OutputMode.COMMA_LIST:
        return COMMA_SEPARATOR.join(uris)
    return "\n".join(uris)
