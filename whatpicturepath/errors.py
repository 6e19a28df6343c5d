from __future__ import annotations


class WhatPicturePathError(Exception):
    """Base class for errors raised by whatpicturepath."""


class ConversionError(WhatPicturePathError):
    """A filesystem path could not be expressed as a file URI."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot convert {path!r} to a file URI: {reason}")
        self.path = path
        self.reason = reason


class DialogUnavailableError(WhatPicturePathError):
    """The native file dialog cannot be shown in this environment."""
