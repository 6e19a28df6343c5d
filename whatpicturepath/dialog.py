from __future__ import annotations

import logging
import os
import sys

from whatpicturepath.constants import SUPPORTED_EXTENSIONS
from whatpicturepath.errors import DialogUnavailableError

LOGGER = logging.getLogger(__name__)

_APP = None


def build_name_filter(images_label: str, all_label: str) -> str:
    ext_pattern = " ".join(f"*{ext}" for ext in sorted(SUPPORTED_EXTENSIONS))
    return f"{images_label} ({ext_pattern});;{all_label} (*)"


def _has_display() -> bool:
    if sys.platform in {"win32", "darwin"}:
        return True
    return bool(os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY"))


def pick_files(title: str, name_filter: str, start_dir: str = "") -> list[str]:
    """Show a native multi-select open dialog; an empty list means cancelled."""
    global _APP
    if not _has_display():
        raise DialogUnavailableError("no graphical display available")
    try:
        from PyQt6.QtWidgets import QApplication, QFileDialog
    except ImportError as exc:
        raise DialogUnavailableError(f"PyQt6 is unavailable: {exc}") from exc

    _APP = QApplication.instance() or QApplication(sys.argv[:1])
    file_names, _ = QFileDialog.getOpenFileNames(None, title, start_dir, name_filter)
    LOGGER.info("dialog returned %s file(s)", len(file_names))
    # Qt 在 Windows 上也返回正斜杠路径
    return [os.path.normpath(name) for name in file_names]
