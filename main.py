from __future__ import annotations

import logging
import sys
import traceback

from whatpicturepath.cli import main as cli_main

_log = logging.getLogger("whatpicturepath.main")


def _filter_platform_startup_args(argv: list[str]) -> list[str]:
    """过滤 macOS 启动器注入的 -psn_ 参数，避免被 CLI 误判。"""
    filtered_args: list[str] = []
    for arg in argv:
        if sys.platform == "darwin" and arg.startswith("-psn_"):
            continue
        filtered_args.append(arg)
    return filtered_args


def _install_exception_logging() -> None:
    def _log_uncaught_exception(exc_type, exc_value, exc_tb) -> None:
        message = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
        _log.error("uncaught exception\n%s", message.rstrip())
        sys.__excepthook__(exc_type, exc_value, exc_tb)

    sys.excepthook = _log_uncaught_exception


def main() -> None:
    _install_exception_logging()
    sys.argv[1:] = _filter_platform_startup_args(sys.argv[1:])
    cli_main()


if __name__ == "__main__":
    main()
