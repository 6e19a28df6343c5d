from __future__ import annotations

import logging
import sys
from typing import TextIO

import click
import typer

from whatpicturepath.constants import NULL_KEY

LOGGER = logging.getLogger(__name__)


def _is_tty(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError, OSError):
        return False


class TerminalConsole:
    """Console I/O that keeps working when stdin/stdout are redirected.

    Failures of the underlying terminal are logged and degraded to a safe
    default instead of propagating. End-of-file on stdin degrades the same
    way and sets ``input_closed``, since no further input can arrive.
    """

    def __init__(
        self,
        separator_width: int = 50,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.separator_width = max(1, int(separator_width))
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self.input_closed = False

    def read_key(self) -> str:
        try:
            if not _is_tty(self._stdin):
                # 输入被重定向时读取一整行并取第一个字符
                line = self._stdin.readline()
                if line == "":
                    self._mark_closed()
                    return NULL_KEY
                line = line.rstrip("\r\n")
                return line[0] if line else NULL_KEY
            return click.getchar(echo=False)
        except (OSError, EOFError, ValueError) as exc:
            LOGGER.debug("key read failed: %s", exc)
            return NULL_KEY

    def _mark_closed(self) -> None:
        if not self.input_closed:
            LOGGER.info("stdin reached end of file")
        self.input_closed = True

    def read_line(self) -> str | None:
        try:
            line = self._stdin.readline()
        except (OSError, ValueError) as exc:
            LOGGER.debug("line read failed: %s", exc)
            return None
        if line == "":
            self._mark_closed()
            return None
        return line.rstrip("\r\n")

    def clear(self) -> None:
        if _is_tty(self._stdout):
            try:
                click.clear()
                return
            except OSError as exc:
                LOGGER.debug("clear failed: %s", exc)
        self.echo("=" * self.separator_width)

    def echo(self, text: str = "") -> None:
        typer.echo(text, file=self._stdout)

    def prompt(self, text: str) -> None:
        typer.echo(text, file=self._stdout, nl=False)
        self._stdout.flush()

    def _status(self, message: str, color: str) -> None:
        self.echo()
        typer.secho(message, file=self._stdout, fg=color)

    def success(self, message: str) -> None:
        self._status(message, typer.colors.GREEN)

    def error(self, message: str) -> None:
        self._status(message, typer.colors.RED)

    def info(self, message: str) -> None:
        self._status(message, typer.colors.CYAN)
