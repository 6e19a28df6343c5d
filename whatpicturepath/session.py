from __future__ import annotations

import logging
from typing import Callable, Protocol

from whatpicturepath.constants import (
    FORMAT_KEY_COMMA,
    MENU_KEY_DIALOG,
    MENU_KEY_FINISH,
    MENU_KEY_PASTE,
)
from whatpicturepath.dialog import build_name_filter, pick_files
from whatpicturepath.errors import DialogUnavailableError
from whatpicturepath.i18n import Messages
from whatpicturepath.models import AddResult, OutputMode, SessionState
from whatpicturepath.selection import SelectionSet
from whatpicturepath.tokenizer import tokenize_paths
from whatpicturepath.uri import format_uris

LOGGER = logging.getLogger(__name__)

FilePicker = Callable[[str, str, str], list[str]]


class Console(Protocol):
    input_closed: bool

    def read_key(self) -> str: ...

    def read_line(self) -> str | None: ...

    def clear(self) -> None: ...

    def echo(self, text: str = "") -> None: ...

    def prompt(self, text: str) -> None: ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...


class SessionController:
    """Main-menu loop: collect files, then print them once as file URIs.

    The loop only leaves the main menu through the finish option with a
    non-empty selection; every other outcome is reported and the menu is
    shown again. Once the console input is exhausted no choice can ever be
    made, so the session ends quietly without output.
    """

    def __init__(
        self,
        console: Console,
        messages: Messages,
        picker: FilePicker = pick_files,
        selection: SelectionSet | None = None,
        dialog_start_dir: str = "",
    ) -> None:
        self.console = console
        self.messages = messages
        self.picker = picker
        self.selection = selection if selection is not None else SelectionSet()
        self.dialog_start_dir = dialog_start_dir
        self.state = SessionState.MAIN_MENU

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self) -> int:
        while self.state is SessionState.MAIN_MENU:
            if self.console.input_closed:
                LOGGER.info("input closed on main menu, ending without output")
                return 0
            self.console.clear()
            self.show_main_menu()
            self.handle_menu_key(self.console.read_key())
        self.output()
        return 0

    def show_main_menu(self) -> None:
        msg = self.messages.get
        self.console.echo(f"=== {msg('TitleMain')} ===")
        self.console.echo()
        self.console.echo(msg("MenuSelectedCount", len(self.selection)))
        self.console.echo()
        self.console.echo(msg("MenuOption1"))
        self.console.echo(msg("MenuOption2"))
        self.console.echo(msg("MenuOption3"))
        self.console.echo()
        self.console.prompt(msg("MenuPrompt"))

    def handle_menu_key(self, key: str) -> SessionState:
        LOGGER.debug("menu key %r", key)
        if key == MENU_KEY_DIALOG:
            self._adding(self.add_from_dialog)
        elif key == MENU_KEY_PASTE:
            self._adding(self.add_from_paste)
        elif key == MENU_KEY_FINISH:
            if len(self.selection) > 0:
                self.state = SessionState.OUTPUT
            else:
                self._error(self.messages.get("ErrorNoFilesSelected"))
                self._pause()
        else:
            self._error(self.messages.get("ErrorInvalidOption"))
            self._pause()
        return self.state

    def _adding(self, action: Callable[[], None]) -> None:
        self.state = SessionState.ADDING
        try:
            action()
        finally:
            self.state = SessionState.MAIN_MENU

    # ------------------------------------------------------------------
    # Adding files
    # ------------------------------------------------------------------

    def add_from_dialog(self) -> AddResult | None:
        msg = self.messages.get
        name_filter = build_name_filter(msg("DialogFilterImages"), msg("DialogFilterAll"))
        try:
            picked = self.picker(msg("DialogTitle"), name_filter, self.dialog_start_dir)
        except DialogUnavailableError as exc:
            LOGGER.warning("file dialog unavailable: %s", exc)
            self._error(msg("DialogUnavailable", exc))
            self._pause()
            return None

        if not picked:
            self._info(msg("AddNoSelection"))
            self._pause()
            return None

        result = self.selection.merge(picked)
        self._report(result, "AddSuccess")
        return result

    def add_from_paste(self) -> AddResult | None:
        msg = self.messages.get
        self.console.echo()
        self.console.echo(msg("PasteHint"))
        self.console.echo(msg("PasteQuoteHint"))
        self.console.echo()
        self.console.prompt(msg("PromptFilePath"))
        text = self.console.read_line()

        if text is None or not text.strip():
            self._info(msg("PasteNoInput"))
            self._pause()
            return None

        result = self.selection.merge(tokenize_paths(text))
        self._report(result, "PasteAddSuccess")
        return result

    def _report(self, result: AddResult, success_key: str) -> None:
        if result.added > 0:
            self._success(self.messages.get(success_key, result.added, result.skipped))
        else:
            self._error(self.messages.get("AddNoNew"))
        self._pause()

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def output(self) -> str:
        msg = self.messages.get
        self.console.clear()
        self.console.echo(f"=== {msg('OutputTitle')} ===")
        self.console.echo()
        self.console.echo(msg("OutputTotalCount", len(self.selection)))
        self.console.echo()
        self.console.echo(msg("OutputFormatOption1"))
        self.console.echo(msg("OutputFormatOption2"))
        self.console.echo()
        self.console.prompt(msg("OutputFormatPrompt"))

        key = self.console.read_key()
        mode = OutputMode.COMMA_LIST if key == FORMAT_KEY_COMMA else OutputMode.NEWLINE
        LOGGER.info("output mode=%s files=%s", mode.value, len(self.selection))

        self.console.echo()
        self.console.echo()
        rendered = format_uris(self.selection, mode)
        if rendered:
            self.console.echo(rendered)

        self.console.echo()
        self.console.echo(msg("ExitPrompt"))
        self.console.read_key()
        return rendered

    # ------------------------------------------------------------------
    # Status helpers
    # ------------------------------------------------------------------

    def _pause(self) -> None:
        self.console.echo(self.messages.get("PressAnyKey"))
        self.console.read_key()

    def _success(self, message: str) -> None:
        self.console.success(self.messages.get("Success", message))

    def _error(self, message: str) -> None:
        self.console.error(self.messages.get("Error", message))

    def _info(self, message: str) -> None:
        self.console.info(self.messages.get("Info", message))
