from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OutputMode(str, Enum):
    NEWLINE = "newline"
    COMMA_LIST = "comma"


class SessionState(str, Enum):
    MAIN_MENU = "main_menu"
    ADDING = "adding"
    OUTPUT = "output"


@dataclass(slots=True, frozen=True)
class AddResult:
    requested: int
    added: int

    @property
    def skipped(self) -> int:
        return self.requested - self.added
