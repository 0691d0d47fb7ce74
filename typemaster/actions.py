"""Key actions understood by the session, independent of any terminal library."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Action(Enum):
    QUIT = "quit"
    START = "start"
    DELETE_BEFORE = "delete_before"
    DELETE_AT = "delete_at"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    COMMIT_WORD = "commit_word"
    CLEAR_LINE = "clear_line"
    CANCEL_ROUND = "cancel_round"


@dataclass(frozen=True)
class InsertChar:
    char: str


KeyAction = Union[Action, InsertChar]
