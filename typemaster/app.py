from __future__ import annotations

import logging
from typing import Dict, List, Optional

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.widgets import Static

from .actions import Action, InsertChar, KeyAction
from .config import Settings
from .session import Session
from .themes import DEFAULT_THEME, build_palettes, cycle_value
from .view import render_help, render_input, render_prompt, render_stats
from .words import load_word_pool

logger = logging.getLogger(__name__)

REDRAW_INTERVAL = 0.1

KEY_ACTIONS: Dict[str, Action] = {
    "escape": Action.QUIT,
    "enter": Action.START,
    "backspace": Action.DELETE_BEFORE,
    "delete": Action.DELETE_AT,
    "left": Action.MOVE_LEFT,
    "right": Action.MOVE_RIGHT,
    "space": Action.COMMIT_WORD,
    "ctrl+u": Action.CLEAR_LINE,
    "ctrl+c": Action.CANCEL_ROUND,
}


def translate_key(key: str, character: Optional[str], is_printable: bool) -> Optional[KeyAction]:
    """Map a Textual key event onto a session action (None if the key means nothing)."""
    if key in KEY_ACTIONS:
        return KEY_ACTIONS[key]
    if is_printable and character and len(character) == 1:
        return InsertChar(character)
    return None


# ---------------------------
# UI widgets
# ---------------------------

class StatsBar(Static):
    """Clock, progress bar, words and WPM."""
    pass


class PromptView(Static):
    """Remaining words, current one highlighted."""
    pass


class InputLine(Static):
    """What has been typed, with the cursor."""
    pass


class HelpBar(Static):
    """Help / controls."""
    pass


# ---------------------------
# App
# ---------------------------

class TypemasterApp(App):
    CSS = """
    Screen {
        background: transparent;
    }

    #root {
        height: 100%;
        padding: 1 2;
    }

    StatsBar {
        border: round #1f2937;
        padding: 0 2;
        height: 4;
    }

    PromptView {
        border: round #1f2937;
        padding: 1 2;
        height: 1fr;
    }

    InputLine {
        border: round #1f2937;
        padding: 0 2;
        height: 3;
    }

    HelpBar {
        border: round #1f2937;
        padding: 0 2;
        height: 3;
    }
    """

    TITLE = "TYPEMASTER"
    SUB_TITLE = "60s typing test"

    BINDINGS = [
        Binding("escape", "quit_game", "Quit", priority=True),
        Binding("ctrl+c", "cancel_round", "Cancel", priority=True),
        ("ctrl+t", "cycle_theme", "Theme"),
    ]

    def __init__(self, settings: Optional[Settings] = None, session: Optional[Session] = None) -> None:
        super().__init__()
        self.app_settings = settings or Settings()
        if session is None:
            corpus = load_word_pool(self.app_settings.word_file, self.app_settings.difficulty)
            session = Session(
                corpus,
                sample_size=self.app_settings.word_count,
                start_on_keystroke=self.app_settings.start_on_keystroke,
            )
        self.session = session
        self.palettes = build_palettes(self.app_settings.themes)
        self.theme_name = self.app_settings.theme
        if self.theme_name not in self.palettes:
            logger.warning("unknown theme %r, using %r", self.theme_name, DEFAULT_THEME)
            self.theme_name = DEFAULT_THEME
        self.palette = self.palettes[self.theme_name]

    def compose(self) -> ComposeResult:
        with Container(id="root"):
            self.stats_bar = StatsBar()
            self.prompt_view = PromptView()
            self.input_line = InputLine()
            self.help_bar = HelpBar()
            yield self.stats_bar
            yield self.prompt_view
            yield self.input_line
            yield self.help_bar

    def on_mount(self) -> None:
        self.apply_theme()
        self._render_all()
        self.set_interval(REDRAW_INTERVAL, self._tick)

    def apply_theme(self) -> None:
        palette = self.palette
        border_def = (("round", palette["border"]),)
        self.stats_bar.styles.background = palette["card_bg"]
        self.help_bar.styles.background = palette["card_bg"]
        self.prompt_view.styles.background = palette["prompt_bg"]
        self.input_line.styles.background = palette["input_bg"]
        for widget in (self.stats_bar, self.prompt_view, self.input_line, self.help_bar):
            widget.styles.border = border_def

    def _tick(self) -> None:
        self.session.poll()
        self._render_all()

    def on_key(self, event: events.Key) -> None:
        action = translate_key(event.key, event.character, event.is_printable)
        if action is None:
            return
        event.stop()
        self.dispatch_action(action)

    def dispatch_action(self, action: KeyAction) -> None:
        if action is Action.QUIT:
            # stop a running countdown before the loop goes away
            self.session.cancel_round()
            self.exit()
            return
        self.session.handle(action)
        self._render_all()

    def action_quit_game(self) -> None:
        self.dispatch_action(Action.QUIT)

    def action_cancel_round(self) -> None:
        self.dispatch_action(Action.CANCEL_ROUND)

    def action_cycle_theme(self) -> None:
        names: List[str] = list(self.palettes.keys())
        self.theme_name = cycle_value(self.theme_name, names)
        self.palette = self.palettes[self.theme_name]
        self.apply_theme()
        self._render_all()

    def _render_all(self) -> None:
        snap = self.session.snapshot()
        self.stats_bar.update(render_stats(snap, self.palette))
        self.prompt_view.update(render_prompt(snap, self.palette))
        self.input_line.update(render_input(snap, self.palette))
        self.help_bar.update(render_help(snap, self.palette))
