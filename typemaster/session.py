from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence

from .actions import Action, InsertChar, KeyAction
from .buffer import InputBuffer
from .scoring import Score, format_clock
from .timer import CountdownTimer
from .words import SAMPLE_SIZE, WordQueue

logger = logging.getLogger(__name__)


class Phase(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    RESULT = "result"


@dataclass(frozen=True)
class Snapshot:
    """Everything the renderer needs for one frame."""

    phase: Phase
    words_text: str
    target: Optional[str]
    input_text: str
    cursor: int
    remaining_seconds: int
    clock: str
    duration: int
    matched_chars: int
    word_count: int
    wpm: int
    words_completed: int


class Session:
    """Round state machine: IDLE -> PLAYING -> RESULT -> PLAYING ...

    Key actions go through ``handle()``. The redraw loop calls ``poll()`` to
    pick up timer expiry and ``snapshot()`` to get something to draw.
    """

    def __init__(
        self,
        corpus: Sequence[str],
        sample_size: int = SAMPLE_SIZE,
        timer: Optional[CountdownTimer] = None,
        rng: Optional[random.Random] = None,
        start_on_keystroke: bool = False,
    ) -> None:
        if sample_size <= 0:
            raise ValueError(f"sample_size must be positive, got {sample_size}")
        self.corpus: List[str] = list(corpus)
        self.sample_size = sample_size
        self.timer = timer or CountdownTimer()
        self.rng = rng or random.Random()
        self.start_on_keystroke = start_on_keystroke

        self.phase = Phase.IDLE
        self.word_queue = WordQueue()
        self.input = InputBuffer()
        self.score = Score()
        self.words_completed = 0

        self._edits: Dict[Action, Callable[[], None]] = {
            Action.DELETE_BEFORE: self.input.delete_before,
            Action.DELETE_AT: self.input.delete_at,
            Action.MOVE_LEFT: self.input.move_left,
            Action.MOVE_RIGHT: self.input.move_right,
            Action.CLEAR_LINE: self.input.clear,
        }

    # ---------------------------
    # Input
    # ---------------------------

    def handle(self, action: KeyAction) -> None:
        if isinstance(action, InsertChar):
            self._insert(action.char)
        elif action is Action.START:
            self.start_round()
        elif action is Action.CANCEL_ROUND:
            self.cancel_round()
        elif action is Action.COMMIT_WORD:
            self.commit()
        elif action in self._edits:
            if self.phase is Phase.PLAYING:
                self._edits[action]()
        # QUIT ends the process and is handled by the caller

    def _accepting_input(self) -> bool:
        return self.phase is Phase.PLAYING and self.timer.remaining > 0

    def _insert(self, char: str) -> None:
        if self.phase is not Phase.PLAYING and self.start_on_keystroke:
            self.start_round()
        if self._accepting_input():
            self.input.insert(char)

    def commit(self) -> bool:
        """Space: advance only if the buffer is exactly the target word."""
        if not self._accepting_input():
            return False
        target = self.word_queue.front()
        if target is None or self.input.text != target:
            return False
        self.score.add_word(target)
        self.word_queue.pop_front()
        self.input.clear()
        self.words_completed += 1
        if not self.word_queue:
            logger.info("word queue exhausted with %ds left", self.timer.remaining)
            self.timer.halt()
            self._finish()
        return True

    # ---------------------------
    # Transitions
    # ---------------------------

    def start_round(self) -> bool:
        if self.phase is Phase.PLAYING:
            return False
        # a previous round's thread is always gone by now; this only waits if it is not
        self.timer.join()
        self.word_queue = WordQueue.generate(self.corpus, self.sample_size, self.rng)
        self.input.clear()
        self.score.reset()
        self.words_completed = 0
        self.timer.reset()
        if not self.timer.start():
            return False
        self.phase = Phase.PLAYING
        logger.info("round started with %d words", len(self.word_queue))
        return True

    def cancel_round(self) -> None:
        if self.phase is not Phase.PLAYING:
            return
        self.timer.cancel()
        self.score.reset()
        self.input.clear()
        self.word_queue = WordQueue()
        self.words_completed = 0
        self.phase = Phase.IDLE
        logger.info("round cancelled")

    def poll(self) -> None:
        """Called every redraw; moves PLAYING -> RESULT once the clock has run out."""
        if self.phase is Phase.PLAYING and self.timer.consume_expired():
            self._finish()

    def _finish(self) -> None:
        target = self.word_queue.front()
        if target is not None:
            self.score.add_partial(self.input.text, target)
        self.input.clear()
        self.phase = Phase.RESULT
        logger.info(
            "round finished: %d chars, %d words, %d wpm",
            self.score.matched_chars,
            self.score.word_count,
            self.score.wpm(self.timer.elapsed),
        )

    # ---------------------------
    # Rendering
    # ---------------------------

    def snapshot(self) -> Snapshot:
        state = self.timer.state()
        duration = self.timer.duration
        if self.phase is Phase.IDLE:
            elapsed = 0
        else:
            elapsed = duration - state.remaining
        return Snapshot(
            phase=self.phase,
            words_text=self.word_queue.render_text(),
            target=self.word_queue.front(),
            input_text=self.input.text,
            cursor=self.input.cursor,
            remaining_seconds=state.remaining,
            clock=format_clock(state.remaining),
            duration=duration,
            matched_chars=self.score.matched_chars,
            word_count=self.score.word_count,
            wpm=self.score.wpm(elapsed),
            words_completed=self.words_completed,
        )
