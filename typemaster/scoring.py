from __future__ import annotations

from dataclasses import dataclass

CHARS_PER_WORD = 5


# ---------------------------
# Typing math
# ---------------------------

def prefix_match_count(typed: str, target: str) -> int:
    """Length of the common prefix; nothing after the first mismatch counts."""
    good = 0
    for a, b in zip(typed, target):
        if a != b:
            break
        good += 1
    return good


def compute_wpm(word_count: int, elapsed_sec: int) -> int:
    # 60 // elapsed first, then multiply: the integer rounding is part of the score
    if elapsed_sec <= 0:
        return 0
    return word_count * (60 // elapsed_sec)


def format_clock(seconds: int) -> str:
    seconds = max(0, int(seconds))
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


@dataclass
class Score:
    matched_chars: int = 0

    def add_word(self, word: str) -> None:
        # the committing space is credited too
        self.matched_chars += len(word) + 1

    def add_partial(self, typed: str, target: str) -> int:
        credit = prefix_match_count(typed, target)
        self.matched_chars += credit
        return credit

    @property
    def word_count(self) -> int:
        return self.matched_chars // CHARS_PER_WORD

    def wpm(self, elapsed_sec: int) -> int:
        return compute_wpm(self.word_count, elapsed_sec)

    def reset(self) -> None:
        self.matched_chars = 0
