from __future__ import annotations

import logging
import random
from collections import deque
from itertools import cycle, islice
from pathlib import Path
from typing import Deque, Iterable, Iterator, List, Optional, Sequence

from .errors import WordListError

logger = logging.getLogger(__name__)

SAMPLE_SIZE = 250

DIFFICULTIES = ["easy", "normal", "hard"]


# ---------------------------
# Word source (offline)
# ---------------------------

COMMON_WORDS = [
    "a", "about", "above", "after", "again", "air", "all", "almost", "also", "always",
    "am", "among", "an", "and", "another", "any", "are", "around", "as", "ask",
    "at", "away", "back", "be", "because", "been", "before", "being", "below", "best",
    "between", "big", "both", "but", "by", "call", "came", "can", "car", "case",
    "change", "child", "city", "close", "come", "company", "could", "country", "course", "day",
    "did", "different", "do", "does", "down", "each", "early", "end", "enough", "even",
    "every", "example", "eye", "face", "fact", "family", "far", "feel", "few", "find",
    "first", "for", "found", "from", "full", "get", "give", "go", "good", "great",
    "group", "grow", "had", "hand", "hard", "has", "have", "he", "head", "health",
    "hear", "help", "her", "here", "high", "him", "his", "home", "house", "how",
    "however", "if", "in", "into", "is", "it", "its", "just", "keep",
    "kind", "know", "large", "last", "late", "learn", "left", "life", "like", "line",
    "little", "live", "long", "look", "love", "made", "make", "man", "many", "may",
    "me", "mean", "men", "might", "more", "most", "move", "much", "must", "my",
    "near", "need", "never", "new", "next", "night", "no", "not", "now", "number",
    "of", "off", "often", "old", "on", "once", "one", "only", "or", "other",
    "our", "out", "over", "own", "part", "people", "place", "point", "problem", "program",
    "public", "put", "question", "right", "room", "run", "said", "same", "saw", "say",
    "school", "see", "seem", "set", "she", "should", "show", "since", "small", "so",
    "some", "something", "sound", "still", "study", "such", "system", "take", "tell", "than",
    "that", "the", "their", "them", "then", "there", "these", "they", "thing", "think",
    "this", "those", "time", "to", "today", "together", "too", "town", "try", "two",
    "under", "up", "use", "very", "want", "was", "water", "way", "we", "week",
    "well", "went", "were", "what", "when", "where", "which", "while", "who", "why",
    "will", "with", "word", "work", "world", "would", "write", "year", "you", "your",
]

# Mixed-case and punctuated tokens mixed in on "hard".
HARD_TOKENS = [
    "I", "v2", "x86", "3.14", "99", "done.", "ready,", "wow?", "hello!",
    "commit;", "push:", "path/to", "config.json", "e-mail", "don't",
]


def load_word_file(path: Path) -> List[str]:
    """Read a newline-separated word list. Blank lines and words with spaces are skipped."""
    try:
        lines = Path(path).read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        raise WordListError(f"cannot read word list {path}: {exc}") from exc
    words = [line.strip() for line in lines]
    words = [w for w in words if w and " " not in w and "\t" not in w]
    if not words:
        raise WordListError(f"word list {path} has no usable words")
    logger.info("loaded %d words from %s", len(words), path)
    return words


def filter_word_pool(pool: Sequence[str], difficulty: str) -> List[str]:
    if difficulty == "easy":
        min_len, max_len = 3, 6
    elif difficulty == "hard":
        min_len, max_len = 2, 10
    else:
        min_len, max_len = 2, 8
    filtered = [w for w in pool if min_len <= len(w) <= max_len]
    if difficulty == "hard":
        filtered = filtered + HARD_TOKENS
    return filtered if filtered else list(pool)


def load_word_pool(word_file: Optional[Path] = None, difficulty: str = "normal") -> List[str]:
    pool = load_word_file(word_file) if word_file else COMMON_WORDS[:]
    return filter_word_pool(pool, difficulty)


# ---------------------------
# Round queue
# ---------------------------

class WordQueue:
    """Words left to type this round. The front word is the current target."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words: Deque[str] = deque(words)

    @classmethod
    def generate(
        cls,
        corpus: Sequence[str],
        size: int = SAMPLE_SIZE,
        rng: Optional[random.Random] = None,
    ) -> "WordQueue":
        """Draw `size` words from the corpus (cycling it if too small) and shuffle them."""
        if size <= 0:
            raise ValueError(f"queue size must be positive, got {size}")
        if not corpus:
            raise WordListError("word corpus is empty")
        rng = rng or random.Random()
        drawn = list(islice(cycle(corpus), size))
        rng.shuffle(drawn)
        return cls(drawn)

    def front(self) -> Optional[str]:
        return self._words[0] if self._words else None

    def pop_front(self) -> Optional[str]:
        if not self._words:
            return None
        return self._words.popleft()

    def render_text(self) -> str:
        return " ".join(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __bool__(self) -> bool:
        return bool(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)
