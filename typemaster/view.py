"""Snapshot -> rich Text. Nothing here touches the session."""

from __future__ import annotations

from rich.text import Text

from .scoring import format_clock, prefix_match_count
from .session import Phase, Snapshot
from .themes import Palette

PROMPT_WINDOW = 60
BAR_LEN = 34


def render_stats(snap: Snapshot, theme: Palette) -> Text:
    elapsed = 0 if snap.phase is Phase.IDLE else snap.duration - snap.remaining_seconds
    progress = 0.0 if snap.duration == 0 else elapsed / float(snap.duration)
    filled = int(BAR_LEN * min(1.0, max(0.0, progress)))

    text = Text()
    text.append("Time ", style=theme["muted"])
    text.append(snap.clock, style=f"bold {theme['title']}")
    text.append(" / ", style=theme["muted"])
    text.append(format_clock(snap.duration), style=theme["muted"])
    text.append("  [", style=theme["muted"])
    if filled:
        text.append("=" * filled, style=theme["bar_fg"])
    if BAR_LEN - filled:
        text.append("." * (BAR_LEN - filled), style=theme["bar_bg"])
    text.append("]", style=theme["muted"])
    text.append("\n", style="")
    text.append("Words ", style=theme["muted"])
    text.append(f"{snap.word_count}", style=f"bold {theme['title']}")
    text.append("   ", style=theme["muted"])
    text.append("WPM ", style=theme["muted"])
    text.append(f"{snap.wpm:>3}", style=f"bold {theme['title']}")
    text.append("   ", style=theme["muted"])
    text.append("Done ", style=theme["muted"])
    text.append(f"{snap.words_completed}", style=f"bold {theme['title']}")
    return text


def render_prompt(snap: Snapshot, theme: Palette) -> Text:
    text = Text()
    if snap.phase is Phase.IDLE:
        text.append("PRESS ENTER TO PLAY", style=f"bold {theme['hint']}")
        return text
    if snap.phase is Phase.RESULT:
        text.append("Time's up. ", style=f"bold {theme['title']}")
        text.append(f"{snap.wpm} wpm", style=f"bold {theme['ok']}")
        text.append(f"  ({snap.word_count} words, {snap.matched_chars} chars)\n\n", style=theme["muted"])

    words = snap.words_text.split(" ")[:PROMPT_WINDOW] if snap.words_text else []
    for j, word in enumerate(words):
        if j == 0 and snap.phase is Phase.PLAYING:
            good = prefix_match_count(snap.input_text, word)
            if good:
                text.append(word[:good], style=f"bold {theme['ok']} underline")
            # what was actually typed past the matching prefix, clamped to the word
            bad = snap.input_text[good:len(word)]
            if bad:
                text.append(bad, style=f"bold {theme['bad']} underline")
            rest = word[max(good, len(snap.input_text)):]
            if rest:
                text.append(rest, style=f"bold {theme['target']} underline")
        else:
            text.append(word, style=theme["upcoming"])
        text.append(" ", style="")
    return text


def render_input(snap: Snapshot, theme: Palette) -> Text:
    text = Text()
    text.append("> ", style=theme["muted"])
    if snap.phase is not Phase.PLAYING:
        return text
    before = snap.input_text[: snap.cursor]
    at = snap.input_text[snap.cursor: snap.cursor + 1] or " "
    after = snap.input_text[snap.cursor + 1:]
    good = prefix_match_count(snap.input_text, snap.target or "")
    style = theme["title"] if good == len(snap.input_text) else theme["bad"]
    text.append(before, style=f"bold {style}")
    text.append(at, style=f"reverse {theme['cursor']}")
    text.append(after, style=f"bold {style}")
    return text


def render_help(snap: Snapshot, theme: Palette) -> Text:
    text = Text()
    if snap.phase is Phase.IDLE:
        text.append("Enter start", style=theme["hint"])
    elif snap.phase is Phase.PLAYING:
        text.append("Space next word  Ctrl+U clear  Ctrl+C cancel", style=theme["hint"])
    else:
        text.append("Enter play again", style=theme["hint"])
    text.append("  ", style=theme["muted"])
    text.append("Ctrl+T theme", style=theme["hint"])
    text.append("  ", style=theme["muted"])
    text.append("Esc quit", style=theme["hint"])
    return text
