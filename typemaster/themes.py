from __future__ import annotations

from typing import Dict, List

Palette = Dict[str, str]

DEFAULT_THEME = "slate"

THEMES: Dict[str, Palette] = {
    "slate": {
        "card_bg": "#111827",
        "prompt_bg": "#0b1220",
        "input_bg": "#0b0f14",
        "border": "#1f2937",
        "title": "#e5e7eb",
        "muted": "#64748b",
        "hint": "#93c5fd",
        "ok": "#a7f3d0",
        "bad": "#fca5a5",
        "target": "#e5e7eb",
        "upcoming": "#cbd5e1",
        "cursor": "#60a5fa",
        "bar_fg": "#60a5fa",
        "bar_bg": "#1e293b",
    },
    "ember": {
        "card_bg": "#1f140f",
        "prompt_bg": "#1a1210",
        "input_bg": "#130c0a",
        "border": "#3b1d14",
        "title": "#fef3c7",
        "muted": "#d6a08a",
        "hint": "#fbbf24",
        "ok": "#fcd34d",
        "bad": "#f87171",
        "target": "#fde68a",
        "upcoming": "#f3e8e1",
        "cursor": "#f97316",
        "bar_fg": "#f97316",
        "bar_bg": "#3b1d14",
    },
    "mint": {
        "card_bg": "#0b1f24",
        "prompt_bg": "#0a1b1f",
        "input_bg": "#07161a",
        "border": "#12323a",
        "title": "#d1fae5",
        "muted": "#7dd3c7",
        "hint": "#5eead4",
        "ok": "#a7f3d0",
        "bad": "#fb7185",
        "target": "#d1fae5",
        "upcoming": "#c7f9f1",
        "cursor": "#34d399",
        "bar_fg": "#34d399",
        "bar_bg": "#12323a",
    },
}


def build_palettes(extra: Dict[str, Palette]) -> Dict[str, Palette]:
    """Built-in palettes plus user ones; user palettes only need the keys they change."""
    palettes = THEMES.copy()
    for name, colors in extra.items():
        palettes[name] = {**THEMES[DEFAULT_THEME], **colors}
    return palettes


def cycle_value(current: str, options: List[str]) -> str:
    if current not in options:
        return options[0]
    idx = options.index(current)
    return options[(idx + 1) % len(options)]
