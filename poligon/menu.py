"""Timing of the welcome fade and of the countdown shown before each round."""

from __future__ import annotations

WELCOME_TEXT = "Poligona Hoşgeldin"
READY_TEXT = "Hazır mısın?"
GO_TEXT = "Başla!"

WELCOME_DURATION = 5.0
FADE_IN_END = 1.0
FADE_OUT_START = 4.0

READY_DURATION = 2.0
INTRO_DURATION = 4.0


def intro_alpha(elapsed: float) -> int:
    """Opacity (0-255) of the welcome text ``elapsed`` seconds after start."""
    if elapsed < FADE_IN_END:
        alpha = elapsed / FADE_IN_END
    elif elapsed < FADE_OUT_START:
        alpha = 1.0
    else:
        alpha = 1.0 - (elapsed - FADE_OUT_START) / (WELCOME_DURATION - FADE_OUT_START)
    return int(min(max(alpha * 255.0, 0.0), 255.0))


def welcome_finished(elapsed: float) -> bool:
    """Whether the welcome fade is over and the menu should be shown."""
    return elapsed >= WELCOME_DURATION


def intro_message(elapsed: float) -> str | None:
    """The countdown text shown before a round, or None once the round begins."""
    if elapsed < READY_DURATION:
        return READY_TEXT
    if elapsed < INTRO_DURATION:
        return GO_TEXT
    return None