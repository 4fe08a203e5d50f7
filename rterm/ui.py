"""Prompt rendering and line input."""

from __future__ import annotations

import sys


def render_prompt(user: str, host: str) -> None:
    """Print ``user@host: `` without a newline."""
    sys.stdout.write(f"{user}@{host}: ")
    sys.stdout.flush()


def render_prompt_and_get_input(user: str, host: str) -> str:
    """Show the prompt and return the next line of input, stripped."""
    render_prompt(user, host)
    return sys.stdin.readline().strip()


def display_input(text: str) -> None:
    """Print text on a line of its own."""
    print(text)