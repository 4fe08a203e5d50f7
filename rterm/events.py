"""Raw-keyboard shell: a scrollable output buffer driven by key events."""

from __future__ import annotations

import shutil
import subprocess
import sys
from typing import Any

from rterm import ui
from rterm.keys import KeyCode, from_keystroke

_USER = "user"
_HOST = "host"

_WELCOME = (
    "Welcome to Rust Terminal Emulator!",
    "Type commands to execute them, use Ctrl+Up/Down or PageUp/PageDown to scroll history.",
    "Type 'exit' or press ESC to quit.",
    "",
)


class TerminalState:
    """Output lines with a scroll position that follows new content."""

    def __init__(self, terminal_height: int | None = None) -> None:
        if terminal_height is None:
            terminal_height = shutil.get_terminal_size((80, 24)).lines
        self.output_lines: list[str] = []
        self.scroll_position = 0
        self.terminal_height = terminal_height

    def _max_scroll(self) -> int:
        return max(0, len(self.output_lines) - self.terminal_height)

    def add_output_line(self, line: str) -> None:
        self.output_lines.append(line)
        self.scroll_position = self._max_scroll()

    def add_command_output(self, output: bytes) -> None:
        """Append captured command output, one entry per line."""
        if not output:
            return
        text = output.decode(errors="replace")

        if "\n" not in text:
            self.add_output_line(text.rstrip())
            return

        ends_with_newline = text.endswith("\n")
        pieces = text.split("\n")
        last = pieces.pop()
        lines = [piece.removesuffix("\r") for piece in pieces]
        if last:
            lines.append(last)

        for line in lines:
            if not line and ends_with_newline:
                continue
            self.add_output_line(line)

    def scroll_up(self, lines: int) -> None:
        if self.scroll_position > 0:
            self.scroll_position = max(0, self.scroll_position - lines)

    def scroll_down(self, lines: int) -> None:
        max_scroll = self._max_scroll()
        if self.scroll_position < max_scroll:
            self.scroll_position = min(self.scroll_position + lines, max_scroll)

    def visible_lines(self) -> list[str]:
        """Lines shown on screen, leaving the last row for the prompt."""
        end = min(
            len(self.output_lines),
            self.scroll_position + max(0, self.terminal_height - 1),
        )
        return self.output_lines[self.scroll_position:end]

    def render_visible_content(self, term: Any) -> None:
        """Clear the screen and draw the visible lines from the top."""
        sys.stdout.write(term.clear + term.home)
        for line in self.visible_lines():
            sys.stdout.write(line + "\n")
        sys.stdout.flush()


def capture_input(text: str) -> None:
    """Run a line with ``bash -c`` and echo its stdout and stderr."""
    if not text.strip():
        return
    completed = subprocess.run(["bash", "-c", text], capture_output=True, check=False)
    sys.stdout.write(completed.stdout.decode(errors="replace"))
    sys.stderr.write(completed.stderr.decode(errors="replace"))
    sys.stdout.flush()


def _display_prompt() -> None:
    ui.render_prompt(_USER, _HOST)


def _display_prompt_with_input(buffer: str) -> None:
    ui.render_prompt(_USER, _HOST)
    sys.stdout.write(buffer)
    sys.stdout.flush()


def _redraw_input(term: Any, buffer: str) -> None:
    sys.stdout.write("\r" + term.clear_eol)
    _display_prompt_with_input(buffer)


def capture_keyboard_events() -> None:
    """Run the interactive key-driven shell until ESC or ``exit``."""
    import blessed

    term = blessed.Terminal()
    state = TerminalState()
    buffer = ""
    history: list[str] = []

    sys.stdout.write(term.clear + term.home)
    for line in _WELCOME:
        state.add_output_line(line)
    state.render_visible_content(term)
    _display_prompt()

    while True:
        with term.cbreak():
            key = from_keystroke(term.inkey(timeout=0.5))
        if key is None:
            continue

        match key.code:
            case KeyCode.ESC:
                state.add_output_line("\nExiting...")
                state.render_visible_content(term)
                break

            case KeyCode.ENTER:
                sys.stdout.write("\r" + term.clear_eol)
                state.add_output_line(f"{_USER}@{_HOST}: {buffer}")
                if buffer.strip() == "exit":
                    state.add_output_line("Exiting terminal emulator...")
                    state.render_visible_content(term)
                    break
                if buffer.strip():
                    history.append(buffer)
                command, buffer = buffer, ""
                completed = subprocess.run(
                    ["bash", "-c", command], capture_output=True, check=False
                )
                state.add_command_output(completed.stdout)
                state.add_command_output(completed.stderr)
                state.render_visible_content(term)
                _display_prompt()

            case KeyCode.CHAR:
                buffer += key.char
                _redraw_input(term, buffer)

            case KeyCode.BACKSPACE:
                if buffer:
                    buffer = buffer[:-1]
                    _redraw_input(term, buffer)

            case KeyCode.UP:
                if key.ctrl:
                    state.scroll_up(1)
                    state.render_visible_content(term)
                    _display_prompt_with_input(buffer)
                elif history:
                    buffer = history[-1]
                    _redraw_input(term, buffer)

            case KeyCode.DOWN:
                if key.ctrl:
                    state.scroll_down(1)
                    state.render_visible_content(term)
                    _display_prompt_with_input(buffer)

            case KeyCode.PAGE_UP:
                state.scroll_up(state.terminal_height // 2)
                state.render_visible_content(term)
                _display_prompt_with_input(buffer)

            case KeyCode.PAGE_DOWN:
                state.scroll_down(state.terminal_height // 2)
                state.render_visible_content(term)
                _display_prompt_with_input(buffer)

            case _:
                pass