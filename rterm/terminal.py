"""Full-screen shell with a scrollable history, a prompt line and command history."""

from __future__ import annotations

import contextlib
import os
import shutil
import socket
import sys
from pathlib import Path
from typing import Any

import blessed

from rterm.command import CommandRegistry, ResultKind
from rterm.keys import KeyCode, KeyPress, from_keystroke

_POLL_SECONDS = 0.1

_BANNER = (
    "",
    "                 _~^~^~_                 ",
    "             \\) /  o o  \\ (/            ",
    "               '_   v   _'               ",
    "              / '-----' \\               ",
    "                                         ",
    "         ██████╗ ██╗   ██╗███████╗████████╗",
    "         ██╔══██╗██║   ██║██╔════╝╚══██╔══╝",
    "         ██████╔╝██║   ██║███████╗   ██║   ",
    "         ██╔══██╗██║   ██║╚════██║   ██║   ",
    "         ██║  ██║╚██████╔╝███████║   ██║   ",
    "         ╚═╝  ╚═╝ ╚═════╝ ╚══════╝   ╚═╝   ",
    "                                         ",
    "  ******** Rust Terminal Emulator ******** ",
    "",
    "Use Ctrl+Up/Down or PageUp/PageDown to scroll through terminal history.",
    "Type 'exit' or press ESC to quit.",
    "",
)


def _split_lines(text: str) -> list[str]:
    """Split on newlines, dropping a final empty piece and trailing carriage returns."""
    if not text:
        return []
    pieces = text.split("\n")
    if pieces[-1] == "":
        pieces.pop()
    return [piece.removesuffix("\r") for piece in pieces]


class Terminal:
    """State of the full-screen shell and the logic that drives it."""

    def __init__(
        self,
        term: Any = None,
        width: int | None = None,
        height: int | None = None,
    ) -> None:
        if width is None or height is None:
            size = shutil.get_terminal_size()
            width = size.columns if width is None else width
            height = size.lines if height is None else height
        self._term = term
        self._stack: contextlib.ExitStack | None = None
        self.width = width
        self.height = height
        self.history: list[str] = []
        self.scroll_position = 0
        self.prompt = "user@host: "
        self.input_buffer = ""
        self.command_history: list[str] = []
        self.command_history_position: int | None = None
        self.command_registry = CommandRegistry()
        self.current_dir = Path.cwd()

    @property
    def term(self) -> Any:
        if self._term is None:
            self._term = blessed.Terminal()
        return self._term

    def __enter__(self) -> Terminal:
        self.init()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cleanup()

    def init(self) -> None:
        """Switch to the alternate screen in cbreak mode and draw the banner."""
        stack = contextlib.ExitStack()
        stack.enter_context(self.term.fullscreen())
        stack.enter_context(self.term.cbreak())
        self._stack = stack
        for line in _BANNER:
            self.add_to_history(line)
        self.render()

    def cleanup(self) -> None:
        """Leave the alternate screen and restore the terminal mode."""
        if self._stack is not None:
            self._stack.close()
            self._stack = None

    def add_to_history(self, line: str) -> None:
        self.history.append(line)
        self.scroll_to_bottom()

    def _max_scroll(self) -> int:
        return max(0, len(self.history) - (self.height - 1))

    def scroll_up(self, lines: int) -> None:
        if self.scroll_position > 0:
            self.scroll_position = max(0, self.scroll_position - lines)

    def scroll_down(self, lines: int) -> None:
        max_scroll = self._max_scroll()
        if self.scroll_position < max_scroll:
            self.scroll_position = min(self.scroll_position + lines, max_scroll)

    def scroll_to_bottom(self) -> None:
        self.scroll_position = self._max_scroll()

    def visible_lines(self) -> list[str]:
        """History lines shown above the prompt row."""
        end = min(self.scroll_position + self.height - 1, len(self.history))
        return self.history[self.scroll_position:end]

    def render(self) -> None:
        """Redraw the visible history and the prompt on the bottom row."""
        term = self.term
        out = [term.clear, term.home]
        for row, line in enumerate(self.visible_lines()):
            out.append(term.move_xy(0, row) + line)
        out.append(term.move_xy(0, self.height - 1))
        out.append(term.green + self.get_prompt() + term.normal)
        out.append(self.input_buffer)
        sys.stdout.write("".join(out))
        sys.stdout.flush()

    def process_keyboard_input(self) -> bool:
        """Wait briefly for a key and handle it; return False when the shell should exit."""
        key = from_keystroke(self.term.inkey(timeout=_POLL_SECONDS))
        if key is None:
            return True
        return self.handle_key(key)

    def handle_key(self, key: KeyPress) -> bool:
        """React to one key press; return False when the shell should exit."""
        match key.code:
            case KeyCode.ESC:
                self.add_to_history("Exiting...")
                self.render()
                return False

            case KeyCode.ENTER:
                command = self.input_buffer
                self.add_to_history(f"{self.get_prompt()}{command}")
                if command.strip() == "exit":
                    self.add_to_history("Exiting...")
                    self.render()
                    return False
                if command.strip():
                    self.command_history.append(command)
                    self.command_history_position = None
                self.input_buffer = ""
                if command.strip():
                    self.execute_command(command)
                self.render()

            case KeyCode.CHAR:
                self.input_buffer += key.char
                self.render()

            case KeyCode.BACKSPACE:
                if self.input_buffer:
                    self.input_buffer = self.input_buffer[:-1]
                    self.render()

            case KeyCode.UP:
                if key.ctrl:
                    self.scroll_up(1)
                    self.render()
                else:
                    self.navigate_history_up()

            case KeyCode.DOWN:
                if key.ctrl:
                    self.scroll_down(1)
                    self.render()
                else:
                    self.navigate_history_down()

            case KeyCode.PAGE_UP:
                self.scroll_up(self.height // 2)
                self.render()

            case KeyCode.PAGE_DOWN:
                self.scroll_down(self.height // 2)
                self.render()

            case _:
                pass

        return True

    def navigate_history_up(self) -> None:
        if not self.command_history:
            return
        position = self.command_history_position
        if position is None:
            position = len(self.command_history) - 1
        elif position > 0:
            position -= 1
        self.input_buffer = self.command_history[position]
        self.command_history_position = position
        self.render()

    def navigate_history_down(self) -> None:
        if not self.command_history:
            return
        position = self.command_history_position
        if position is not None and position < len(self.command_history) - 1:
            position += 1
            self.input_buffer = self.command_history[position]
            self.command_history_position = position
        else:
            self.input_buffer = ""
            self.command_history_position = None
        self.render()

    def execute_command(self, command: str) -> None:
        """Run a command line and add what it produced to the history."""
        try:
            result = self.command_registry.execute_bash_command(command)
        except OSError as exc:
            self.add_to_history(f"Failed to execute command: {exc}")
            return

        match result.kind:
            case ResultKind.OUTPUT:
                for line in _split_lines(result.text):
                    self.add_to_history(line)
            case ResultKind.ERROR:
                for line in _split_lines(result.text):
                    self.add_to_history(f"Error: {line}")
            case ResultKind.DIRECTORY_CHANGED:
                if result.path is not None:
                    self.current_dir = result.path
            case ResultKind.EMPTY:
                pass

    def update_current_dir(self, new_dir: str | os.PathLike[str]) -> None:
        """Change the process directory; raise OSError if that fails."""
        os.chdir(new_dir)
        self.current_dir = Path(new_dir)

    def get_prompt(self) -> str:
        """Prompt of the form ``user@host(directory): ``."""
        username = os.environ.get("USER", "user")
        try:
            hostname = socket.gethostname() or "host"
        except OSError:
            hostname = "host"
        return f"{username}@{hostname}({self.current_dir}): "

    def update_after_command(self) -> None:
        """Pick up a change of the process directory."""
        new_dir = Path.cwd()
        if new_dir != self.current_dir:
            self.current_dir = new_dir