"""Line-based shell: read a line, run it with bash, repeat."""

from __future__ import annotations

import sys
import time

from rterm import events, ui

_PAUSE_SECONDS = 0.1


def run() -> None:
    """Read commands from standard input until ``exit``."""
    host = "host"
    user = "user"

    print("Welcome to the App-based Terminal Emulator!")
    print("Type 'exit' to quit the program")
    print("-----------------------------------------------------------")

    while True:
        line = ui.render_prompt_and_get_input(user, host)
        if line.strip() == "exit":
            print("Exiting terminal emulator...")
            break

        try:
            events.capture_input(line)
        except OSError as exc:
            print(f"Error capturing input: {exc}", file=sys.stderr)

        time.sleep(_PAUSE_SECONDS)