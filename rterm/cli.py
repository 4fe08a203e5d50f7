"""Command-line entry point for the full-screen shell."""

from __future__ import annotations

import argparse
from typing import Sequence

from rterm.terminal import Terminal


def main(argv: Sequence[str] | None = None) -> int:
    """Start the full-screen shell and run it until the user quits."""
    parser = argparse.ArgumentParser(
        prog="rterm",
        description="A full-screen shell that runs commands with bash.",
    )
    parser.parse_args(argv)

    with Terminal() as terminal:
        while terminal.process_keyboard_input():
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())