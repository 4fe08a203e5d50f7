"""Command execution: executors, their results and a registry of executors."""

from __future__ import annotations

import enum
import os
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence


class ResultKind(enum.Enum):
    """The kind of outcome a command produced."""

    OUTPUT = "output"
    ERROR = "error"
    EMPTY = "empty"
    DIRECTORY_CHANGED = "directory_changed"


@dataclass(frozen=True)
class CommandResult:
    """Outcome of running a command."""

    kind: ResultKind
    text: str = ""
    path: Path | None = None

    @classmethod
    def output(cls, text: str) -> CommandResult:
        return cls(ResultKind.OUTPUT, text=text)

    @classmethod
    def error(cls, text: str) -> CommandResult:
        return cls(ResultKind.ERROR, text=text)

    @classmethod
    def empty(cls) -> CommandResult:
        return cls(ResultKind.EMPTY)

    @classmethod
    def directory_changed(cls, path: Path) -> CommandResult:
        return cls(ResultKind.DIRECTORY_CHANGED, path=path)


class CommandExecutor(ABC):
    """Something that can run a command given as a list of words."""

    @abstractmethod
    def execute(self, args: Sequence[str]) -> CommandResult:
        """Run the command; raise OSError if it cannot be started."""

    @abstractmethod
    def name(self) -> str:
        """Short name used to look the executor up."""

    @abstractmethod
    def help(self) -> str:
        """One-line description of the executor."""


class BashExecutor(CommandExecutor):
    """Runs commands with ``bash -c``; ``cd`` is handled in-process."""

    def execute(self, args: Sequence[str]) -> CommandResult:
        if not args:
            return CommandResult.empty()

        command = " ".join(args)
        if command.strip().startswith("cd "):
            return self._handle_cd(command)

        completed = subprocess.run(
            ["bash", "-c", command], capture_output=True, check=False
        )
        if completed.returncode != 0:
            return CommandResult.error(completed.stderr.decode(errors="replace"))

        output = completed.stdout.decode(errors="replace")
        return CommandResult.output(output) if output else CommandResult.empty()

    def name(self) -> str:
        return "bash"

    def help(self) -> str:
        return "Executes commands in bash shell"

    def _handle_cd(self, command: str) -> CommandResult:
        parts = command.split()

        if len(parts) < 2:
            try:
                home = Path.home()
            except RuntimeError:
                return CommandResult.error("Home directory not found")
            os.chdir(home)
            return CommandResult.directory_changed(home)

        target = parts[1]

        if target == "-":
            previous = os.environ.get("OLDPWD")
            if previous is None:
                return CommandResult.error("No previous directory")
            previous_path = Path(previous)
            os.chdir(previous_path)
            try:
                os.environ["OLDPWD"] = os.getcwd()
            except OSError:
                pass
            return CommandResult.directory_changed(previous_path)

        try:
            os.environ["OLDPWD"] = os.getcwd()
        except OSError:
            pass

        try:
            os.chdir(target)
        except OSError as exc:
            return CommandResult.error(f"Failed to change directory: {exc}")

        try:
            return CommandResult.directory_changed(Path.cwd())
        except OSError as exc:
            return CommandResult.error(f"Failed to get new directory: {exc}")


class CommandRegistry:
    """Holds the available executors; bash is registered by default."""

    def __init__(self) -> None:
        self.executors: list[CommandExecutor] = []
        self.register(BashExecutor())

    def register(self, executor: CommandExecutor) -> None:
        self.executors.append(executor)

    def execute_bash_command(self, command: str) -> CommandResult:
        """Run a whole command line with the first executor named ``bash``."""
        for executor in self.executors:
            if executor.name() == "bash":
                return executor.execute([command])
        return CommandResult.error("Bash executor not found")