# rterm

rterm is a small full-screen shell for the console. Each command you type is
run with `bash -c`, and what it prints is added to a scrollable history above
the prompt line. The prompt has the form `user@host(directory): `, built from
the `USER` environment variable, the machine's host name and the current
working directory.

## Installation

```
pip install rterm
```

rterm needs `bash` on the `PATH`.

## Usage

Start the shell:

```
rterm
```

It switches to the terminal's alternate screen, shows a banner and waits for
keys:

| Key                   | Action                                          |
|-----------------------|-------------------------------------------------|
| Enter                 | Run the typed command                           |
| Backspace             | Delete the last character                       |
| Up / Down             | Step through earlier commands                   |
| Ctrl+Up / Ctrl+Down   | Scroll the history by one line                  |
| PageUp / PageDown     | Scroll the history by half a screen             |
| Esc, or type `exit`   | Quit                                            |

When a command succeeds, each line of its standard output is added to the
history. When it exits with a non-zero status, each line of its error output is
added with an `Error: ` prefix, and its standard output is not shown.

A command that starts with `cd ` followed by a directory is handled by rterm
itself, so the change of directory lasts between commands and shows in the
prompt. `cd -` changes to the directory named by `OLDPWD`; rterm sets `OLDPWD`
each time it changes directory. Only the first word after `cd` is used.

## What rterm does not do

rterm runs each command to completion and captures its output; it does not
give commands a pseudo-terminal. Programs that read from the keyboard or draw
on the screen (editors, pagers, `top`) do not work in it, and escape sequences
in command output are not interpreted. There is no tab completion, no cursor
movement inside the input line, and the command history is not saved between
sessions.

## Using it as a library

The command layer works without a screen:

```python
from rterm.command import CommandRegistry, ResultKind

registry = CommandRegistry()
result = registry.execute_bash_command("echo hello")
if result.kind is ResultKind.OUTPUT:
    print(result.text)
```

`execute_bash_command` returns a `CommandResult` whose `kind` is one of
`ResultKind.OUTPUT`, `ERROR`, `EMPTY` or `DIRECTORY_CHANGED`, with the text in
`text` or the new directory in `path`. Further executors can be added with
`CommandRegistry.register`; they subclass `CommandExecutor`.

`rterm.terminal.Terminal` holds the history, the scroll position, the input
buffer and the command history. It takes an optional `blessed` terminal and an
explicit `width` and `height`, and can be used as a context manager, which
calls `init` and `cleanup`. Its `handle_key` method takes a
`rterm.keys.KeyPress` and returns `False` when the shell should quit, so the
shell can be driven without a real keyboard. `rterm.keys.from_keystroke`
turns a keystroke read with `blessed` into a `KeyPress`.

Two simpler shells are available as functions:

- `rterm.app.run()` reads whole lines from standard input and runs each with
  bash, printing its output, until you type `exit`.
- `rterm.events.capture_keyboard_events()` is a key-driven shell with a fixed
  `user@host: ` prompt that redraws its output buffer after each command.

## Running the tests

```
pip install -e ".[test]"
pytest
```