import subprocess
from types import SimpleNamespace

import pytest

from rterm.events import TerminalState, capture_input


def _filled(height, count):
    state = TerminalState(height)
    for n in range(count):
        state.add_output_line(f"line {n}")
    return state


def test_add_output_line_scrolls_to_bottom():
    state = _filled(3, 5)
    assert state.scroll_position == 2
    assert state.output_lines[-1] == "line 4"


def test_short_history_stays_at_top():
    assert _filled(10, 4).scroll_position == 0


def test_add_command_output_empty_is_noop():
    state = TerminalState(10)
    state.add_command_output(b"")
    assert state.output_lines == []


def test_add_command_output_without_newline_trims_end():
    state = TerminalState(10)
    state.add_command_output(b"no newline   ")
    assert state.output_lines == ["no newline"]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (b"a\nb\n", ["a", "b"]),
        (b"a\n\nb\n", ["a", "b"]),
        (b"a\n\nb", ["a", "", "b"]),
        (b"a\r\nb\r\n", ["a", "b"]),
    ],
)
def test_add_command_output_splits_lines(raw, expected):
    state = TerminalState(10)
    state.add_command_output(raw)
    assert state.output_lines == expected


def test_add_command_output_replaces_invalid_utf8():
    state = TerminalState(10)
    state.add_command_output(b"x\xff\n")
    assert state.output_lines == ["x\ufffd"]


def test_scroll_up_clamps_at_zero():
    state = _filled(3, 5)
    state.scroll_up(10)
    assert state.scroll_position == 0
    state.scroll_up(1)
    assert state.scroll_position == 0


def test_scroll_down_clamps_at_max():
    state = _filled(3, 5)
    state.scroll_up(2)
    state.scroll_down(1)
    assert state.scroll_position == 1
    state.scroll_down(100)
    assert state.scroll_position == 2


def test_visible_lines_leave_room_for_prompt():
    state = _filled(3, 5)
    visible = state.visible_lines()
    assert len(visible) == state.terminal_height - 1
    assert visible == state.output_lines[state.scroll_position:state.scroll_position + 2]


def test_render_visible_content(capsys):
    state = _filled(3, 5)
    state.render_visible_content(SimpleNamespace(clear="<C>", home="<H>"))
    assert capsys.readouterr().out == "<C><H>line 2\nline 3\n"


def test_capture_input_blank_runs_nothing(monkeypatch, capsys):
    calls = []
    monkeypatch.setattr(subprocess, "run", lambda *a, **k: calls.append(a))
    result = capture_input("   ")
    captured = capsys.readouterr()
    assert result is None
    assert calls == []
    assert captured.out == ""
    assert captured.err == ""


def test_capture_input_writes_both_streams(monkeypatch, capsys):
    calls = []

    def fake_run(args, **kwargs):
        calls.append(list(args))
        return subprocess.CompletedProcess(args, 0, b"out\n", b"err\n")

    monkeypatch.setattr(subprocess, "run", fake_run)
    capture_input("echo out")
    captured = capsys.readouterr()
    assert calls == [["bash", "-c", "echo out"]]
    assert captured.out == "out\n"
    assert captured.err == "err\n"


def test_capture_input_propagates_spawn_failure(monkeypatch):
    def broken(args, **kwargs):
        raise FileNotFoundError("bash")

    monkeypatch.setattr(subprocess, "run", broken)
    with pytest.raises(FileNotFoundError):
        capture_input("ls")