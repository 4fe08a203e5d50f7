import io
import subprocess

from rterm.app import run


def test_run_executes_lines_until_exit(monkeypatch, capsys):
    calls = []

    def fake_run(args, **kwargs):
        calls.append(list(args))
        return subprocess.CompletedProcess(args, 0, b"hi\n", b"")

    monkeypatch.setattr(subprocess, "run", fake_run)
    monkeypatch.setattr("sys.stdin", io.StringIO("echo hi\n\nexit\nnever\n"))

    run()

    out = capsys.readouterr().out
    assert calls == [["bash", "-c", "echo hi"]]
    assert out.startswith("Welcome to the App-based Terminal Emulator!\n")
    assert "user@host: hi\n" in out
    assert out.endswith("Exiting terminal emulator...\n")


def test_run_reports_spawn_errors(monkeypatch, capsys):
    def broken(args, **kwargs):
        raise FileNotFoundError("no bash")

    monkeypatch.setattr(subprocess, "run", broken)
    monkeypatch.setattr("sys.stdin", io.StringIO("ls\nexit\n"))

    run()

    captured = capsys.readouterr()
    assert "Error capturing input: no bash" in captured.err
    assert captured.out.endswith("Exiting terminal emulator...\n")