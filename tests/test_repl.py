import io

from todo_cli.repl import run_repl


def test_repl_runs_until_exit(manager, capsys):
    stream = io.StringIO("add Buy milk\n\nprint_all\nexit\nadd never\n")

    run_repl(manager, stream=stream)

    captured = capsys.readouterr()
    assert captured.out.splitlines() == [
        "Todo added successfully.",
        "ID: 0, Title: Buy milk, Status: false",
    ]
    assert len(manager) == 1


def test_repl_writes_prompt_to_stderr(manager, capsys):
    run_repl(manager, prompt="todo> ", stream=io.StringIO("quit\n"))

    captured = capsys.readouterr()
    assert captured.err == "todo> "
    assert captured.out == ""


def test_repl_stops_at_end_of_input(manager, capsys):
    run_repl(manager, stream=io.StringIO("add A\nbogus"))

    assert capsys.readouterr().out.splitlines() == ["Todo added successfully.", "Invalid command"]


def test_repl_strips_surrounding_whitespace(manager, capsys):
    run_repl(manager, stream=io.StringIO("   add  Padded title  \n"))

    assert manager.todos[0].title == " Padded title"


def test_repl_reports_undecodable_line_and_continues(manager, capsys):
    stream = io.TextIOWrapper(io.BytesIO(b"add \xff\xfe\nadd Good\nexit\n"), encoding="utf-8")

    run_repl(manager, stream=stream)

    assert capsys.readouterr().out.splitlines() == [
        "Invalid input: line is not valid UTF-8 text",
        "Todo added successfully.",
    ]
    assert [todo.title for todo in manager] == ["Good"]


class _FlakyStream:
    """Raises a decode error on the first read, then replays its lines."""

    def __init__(self, lines):
        self._lines = list(lines)
        self._failed = False

    def readline(self):
        if not self._failed:
            self._failed = True
            raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        return self._lines.pop(0) if self._lines else ""


def test_repl_survives_decode_errors_from_stream(manager, capsys):
    run_repl(manager, stream=_FlakyStream(["add After\n"]))

    assert capsys.readouterr().out.splitlines() == [
        "Invalid input: line is not valid UTF-8 text",
        "Todo added successfully.",
    ]
    assert len(manager) == 1
