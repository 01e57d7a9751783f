import json

import pytest

from todo_cli.commands import dispatch, list_commands, parse_id, parse_id_range, parse_status, split_command
from todo_cli.errors import ParseError
from todo_cli.help_text import USAGE


def _run(manager, capsys, *lines):
    for line in lines:
        assert dispatch(line, manager) is True
    return capsys.readouterr().out.splitlines()


def test_split_command_on_first_space_only():
    assert split_command("add Buy some milk") == ("add", "Buy some milk")
    assert split_command("print_all") == ("print_all", "")


def test_parse_id():
    assert parse_id("12") == 12
    assert parse_id("-1") == -1
    assert parse_id("+7") == 7
    assert parse_id(" 007 ") == 7
    with pytest.raises(ParseError) as excinfo:
        parse_id("abc")
    assert str(excinfo.value) == "Invalid id: abc"


@pytest.mark.parametrize("raw", ["1_000", "\u0663", "1.5", "0x10", "+", ""])
def test_parse_id_rejects_non_decimal_forms(raw):
    with pytest.raises(ParseError):
        parse_id(raw)


def test_parse_status():
    assert parse_status("true") is True
    assert parse_status("FALSE") is False
    with pytest.raises(ParseError):
        parse_status("done")


def test_parse_id_range():
    assert parse_id_range("1 3") == (1, 3)
    with pytest.raises(ParseError):
        parse_id_range("1")


def test_add_and_print(manager, capsys):
    out = _run(manager, capsys, "add Buy milk", "add Walk dog", "print_all")

    assert out == [
        "Todo added successfully.",
        "Todo added successfully.",
        "ID: 0, Title: Buy milk, Status: false",
        "ID: 1, Title: Walk dog, Status: false",
    ]


def test_add_reports_validation_error(manager, capsys):
    out = _run(manager, capsys, "add " + "x" * 101)

    assert out == ["Validation error: Title errors:", "Title cannot exceed 100 characters."]
    assert len(manager) == 0


def test_add_reports_duplicate(manager, capsys):
    out = _run(manager, capsys, "add A", "add A")

    assert out[-1] == "A todo with the title 'A' already exists."


@pytest.mark.parametrize(
    "line, message",
    [
        ("add", "Please provide a title"),
        ("remove_by_id", "Please provide an id"),
        ("remove_by_title", "Please provide a title"),
        ("remove_by_status", "Please provide a status"),
        ("remove_by_id_range", "Please provide a minimum and maximum id"),
        ("toggle_by_id", "Please provide an id"),
        ("toggle_by_title", "Please provide a title"),
        ("toggle_by_status", "Please provide a status"),
        ("print_by_status", "Please provide a status"),
        ("print_by_id", "Please provide an id"),
        ("print_by_title", "Please provide a title"),
        ("save_to_json", "Please provide a filename"),
        ("load_from_json", "Please provide a filename"),
    ],
)
def test_missing_arguments(manager, capsys, line, message):
    assert _run(manager, capsys, line) == [message]


def test_invalid_command(manager, capsys):
    assert _run(manager, capsys, "frobnicate now") == ["Invalid command"]


def test_exit_and_quit_stop_the_loop(manager):
    assert dispatch("exit", manager) is False
    assert dispatch("quit", manager) is False


def test_malformed_arguments_are_reported(manager, capsys):
    out = _run(manager, capsys, "toggle_by_id one", "print_by_status maybe")

    assert out == ["Invalid id: one", "Invalid status: maybe (expected true or false)"]


def test_not_found_is_reported(manager, capsys):
    out = _run(manager, capsys, "remove_by_id 3", "toggle_by_title Nope", "print_by_id 3")

    assert out == [
        "Todo with ID 3 not found.",
        "Todo with title 'Nope' not found.",
        "Todo with ID 3 not found.",
    ]


def test_toggle_and_remove_flow(manager, capsys):
    out = _run(
        manager,
        capsys,
        "add Buy milk",
        "add Walk dog",
        "toggle_by_id 0",
        "remove_by_id 1",
        "print_all",
    )

    assert out[-3:] == [
        "Todo toggled successfully.",
        "Todo removed successfully.",
        "ID: 0, Title: Buy milk, Status: true",
    ]


def test_bulk_status_commands(manager, capsys):
    _run(manager, capsys, "add A", "add B", "add C", "toggle_by_title B")

    out = _run(manager, capsys, "remove_by_status true", "print_by_status false")
    assert out == [
        "Removed 1 todo(s).",
        "ID: 0, Title: A, Status: false",
        "ID: 2, Title: C, Status: false",
    ]

    out = _run(manager, capsys, "toggle_by_status true", "print_by_status true")
    assert out[0] == "Updated 2 todo(s)."
    assert len(out) == 3


def test_remove_by_id_range_and_remove_all(manager, capsys):
    _run(manager, capsys, "add A", "add B", "add C", "add D")

    assert _run(manager, capsys, "remove_by_id_range 1 2") == ["Removed 2 todo(s)."]
    assert [todo.title for todo in manager] == ["A", "D"]
    assert _run(manager, capsys, "remove_all") == ["Removed 2 todo(s)."]
    assert len(manager) == 0


def test_save_and_load_commands(manager, capsys, tmp_path):
    path = tmp_path / "todos.json"
    _run(manager, capsys, "add A", "toggle_by_title A")

    assert _run(manager, capsys, f"save_to_json {path}") == [f"Saved 1 todo(s) to {path}."]
    assert json.loads(path.read_text(encoding="utf-8")) == [{"id": 0, "title": "A", "status": True}]

    _run(manager, capsys, "remove_all")
    assert _run(manager, capsys, f"load_from_json {path}") == [f"Loaded 1 todo(s) from {path}."]
    assert manager.find_by_title("A").status is True


def test_load_failures_do_not_stop_the_loop(manager, capsys, tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{", encoding="utf-8")

    out = _run(manager, capsys, f"load_from_json {tmp_path / 'missing.json'}", f"load_from_json {bad}")

    assert out[0].startswith(f"Error reading {tmp_path / 'missing.json'}")
    assert out[1].startswith("Invalid todo file:")


def test_help_all(manager, capsys):
    out = _run(manager, capsys, "help")

    assert out[0] == "Available commands:"
    assert out[1:] == list(USAGE.values())
    assert _run(manager, capsys, "help all") == out


def test_help_topics(manager, capsys):
    assert _run(manager, capsys, "help add") == [USAGE["add"]]
    assert _run(manager, capsys, "help json") == [USAGE["save_to_json"], USAGE["load_from_json"]]
    assert len(_run(manager, capsys, "help toggle")) == 3


@pytest.mark.parametrize("topic", ["exit", "quit"])
def test_help_exit_does_not_report_invalid_argument(manager, capsys, topic):
    assert _run(manager, capsys, f"help {topic}") == ["exit or quit: Exit the program"]


def test_help_unknown_topic(manager, capsys):
    assert _run(manager, capsys, "help bogus") == ["Invalid argument: bogus"]


def test_every_command_has_usage():
    for name in list_commands():
        if name == "quit":
            continue
        assert name in USAGE


def test_save_failure_on_bad_title_does_not_stop_the_loop(manager, capsys, tmp_path):
    path = tmp_path / "todos.json"
    _run(manager, capsys, "add Keep", f"save_to_json {path}")
    manager.add("bad \udcff")

    out = _run(manager, capsys, f"save_to_json {path}")

    assert out == [f"Error writing {path}: a todo title is not valid UTF-8 text"]
    assert json.loads(path.read_text(encoding="utf-8")) == [{"id": 0, "title": "Keep", "status": False}]
