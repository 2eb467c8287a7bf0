import pytest

from studentdesk.cli import build_parser, main
from studentdesk.records import Student, StudentStore


def _add_args(data_file, name="Alice", roll="7", p="40", c="45", m="50"):
    return [
        "--data-file", str(data_file), "add",
        "--name", name, "--roll", roll, "--class", "X", "--div", "A",
        "--physics", p, "--chemistry", c, "--maths", m,
    ]


def test_add_stores_student(tmp_path, capsys):
    data = tmp_path / "data.txt"
    assert main(_add_args(data)) == 0
    assert StudentStore(data).load() == [Student("Alice", 7, "X", "A", 40, 45, 50)]
    assert "Student was added successfully!" in capsys.readouterr().out


def test_add_appends_in_order(tmp_path):
    data = tmp_path / "data.txt"
    main(_add_args(data, name="Alice", roll="7"))
    main(_add_args(data, name="Bob", roll="8"))
    assert [s.name for s in StudentStore(data).load()] == ["Alice", "Bob"]


def test_add_missing_mark_fails(tmp_path, capsys):
    data = tmp_path / "data.txt"
    assert main(_add_args(data, m="0")) == 1
    assert not data.exists()
    err = capsys.readouterr().err
    assert "Please enter the required marks!" in err
    assert "Failed to add new student :(" in err


def test_add_zero_roll_fails(tmp_path, capsys):
    data = tmp_path / "data.txt"
    assert main(_add_args(data, roll="0")) == 1
    assert "Please fill the required data!" in capsys.readouterr().err


def test_edit_changes_only_given_fields(tmp_path, capsys):
    data = tmp_path / "data.txt"
    main(_add_args(data))
    assert main(["--data-file", str(data), "edit", "7", "--physics", "10"]) == 0
    assert StudentStore(data).load() == [Student("Alice", 7, "X", "A", 10, 45, 50)]
    assert "Data was edited successfully!" in capsys.readouterr().out


def test_edit_unknown_roll(tmp_path, capsys):
    data = tmp_path / "data.txt"
    main(_add_args(data))
    before = data.read_text()
    assert main(["--data-file", str(data), "edit", "99", "--name", "Zed"]) == 1
    assert data.read_text() == before
    assert "Student not found!" in capsys.readouterr().err


def test_edit_missing_file(tmp_path, capsys):
    data = tmp_path / "missing.txt"
    assert main(["--data-file", str(data), "edit", "7"]) == 1
    assert "Error opening file!" in capsys.readouterr().err


def test_edit_zero_roll(tmp_path, capsys):
    data = tmp_path / "data.txt"
    main(_add_args(data))
    assert main(["--data-file", str(data), "edit", "0"]) == 1
    assert "Please enter the roll number!" in capsys.readouterr().err


def test_show_lists_students(tmp_path, capsys):
    data = tmp_path / "data.txt"
    main(_add_args(data, name="Alice", roll="7"))
    main(_add_args(data, name="Bob", roll="8"))
    capsys.readouterr()
    assert main(["--data-file", str(data), "show"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split() == ["Name", "Roll", "No.", "Class", "Div"]
    assert lines[1].split() == ["Alice", "7", "X", "A"]
    assert lines[2].split() == ["Bob", "8", "X", "A"]


def test_show_missing_file_prints_headers_only(tmp_path, capsys):
    assert main(["--data-file", str(tmp_path / "none.txt"), "show"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("Name")


def test_about_shows_version(capsys):
    assert main(["about"]) == 0
    assert "Version: 1.0.0" in capsys.readouterr().out


def test_command_is_required():
    with pytest.raises(SystemExit) as info:
        build_parser().parse_args([])
    assert info.value.code == 2


def test_parser_reads_add_options():
    args = build_parser().parse_args(_add_args("f.txt"))
    assert (args.command, args.name, args.roll, args.stu_class) == ("add", "Alice", 7, "X")