import json
import sys
from pathlib import Path
from unittest import mock

import pytest

from adventkit import commands
from adventkit.day import Day, parse_day, read_file
from adventkit.readme_benchmarks import MARKER


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    (tmp_path / "data" / "inputs").mkdir(parents=True)
    (tmp_path / "data" / "examples").mkdir(parents=True)
    solutions = tmp_path / "solutions"
    solutions.mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(commands, "SOLUTIONS_DIR", solutions)
    return tmp_path


def test_scaffold_creates_files(workspace):
    day = parse_day("7")
    commands.handle_scaffold(day, False)
    module = workspace / "solutions" / "day07.py"
    content = module.read_text(encoding="utf-8")
    assert "DAY = Day(7)" in content
    assert "%DAY_NUMBER%" not in content
    assert read_file("inputs", day) == ""
    assert read_file("examples", day) == ""


def test_scaffold_refuses_existing_module(workspace):
    module = workspace / "solutions" / "day03.py"
    module.write_text("kept", encoding="utf-8")
    with pytest.raises(SystemExit) as info:
        commands.handle_scaffold(Day(3), False)
    assert info.value.code == 1
    assert module.read_text(encoding="utf-8") == "kept"


def test_scaffold_overwrites_when_asked(workspace):
    day = parse_day("03")
    module = workspace / "solutions" / "day03.py"
    module.write_text("kept", encoding="utf-8")
    commands.handle_scaffold(day, True)
    assert "DAY = Day(3)" in module.read_text(encoding="utf-8")
    assert read_file("inputs", day) == ""


def test_scaffold_fails_without_data_dir(workspace):
    (workspace / "data" / "inputs").rmdir()
    with pytest.raises(SystemExit) as info:
        commands.handle_scaffold(Day(4), False)
    assert info.value.code == 1


def test_download_without_client_exits(monkeypatch, capsys):
    monkeypatch.setenv("PATH", "")
    with pytest.raises(SystemExit) as info:
        commands.handle_download(Day(1))
    assert info.value.code == 1
    assert 'command "aoc" not found' in capsys.readouterr().err


def test_read_without_client_exits(monkeypatch, capsys):
    monkeypatch.setenv("PATH", "")
    with pytest.raises(SystemExit) as info:
        commands.handle_read(Day(1))
    assert info.value.code == 1
    assert "not callable" in capsys.readouterr().err


def test_solve_builds_command():
    day = parse_day("5")
    with mock.patch("adventkit.commands.subprocess.run") as run:
        commands.handle_solve(day, True, False, 2)
    command = run.call_args.args[0]
    assert str(day) == "05"
    assert command[0] == sys.executable
    assert "-O" in command
    assert command[command.index("-m") + 1] == f"adventkit.solutions.day{day}"
    assert command[-2:] == ["--submit", "2"]


def test_solve_profile_mode_skips_release_flag():
    day = parse_day("12")
    with mock.patch("adventkit.commands.subprocess.run") as run:
        commands.handle_solve(day, True, True, None)
    command = run.call_args.args[0]
    assert "-O" not in command
    assert "--submit" not in command
    assert command[-1] == f"adventkit.solutions.day{day}"
    assert command[-1] == "adventkit.solutions.day12"


def test_all_reports_every_day(workspace, capsys):
    commands.handle_all(False)
    out = capsys.readouterr().out
    assert "Day 01" in out
    assert "Day 25" in out
    assert out.count("Not solved.") == 25


def test_time_stores_timings_and_readme(workspace, capsys):
    readme = workspace / "README.md"
    readme.write_text(f"intro\n{MARKER}{MARKER}\n", encoding="utf-8")
    stored = {
        "data": [
            {"day": "01", "part_1": "1ms", "part_2": "2ms", "total_nanos": 3000000.0}
        ]
    }
    (workspace / "data" / "timings.json").write_text(json.dumps(stored), encoding="utf-8")

    commands.handle_time(Day(25), False, True)

    saved = json.loads((workspace / "data" / "timings.json").read_text(encoding="utf-8"))
    assert [entry["day"] for entry in saved["data"]] == ["01"]
    text = readme.read_text(encoding="utf-8")
    assert "## Benchmarks" in text
    assert text.count(MARKER) == 2
    assert "Stored updated benchmarks." in capsys.readouterr().out


def test_time_reports_missing_readme(workspace, capsys):
    commands.handle_time(Day(25), False, True)
    assert Path("data/timings.json").exists()
    assert "Failed to store updated benchmarks." in capsys.readouterr().err