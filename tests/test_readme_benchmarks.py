import pytest

from adventkit.day import Day
from adventkit.readme_benchmarks import (
    MARKER,
    ReadmeError,
    get_path_for_bin,
    locate_table,
    update,
    update_content,
)
from adventkit.timings import Timing, Timings


def mock_timings():
    return Timings(
        data=[
            Timing(day=Day(1), part_1="10ms", part_2="20ms", total_nanos=3e10),
            Timing(day=Day(2), part_1="30ms", part_2="40ms", total_nanos=7e10),
            Timing(day=Day(4), part_1="40ms", part_2="50ms", total_nanos=9e10),
        ]
    )


def test_errors_if_marker_not_present():
    with pytest.raises(ReadmeError):
        update_content("# readme", mock_timings(), 190.0)


def test_errors_if_too_many_markers_present():
    with pytest.raises(ReadmeError):
        update_content(f"{MARKER} {MARKER} {MARKER}", mock_timings(), 190.0)


def test_updates_empty_benchmarks():
    s = update_content(f"foo\nbar\n{MARKER}{MARKER}\nbaz", mock_timings(), 190.0)
    assert "## Benchmarks" in s


def test_updates_existing_benchmarks():
    s = f"foo\nbar\n{MARKER}{MARKER}\nbaz"
    s = update_content(s, mock_timings(), 190.0)
    s = update_content(s, mock_timings(), 190.0)
    assert s.count(MARKER) == 2
    assert s.count("## Benchmarks") == 1


def test_format_benchmarks():
    s = update_content(f"foo\nbar\n{MARKER}\n{MARKER}\nbaz", mock_timings(), 190.0)
    expected = "\n".join(
        [
            "foo",
            "bar",
            "<!--- benchmarking table --->",
            "## Benchmarks",
            "",
            "| Day | Part 1 | Part 2 |",
            "| :---: | :---: | :---:  |",
            "| [Day 1](./src/bin/01.rs) | `10ms` | `20ms` |",
            "| [Day 2](./src/bin/02.rs) | `30ms` | `40ms` |",
            "| [Day 4](./src/bin/04.rs) | `40ms` | `50ms` |",
            "",
            "**Total: 190.00ms**",
            "<!--- benchmarking table --->",
            "baz",
        ]
    )
    assert s == expected


def test_missing_parts_render_as_dash():
    timings = Timings(data=[Timing(day=Day(3), part_1="1ms", part_2=None, total_nanos=1.0)])
    s = update_content(f"{MARKER}{MARKER}", timings, 0.0)
    assert "| [Day 3](./src/bin/03.rs) | `1ms` | `-` |" in s


def test_locate_table_single_marker():
    position = locate_table(f"ab{MARKER}cd")
    assert position.pos_start == 2
    assert position.pos_end == 2 + len(MARKER)


def test_get_path_for_bin():
    assert get_path_for_bin(Day(4)) == "./src/bin/04.rs"


def test_update_rewrites_file(tmp_path):
    readme = tmp_path / "README.md"
    readme.write_text(f"intro\n{MARKER}\n{MARKER}\nend", encoding="utf-8")
    update(mock_timings(), readme)
    content = readme.read_text(encoding="utf-8")
    assert content.startswith("intro\n")
    assert content.endswith("\nend")
    assert "**Total: 190000.00ms**" in content


def test_update_missing_file(tmp_path):
    with pytest.raises(ReadmeError):
        update(mock_timings(), tmp_path / "missing.md")