from adventkit.solutions.day04 import part_one, part_two

EXAMPLE = "\n".join(
    [
        "..@@.@@@@.",
        "@@@.@.@.@@",
        "@@@@@.@.@@",
        "@.@@@@..@.",
        "@@.@@@@.@@",
        ".@@@@@@@.@",
        ".@.@.@.@@@",
        "@.@@@.@@@@",
        ".@@@@@@@@.",
        "@.@.@@@.@.",
    ]
) + "\n"

FULL_SQUARE = "@@@\n@@@\n@@@\n"


def test_part_one():
    assert part_one(EXAMPLE) == 13


def test_part_two():
    assert part_two(EXAMPLE) == 43


def test_single_roll_is_accessible():
    assert part_one("@") == 1
    assert part_two("@") == 1


def test_full_square_only_corners_accessible():
    assert part_one(FULL_SQUARE) == 4


def test_full_square_is_removed_completely():
    assert part_two(FULL_SQUARE) == 9


def test_empty_grid():
    assert part_one("...\n...\n") == 0
    assert part_two("") == 0


def test_part_two_at_least_part_one():
    assert part_two(EXAMPLE) >= part_one(EXAMPLE)