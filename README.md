# adventkit

A workbench for solving Advent of Code puzzles in Python. It creates the
files for each day, fetches puzzle descriptions and inputs through the `aoc`
command-line client, runs your solutions, and keeps a benchmark table in your
`README.md` up to date. Solutions for days 1 to 6 are included.

## Layout

Data files are read and written relative to the current directory:

```
data/
  inputs/01.txt      your personal puzzle input
  examples/01.txt    the example from the puzzle text
  puzzles/01.md      the puzzle description
  timings.json       stored benchmark results
README.md            holds the benchmark table
```

The `data/inputs` and `data/examples` directories must exist before you
scaffold a day.

Solution modules live inside the installed package, as
`adventkit/solutions/dayNN.py`. Days are numbered 1 to 25 and written with
two digits (`01` … `25`); any other day number is rejected with an error.

Each solution module defines `part_one(puzzle_input)` and
`part_two(puzzle_input)`, which take the puzzle text and return the answer,
or `None` if that part is not solved yet, and a `main(argv=None)` that reads
`data/inputs/NN.txt` and runs both parts.

## Commands

### scaffold

```
adventkit scaffold 7
adventkit scaffold 7 --overwrite
adventkit scaffold 7 --download
```

Writes `adventkit/solutions/day07.py` from a template and creates empty
`data/inputs/07.txt` and `data/examples/07.txt`. An existing solution module
is an error unless `--overwrite` is given. The input and example files are
always created empty, replacing whatever was there. `--download` runs
`download` for the day afterwards.

### download and read

```
adventkit download 7
adventkit read 7
```

`download` saves the input to `data/inputs/07.txt` and the description to
`data/puzzles/07.md`. `read` prints the description in the terminal.

### today

```
adventkit today
```

During December 1st to 25th (in UTC−5, the puzzle server's time zone),
scaffolds, downloads and reads the current day. At any other time it exits
with an error.

### solve

```
adventkit solve 7
adventkit solve 7 --release
adventkit solve 7 --submit 1
adventkit solve 7 --dhat
```

Runs the day's solution in a fresh Python interpreter and prints each part's
result with how long it took. `--release` starts the interpreter with `-O`;
`--dhat` starts it with `-X tracemalloc` instead. `--submit N` sends the
answer of part `N` through `aoc` once that part has a result.

### all

```
adventkit all
adventkit all --release
```

Runs every day that has a solution module, in day order. Days without one
print `Not solved.`.

### time

```
adventkit time
adventkit time 7
adventkit time --all
adventkit time --all --store
```

Benchmarks solutions. Each part is run repeatedly: about one second's worth
of runs, never fewer than 10 or more than 10,000, and the average time is
reported with the number of samples, followed by the total in milliseconds.

Without a day or `--all`, days that already have timings for both parts in
`data/timings.json` are skipped. With `--store`, the new results are merged
into `data/timings.json` (new results win for the same day) and the benchmark
table in `README.md` is rewritten.

A single solution can also be benchmarked directly:

```
python -m adventkit.solutions.day01 --time
```

Unknown extra arguments are reported with a warning and otherwise ignored.

## The benchmark table

Put this marker in your `README.md` twice, once where the table should start
and once where it should end:

```
<!--- benchmarking table --->
<!--- benchmarking table --->
```

Everything from the first marker to the last is replaced by a table with one
row per day and the total run time in milliseconds. If the marker is missing
or appears more than twice, the table is not written and
`Failed to store updated benchmarks.` is printed.

## Talking to adventofcode.com

`download`, `read`, `today` and `--submit` call the `aoc` client, which must
be installed and on your `PATH`; without it these commands exit with an
error. To work on an earlier event, set `AOC_YEAR` (for example
`AOC_YEAR=2023`); if it is unset or not a number, the client's own default
year is used.

## What it does not do

- It has no HTTP client of its own; all contact with the puzzle site goes
  through `aoc`.
- `--dhat` only enables `tracemalloc` in the child interpreter; no heap
  profile or memory report is printed.