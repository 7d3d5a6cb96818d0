# timetravel

Renames the files in a directory so that the date in each name is written in
one form, `YYYY-MM-DD`. The file extension is kept.

## Installation

```
pip install .
```

## Usage

```
time-travel PATH/TO/DIRECTORY
```

The same command can be run as `python -m timetravel.cli PATH/TO/DIRECTORY`.

The command goes through the regular, non-hidden files in the directory in
name order. Subdirectories and symbolic links are skipped. It prints one line
for each file:

- `old -> new`: a date was found and the file was renamed.
- `old -> new` in yellow: more than one date could be read from the name. The
  file was renamed using the first date found, so check it.
- `old -> new` in grey: the name already has the right form and was left alone.
- `Unknown: name` in red: no date was found.
- `Failure: name` in red: the file could not be renamed.

The last line gives the number of files renamed. If the new name is already
taken, a number is added before the extension, as in `2021-03-04(1).jpg`.

The command exits with status 1 when no directory is given, 2 when the
directory name is too long and 3 when the directory cannot be opened.

Only the part of a name before its first dot is searched for a date. That part
is replaced by the date, and everything from the first dot on is kept.

### Recognised dates

Months may be numbers or words, in English or Italian, full or short
(`january`, `jan`, `gennaio`, `gen`, ...). Any case is accepted. The parts may
be separated by `-`, `_` or a space. Numeric dates with a year need either
separators or fixed-width parts:

- `2021-03-04`, `21_3_4`, `20210304`, `04-03-2021`, `04032021`
- `2021 march 4`, `4-mar-21`, `04marzo2021`
- with no year, the current year is used: `march 4`, `4 mar`, `03-04`, `0304`

Worded months are tried before numeric ones, and dates with a year before dates
without one. A name such as `03-04` can be read both as month-day and as
day-month. It is then taken as month-day and reported as unsure.

A two-digit year is read as 20YY if that is no more than ten years after the
current year. Otherwise it is read as 19YY. Dates more than ten years in the
future are not accepted, and neither are days that a month does not have.

## Library use

```python
from timetravel.finder import Outcome, find_date

outcome, new_name = find_date("IMG 2019 jan 05")
assert outcome is Outcome.FOUND
assert new_name == "2019-01-05"
```

`find_date` returns an `Outcome` (`FOUND`, `UNSURE`, `UNKNOWN`, `UNCHANGED` or
`FAILURE`) together with the date found, or an empty string when there is none.

`timetravel.finder.extract_date(source, pattern, year_pos, month_pos, day_pos,
month_value)` applies a single regular expression and returns the date its
groups capture, or `None`.

`timetravel.files.analyze_filenames(folder, finder)` applies any finder with
the same signature as `find_date` to the files in a folder, prints each
outcome and returns the number of files renamed. The module also provides
`split_extension`, `make_filename_unique`, `write_back`, `format_outcome` and
`print_outcome`.

## Running the tests

```
pip install .[test]
pytest
```