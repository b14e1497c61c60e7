# tapesort

`tapesort` sorts a file of whitespace-separated integers in ascending order
by using a model of a tape device. The tape holds no more than a fixed number
of values at once. Reading, writing and each one-cell move of the tape head
can be slowed by a delay in milliseconds. This simulates slow hardware.

The input is read in segments no larger than the memory limit. Each segment
is loaded onto the tape and sorted there by selection sort. The sorted
segment is then merged into a running sorted result, which is kept in a
temporary directory. When the input is used up, the result is copied to the
output file. The temporary directory is then deleted, and this happens even
if an error occurs.

## Installation

```
pip install .
```

## Command line

```
tapesort <input_file> <output_file> <config_file> <memory_limit>
```

- `input_file`: integers separated by whitespace. Reading stops at the first
  token that is not an integer, or at a value outside the signed 32-bit
  range. Any values read before that point are sorted.
- `output_file`: receives the sorted integers. Each is followed by one space.
- `config_file`: a JSON object that holds the three delays in milliseconds.
  All three keys are required:

  ```json
  {
      "read_delay_ms": 0,
      "write_delay_ms": 0,
      "move_delay_ms": 0
  }
  ```

  Fractional numbers are truncated to integers. Any value that is not a
  number is an error.
- `memory_limit`: the largest number of values the tape holds at once. Any
  leading integer prefix of the argument is used, and text that does not
  start with a number counts as 0. The limit must be positive.

With the wrong number of arguments, the command prints a usage line to
standard error and exits with status 1. Any other error is printed to
standard error as `Error: <message>` and also gives exit status 1. Such
errors include a missing file, a missing or negative delay, and a memory
limit of zero or less.

Temporary files go into a directory named `tmp` under the current working
directory. That directory is created if it does not exist, and it is removed
with all its contents when sorting finishes. Do not point it at a directory
that holds anything you want to keep.

## Library use

```python
from tapesort.app import TapeSortingApp, load_delay_settings, main

app = TapeSortingApp("config.json", 1024, tmp_directory="work")
app.sort("input.txt", "output.txt")

settings = load_delay_settings("config.json")  # -> DelaySettings

exit_status = main(["input.txt", "output.txt", "config.json", "1024"])
```

The parts can also be used on their own:

- `tapesort.delay_settings.DelaySettings`: a frozen dataclass that holds
  `read_delay_ms`, `write_delay_ms` and `move_delay_ms`, each 0 by default.
  A negative value raises `ValueError`.
- `tapesort.tape.Tape`: fixed-capacity storage with a head that starts at
  position -1 and moves one cell at a time through `move_head_left()` and
  `move_head_right()`. `read()` and `write(value)` act on the cell under the
  head. They raise `IndexError` when the head is outside the tape.
- `tapesort.tape_handler.TapeHandler`: the abstract interface a sorter uses:
  `tape_size()`, `head_pos()`, `head()`, `set_head(value)`, `move_to(pos)`
  and `shift(offset)`.
- `tapesort.tape_handler.FileTapeHandler`: a `TapeHandler` over a tape of
  `mem_limit` cells that applies the configured delays.
  `read_next_segment(values)` takes an iterator of integers and loads up to
  `mem_limit` of them onto the tape. It returns `True` once the iterator is
  exhausted.
- `tapesort.sorter.sort_tape(handler)`: sorts the used cells of any
  `TapeHandler` in place, in ascending order.

```python
from tapesort.delay_settings import DelaySettings
from tapesort.sorter import sort_tape
from tapesort.tape_handler import FileTapeHandler

handler = FileTapeHandler(DelaySettings(), mem_limit=4)
handler.read_next_segment(iter([3, 1, 2]))
sort_tape(handler)
```

## Running the tests

```
pip install .[test]
pytest
```