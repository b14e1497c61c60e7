"""External sorting of integer files using a limited-size tape."""

from __future__ import annotations

import heapq
import json
import os
import re
import shutil
import sys
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, TextIO, Union

from .delay_settings import DelaySettings
from .sorter import sort_tape
from .tape_handler import FileTapeHandler

PathLike = Union[str, "os.PathLike[str]"]

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_INT_PREFIX = re.compile(r"[+-]?\d+")
_ATOI = re.compile(r"\s*([+-]?\d+)")
_DELAY_KEYS = ("read_delay_ms", "write_delay_ms", "move_delay_ms")


def _read_ints(stream: Iterable[str]) -> Iterator[int]:
    """Yield whitespace-separated integers, stopping at the first invalid one."""
    for line in stream:
        for token in line.split():
            while token:
                match = _INT_PREFIX.match(token)
                if match is None:
                    return
                value = int(match.group())
                if not _INT_MIN <= value <= _INT_MAX:
                    return
                yield value
                token = token[match.end():]


def _as_int(key: str, value: object) -> int:
    if isinstance(value, (bool, int)):
        return int(value)
    if isinstance(value, float):
        return int(value)
    raise ValueError(f"{key} must be a number")


def load_delay_settings(config_file_name: PathLike) -> DelaySettings:
    """Read delay settings from a JSON configuration file."""
    try:
        config_file = open(config_file_name, encoding="utf-8")
    except OSError as exc:
        raise OSError("Failed to open config file") from exc
    with config_file:
        data = json.load(config_file)
    if not isinstance(data, dict):
        raise ValueError("Config must be a JSON object")
    delays = {}
    for key in _DELAY_KEYS:
        if key not in data:
            raise ValueError(f"{key} is missing from config")
        delays[key] = _as_int(key, data[key])
    return DelaySettings(**delays)


class TapeSortingApp:
    """Sorts a file of integers in memory-limited chunks merged through temporary files."""

    def __init__(
        self,
        config_file_name: PathLike,
        mem_limit: int,
        tmp_directory: PathLike = "tmp",
    ) -> None:
        self._handler = FileTapeHandler(load_delay_settings(config_file_name), mem_limit)
        if mem_limit == 0:
            raise ValueError("Memory limit must be positive")
        self._tmp_directory = Path(tmp_directory)
        self._chunk_path = self._tmp_directory / "tmp.txt"
        self._sorted_path = self._tmp_directory / "tmp_sorted_tape.txt"
        self._merged_path = self._tmp_directory / "tmp_merged.txt"

    def sort(self, input_file_name: PathLike, output_file_name: PathLike) -> None:
        """Sort the integers of the input file into the output file."""
        try:
            input_file = open(input_file_name, encoding="utf-8")
        except OSError as exc:
            raise OSError("Failed to open input file") from exc
        try:
            with input_file:
                self._tmp_directory.mkdir(exist_ok=True)
                try:
                    self._sorted_path.write_text("")
                except OSError as exc:
                    raise OSError("Failed to create sorted tape file") from exc
                self._process_input(input_file)
            self._write_output(output_file_name)
        finally:
            shutil.rmtree(self._tmp_directory, ignore_errors=True)

    def _process_input(self, input_file: TextIO) -> None:
        values = _read_ints(input_file)
        handler = self._handler
        exhausted = False
        while not exhausted:
            exhausted = handler.read_next_segment(values)
            sort_tape(handler)
            try:
                chunk = open(self._chunk_path, "w", encoding="utf-8")
            except OSError as exc:
                raise OSError("Failed to open temporary file") from exc
            with chunk:
                handler.move_to(-1)
                for _ in range(handler.tape_size()):
                    handler.shift(+1)
                    chunk.write(f"{handler.head()} ")
            self._merge_sorted_tapes()

    def _merge_sorted_tapes(self) -> None:
        try:
            chunk = open(self._chunk_path, encoding="utf-8")
            accumulated = open(self._sorted_path, encoding="utf-8")
            merged = open(self._merged_path, "w", encoding="utf-8")
        except OSError as exc:
            raise OSError("Failed to open files for merging") from exc
        with chunk, accumulated, merged:
            for value in heapq.merge(_read_ints(chunk), _read_ints(accumulated)):
                merged.write(f"{value} ")
        os.replace(self._merged_path, self._sorted_path)

    def _write_output(self, output_file_name: PathLike) -> None:
        try:
            output_file = open(output_file_name, "w", encoding="utf-8")
        except OSError as exc:
            raise OSError("Failed to open output file") from exc
        with output_file:
            try:
                sorted_file = open(self._sorted_path, encoding="utf-8")
            except OSError as exc:
                raise OSError("Failed to open sorted tape file for reading") from exc
            with sorted_file:
                shutil.copyfileobj(sorted_file, output_file)


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: tapesort <input> <output> <config> <memory_limit>."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        print(
            "Usage: tapesort <input_file> <output_file> <config_file> <memory_limit>",
            file=sys.stderr,
        )
        return 1
    input_file_name, output_file_name, config_file_name, limit_text = args
    try:
        app = TapeSortingApp(config_file_name, _atoi(limit_text))
        app.sort(input_file_name, output_file_name)
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0