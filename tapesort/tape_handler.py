"""Tape handlers: the operations a sorter may perform on a tape."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Generic, Iterator, TypeVar

from .delay_settings import DelaySettings
from .tape import Tape

T = TypeVar("T")


class TapeHandler(ABC, Generic[T]):
    """Abstract access to a tape through a single head."""

    @abstractmethod
    def tape_size(self) -> int:
        """Number of cells in use."""

    @abstractmethod
    def head_pos(self) -> int:
        """Current head position."""

    @abstractmethod
    def head(self) -> T:
        """Value under the head."""

    @abstractmethod
    def set_head(self, value: T) -> None:
        """Overwrite the value under the head."""

    @abstractmethod
    def move_to(self, pos: int) -> None:
        """Move the head to an absolute position."""

    @abstractmethod
    def shift(self, offset: int) -> None:
        """Move the head by a relative offset."""


class FileTapeHandler(TapeHandler[int]):
    """Handler over an in-memory tape loaded in segments from an integer stream.

    Every read, write and single-cell head move waits for the configured delay.
    Operations do not return the head to any particular position.
    """

    def __init__(self, delay_settings: DelaySettings, mem_limit: int) -> None:
        if mem_limit < 0:
            raise ValueError("Memory limit cannot be negative")
        self._delay_settings = delay_settings
        self._mem_limit = mem_limit
        self._tape: Tape[int] = Tape(mem_limit)
        self._tape_size = 0

    @staticmethod
    def _wait(ms: int) -> None:
        if ms > 0:
            time.sleep(ms / 1000)

    def tape_size(self) -> int:
        return self._tape_size

    def mem_limit(self) -> int:
        return self._mem_limit

    def read_next_segment(self, stream: Iterator[int]) -> bool:
        """Load up to ``mem_limit`` integers from an iterator onto the tape.

        Returns True once the iterator is exhausted, False if values may remain.
        """
        self._tape_size = 0
        self.move_to(-1)
        while self._tape_size < self._mem_limit:
            try:
                value = next(stream)
            except StopIteration:
                return True
            self.shift(+1)
            self.set_head(value)
            self._tape_size += 1
        return False

    def head_pos(self) -> int:
        return self._tape.head_pos()

    def head(self) -> int:
        self._wait(self._delay_settings.read_delay_ms)
        return self._tape.read()

    def set_head(self, value: int) -> None:
        self._wait(self._delay_settings.write_delay_ms)
        self._tape.write(value)

    def move_to(self, pos: int) -> None:
        self.shift(pos - self._tape.head_pos())

    def shift(self, offset: int) -> None:
        step = self._tape.move_head_left if offset < 0 else self._tape.move_head_right
        for _ in range(abs(offset)):
            self._wait(self._delay_settings.move_delay_ms)
            step()