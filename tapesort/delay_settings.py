"""Per-operation delays that simulate a slow tape device."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class DelaySettings:
    """Delays in milliseconds applied to tape reads, writes and head moves."""

    read_delay_ms: int = 0
    write_delay_ms: int = 0
    move_delay_ms: int = 0

    def __post_init__(self) -> None:
        for field in fields(self):
            if getattr(self, field.name) < 0:
                raise ValueError(f"{field.name} cannot be negative")