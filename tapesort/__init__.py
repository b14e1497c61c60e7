"""External integer sorting through a simulated tape with configurable delays."""

__version__ = "1.0.0"
__all__ = ["app", "delay_settings", "sorter", "tape", "tape_handler"]