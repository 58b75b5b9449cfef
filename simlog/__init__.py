"""Leveled, colored logger with daily log files and callbacks, and byte records for sim-racing peripherals."""

__version__ = "1.8.37"
__all__ = ["levels", "devicedata", "slog"]