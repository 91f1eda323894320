"""A register of events in SQLite with search and a simple keyword assistant."""

__version__ = "0.1.0"